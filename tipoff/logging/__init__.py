"""Game logging and output."""

from tipoff.logging.game_log import GameLog, LogEntry

__all__ = ["GameLog", "LogEntry"]
