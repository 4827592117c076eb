"""Named failures surfaced to callers."""


class TipoffError(Exception):
    """Base class for all tipoff errors."""


class ConfigurationError(TipoffError, ValueError):
    """Invalid simulation configuration."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid configuration")


class TeamNotFoundError(TipoffError, KeyError):
    """A matchup or lookup named a team that is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "team not found"


class PlayerNotFoundError(TipoffError, KeyError):
    """A lookup named a player that is not on the roster."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "player not found"


class RosterCompositionError(TipoffError, ValueError):
    """A roster is missing one or more required roles."""

    def __init__(self, missing_roles: list):
        self.missing_roles = list(missing_roles)
        names = ", ".join(getattr(r, "value", str(r)) for r in self.missing_roles)
        super().__init__(f"Roster is missing required roles: {names}")
