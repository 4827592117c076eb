#!/usr/bin/env python3
"""Demo script: one game in detail, then a few seasons of careers."""

import logging
from itertools import combinations

from tipoff.config import SimulationConfig
from tipoff.events import EventBus, GameCompleted, PlayerRetired, SkillUpgraded
from tipoff.generators import generate_roster, starting_lineup
from tipoff.logging import GameLog
from tipoff.simulation import PossessionSimulator, SeasonOrchestrator


def main():
    """Run a demo game and a short multi-season simulation."""
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    print("=" * 60)
    print("TIPOFF - Basketball Career Simulator Demo")
    print("=" * 60)
    print()

    config = SimulationConfig.from_env().validate_or_raise()
    rng = config.make_rng()
    used_names: set[str] = set()

    teams = [
        generate_roster(name, abbrev, rng=rng, used_names=used_names)
        for name, abbrev in [
            ("Harbor City Gulls", "HCG"),
            ("Red Rock Coyotes", "RRC"),
            ("Lakeshore Pilots", "LKP"),
            ("Summit Owls", "SMO"),
        ]
    ]
    home, away = teams[0], teams[1]

    for team in (home, away):
        print(f"{team.name} ({team.abbreviation}) - {team.size} players")
        for player in starting_lineup(team):
            print(f"  {player}")
        print()

    # Single game with play-by-play
    event_bus = EventBus()
    game_log = GameLog(home.abbreviation, away.abbreviation, home.id, away.id)
    for team in (home, away):
        for player in team.players:
            game_log.register_player(player.id, player.name, player.role.value, team.abbreviation)
    game_log.connect_to_event_bus(event_bus)

    simulator = PossessionSimulator(config=config, rng=rng, event_bus=event_bus)
    result = simulator.simulate_game(home, away)

    print("-" * 60)
    print("FIRST 15 POSSESSIONS")
    print("-" * 60)
    for line in game_log.to_text().splitlines()[:15]:
        print(line)
    print()
    print(f"FINAL: {away.abbreviation} {result.away_score} @ {home.abbreviation} {result.home_score}")

    top = max(result.box_score.entries.items(), key=lambda item: item[1].points)
    print(f"Top scorer: {game_log.player_name(top[0])} with {top[1].points} points")
    print()

    # Multi-season run
    stats = {"upgrades": 0, "retirements": 0, "games": 0}
    season_bus = EventBus()
    season_bus.subscribe(SkillUpgraded, lambda e: stats.__setitem__("upgrades", stats["upgrades"] + 1))
    season_bus.subscribe(PlayerRetired, lambda e: stats.__setitem__("retirements", stats["retirements"] + 1))
    season_bus.subscribe(GameCompleted, lambda e: stats.__setitem__("games", stats["games"] + 1))

    orchestrator = SeasonOrchestrator(teams, config=config, rng=rng, event_bus=season_bus)
    schedule = [[pair] for pair in combinations([t.id for t in teams], 2)] * 4

    print("-" * 60)
    print("SEASONS")
    print("-" * 60)
    for _ in range(3):
        summary = orchestrator.run_season(schedule)
        print(f"Season {summary.season}")
        for name, wins, losses in summary.standings:
            print(f"  {name:<22} {wins:>2}-{losses:<2}")
        for player in summary.retired:
            print(f"  Retired: {player.name} ({player.age}) - {player.retirement_reason.description}")
        print()

    print(f"Games: {stats['games']}, skill upgrades: {stats['upgrades']}, retirements: {stats['retirements']}")


if __name__ == "__main__":
    main()
