"""Content generators."""

from tipoff.generators.player import (
    fill_roster,
    generate_draft_class,
    generate_free_agent_pool,
    generate_player,
    generate_rookie,
    generate_roster,
    starting_lineup,
    validate_roster_composition,
)
from tipoff.generators.talent import TalentDistribution, attribute_ranges

__all__ = [
    # Player generation
    "generate_player",
    "generate_rookie",
    "generate_draft_class",
    "generate_free_agent_pool",
    # Rosters
    "generate_roster",
    "fill_roster",
    "starting_lineup",
    "validate_roster_composition",
    # Talent
    "TalentDistribution",
    "attribute_ranges",
]
