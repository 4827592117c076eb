"""Skill shifts applied by rare archetypes."""

from typing import TYPE_CHECKING

from tipoff.core.enums import Archetype, Skill
from tipoff.core.models.potential import clamp_cap

if TYPE_CHECKING:
    from tipoff.core.models.player import PlayerRecord


# skill -> (value delta, ceiling delta)
ARCHETYPE_SHIFTS: dict[Archetype, dict[Skill, tuple[int, int]]] = {
    Archetype.ELITE_SHOOTER: {
        Skill.SHOOTING: (10, 15),
        Skill.INSIDE_SHOOTING: (-5, -10),
    },
    Archetype.DEFENSIVE_SPECIALIST: {
        Skill.PERIMETER_DEFENSE: (8, 12),
        Skill.POST_DEFENSE: (8, 12),
        Skill.SHOOTING: (-5, -8),
    },
    Archetype.PLAYMAKER: {
        Skill.PASSING: (10, 15),
        Skill.BALL_HANDLING: (5, 8),
        Skill.POST_DEFENSE: (-5, -8),
    },
    Archetype.ATHLETIC_FINISHER: {
        Skill.INSIDE_SHOOTING: (10, 15),
        Skill.REBOUNDING: (5, 5),
        Skill.SHOOTING: (-5, -10),
    },
    Archetype.STRETCH_BIG: {
        Skill.SHOOTING: (12, 15),
        Skill.POST_DEFENSE: (-5, -8),
        Skill.INSIDE_SHOOTING: (-3, -5),
    },
    Archetype.LOCKDOWN_DEFENDER: {
        Skill.PERIMETER_DEFENSE: (12, 15),
        Skill.SHOOTING: (-5, -8),
    },
    Archetype.FLOOR_GENERAL: {
        Skill.PASSING: (8, 12),
        Skill.BALL_HANDLING: (8, 12),
        Skill.INSIDE_SHOOTING: (-5, -8),
    },
    Archetype.ENERGIZER: {
        Skill.REBOUNDING: (6, 8),
        Skill.PERIMETER_DEFENSE: (4, 6),
        Skill.PASSING: (-3, -5),
    },
}


def apply_archetype(player: "PlayerRecord", archetype: Archetype) -> None:
    """
    Tag a player with an archetype and shift their values and ceilings.

    Ceilings never end up below the shifted value, so an archetype never
    leaves a skill already above its potential.
    """
    player.archetype = archetype
    for skill, (value_delta, cap_delta) in ARCHETYPE_SHIFTS[archetype].items():
        player.skills.adjust(skill, value_delta)
        cap = clamp_cap(player.potential.cap(skill) + cap_delta)
        player.potential.set_cap(skill, max(cap, player.skills.get(skill)))
