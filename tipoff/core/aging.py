"""
Aging and retirement.

Advances players one season at a time: age goes up, skills decay once the
player is past the decline start of their aging curve, and retirement is
evaluated in a fixed priority order.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TYPE_CHECKING
from uuid import UUID

from tipoff.core.enums import PlayerRole, RetirementReason, Skill
from tipoff.core.models.aging_curve import AgingCurve
from tipoff.core.skills import clamp_rating

if TYPE_CHECKING:
    from tipoff.core.models.player import PlayerRecord


logger = logging.getLogger(__name__)


# =============================================================================
# Decline Constants
# =============================================================================

# Aging never pushes a skill below this floor
AGING_SKILL_FLOOR = 30

# Most points a single skill can lose in one season
MAX_SEASON_LOSS = 3

# Physical and perimeter skills fade faster than touch skills
SKILL_DEGRADATION_MULTIPLIERS: Dict[Skill, float] = {
    Skill.SHOOTING: 0.8,
    Skill.REBOUNDING: 1.2,
    Skill.PASSING: 0.6,
    Skill.BALL_HANDLING: 0.9,
    Skill.PERIMETER_DEFENSE: 1.3,
    Skill.POST_DEFENSE: 1.1,
    Skill.INSIDE_SHOOTING: 0.9,
}

INJURY_RETIREMENT_CHANCE = 0.05
VOLUNTARY_RETIREMENT_CHANCE = 0.15


def value_multiplier(value: int) -> float:
    """Higher-rated skills have further to fall."""
    if value > 80:
        return 1.5
    if value > 70:
        return 1.2
    if value > 60:
        return 1.0
    return 0.8


def age_multiplier(age: int) -> float:
    if age > 35:
        return 2.0
    if age > 32:
        return 1.5
    if age > 30:
        return 1.0
    return 0.5


# =============================================================================
# Results
# =============================================================================

@dataclass
class SkillChange:
    """Old and new value of one skill across a season boundary."""

    old: int
    new: int

    @property
    def delta(self) -> int:
        return self.new - self.old

    def to_dict(self) -> dict:
        return {"old": self.old, "new": self.new, "delta": self.delta}


@dataclass
class AgingResult:
    """Outcome of advancing one player by one season."""

    player_id: UUID
    previous_age: int
    new_age: int
    skill_changes: Dict[Skill, SkillChange] = field(default_factory=dict)
    retired: bool = False
    reason: Optional[RetirementReason] = None

    @property
    def total_skill_loss(self) -> int:
        return sum(-change.delta for change in self.skill_changes.values() if change.delta < 0)

    @property
    def declined_skills(self) -> List[Skill]:
        return [skill for skill, change in self.skill_changes.items() if change.delta < 0]

    @property
    def reason_description(self) -> str:
        return self.reason.description if self.reason else ""

    def to_dict(self) -> dict:
        return {
            "player_id": str(self.player_id),
            "previous_age": self.previous_age,
            "new_age": self.new_age,
            "skill_changes": {s.value: c.to_dict() for s, c in self.skill_changes.items()},
            "retired": self.retired,
            "reason": self.reason.value if self.reason else None,
        }


# =============================================================================
# Season Processing
# =============================================================================

def _degrade_skills(
    player: "PlayerRecord",
    rate: float,
    rng: random.Random,
) -> Dict[Skill, SkillChange]:
    changes: Dict[Skill, SkillChange] = {}
    for skill in Skill:
        old = player.skills.get(skill)
        base = (
            rate
            * SKILL_DEGRADATION_MULTIPLIERS[skill]
            * value_multiplier(old)
            * age_multiplier(player.age)
            * 100
        )
        jitter = rng.uniform(0.75, 1.25)
        amount = max(0, min(MAX_SEASON_LOSS, round(base * jitter)))
        if amount <= 0:
            continue
        new = clamp_rating(old - amount, low=AGING_SKILL_FLOOR)
        if old < AGING_SKILL_FLOOR:
            # Already below the aging floor; aging never raises a skill
            new = old
        player.skills.set(skill, new)
        if new != old:
            changes[skill] = SkillChange(old=old, new=new)
    return changes


def check_retirement(
    player: "PlayerRecord",
    rng: Optional[random.Random] = None,
) -> Optional[RetirementReason]:
    """
    Evaluate retirement conditions in priority order.

    The first matching condition wins. Random draws are only made for the
    conditions that are reached.
    """
    rng = rng or random.Random()
    curve = player.aging_curve
    age = player.age
    average = player.average_skill

    if age >= curve.retirement_age + 2:
        return RetirementReason.AGE
    if age >= curve.decline_start_age + 3 and average < 45:
        return RetirementReason.PERFORMANCE
    if age >= curve.retirement_age - 2 and rng.random() < INJURY_RETIREMENT_CHANCE:
        return RetirementReason.INJURY
    if (
        age >= curve.retirement_age - 1
        and average < 60
        and rng.random() < VOLUNTARY_RETIREMENT_CHANCE
    ):
        return RetirementReason.VOLUNTARY
    return None


def process_player_aging(
    player: "PlayerRecord",
    rng: Optional[random.Random] = None,
) -> AgingResult:
    """
    Advance a player by one season.

    Args:
        player: Player to age (mutated in place)
        rng: Random source for jitter and retirement draws

    Returns:
        AgingResult describing the season boundary
    """
    rng = rng or random.Random()
    previous_age = player.age
    player.age += 1
    player.experience_years += 1

    rate = player.aging_curve.degradation_rate(player.age)
    changes = _degrade_skills(player, rate, rng) if rate > 0 else {}

    reason = check_retirement(player, rng)
    if reason is not None:
        player.retire(reason)
        logger.info("%s retired at %d: %s", player.name, player.age, reason.description)

    return AgingResult(
        player_id=player.id,
        previous_age=previous_age,
        new_age=player.age,
        skill_changes=changes,
        retired=reason is not None,
        reason=reason,
    )


def process_team_aging(
    players: List["PlayerRecord"],
    rng: Optional[random.Random] = None,
) -> List[AgingResult]:
    """Age every player, returning results in input order."""
    rng = rng or random.Random()
    return [process_player_aging(player, rng) for player in players]


# =============================================================================
# Curves and Projections
# =============================================================================

# (peak, decline start, retirement, decline rate); None keeps the base value
_ROLE_CURVE_OVERRIDES: Dict[PlayerRole, tuple] = {
    PlayerRole.PG: (28, 31, 39, 0.018),
    PlayerRole.SG: (None, None, None, None),
    PlayerRole.SF: (None, None, 39, 0.019),
    PlayerRole.PF: (26, 29, 37, 0.022),
    PlayerRole.C: (25, 28, 36, 0.025),
}


def create_custom_aging_curve(role: PlayerRole, current_age: int, overall: float) -> AgingCurve:
    """
    Build an aging curve from role, current age and current ability.

    Centers age soonest and point guards latest. Elite players last two
    years longer and decline 10% slower; weak players the opposite. A
    player already past 30 gets a steeper decline and a retirement age no
    earlier than next season.
    """
    base = AgingCurve.standard()
    peak, decline, retirement, rate = _ROLE_CURVE_OVERRIDES[role]
    peak = base.peak_age if peak is None else peak
    decline = base.decline_start_age if decline is None else decline
    retirement = base.retirement_age if retirement is None else retirement
    rate = base.decline_rate if rate is None else rate

    if overall > 85:
        retirement += 2
        rate *= 0.9
    elif overall < 60:
        retirement -= 2
        rate *= 1.1

    if current_age > 30:
        rate *= 1.2
        retirement = max(current_age + 1, min(45, retirement - (current_age - 30)))

    return AgingCurve(
        peak_age=peak,
        decline_start_age=decline,
        retirement_age=retirement,
        peak_multiplier=base.peak_multiplier,
        decline_rate=rate,
    )


def retirement_probability(player: "PlayerRecord") -> float:
    """Rough chance that a player retires this season, for display."""
    curve = player.aging_curve
    age = player.age
    if age < curve.decline_start_age:
        return 0.0
    if age >= curve.retirement_age:
        return min(0.95, 0.8 + (age - curve.retirement_age) * 0.1)

    probability = (age - curve.decline_start_age) * 0.05
    average = player.average_skill
    if average < 50:
        probability += 0.2
    elif average > 80:
        probability -= 0.1
    return max(0.0, min(0.95, probability))


def project_career_progression(
    player: "PlayerRecord",
    years: int,
    rng: Optional[random.Random] = None,
) -> List[AgingResult]:
    """
    Project future seasons on a copy of the player.

    Stops early if the projected player retires. The input player is not
    modified.
    """
    rng = rng or random.Random()
    projected = player.copy()
    results: List[AgingResult] = []
    for _ in range(max(0, years)):
        result = process_player_aging(projected, rng)
        results.append(result)
        if result.retired:
            break
    return results


__all__ = [
    "AGING_SKILL_FLOOR",
    "SKILL_DEGRADATION_MULTIPLIERS",
    "SkillChange",
    "AgingResult",
    "value_multiplier",
    "age_multiplier",
    "check_retirement",
    "process_player_aging",
    "process_team_aging",
    "create_custom_aging_curve",
    "retirement_probability",
    "project_career_progression",
]
