"""
Player Development System.

Game performance and training sessions earn per-skill experience; banked
experience is converted into single-point skill upgrades, bounded by each
skill's hidden potential ceiling.
"""

import logging
import math
from typing import TYPE_CHECKING, Dict, List, Optional

from tipoff.core.enums import PlayerRole, PotentialTier, Skill
from tipoff.core.models.potential import clamp_cap
from tipoff.core.skills import clamp_rating

if TYPE_CHECKING:
    from tipoff.core.models.player import PlayerRecord
    from tipoff.core.models.stats import BoxScoreEntry


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Per-game base experience bounds
MIN_GAME_EXPERIENCE = 10
MAX_GAME_EXPERIENCE = 200
BASE_GAME_EXPERIENCE = 20

# Inefficient shooting penalty
POOR_SHOOTING_PCT = 0.3
POOR_SHOOTING_PENALTY = 10

# Cost of the first upgrade in a pass; each later one costs another step more
UPGRADE_COST_STEP = 100

# Coaching development bonus range observed in use
MIN_COACH_BONUS = -0.2
MAX_COACH_BONUS = 0.3

# Training: share of the pool that goes to the focus skill
TRAINING_FOCUS_SHARE = 0.7
TRAINING_EXPERIENCE_PER_INTENSITY = 10

# Flat per-game participation weights for skills with no box-score signal
DEFENSIVE_PARTICIPATION_WEIGHTS: Dict[Skill, float] = {
    Skill.PERIMETER_DEFENSE: 0.3,
    Skill.POST_DEFENSE: 0.2,
}

RELATED_SKILLS: Dict[Skill, List[Skill]] = {
    Skill.SHOOTING: [Skill.INSIDE_SHOOTING, Skill.BALL_HANDLING],
    Skill.INSIDE_SHOOTING: [Skill.SHOOTING, Skill.POST_DEFENSE],
    Skill.REBOUNDING: [Skill.POST_DEFENSE, Skill.PERIMETER_DEFENSE],
    Skill.PASSING: [Skill.BALL_HANDLING, Skill.SHOOTING],
    Skill.BALL_HANDLING: [Skill.PASSING, Skill.PERIMETER_DEFENSE],
    Skill.PERIMETER_DEFENSE: [Skill.BALL_HANDLING, Skill.REBOUNDING],
    Skill.POST_DEFENSE: [Skill.REBOUNDING, Skill.INSIDE_SHOOTING],
}

# Potential ceiling boosts for each role's signature skills
ROLE_POTENTIAL_ADJUSTMENTS: Dict[PlayerRole, Dict[Skill, int]] = {
    PlayerRole.PG: {Skill.BALL_HANDLING: 5, Skill.PASSING: 5},
    PlayerRole.SG: {Skill.SHOOTING: 5, Skill.PERIMETER_DEFENSE: 3},
    PlayerRole.SF: {Skill.SHOOTING: 3, Skill.REBOUNDING: 3},
    PlayerRole.PF: {Skill.REBOUNDING: 5, Skill.INSIDE_SHOOTING: 3},
    PlayerRole.C: {Skill.REBOUNDING: 5, Skill.POST_DEFENSE: 5, Skill.INSIDE_SHOOTING: 3},
}


# =============================================================================
# Helpers
# =============================================================================

def round_half_up(value: float) -> int:
    """Round to nearest integer with halves going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_coach_bonus(coach_bonus: Optional[float]) -> float:
    if coach_bonus is None:
        return 0.0
    return max(MIN_COACH_BONUS, min(MAX_COACH_BONUS, coach_bonus))


def upgrade_cost(upgrade_index: int) -> int:
    """Experience needed for the n-th upgrade (0-based) of a skill in one pass."""
    return (upgrade_index + 1) * UPGRADE_COST_STEP


# =============================================================================
# Experience Calculation
# =============================================================================

def calculate_base_experience(stats: "BoxScoreEntry") -> int:
    """
    Base experience earned from one game's stat line.

    Args:
        stats: The player's box score entry

    Returns:
        Base experience clamped to [10, 200]
    """
    fgm = stats.field_goals_made
    fga = stats.field_goals_attempted

    experience = BASE_GAME_EXPERIENCE
    experience += stats.points * 2
    experience += stats.rebounds * 3
    experience += stats.assists * 4
    experience += fgm * 2
    experience += stats.three_pointers_made * 3

    if fga > 0 and fgm / fga < POOR_SHOOTING_PCT:
        experience -= POOR_SHOOTING_PENALTY

    return max(MIN_GAME_EXPERIENCE, min(MAX_GAME_EXPERIENCE, experience))


def performance_weights(stats: "BoxScoreEntry", role: PlayerRole) -> Dict[Skill, float]:
    """Per-skill weights derived from the categories a player produced in."""
    points = stats.points
    fgm = stats.field_goals_made
    three_pm = stats.three_pointers_made
    assists = stats.assists

    ball_handling = assists * 0.5
    if role == PlayerRole.PG:
        ball_handling = (ball_handling + 0.3) * 1.5

    weights = {
        Skill.SHOOTING: points * 0.3 + fgm * 0.4 + three_pm * 0.3,
        Skill.INSIDE_SHOOTING: points * 0.2 + (fgm - three_pm) * 0.8,
        Skill.REBOUNDING: float(stats.rebounds),
        Skill.PASSING: float(assists),
        Skill.BALL_HANDLING: ball_handling,
    }
    weights.update(DEFENSIVE_PARTICIPATION_WEIGHTS)
    return weights


def distribute_experience(total: int, weights: Dict[Skill, float]) -> Dict[Skill, int]:
    """
    Split an experience pool across skills in proportion to weights.

    When the weights sum to zero the pool is split evenly across every
    skill, with the remainder going to the first skills in enum order.
    """
    if total <= 0:
        return {skill: 0 for skill in Skill}

    weight_sum = sum(max(0.0, weights.get(skill, 0.0)) for skill in Skill)
    if weight_sum <= 0:
        share, remainder = divmod(total, len(Skill))
        return {
            skill: share + (1 if i < remainder else 0)
            for i, skill in enumerate(Skill)
        }

    return {
        skill: round_half_up(total * max(0.0, weights.get(skill, 0.0)) / weight_sum)
        for skill in Skill
    }


# =============================================================================
# Awarding Experience
# =============================================================================

def award_performance_experience(
    player: "PlayerRecord",
    stats: "BoxScoreEntry",
    age_modifier: float,
    coach_bonus: Optional[float] = None,
) -> Dict[Skill, int]:
    """
    Convert a game stat line into per-skill experience for a player.

    Args:
        player: Player earning experience
        stats: The player's box score entry for the game
        age_modifier: Development multiplier from the aging curve
        coach_bonus: Optional coaching development bonus

    Returns:
        Experience credited per skill
    """
    base = calculate_base_experience(stats)
    bonus = clamp_coach_bonus(coach_bonus)
    total = round_half_up(base * age_modifier * (1.0 + bonus))

    awarded = distribute_experience(total, performance_weights(stats, player.role))
    for skill, amount in awarded.items():
        player.development.add_experience(skill, amount)

    logger.debug("%s earned %d experience (base %d)", player.name, total, base)
    return awarded


def award_training_experience(
    player: "PlayerRecord",
    focus: Skill,
    intensity: int,
    age_modifier: Optional[float] = None,
    coach_bonus: Optional[float] = None,
) -> Dict[Skill, int]:
    """
    Award experience from a training session focused on one skill.

    70% of the pool goes to the focus skill; the rest is divided evenly
    (integer division) across its related skills.

    Args:
        player: Player training
        focus: Focus skill
        intensity: Training intensity; 10 experience per point
        age_modifier: Defaults to the player's aging curve at current age
        coach_bonus: Optional coaching development bonus

    Returns:
        Experience credited per skill
    """
    if age_modifier is None:
        age_modifier = player.aging_curve.age_modifier(player.age)
    bonus = clamp_coach_bonus(coach_bonus)

    base = max(0, intensity) * TRAINING_EXPERIENCE_PER_INTENSITY
    total = round_half_up(base * age_modifier * (1.0 + bonus))
    focus_amount = round_half_up(total * TRAINING_FOCUS_SHARE)
    related = RELATED_SKILLS[focus]
    per_related = (total - focus_amount) // len(related)

    awarded = {skill: 0 for skill in Skill}
    awarded[focus] = focus_amount
    for skill in related:
        awarded[skill] += per_related

    for skill, amount in awarded.items():
        player.development.add_experience(skill, amount)
    return awarded


# =============================================================================
# Upgrades
# =============================================================================

def process_skill_upgrades(player: "PlayerRecord") -> List[Skill]:
    """
    Spend banked experience on skill upgrades.

    Within a pass the first upgrade of a skill costs 100, the second 200,
    and so on. A skill keeps upgrading while its balance covers the next
    cost and its value is strictly below the potential ceiling.

    Returns:
        One entry per upgrade applied (a skill appears once per point gained)
    """
    upgraded: List[Skill] = []
    tracker = player.development

    for skill in Skill:
        count = 0
        while True:
            current = player.skills.get(skill)
            cost = upgrade_cost(count)
            if current >= 99 or not player.potential.can_improve(skill, current):
                break
            if not tracker.spend_experience(skill, cost):
                break
            player.skills.set(skill, clamp_rating(current + 1))
            upgraded.append(skill)
            count += 1

    if upgraded:
        logger.debug("%s upgraded %d skill points", player.name, len(upgraded))
    return upgraded


def develop_after_game(
    player: "PlayerRecord",
    stats: "BoxScoreEntry",
    coach_bonus: Optional[float] = None,
) -> List[Skill]:
    """Award game experience at the player's current age and apply upgrades."""
    modifier = player.aging_curve.age_modifier(player.age)
    award_performance_experience(player, stats, modifier, coach_bonus)
    return process_skill_upgrades(player)


# =============================================================================
# Rates and Potential
# =============================================================================

def update_development_rate(player: "PlayerRecord", coach_bonus: Optional[float] = None) -> float:
    """Reset the player's development rate from age and coaching."""
    modifier = player.aging_curve.age_modifier(player.age)
    player.development.set_development_rate(1.0 * modifier + clamp_coach_bonus(coach_bonus))
    return player.development.development_rate


def calculate_potential_tier(player: "PlayerRecord") -> PotentialTier:
    """
    Estimate a potential tier from current ability and age.

    Younger players reach higher tiers at lower overall ratings.
    """
    overall = player.average_skill
    age = player.age

    if age <= 22:
        thresholds = (85, 75, 65)
    elif age <= 26:
        thresholds = (90, 80, 70)
    else:
        if overall >= 95:
            return PotentialTier.GOLD
        if overall >= 85:
            return PotentialTier.SILVER
        return PotentialTier.BRONZE

    elite, gold, silver = thresholds
    if overall >= elite:
        return PotentialTier.ELITE
    if overall >= gold:
        return PotentialTier.GOLD
    if overall >= silver:
        return PotentialTier.SILVER
    return PotentialTier.BRONZE


def apply_role_potential_adjustments(player: "PlayerRecord") -> None:
    """Raise the ceilings of the player's role-signature skills."""
    for skill, boost in ROLE_POTENTIAL_ADJUSTMENTS[player.role].items():
        player.potential.set_cap(skill, clamp_cap(player.potential.cap(skill) + boost))


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "MIN_GAME_EXPERIENCE",
    "MAX_GAME_EXPERIENCE",
    "UPGRADE_COST_STEP",
    "RELATED_SKILLS",
    "ROLE_POTENTIAL_ADJUSTMENTS",
    "round_half_up",
    "upgrade_cost",
    "calculate_base_experience",
    "performance_weights",
    "distribute_experience",
    "award_performance_experience",
    "award_training_experience",
    "process_skill_upgrades",
    "develop_after_game",
    "update_development_rate",
    "calculate_potential_tier",
    "apply_role_potential_adjustments",
]
