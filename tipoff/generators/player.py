"""Player and roster generation."""

import logging
import random
from typing import Optional

from tipoff.core.aging import create_custom_aging_curve
from tipoff.core.development import apply_role_potential_adjustments
from tipoff.core.enums import PlayerRole, Skill, TalentTier
from tipoff.core.errors import ConfigurationError, RosterCompositionError
from tipoff.core.models.development_tracker import DevelopmentTracker
from tipoff.core.models.player import PlayerRecord
from tipoff.core.models.potential import PlayerPotential
from tipoff.core.models.team import Roster
from tipoff.core.skills import SkillRatings
from tipoff.generators.archetypes import apply_archetype
from tipoff.generators.names import generate_unique_name, select_nationality
from tipoff.generators.talent import POSITION_SPECS, TalentDistribution, attribute_ranges


logger = logging.getLogger(__name__)

MIN_ROSTER_SIZE = 13
MAX_ROSTER_SIZE = 17

# Roles every roster starts with, before extra spots are handed out
BASE_POSITION_COUNTS: dict[PlayerRole, int] = {
    PlayerRole.PG: 2,
    PlayerRole.SG: 3,
    PlayerRole.SF: 3,
    PlayerRole.PF: 3,
    PlayerRole.C: 2,
}

# Order extra roster spots are filled in
EXTRA_SPOT_ORDER = [PlayerRole.SF, PlayerRole.SG, PlayerRole.PF, PlayerRole.PG, PlayerRole.C]


def _experience_years_for_age(age: int, rng: random.Random) -> int:
    if age <= 19:
        return 0
    if age <= 22:
        return rng.randint(0, 1)
    if age <= 25:
        return rng.randint(1, 4)
    if age <= 30:
        return rng.randint(3, 10)
    return rng.randint(8, 19)


def _generate_skills(role: PlayerRole, talent: TalentTier, rng: random.Random) -> SkillRatings:
    """Draw each skill from its (role, tier) band, peaked at the band average."""
    ratings = SkillRatings()
    for skill, band in attribute_ranges(role, talent).items():
        if band.min == band.max:
            value = band.min
        else:
            value = round(rng.triangular(band.min, band.max, band.avg))
        ratings.set(skill, value)
    return ratings


def _generate_height(role: PlayerRole, rng: random.Random) -> int:
    spec = POSITION_SPECS[role]
    low, high = spec.height_range
    return int(round(rng.triangular(low, high, spec.avg_height)))


def generate_player(
    role: Optional[PlayerRole] = None,
    talent: Optional[TalentTier] = None,
    age: Optional[int] = None,
    is_rookie: bool = False,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
) -> PlayerRecord:
    """
    Generate a player.

    Args:
        role: Player role (random if None)
        talent: Talent tier (drawn from the distribution if None)
        age: Player age (random if None)
        is_rookie: Use the rookie talent and potential tables
        rng: Random source
        used_names: Names already taken in this batch; updated in place

    Returns:
        Generated PlayerRecord
    """
    rng = rng or random.Random()
    distribution = TalentDistribution(rng)
    used_names = used_names if used_names is not None else set()

    if role is None:
        role = rng.choice(list(PlayerRole))
    if age is None:
        age = rng.randint(19, 22) if is_rookie else rng.randint(21, 34)
    if talent is None:
        talent = distribution.generate_talent_tier(is_rookie)

    skills = _generate_skills(role, talent, rng)

    profile = distribution.generate_rookie_profile(talent) if is_rookie else None
    if profile is not None:
        potential_tier = profile.potential_tier
    else:
        potential_tier = distribution.generate_potential_tier(talent, age)
    potential = PlayerPotential.from_tier(potential_tier, rng)
    for skill in Skill:
        if potential.cap(skill) < skills.get(skill):
            potential.set_cap(skill, skills.get(skill))

    nationality = select_nationality(rng)
    first_name, last_name = generate_unique_name(nationality, used_names, rng)

    player = PlayerRecord(
        first_name=first_name,
        last_name=last_name,
        role=role,
        skills=skills,
        potential=potential,
        age=age,
        height_cm=_generate_height(role, rng),
        nationality=nationality,
        experience_years=0 if is_rookie else _experience_years_for_age(age, rng),
    )
    apply_role_potential_adjustments(player)

    archetype = distribution.generate_rare_archetype(role)
    if archetype is not None:
        apply_archetype(player, archetype)

    player.development = DevelopmentTracker(
        aging_curve=create_custom_aging_curve(role, age, player.average_skill),
    )
    if profile is not None:
        player.development.set_development_rate(profile.development_rate)

    return player


def generate_rookie(
    role: Optional[PlayerRole] = None,
    talent: Optional[TalentTier] = None,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
) -> PlayerRecord:
    """Generate a draft-eligible rookie (age 19-22)."""
    return generate_player(role=role, talent=talent, is_rookie=True, rng=rng, used_names=used_names)


def generate_draft_class(
    size: int = 60,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
) -> list[PlayerRecord]:
    """
    Generate a draft class ordered by projected pick.

    Early picks draw from a distribution skewed toward higher talent tiers.
    """
    rng = rng or random.Random()
    used_names = used_names if used_names is not None else set()
    tiers = TalentDistribution(rng).generate_draft_class_distribution(size)
    return [generate_rookie(talent=tier, rng=rng, used_names=used_names) for tier in tiers]


def generate_free_agent_pool(
    size: int = 30,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
) -> list[PlayerRecord]:
    """Generate unsigned veterans, skewed toward lower talent tiers."""
    rng = rng or random.Random()
    used_names = used_names if used_names is not None else set()
    pool = []
    for _ in range(size):
        talent = rng.choice([TalentTier.STARTER, TalentTier.ROTATION, TalentTier.BENCH, TalentTier.BENCH])
        pool.append(generate_player(talent=talent, age=rng.randint(23, 34), rng=rng, used_names=used_names))
    return pool


def position_distribution(roster_size: int) -> dict[PlayerRole, int]:
    """
    How many players of each role a roster of the given size carries.

    Rosters below the base shape carry one player per role and hand out
    the rest in extra-spot order.
    """
    if roster_size < len(PlayerRole):
        raise ConfigurationError(
            [f"Roster size {roster_size} cannot cover all {len(PlayerRole)} roles"]
        )
    if roster_size < sum(BASE_POSITION_COUNTS.values()):
        counts = {role: 1 for role in PlayerRole}
    else:
        counts = dict(BASE_POSITION_COUNTS)
    remaining = roster_size - sum(counts.values())
    for i in range(max(0, remaining)):
        counts[EXTRA_SPOT_ORDER[i % len(EXTRA_SPOT_ORDER)]] += 1
    return counts


def generate_roster(
    name: str,
    abbreviation: str = "",
    size: Optional[int] = None,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
    min_size: int = MIN_ROSTER_SIZE,
    max_size: int = MAX_ROSTER_SIZE,
) -> Roster:
    """
    Generate a position-balanced roster.

    Args:
        name: Team name
        abbreviation: Team abbreviation
        size: Roster size (random between min_size and max_size if None)
        rng: Random source
        used_names: Names already taken across the league; updated in place

    Returns:
        Roster covering every role
    """
    rng = rng or random.Random()
    used_names = used_names if used_names is not None else set()
    if size is None:
        size = rng.randint(min_size, max_size)

    roster = Roster(name=name, abbreviation=abbreviation or name[:3].upper())
    for role, count in position_distribution(size).items():
        for _ in range(count):
            roster.add_player(generate_player(role=role, rng=rng, used_names=used_names))

    validate_roster_composition(roster)
    logger.debug("Generated roster %s with %d players", roster.name, roster.size)
    return roster


def validate_roster_composition(roster: Roster) -> None:
    """Raise RosterCompositionError if any role has no active player."""
    missing = [role for role in PlayerRole if not roster.players_by_role(role)]
    if missing:
        raise RosterCompositionError(missing)


def starting_lineup(roster: Roster) -> list[PlayerRecord]:
    """Best active player at each role, in role order; missing roles are skipped."""
    lineup = []
    for role in PlayerRole:
        candidates = roster.players_by_role(role)
        if candidates:
            lineup.append(max(candidates, key=lambda p: p.average_skill))
    return lineup


def fill_roster(
    roster: Roster,
    target_size: int,
    rng: Optional[random.Random] = None,
    used_names: Optional[set[str]] = None,
) -> list[PlayerRecord]:
    """
    Top up a roster with rookies until it reaches target_size.

    Missing roles are filled first so the roster stays valid.

    Returns:
        The players added
    """
    rng = rng or random.Random()
    used_names = used_names if used_names is not None else {p.name for p in roster.players}
    added = []
    while roster.size < target_size:
        missing = [role for role in PlayerRole if not roster.players_by_role(role)]
        role = missing[0] if missing else rng.choice(list(PlayerRole))
        rookie = generate_rookie(role=role, rng=rng, used_names=used_names)
        roster.add_player(rookie)
        added.append(rookie)
    return added
