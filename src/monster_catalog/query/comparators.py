"""
Comparator Catalog - Ready-Made Sort Criteria.

Each comparator is a CompareFn: it returns True if the first monster sorts
strictly before the second in ascending order. Some compare a single field,
others compare a metric derived from several fields:

    - Experience per HP (base and job): float ratio, falls back to raw
      experience when either monster has zero HP
    - Max hit rate: HIT needed to land every attack (20 + level + AGI)
    - Max dodge rate: FLEE needed to dodge 95% of the monster's
      attacks (75 + level + DEX)

Comparators are also registered by name in COMPARATORS so that queries
can select them from configuration.
"""

from __future__ import annotations

from typing import Dict, List

from monster_catalog.domain.entities import Monster
from monster_catalog.query.sorting import CompareFn


class UnknownComparatorError(ValueError):
    """Raised when a comparator name is not in the catalog."""


def by_name(m1: Monster, m2: Monster) -> bool:
    return m1.name < m2.name


def by_element(m1: Monster, m2: Monster) -> bool:
    """Compare by rendered property label, not by code."""
    return m1.element_label < m2.element_label


def by_race(m1: Monster, m2: Monster) -> bool:
    """Compare by rendered race label."""
    return m1.race_label < m2.race_label


def by_size(m1: Monster, m2: Monster) -> bool:
    """Compare by size code (Small < Medium < Large)."""
    return m1.size < m2.size


def by_base_exp(m1: Monster, m2: Monster) -> bool:
    return m1.base_exp < m2.base_exp


def by_base_exp_per_hp(m1: Monster, m2: Monster) -> bool:
    if m1.hp == 0 or m2.hp == 0:
        return by_base_exp(m1, m2)
    return m1.base_exp / m1.hp < m2.base_exp / m2.hp


def by_job_exp(m1: Monster, m2: Monster) -> bool:
    return m1.job_exp < m2.job_exp


def by_job_exp_per_hp(m1: Monster, m2: Monster) -> bool:
    if m1.hp == 0 or m2.hp == 0:
        return by_job_exp(m1, m2)
    return m1.job_exp / m1.hp < m2.job_exp / m2.hp


def by_hp(m1: Monster, m2: Monster) -> bool:
    return m1.hp < m2.hp


def by_level(m1: Monster, m2: Monster) -> bool:
    return m1.level < m2.level


def by_attack_range(m1: Monster, m2: Monster) -> bool:
    return m1.attack_range < m2.attack_range


def max_hit(monster: Monster) -> int:
    """
    HIT an attacker needs for a 100% hit rate against this monster.

    A hit lands with an (80 + attacker HIT - defender FLEE)% chance, and a
    monster's FLEE is level + AGI. Solving 80 + HIT - FLEE = 100 gives
    HIT = 20 + level + AGI.
    """
    return 20 + monster.level + monster.agility


def by_max_hit_rate(m1: Monster, m2: Monster) -> bool:
    return max_hit(m1) < max_hit(m2)


def max_dodge(monster: Monster) -> int:
    """
    FLEE a player needs to dodge 95% of this monster's attacks.

    Dodge rate is 100 - (attacker HIT + 80 - defender FLEE)%, and a
    monster's HIT is level + DEX. Solving for a 95% dodge rate gives
    FLEE = 75 + level + DEX.
    """
    return 75 + monster.level + monster.dexterity


def by_max_dodge_rate(m1: Monster, m2: Monster) -> bool:
    return max_dodge(m1) < max_dodge(m2)


def by_defense(m1: Monster, m2: Monster) -> bool:
    return m1.defense < m2.defense


def by_magic_defense(m1: Monster, m2: Monster) -> bool:
    return m1.magic_defense < m2.magic_defense


COMPARATORS: Dict[str, CompareFn] = {
    "name": by_name,
    "element": by_element,
    "race": by_race,
    "size": by_size,
    "base_exp": by_base_exp,
    "base_exp_per_hp": by_base_exp_per_hp,
    "job_exp": by_job_exp,
    "job_exp_per_hp": by_job_exp_per_hp,
    "hp": by_hp,
    "level": by_level,
    "attack_range": by_attack_range,
    "max_hit_rate": by_max_hit_rate,
    "max_dodge_rate": by_max_dodge_rate,
    "defense": by_defense,
    "magic_defense": by_magic_defense,
}


def get_comparator(name: str) -> CompareFn:
    """
    Look up a comparator by catalog name.

    Raises:
        UnknownComparatorError: If no comparator has that name
    """
    try:
        return COMPARATORS[name]
    except KeyError:
        raise UnknownComparatorError(
            f"Unknown comparator '{name}'. Available: {available_comparators()}"
        ) from None


def available_comparators() -> List[str]:
    """Catalog names in registration order."""
    return list(COMPARATORS)
