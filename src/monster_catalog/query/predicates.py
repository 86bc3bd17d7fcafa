"""
Predicate Catalog - Ready-Made Filter Criteria.

Builders returning Predicate functions for filter_monsters. Code-based
predicates compare raw category codes; property_label_in compares rendered
labels, so every code sharing a label (e.g. both Neutral 1 codes) matches.
"""

from __future__ import annotations

from typing import Iterable, Optional

from monster_catalog.domain.entities import Monster
from monster_catalog.query.filtering import Predicate


def name_contains(text: str) -> Predicate:
    """Case-insensitive substring match on the display name."""
    needle = text.lower()

    def predicate(monster: Monster) -> bool:
        return needle in monster.name.lower()

    return predicate


def name_in(names: Iterable[str]) -> Predicate:
    """Exact display name match."""
    allowed = frozenset(names)

    def predicate(monster: Monster) -> bool:
        return monster.name in allowed

    return predicate


def property_in(codes: Iterable[int]) -> Predicate:
    allowed = frozenset(codes)

    def predicate(monster: Monster) -> bool:
        return monster.element in allowed

    return predicate


def property_label_in(labels: Iterable[str]) -> Predicate:
    allowed = frozenset(labels)

    def predicate(monster: Monster) -> bool:
        return monster.element_label in allowed

    return predicate


def race_in(codes: Iterable[int]) -> Predicate:
    allowed = frozenset(codes)

    def predicate(monster: Monster) -> bool:
        return monster.race in allowed

    return predicate


def size_in(codes: Iterable[int]) -> Predicate:
    allowed = frozenset(codes)

    def predicate(monster: Monster) -> bool:
        return monster.size in allowed

    return predicate


def classification_in(codes: Iterable[int]) -> Predicate:
    allowed = frozenset(codes)

    def predicate(monster: Monster) -> bool:
        return monster.classification in allowed

    return predicate


def level_between(low: Optional[int] = None, high: Optional[int] = None) -> Predicate:
    """Inclusive level range; a missing bound is open."""

    def predicate(monster: Monster) -> bool:
        if low is not None and monster.level < low:
            return False
        if high is not None and monster.level > high:
            return False
        return True

    return predicate


def all_of(*predicates: Predicate) -> Predicate:
    """Match monsters satisfying every predicate (all match when empty)."""

    def predicate(monster: Monster) -> bool:
        return all(p(monster) for p in predicates)

    return predicate
