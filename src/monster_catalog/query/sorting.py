"""
Monster Sort.

Sorts monsters in place with a comparison function and a direction.

Sorting is stable: if monsters are arranged alphabetically and then sorted
by size, monsters of the same size stay in alphabetical order. Descending
order swaps the comparator's arguments instead of reversing the sorted
list, so ties keep their original order in both directions.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import cmp_to_key
from typing import Callable, List

from monster_catalog.domain.entities import Monster

logger = logging.getLogger(__name__)

# Returns True if the first monster sorts strictly before the second.
CompareFn = Callable[[Monster, Monster], bool]


class Direction(str, Enum):
    """Sort direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def reverse(compare_fn: CompareFn) -> CompareFn:
    """Invert the sense of a comparison function."""

    def reversed_fn(m1: Monster, m2: Monster) -> bool:
        return compare_fn(m2, m1)

    return reversed_fn


def _three_way(compare_fn: CompareFn) -> Callable[[Monster, Monster], int]:
    """Adapt a less-than function to the cmp protocol."""

    def cmp(m1: Monster, m2: Monster) -> int:
        if compare_fn(m1, m2):
            return -1
        if compare_fn(m2, m1):
            return 1
        return 0

    return cmp


def sort_monsters(
    monsters: List[Monster],
    compare_fn: CompareFn,
    direction: Direction = Direction.ASCENDING,
) -> None:
    """
    Stable in-place sort of monsters.

    Args:
        monsters: Monsters to reorder (mutated)
        compare_fn: Strict weak ordering over monsters
        direction: Ascending or descending (a Direction or its value)
    """
    direction = Direction(direction)
    logger.debug(
        f"Sorting {len(monsters)} monsters by "
        f"{getattr(compare_fn, '__name__', 'comparator')} ({direction.value})"
    )
    if direction == Direction.DESCENDING:
        compare_fn = reverse(compare_fn)

    monsters.sort(key=cmp_to_key(_three_way(compare_fn)))


def sorted_monsters(
    monsters: List[Monster],
    compare_fn: CompareFn,
    direction: Direction = Direction.ASCENDING,
) -> List[Monster]:
    """Return a sorted copy, leaving the input untouched."""
    result = list(monsters)
    sort_monsters(result, compare_fn, direction)
    return result
