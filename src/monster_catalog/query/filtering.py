"""
Monster Filter.

Selects the monsters matching a caller-supplied predicate. Filtering never
reorders or mutates records.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from monster_catalog.domain.entities import Monster

logger = logging.getLogger(__name__)

Predicate = Callable[[Monster], bool]


def filter_monsters(
    monsters: List[Monster],
    predicate: Optional[Predicate] = None,
) -> List[Monster]:
    """
    Filter monsters with a predicate.

    Args:
        monsters: Monsters to filter
        predicate: Function returning True for monsters to keep, or None
            to apply no filter at all

    Returns:
        The input list itself when no predicate is given, otherwise a new
        list of matching monsters in their original order (empty if none
        match)
    """
    if predicate is None:
        return monsters

    matched: List[Monster] = []
    for monster in monsters:
        if predicate(monster):
            matched.append(monster)

    logger.debug(f"Filter kept {len(matched)} of {len(monsters)} monsters")
    return matched
