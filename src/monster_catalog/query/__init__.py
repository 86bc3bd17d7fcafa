"""
Query Package - Filtering and Sorting Monsters.

Filter:
    - filter_monsters: Keep monsters matching a predicate, order preserved
    - predicates: Ready-made predicate builders

Sort:
    - sort_monsters: Stable, direction-aware in-place sort
    - comparators: Ready-made comparison functions, some on derived metrics

Query:
    - MonsterQuery: Runs a QueryConfig (filter, then multi-key sort)
    - QueryResult: Selected monsters plus run statistics

Design Principles:
    - Filter and sort are independent and synchronous
    - One comparison function per criterion, chosen by the caller
    - Records are never mutated
"""

from monster_catalog.query.filtering import Predicate, filter_monsters
from monster_catalog.query.sorting import (
    CompareFn,
    Direction,
    reverse,
    sort_monsters,
    sorted_monsters,
)
from monster_catalog.query.comparators import (
    COMPARATORS,
    UnknownComparatorError,
    available_comparators,
    get_comparator,
    max_dodge,
    max_hit,
)
from monster_catalog.query.engine import MonsterQuery, QueryResult, build_predicate

__all__ = [
    "Predicate",
    "filter_monsters",
    "CompareFn",
    "Direction",
    "reverse",
    "sort_monsters",
    "sorted_monsters",
    "COMPARATORS",
    "UnknownComparatorError",
    "available_comparators",
    "get_comparator",
    "max_dodge",
    "max_hit",
    "MonsterQuery",
    "QueryResult",
    "build_predicate",
]
