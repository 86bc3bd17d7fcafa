"""
Monster Query - Declarative Filter and Sort.

MonsterQuery runs a QueryConfig against a list of monsters:

    1. Build a predicate from the filter section (no section, no predicate)
    2. Filter the monsters
    3. Apply each sort key as a stable pass, last key first, so the first
       key is the primary order and later keys break its ties

The caller's list is never reordered.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from pydantic import BaseModel, Field

from monster_catalog.config.models import FilterConfig, QueryConfig, SortKeyConfig
from monster_catalog.domain.entities import (
    CLASSIFICATION_LABELS,
    RACE_LABELS,
    SIZE_LABELS,
    Monster,
    codes_for_labels,
)
from monster_catalog.query import predicates
from monster_catalog.query.comparators import get_comparator
from monster_catalog.query.filtering import Predicate, filter_monsters
from monster_catalog.query.sorting import sort_monsters

logger = logging.getLogger(__name__)


class QueryResult(BaseModel):
    """Result of a query run."""

    input_count: int
    monsters: List[Monster] = Field(default_factory=list)
    sort_keys: List[SortKeyConfig] = Field(default_factory=list)
    filtered: bool = Field(default=False, description="A predicate was applied")
    duration_seconds: float = 0.0

    @property
    def output_count(self) -> int:
        return len(self.monsters)

    @property
    def reduction_ratio(self) -> float:
        """Calculate reduction ratio (0.0 = no reduction, 1.0 = all filtered)."""
        if self.input_count == 0:
            return 0.0
        return 1.0 - (self.output_count / self.input_count)


def build_predicate(config: Optional[FilterConfig]) -> Optional[Predicate]:
    """
    Translate a FilterConfig into a predicate.

    Returns:
        None if there is no filter section, otherwise a predicate requiring
        every configured criterion
    """
    if config is None:
        return None

    parts: List[Predicate] = []
    if config.name_contains:
        parts.append(predicates.name_contains(config.name_contains))
    if config.names is not None:
        parts.append(predicates.name_in(config.names))
    if config.properties is not None:
        parts.append(predicates.property_label_in(config.properties))
    if config.races is not None:
        parts.append(predicates.race_in(codes_for_labels(RACE_LABELS, config.races)))
    if config.sizes is not None:
        parts.append(predicates.size_in(codes_for_labels(SIZE_LABELS, config.sizes)))
    if config.classes is not None:
        parts.append(
            predicates.classification_in(
                codes_for_labels(CLASSIFICATION_LABELS, config.classes)
            )
        )
    if config.min_level is not None or config.max_level is not None:
        parts.append(predicates.level_between(config.min_level, config.max_level))

    return predicates.all_of(*parts)


class MonsterQuery:
    """Runs a declarative query over in-memory monsters."""

    def __init__(self, config: QueryConfig) -> None:
        """
        Initialize with configuration.

        Args:
            config: Validated query configuration
        """
        self.config = config
        self._predicate = build_predicate(config.filter)

    def run(self, monsters: List[Monster]) -> QueryResult:
        """
        Filter then sort monsters.

        Args:
            monsters: Monsters to query (left untouched)

        Returns:
            QueryResult with the selected monsters in query order
        """
        start = time.perf_counter()

        selected = list(filter_monsters(monsters, self._predicate))
        for key in reversed(self.config.sort):
            sort_monsters(selected, get_comparator(key.by), key.direction)

        duration = time.perf_counter() - start
        logger.info(
            f"Query selected {len(selected)} of {len(monsters)} monsters "
            f"({len(self.config.sort)} sort keys, {duration:.3f}s)"
        )

        return QueryResult(
            input_count=len(monsters),
            monsters=selected,
            sort_keys=list(self.config.sort),
            filtered=self._predicate is not None,
            duration_seconds=duration,
        )
