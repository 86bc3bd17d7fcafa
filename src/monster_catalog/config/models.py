"""
Configuration Models - Pydantic Models for Type-Safe Queries.

A QueryConfig describes which monsters to keep and how to order them.
All labels and comparator names are validated at load time.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from monster_catalog.domain.entities import (
    CLASSIFICATION_LABELS,
    PROPERTY_LABELS,
    RACE_LABELS,
    SIZE_LABELS,
    codes_for_labels,
)
from monster_catalog.query.comparators import get_comparator
from monster_catalog.query.sorting import Direction


class FilterConfig(BaseModel):
    """
    Filter criteria. Every criterion given must match.

    A list criterion left as None does not constrain; an empty list
    matches nothing.
    """

    name_contains: Optional[str] = None
    names: Optional[List[str]] = None
    properties: Optional[List[str]] = Field(
        default=None, description="Property labels, e.g. 'Neutral 3'"
    )
    races: Optional[List[str]] = Field(default=None, description="Race labels")
    sizes: Optional[List[str]] = Field(default=None, description="Size labels")
    classes: Optional[List[str]] = Field(default=None, description="Mob or Boss")
    min_level: Optional[int] = Field(default=None, ge=0)
    max_level: Optional[int] = Field(default=None, ge=0)

    @field_validator("properties")
    @classmethod
    def check_properties(cls, labels: Optional[List[str]]) -> Optional[List[str]]:
        codes_for_labels(PROPERTY_LABELS, labels or [])
        return labels

    @field_validator("races")
    @classmethod
    def check_races(cls, labels: Optional[List[str]]) -> Optional[List[str]]:
        codes_for_labels(RACE_LABELS, labels or [])
        return labels

    @field_validator("sizes")
    @classmethod
    def check_sizes(cls, labels: Optional[List[str]]) -> Optional[List[str]]:
        codes_for_labels(SIZE_LABELS, labels or [])
        return labels

    @field_validator("classes")
    @classmethod
    def check_classes(cls, labels: Optional[List[str]]) -> Optional[List[str]]:
        codes_for_labels(CLASSIFICATION_LABELS, labels or [])
        return labels

    @model_validator(mode="after")
    def check_level_range(self) -> "FilterConfig":
        if (
            self.min_level is not None
            and self.max_level is not None
            and self.min_level > self.max_level
        ):
            raise ValueError(
                f"min_level={self.min_level} > max_level={self.max_level}"
            )
        return self


class SortKeyConfig(BaseModel):
    """One sort criterion."""

    by: str = Field(..., description="Comparator catalog name")
    direction: Direction = Direction.ASCENDING

    @field_validator("by")
    @classmethod
    def check_comparator(cls, name: str) -> str:
        get_comparator(name)
        return name


class QueryConfig(BaseModel):
    """Root configuration object. The first sort key is the primary one."""

    version: str = "1.0"
    filter: Optional[FilterConfig] = None
    sort: List[SortKeyConfig] = Field(default_factory=list)
