"""
Configuration Package - Query Models and Loaders.

This package handles declarative monster queries:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Profiles that narrow a base query

Configuration Structure:
    - QueryConfig: Root configuration object
    - FilterConfig: Which monsters to keep
    - SortKeyConfig: One comparator name plus a direction

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Profiles live in profiles/<name>.yaml beside the base query
"""

from monster_catalog.config.models import FilterConfig, QueryConfig, SortKeyConfig
from monster_catalog.config.loader import (
    ConfigError,
    ProfileError,
    apply_profile,
    load_config,
    narrow_filter,
)

__all__ = [
    "FilterConfig",
    "QueryConfig",
    "SortKeyConfig",
    "ConfigError",
    "ProfileError",
    "apply_profile",
    "load_config",
    "narrow_filter",
]
