"""
Configuration Loader - YAML Queries and Profiles.

Loads a QueryConfig from YAML and validates it with Pydantic. A profile is
a second query file, found in a ``profiles/`` directory next to the base
query, that refines it:

    - Filter criteria narrow the base filter: label and name lists are
      intersected, level bounds tighten, ``name_contains`` is replaced
    - A sort list, when the profile gives one, replaces the base sort keys

Narrowing can only remove monsters from a base query, never add them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from monster_catalog.config.models import FilterConfig, QueryConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = "profiles"

_LIST_CRITERIA = ("names", "properties", "races", "sizes", "classes")


class ConfigError(ValueError):
    """Raised when a query file cannot be turned into a QueryConfig."""


class ProfileError(ConfigError):
    """Raised when a profile is missing, malformed or contradicts its base."""

    def __init__(self, profile: str, message: str) -> None:
        super().__init__(f"Profile '{profile}': {message}")
        self.profile = profile


def read_query_file(path: Path) -> Dict[str, Any]:
    """
    Read a YAML query document.

    Returns:
        The document mapping (empty for an empty file)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigError: If the document is not a mapping
    """
    with open(path, encoding="utf-8") as f:
        document = yaml.safe_load(f)
    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigError(
            f"{path}: expected a mapping at top level, got {type(document).__name__}"
        )
    return document


def narrow_filter(base: Optional[FilterConfig], overlay: FilterConfig) -> FilterConfig:
    """
    Combine two filters so a monster must satisfy both.

    Raises:
        ValidationError: If the tightened level bounds cross
    """
    if base is None:
        return overlay

    merged: Dict[str, Any] = {
        "name_contains": overlay.name_contains or base.name_contains,
    }
    for criterion in _LIST_CRITERIA:
        ours: Optional[List[str]] = getattr(base, criterion)
        theirs: Optional[List[str]] = getattr(overlay, criterion)
        if ours is None or theirs is None:
            merged[criterion] = theirs if ours is None else ours
        else:
            merged[criterion] = [value for value in ours if value in theirs]

    lows = [v for v in (base.min_level, overlay.min_level) if v is not None]
    highs = [v for v in (base.max_level, overlay.max_level) if v is not None]
    merged["min_level"] = max(lows) if lows else None
    merged["max_level"] = min(highs) if highs else None

    return FilterConfig.model_validate(merged)


def apply_profile(base: QueryConfig, profile: QueryConfig, name: str) -> QueryConfig:
    """
    Refine a base query with a profile.

    Args:
        base: Validated base query
        profile: Validated profile query
        name: Profile name, for error messages

    Raises:
        ProfileError: If the narrowed filter is contradictory
    """
    update: Dict[str, Any] = {}
    if profile.filter is not None:
        try:
            update["filter"] = narrow_filter(base.filter, profile.filter)
        except ValidationError as e:
            raise ProfileError(name, f"narrowed filter is invalid: {e}") from e
    if "sort" in profile.model_fields_set:
        update["sort"] = list(profile.sort)
    return base.model_copy(update=update)


def load_profile(profile_path: Path, name: str) -> QueryConfig:
    """
    Load and validate a profile file.

    Raises:
        ProfileError: If the file is missing or invalid
    """
    if not profile_path.exists():
        raise ProfileError(name, f"not found at {profile_path}")
    try:
        return QueryConfig.model_validate(read_query_file(profile_path))
    except (ConfigError, ValidationError) as e:
        raise ProfileError(name, str(e)) from e


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> QueryConfig:
    """
    Load a query, optionally refined by a profile.

    Args:
        config_path: Path to the YAML query file
        profile: Optional profile name, read from ``profiles/<name>.yaml``
            beside the query file
        base_path: Base path for a relative config_path

    Returns:
        Validated QueryConfig object

    Raises:
        FileNotFoundError: If the query file doesn't exist
        ConfigError: If the query file is not a mapping
        ProfileError: If the profile is missing, invalid or contradictory
        ValidationError: If the query is invalid
    """
    path = Path(config_path)
    if not path.is_absolute() and base_path is not None:
        path = base_path / path

    config = QueryConfig.model_validate(read_query_file(path))
    if profile:
        overlay = load_profile(path.parent / PROFILE_DIR / f"{profile}.yaml", profile)
        config = apply_profile(config, overlay, profile)

    logger.debug(f"Loaded query from {path} (profile={profile})")
    return config
