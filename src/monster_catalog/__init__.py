"""
Monster Catalog - Filter and Sort Queries over Monster Records.

A small library for querying in-memory monster-drops records: keep the
monsters matching a predicate, then order them with stable, composable
sorts over raw fields or derived combat metrics.

Architecture:
    - Strategy Pattern: one comparison function per sort criterion
    - Stable multi-pass sorting for predictable tie ordering
    - Configuration-driven queries via YAML

Main Components:
    - domain: Monster record, category enums, document decoding
    - query: Filter, sort, comparator and predicate catalogs, MonsterQuery
    - config: Query configuration models and loaders

Example:
    >>> from monster_catalog.domain import decode_monsters
    >>> from monster_catalog.query import Direction, sort_monsters
    >>> from monster_catalog.query.comparators import by_base_exp_per_hp
    >>> monsters = decode_monsters(payload)
    >>> sort_monsters(monsters, by_base_exp_per_hp, Direction.DESCENDING)

"""

import logging

__version__ = "0.1.0"

# Must load before config: config.models imports query submodules and
# query.engine imports config.models.
from monster_catalog import query  # noqa: E402,F401


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Monster Catalog.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import monster_catalog
        >>> monster_catalog.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("monster_catalog").setLevel(level)
