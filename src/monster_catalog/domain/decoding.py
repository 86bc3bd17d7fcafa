"""
Monster Document Decoding.

Converts between monster-drops JSON documents and Monster records.
Documents are keyed by their upstream field names (aliases), and a record
encodes back to exactly the keys it was decoded from.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Union

from pydantic import TypeAdapter

from monster_catalog.domain.entities import Monster

logger = logging.getLogger(__name__)

_MONSTER_LIST = TypeAdapter(List[Monster])


def decode_monster(document: Mapping[str, Any]) -> Monster:
    """Validate a single document into a Monster."""
    return Monster.model_validate(document)


def decode_monsters(payload: Union[str, bytes]) -> List[Monster]:
    """
    Decode a JSON array of monster documents.

    Args:
        payload: JSON text holding a list of documents

    Returns:
        Monsters in document order

    Raises:
        ValidationError: If the payload is not a list of valid documents
    """
    monsters = _MONSTER_LIST.validate_json(payload)
    logger.debug(f"Decoded {len(monsters)} monsters")
    return monsters


def encode_monster(monster: Monster) -> Dict[str, Any]:
    """Serialize a Monster back to its document mapping."""
    return monster.model_dump(by_alias=True)


def encode_monsters(monsters: Iterable[Monster]) -> bytes:
    """Serialize monsters to a JSON array using upstream field names."""
    return _MONSTER_LIST.dump_json(list(monsters), by_alias=True)
