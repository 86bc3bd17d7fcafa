"""
Domain Layer - Monster Records and Their Categories.

This package contains the monster record model and the enumerated
categories it carries. Everything here is plain data plus lookup tables;
no query logic lives in this layer.

Entities:
    - Monster: One monster-drops database entry (frozen)
    - Drop: One loot slot (item, rate)
    - Property, Race, Size, Classification, MoveSpeed: Enumerated codes

Decoding:
    - decode_monster / decode_monsters: Documents to records
    - encode_monster / encode_monsters: Records to documents

Design Principles:
    - Immutable records
    - Unknown category codes render as "" instead of raising
"""

from monster_catalog.domain.entities import (
    CLASSIFICATION_LABELS,
    PROPERTY_LABELS,
    RACE_LABELS,
    SIZE_LABELS,
    Classification,
    Drop,
    Monster,
    MoveSpeed,
    Property,
    Race,
    Size,
    classification_label,
    codes_for_labels,
    move_speed_class,
    property_label,
    race_label,
    size_label,
)
from monster_catalog.domain.decoding import (
    decode_monster,
    decode_monsters,
    encode_monster,
    encode_monsters,
)

__all__ = [
    "CLASSIFICATION_LABELS",
    "PROPERTY_LABELS",
    "RACE_LABELS",
    "SIZE_LABELS",
    "Classification",
    "Drop",
    "Monster",
    "MoveSpeed",
    "Property",
    "Race",
    "Size",
    "classification_label",
    "codes_for_labels",
    "move_speed_class",
    "property_label",
    "race_label",
    "size_label",
    "decode_monster",
    "decode_monsters",
    "encode_monster",
    "encode_monsters",
]
