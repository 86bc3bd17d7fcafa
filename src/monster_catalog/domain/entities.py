"""
Core Domain Entities.

This module defines the monster record and the enumerated categories it is
tagged with. Records mirror the monster-drops JSON document one field per
key, so a decoded document re-encodes to the same mapping.

Enumerated fields (property, race, size, class) are stored as raw integer
codes. Display strings come from explicit lookup tables and unknown codes
render as an empty string instead of failing, since the upstream feed can
grow new codes at any time.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple

from pydantic import BaseModel, Field


class Property(IntEnum):
    """Elemental property code (level in the tens, element in the ones)."""

    # Neutral 1 technically, reserved for guardians and treasure boxes.
    NEUTRAL_SPECIAL = 0
    NEUTRAL_1 = 20
    NEUTRAL_2 = 40
    NEUTRAL_3 = 60
    NEUTRAL_4 = 80
    WATER_1 = 21
    WATER_2 = 41
    WATER_3 = 61
    WATER_4 = 81
    EARTH_1 = 22
    EARTH_2 = 42
    EARTH_3 = 62
    EARTH_4 = 82
    FIRE_1 = 23
    FIRE_2 = 43
    FIRE_3 = 63
    FIRE_4 = 83
    WIND_1 = 24
    WIND_2 = 44
    WIND_3 = 64
    WIND_4 = 84
    POISON_1 = 25
    POISON_2 = 45
    POISON_3 = 65
    POISON_4 = 85
    HOLY_1 = 26
    HOLY_2 = 46
    HOLY_3 = 66
    HOLY_4 = 86
    SHADOW_1 = 27
    SHADOW_2 = 47
    SHADOW_3 = 67
    SHADOW_4 = 87
    GHOST_1 = 28
    GHOST_2 = 48
    GHOST_3 = 68
    GHOST_4 = 88
    UNDEAD_1 = 29
    UNDEAD_2 = 49
    UNDEAD_3 = 69
    UNDEAD_4 = 89


PROPERTY_LABELS: Dict[int, str] = {
    Property.NEUTRAL_SPECIAL: "Neutral 1",
    Property.NEUTRAL_1: "Neutral 1",
    Property.NEUTRAL_2: "Neutral 2",
    Property.NEUTRAL_3: "Neutral 3",
    Property.NEUTRAL_4: "Neutral 4",
    Property.WATER_1: "Water 1",
    Property.WATER_2: "Water 2",
    Property.WATER_3: "Water 3",
    Property.WATER_4: "Water 4",
    Property.EARTH_1: "Earth 1",
    Property.EARTH_2: "Earth 2",
    Property.EARTH_3: "Earth 3",
    Property.EARTH_4: "Earth 4",
    Property.FIRE_1: "Fire 1",
    Property.FIRE_2: "Fire 2",
    Property.FIRE_3: "Fire 3",
    Property.FIRE_4: "Fire 4",
    Property.WIND_1: "Wind 1",
    Property.WIND_2: "Wind 2",
    Property.WIND_3: "Wind 3",
    Property.WIND_4: "Wind 4",
    Property.POISON_1: "Poison 1",
    Property.POISON_2: "Poison 2",
    Property.POISON_3: "Poison 3",
    Property.POISON_4: "Poison 4",
    Property.HOLY_1: "Holy 1",
    Property.HOLY_2: "Holy 2",
    Property.HOLY_3: "Holy 3",
    Property.HOLY_4: "Holy 4",
    Property.SHADOW_1: "Shadow 1",
    Property.SHADOW_2: "Shadow 2",
    Property.SHADOW_3: "Shadow 3",
    Property.SHADOW_4: "Shadow 4",
    Property.GHOST_1: "Ghost 1",
    Property.GHOST_2: "Ghost 2",
    Property.GHOST_3: "Ghost 3",
    Property.GHOST_4: "Ghost 4",
    Property.UNDEAD_1: "Undead 1",
    Property.UNDEAD_2: "Undead 2",
    Property.UNDEAD_3: "Undead 3",
    Property.UNDEAD_4: "Undead 4",
}


class Race(IntEnum):
    """Monster race."""

    FORMLESS = 0
    UNDEAD = 1
    BRUTE = 2
    PLANT = 3
    INSECT = 4
    FISH = 5
    DEMON = 6
    DEMI_HUMAN = 7
    ANGEL = 8
    DRAGON = 9


RACE_LABELS: Dict[int, str] = {
    Race.FORMLESS: "Formless",
    Race.UNDEAD: "Undead",
    Race.BRUTE: "Brute",
    Race.PLANT: "Plant",
    Race.INSECT: "Insect",
    Race.FISH: "Fish",
    Race.DEMON: "Demon",
    Race.DEMI_HUMAN: "Demi-Human",
    Race.ANGEL: "Angel",
    Race.DRAGON: "Dragon",
}


class Size(IntEnum):
    """Monster size, ordered by declaration."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2


SIZE_LABELS: Dict[int, str] = {
    Size.SMALL: "Small",
    Size.MEDIUM: "Medium",
    Size.LARGE: "Large",
}


class Classification(IntEnum):
    """Monster class. The feed does not tell mini-bosses from MVPs."""

    MOB = 0
    BOSS = 1


CLASSIFICATION_LABELS: Dict[int, str] = {
    Classification.MOB: "Mob",
    Classification.BOSS: "Boss",
}


class MoveSpeed(IntEnum):
    """Movement speed thresholds (milliseconds per cell, lower is faster)."""

    IMMOVABLE = 1000
    VERY_SLOW = 350
    SLOW = 200
    AVERAGE = 170
    FAST = 130
    VERY_FAST = 100


def property_label(code: int) -> str:
    """Display string for a property code, empty if unknown."""
    return PROPERTY_LABELS.get(code, "")


def race_label(code: int) -> str:
    """Display string for a race code, empty if unknown."""
    return RACE_LABELS.get(code, "")


def size_label(code: int) -> str:
    """Display string for a size code, empty if unknown."""
    return SIZE_LABELS.get(code, "")


def classification_label(code: int) -> str:
    """Display string for a class code, empty if unknown."""
    return CLASSIFICATION_LABELS.get(code, "")


def codes_for_labels(table: Dict[int, str], labels: Iterable[str]) -> List[int]:
    """
    Resolve display labels to every code rendering as them.

    Raises:
        ValueError: If a label is not in the table
    """
    codes: List[int] = []
    for label in labels:
        matches = [int(code) for code, text in table.items() if text == label]
        if not matches:
            raise ValueError(
                f"unknown label '{label}', expected one of {sorted(set(table.values()))}"
            )
        codes.extend(matches)
    return codes


def move_speed_class(value: int) -> MoveSpeed:
    """Bucket a raw movement delay into its speed threshold."""
    for threshold in MoveSpeed:
        if value >= threshold:
            return threshold
    return MoveSpeed.VERY_FAST


class Drop(NamedTuple):
    """One item slot of a monster's loot table."""

    item: List[str]
    # Hundredths of a percent: 5335 is 53.35%.
    rate: int

    @property
    def name(self) -> str:
        return self.item[0] if self.item else ""

    @property
    def chance(self) -> float:
        """Drop chance as a fraction (0.0 to 1.0)."""
        return self.rate / 10_000


class Monster(BaseModel):
    """
    A single monster entry from the monster-drops database.

    Missing loot slots are encoded upstream as a placeholder item with a
    zero drop rate. The eighth slot holds the monster's card, if any.
    """

    name: str = Field(..., alias="Name", description="In-game display name")

    item1: List[str] = Field(default_factory=list)
    percent1: int = 0
    item2: List[str] = Field(default_factory=list)
    percent2: int = 0
    item3: List[str] = Field(default_factory=list)
    percent3: int = 0
    item4: List[str] = Field(default_factory=list)
    percent4: int = 0
    item5: List[str] = Field(default_factory=list)
    percent5: int = 0
    item6: List[str] = Field(default_factory=list)
    percent6: int = 0
    item7: List[str] = Field(default_factory=list)
    percent7: int = 0
    item8: List[str] = Field(default_factory=list)
    percent8: int = 0

    # Cells. 0 cannot attack, 1 is melee, 7 is standard ranged.
    attack_range: int = Field(default=0, alias="aRan")
    level: int = Field(default=0, alias="LV")
    hp: int = Field(default=0, alias="HP")
    sp: int = Field(default=0, alias="SP")
    strength: int = Field(default=0, alias="str")
    intelligence: int = Field(default=0, alias="int")
    vitality: int = Field(default=0, alias="vit")
    dexterity: int = Field(default=0, alias="dex")
    agility: int = Field(default=0, alias="agi")
    luck: int = Field(default=0, alias="luk")
    low_attack: int = Field(default=0, alias="atk1")
    # Added to low_attack, not the top of the attack range.
    attack_spread: int = Field(default=0, alias="atk2")
    defense: int = Field(default=0, alias="def")
    base_exp: int = Field(default=0, alias="exp")
    job_exp: int = Field(default=0, alias="jexp")
    # Matches level for every known entry.
    inc: int = 0
    spell_range: int = Field(default=0, alias="as")
    sight_range: int = Field(default=0, alias="es")
    move_speed: int = Field(default=0, alias="Mspeed")
    attack_delay: int = Field(default=0, alias="rechargeTime")
    hurt_delay: int = Field(default=0, alias="attackedMT")
    hit_delay: int = Field(default=0, alias="attackMT")
    element: int = Field(default=0, alias="property")
    size: int = Field(default=0, alias="scale")
    classification: int = Field(default=0, alias="class")
    race: int = 0
    magic_defense: int = Field(default=0, alias="mdef")
    taming_item: str = Field(default="", alias="tamingitem")
    food_item: str = Field(default="", alias="fooditem")
    db_name: List[str] = Field(
        default_factory=list, description="Original kRO name"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def element_label(self) -> str:
        return property_label(self.element)

    @property
    def race_label(self) -> str:
        return race_label(self.race)

    @property
    def size_label(self) -> str:
        return size_label(self.size)

    @property
    def is_boss(self) -> bool:
        return self.classification == Classification.BOSS

    @property
    def high_attack(self) -> int:
        """Top of the attack range."""
        return self.low_attack + self.attack_spread

    @property
    def speed_class(self) -> MoveSpeed:
        return move_speed_class(self.move_speed)

    @property
    def drops(self) -> List[Drop]:
        """All eight loot slots in order, placeholder slots included."""
        return [
            Drop(self.item1, self.percent1),
            Drop(self.item2, self.percent2),
            Drop(self.item3, self.percent3),
            Drop(self.item4, self.percent4),
            Drop(self.item5, self.percent5),
            Drop(self.item6, self.percent6),
            Drop(self.item7, self.percent7),
            Drop(self.item8, self.percent8),
        ]
