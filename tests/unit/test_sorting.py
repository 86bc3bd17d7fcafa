"""
Unit Tests for sort_monsters.

Test Aspects Covered:
    ✅ Business Logic: Ordering by label and by name, both directions
    ✅ Stability: Ties keep their prior order in both directions
    ✅ Edge Cases: Empty and single-element input
"""

from __future__ import annotations

from typing import List

import pytest

from monster_catalog.domain.entities import Monster
from monster_catalog.query.comparators import by_element, by_name, by_race, by_size
from monster_catalog.query.sorting import (
    Direction,
    reverse,
    sort_monsters,
    sorted_monsters,
)
from tests.fixtures.monsters import (
    ALARM,
    CORNUTUS,
    DENIRO,
    PICKY,
    ROTAR_ZAIRO,
    THIEF_BUG_EGG,
    ZEALOTUS,
    names,
)


class TestSortMonsters:
    """Test cases for sort_monsters."""

    @pytest.mark.parametrize(
        "compare_fn, direction, expected",
        [
            (
                by_name,
                Direction.ASCENDING,
                [ALARM, CORNUTUS, DENIRO, PICKY, ROTAR_ZAIRO, THIEF_BUG_EGG, ZEALOTUS],
            ),
            (
                by_name,
                Direction.DESCENDING,
                [ZEALOTUS, THIEF_BUG_EGG, ROTAR_ZAIRO, PICKY, DENIRO, CORNUTUS, ALARM],
            ),
            (
                by_element,
                Direction.ASCENDING,
                [DENIRO, PICKY, ALARM, ZEALOTUS, THIEF_BUG_EGG, CORNUTUS, ROTAR_ZAIRO],
            ),
            (
                by_element,
                Direction.DESCENDING,
                [ROTAR_ZAIRO, CORNUTUS, THIEF_BUG_EGG, ALARM, ZEALOTUS, PICKY, DENIRO],
            ),
            (
                by_race,
                Direction.ASCENDING,
                [PICKY, ZEALOTUS, CORNUTUS, ALARM, ROTAR_ZAIRO, DENIRO, THIEF_BUG_EGG],
            ),
            (
                by_race,
                Direction.DESCENDING,
                [DENIRO, THIEF_BUG_EGG, ALARM, ROTAR_ZAIRO, CORNUTUS, ZEALOTUS, PICKY],
            ),
        ],
        ids=[
            "name",
            "name_descending",
            "element",
            "element_descending",
            "race",
            "race_descending",
        ],
    )
    def test_orders_monsters(
        self,
        monsters: List[Monster],
        compare_fn,
        direction: Direction,
        expected: List[Monster],
    ) -> None:
        """
        SCENARIO: Sort the reference monsters by one criterion
        EXPECTED: Monsters in the expected order, ties in name order
        """
        # Act
        sort_monsters(monsters, compare_fn, direction)

        # Assert
        assert names(monsters) == names(expected)

    def test_default_direction_is_ascending(self, monsters: List[Monster]) -> None:
        """
        SCENARIO: No direction given
        EXPECTED: Ascending order
        """
        # Arrange
        monsters.reverse()

        # Act
        sort_monsters(monsters, by_name)

        # Assert
        assert names(monsters)[0] == "Alarm"
        assert names(monsters)[-1] == "Zealotus"

    def test_descending_is_not_mirrored_ascending(self, monsters: List[Monster]) -> None:
        """
        SCENARIO: Duplicate sort keys (Alarm and Zealotus are both Neutral 3)
        EXPECTED: Descending keeps the tie in prior order, unlike a reversed
                  ascending result
        """
        # Arrange
        ascending = sorted_monsters(monsters, by_element, Direction.ASCENDING)

        # Act
        descending = sorted_monsters(monsters, by_element, Direction.DESCENDING)

        # Assert
        assert descending != list(reversed(ascending))
        assert names(descending).index("Alarm") < names(descending).index("Zealotus")

    def test_descending_equals_ascending_with_reversed_comparator(
        self, monsters: List[Monster]
    ) -> None:
        """
        SCENARIO: Compare descending sort with ascending on an inverted comparator
        EXPECTED: Identical order
        """
        # Act
        descending = sorted_monsters(monsters, by_size, Direction.DESCENDING)
        inverted = sorted_monsters(monsters, reverse(by_size), Direction.ASCENDING)

        # Assert
        assert descending == inverted

    @pytest.mark.parametrize("direction", [Direction.ASCENDING, Direction.DESCENDING])
    def test_multi_pass_sort_keeps_prior_order_within_ties(
        self, direction: Direction
    ) -> None:
        """
        SCENARIO: Pre-sort by name, then sort by size
        EXPECTED: Each size group stays alphabetical, in either direction
        """
        # Arrange
        monsters = [ZEALOTUS, PICKY, ROTAR_ZAIRO, ALARM, THIEF_BUG_EGG, DENIRO, CORNUTUS]
        sort_monsters(monsters, by_name)

        # Act
        sort_monsters(monsters, by_size, direction)

        # Assert
        small = ["Cornutus", "Deniro", "Picky", "Thief Bug Egg"]
        medium = ["Alarm", "Zealotus"]
        large = ["Rotar Zairo"]
        if direction == Direction.ASCENDING:
            assert names(monsters) == small + medium + large
        else:
            assert names(monsters) == large + medium + small

    @pytest.mark.parametrize(
        "direction, first",
        [("ascending", "Alarm"), ("descending", "Zealotus")],
    )
    def test_accepts_direction_value(
        self, monsters: List[Monster], direction: str, first: str
    ) -> None:
        """
        SCENARIO: Direction given as its plain string value
        EXPECTED: Sorts exactly as with the Direction member
        """
        # Arrange
        monsters.reverse()

        # Act
        sort_monsters(monsters, by_name, direction)  # type: ignore[arg-type]

        # Assert
        assert names(monsters)[0] == first
        assert monsters == sorted_monsters(monsters, by_name, Direction(direction))

    def test_rejects_unknown_direction(self, monsters: List[Monster]) -> None:
        with pytest.raises(ValueError):
            sort_monsters(monsters, by_name, "sideways")  # type: ignore[arg-type]

    def test_sorts_in_place(self, monsters: List[Monster]) -> None:
        """
        SCENARIO: sort_monsters on a list
        EXPECTED: Returns None, the list itself is reordered
        """
        # Arrange
        original = monsters

        # Act
        result = sort_monsters(monsters, by_name, Direction.DESCENDING)

        # Assert
        assert result is None
        assert original is monsters
        assert monsters[0] == ZEALOTUS

    def test_sorted_monsters_leaves_input_untouched(self, monsters: List[Monster]) -> None:
        """
        SCENARIO: sorted_monsters on a list
        EXPECTED: New sorted list, input order unchanged
        """
        # Act
        result = sorted_monsters(monsters, by_name, Direction.DESCENDING)

        # Assert
        assert result[0] == ZEALOTUS
        assert monsters[0] == ALARM

    def test_empty_and_single(self) -> None:
        """
        SCENARIO: Nothing or one monster to sort
        EXPECTED: No errors, list unchanged
        """
        # Arrange
        empty: List[Monster] = []
        single = [PICKY]

        # Act
        sort_monsters(empty, by_name, Direction.DESCENDING)
        sort_monsters(single, by_name, Direction.DESCENDING)

        # Assert
        assert empty == []
        assert single == [PICKY]
