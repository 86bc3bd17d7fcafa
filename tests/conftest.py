"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from monster_catalog.domain.entities import Monster
from tests.fixtures.monsters import ALARM_DOCUMENT, reference_monsters


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_query_path(fixtures_dir: Path) -> Path:
    """Path to sample query configuration file."""
    return fixtures_dir / "sample_query.yaml"


@pytest.fixture
def monsters() -> List[Monster]:
    """The seven reference monsters, in name order."""
    return reference_monsters()


@pytest.fixture
def alarm_document() -> bytes:
    """Raw JSON document for Alarm."""
    return ALARM_DOCUMENT


@pytest.fixture
def alarm(alarm_document: bytes) -> Monster:
    """Fully populated Alarm record."""
    return Monster.model_validate_json(alarm_document)
