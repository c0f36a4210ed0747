"""Shared farms for the test suite."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from iotcs.core.farm import Farm

from farms import (
    SAMPLE_ROWS, SOLVABLE_ROWS, BARN_ROWS, THRESHOLD_ROWS,
    ALL_BARRIERS_ROWS, SILO_ROWS, farm_text,
)


@pytest.fixture
def sample_text():
    return farm_text(*SAMPLE_ROWS)


@pytest.fixture
def sample_farm(sample_text):
    return Farm.parse(sample_text)


@pytest.fixture
def solvable_farm():
    return Farm.parse(farm_text(*SOLVABLE_ROWS))


@pytest.fixture
def barn_farm():
    return Farm.parse(farm_text(*BARN_ROWS))


@pytest.fixture
def threshold_farm():
    return Farm.parse(farm_text(*THRESHOLD_ROWS))


@pytest.fixture
def all_barriers_farm():
    return Farm.parse(farm_text(*ALL_BARRIERS_ROWS))


@pytest.fixture
def silo_farm():
    return Farm.parse(farm_text(*SILO_ROWS))
