"""
Pytest configuration and shared fixtures.
"""

import pytest

from liftsize.config import DEFAULT_CONSTANTS, ElevatorConstants
from liftsize.models.inputs import CalculationInput
from liftsize.models.warnings_log import WarningsLog


@pytest.fixture
def constants() -> ElevatorConstants:
    """The shared default assumptions."""
    return DEFAULT_CONSTANTS


@pytest.fixture
def warnings_log() -> WarningsLog:
    """A fresh per-run warnings log."""
    return WarningsLog()


@pytest.fixture
def default_inputs() -> CalculationInput:
    """Default request: 2 stops, 400 kg, 4 m travel."""
    return CalculationInput(stops=2, rated_load_kg=400.0, travel_m=4.0)


@pytest.fixture
def heavy_inputs() -> CalculationInput:
    """Heavy-duty residential lift above the heaviest rail tier."""
    return CalculationInput(stops=4, rated_load_kg=1000.0, travel_m=9.0)


@pytest.fixture
def oversized_inputs() -> CalculationInput:
    """Load too large for any rope in the heuristic table."""
    return CalculationInput(stops=3, rated_load_kg=5000.0, travel_m=6.0)
