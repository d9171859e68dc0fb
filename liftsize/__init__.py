"""
Elevator Sizing Estimator (liftsize)

A preliminary sizing tool for residential traction elevators with a
counterweight. From the number of stops, rated load and travel it estimates
cabin geometry, speed, masses, motor rating, ropes, guide rails, top beam
reaction and safety equipment.

WARNING: This tool provides rough preliminary estimates only. Not a
structural calculation and not a code compliance check.

Usage:
    python -m liftsize estimate --stops 3 --load 450 --travel 6
    python -m liftsize make-example
    python -m liftsize estimate --input example_request.json
    python -m liftsize serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Elevator Sizing Project"

from liftsize.config import DEFAULT_CONSTANTS, ElevatorConstants
from liftsize.models.inputs import CalculationRequest, CalculationInput, validate_request
from liftsize.models.outputs import Report, ErrorReport
from liftsize.estimator.pipeline import ElevatorEstimator, IntermediateResult, estimate

__all__ = [
    "DEFAULT_CONSTANTS",
    "ElevatorConstants",
    "CalculationRequest",
    "CalculationInput",
    "validate_request",
    "Report",
    "ErrorReport",
    "ElevatorEstimator",
    "IntermediateResult",
    "estimate",
]
