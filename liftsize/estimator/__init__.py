"""
Sizing pipeline for traction elevators.

Validates inputs, runs every estimation stage and assembles the report.
"""

from liftsize.estimator.pipeline import (
    ElevatorEstimator,
    IntermediateResult,
    assemble_report,
    estimate,
    estimate_request,
)

__all__ = [
    "ElevatorEstimator",
    "IntermediateResult",
    "assemble_report",
    "estimate",
    "estimate_request",
]
