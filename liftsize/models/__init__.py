"""
Pydantic models for elevator sizing inputs and reports.
"""

from liftsize.models.inputs import CalculationRequest, CalculationInput, validate_request
from liftsize.models.outputs import (
    InputsEcho,
    StandardShaft,
    RecommendedGeometry,
    Performance,
    Masses,
    MotorAndDrive,
    RopeSelectionOut,
    Ropes,
    GuideRails,
    TopBeam,
    PitAndOverhead,
    StructuralEstimates,
    SafetyEquipment,
    Report,
    ErrorReport,
)
from liftsize.models.warnings_log import WarningsLog

__all__ = [
    "CalculationRequest",
    "CalculationInput",
    "validate_request",
    "InputsEcho",
    "StandardShaft",
    "RecommendedGeometry",
    "Performance",
    "Masses",
    "MotorAndDrive",
    "RopeSelectionOut",
    "Ropes",
    "GuideRails",
    "TopBeam",
    "PitAndOverhead",
    "StructuralEstimates",
    "SafetyEquipment",
    "Report",
    "ErrorReport",
    "WarningsLog",
]
