"""
Output models for elevator sizing reports.

These models define the externally visible result. Values are already
rounded for presentation; full-precision figures live in the estimator's
IntermediateResult.
"""

from typing import Literal

from pydantic import BaseModel, Field


class _Section(BaseModel):
    """Base for report sections: immutable once built."""
    model_config = {"frozen": True}


class InputsEcho(_Section):
    """Validated inputs, echoed as given."""
    stops: int
    rated_load_kg: float
    travel_m: float


class StandardShaft(_Section):
    """Fixed shaft envelope every estimate assumes."""
    shaft_m: tuple[float, float] = Field(..., description="Shaft width and depth")
    pit_m: float = Field(..., description="Pit depth below finished floor")
    note: str


class CabinInternal(_Section):
    width: float
    depth: float
    area_m2: float


class AssumedClearances(_Section):
    rail_zone: float
    running_clearance: float
    cabin_wall_thickness: float


class RecommendedGeometry(_Section):
    configuration: str
    door_clear_opening_m: tuple[float, float] = Field(
        ..., description="Clear door opening width and height"
    )
    cabin_internal_m: CabinInternal
    counterweight_column_m: float
    assumed_clearances_m: AssumedClearances


class Performance(_Section):
    rated_speed_mps: float
    estimated_travel_time_s: float
    floor_to_floor_m: float


class Masses(_Section):
    estimated_cabin_plus_sling_kg: float
    counterweight_kg: float
    counterweight_rule: str


class DriveAssumptions(_Section):
    eta_total: float
    friction_factor: float
    acceleration_mps2: float


class MotorAndDrive(_Section):
    suggested_motor_kW: float
    steady_power_kW_est: float
    peak_power_kW_est: float
    drive: str
    assumptions: DriveAssumptions
    note: str


class RopeSelectionOut(_Section):
    rope_diameter_mm: int
    rope_count: int
    estimated_total_break_kN: float
    required_total_break_kN: float
    assumed_safety_factor: float
    fallback: bool = Field(
        default=False,
        description="True when no table entry met the requirement",
    )


class Ropes(_Section):
    roping: str
    selection_heuristic: RopeSelectionOut
    note: str


class GuideRails(_Section):
    suggested_rail_type: str
    total_guide_length_m_est: float
    bracket_spacing_m: float
    brackets_per_rail_est: int
    bracket_design_load_N_est: float
    notes: str


class TopBeam(_Section):
    vertical_reaction_kN_est: float
    notes: str


class PitAndOverhead(_Section):
    pit_depth_m: float
    assumed_overhead_m: float
    warning: str


class StructuralEstimates(_Section):
    guide_rails: GuideRails
    top_beam: TopBeam
    pit_and_overhead: PitAndOverhead


class OverspeedGovernor(_Section):
    type: str
    rated_speed_mps: float
    recommended_trip_speed_mps: float
    notes: str


class SafetyGear(_Section):
    type: str
    mounting: str
    trigger: str


class DoorInterlocks(_Section):
    type: str
    quantity: int
    notes: str


class LimitSwitches(_Section):
    normal_limits: str
    safety_limits: str
    inspection: str


class Buffers(_Section):
    pit_depth_m: float
    recommended: str
    warning: str


class SafetyChainConcept(_Section):
    series_contacts: tuple[str, ...]
    notes: str


class SafetyEquipment(_Section):
    overspeed_governor: OverspeedGovernor
    safety_gear: SafetyGear
    door_interlocks: DoorInterlocks
    limit_switches: LimitSwitches
    buffers: Buffers
    safety_chain_concept: SafetyChainConcept


class Report(_Section):
    """
    Complete preliminary sizing report.

    ADVISORY ONLY: not a structural calculation or code compliance check.
    """
    ok: Literal[True] = True
    inputs: InputsEcho
    standard_shaft: StandardShaft
    recommended_geometry: RecommendedGeometry
    performance: Performance
    masses: Masses
    motor_and_drive: MotorAndDrive
    ropes: Ropes
    structural_requirements_estimates: StructuralEstimates
    safety_equipment: SafetyEquipment
    warnings: tuple[str, ...] = ()


class ErrorReport(_Section):
    """Returned instead of a Report when input validation fails."""
    ok: Literal[False] = False
    errors: tuple[str, ...] = Field(..., min_length=1)
