"""
Sizing heuristics for a residential traction elevator.

Each module covers one stage of the estimate:
- geometry: cabin envelope inside the standard shaft
- kinematics: speed tier, floor spacing, ride time
- masses: cabin, counterweight and suspension load
- power: hoisting force, power and motor rating
- ropes: rope diameter/count selection
- structure: guide rails, brackets and top beam reaction
- safety: governor, safety gear, interlocks, pit warnings

All calculations are closed-form or table lookups for preliminary sizing.
NOT for certification or detailed structural analysis.
"""

from liftsize.physics.units import ureg, Q_, weight_N, N_to_kN, W_to_kW, clamp, round_sig
from liftsize.physics.geometry import CabinGeometry, estimate_cabin_geometry
from liftsize.physics.kinematics import (
    Kinematics,
    select_rated_speed,
    calculate_floor_to_floor,
    calculate_travel_time,
    estimate_kinematics,
)
from liftsize.physics.masses import (
    MassEstimate,
    estimate_cabin_mass,
    calculate_counterweight_mass,
    estimate_masses,
    calculate_suspension_load,
)
from liftsize.physics.power import PowerEstimate, suggest_motor_rating, estimate_power
from liftsize.physics.ropes import (
    RopeCandidate,
    RopeSelection,
    flatten_rope_table,
    calculate_required_break,
    find_first_rope,
    select_ropes,
)
from liftsize.physics.structure import (
    GuideRailEstimate,
    TopBeamEstimate,
    select_rail_tier,
    estimate_guide_rails,
    estimate_top_beam,
)
from liftsize.physics.safety import (
    SafetyRecommendation,
    calculate_governor_trip_speed,
    select_safety_gear,
    advise_safety_equipment,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "weight_N",
    "N_to_kN",
    "W_to_kW",
    "clamp",
    "round_sig",
    # Geometry
    "CabinGeometry",
    "estimate_cabin_geometry",
    # Kinematics
    "Kinematics",
    "select_rated_speed",
    "calculate_floor_to_floor",
    "calculate_travel_time",
    "estimate_kinematics",
    # Masses
    "MassEstimate",
    "estimate_cabin_mass",
    "calculate_counterweight_mass",
    "estimate_masses",
    "calculate_suspension_load",
    # Power
    "PowerEstimate",
    "suggest_motor_rating",
    "estimate_power",
    # Ropes
    "RopeCandidate",
    "RopeSelection",
    "flatten_rope_table",
    "calculate_required_break",
    "find_first_rope",
    "select_ropes",
    # Structure
    "GuideRailEstimate",
    "TopBeamEstimate",
    "select_rail_tier",
    "estimate_guide_rails",
    "estimate_top_beam",
    # Safety
    "SafetyRecommendation",
    "calculate_governor_trip_speed",
    "select_safety_gear",
    "advise_safety_equipment",
]
