"""
Safety equipment recommendations.

Only the governor trip speed, safety gear class, interlock count and the
pit-depth warning are derived. The remaining content (limit switches,
buffers, safety chain) is fixed advisory text attached to every report.
"""

from dataclasses import dataclass

from liftsize.config import ElevatorConstants
from liftsize.models.warnings_log import WarningsLog
from liftsize.physics.units import round_sig

GOVERNOR_TYPE = "Centrifugal (mechanical) overspeed governor with governor rope and tension pulley"
GOVERNOR_NOTES = (
    "Actual tripping speed depends on the supplier's governor/safety gear kit "
    "and the applicable standard."
)

SAFETY_GEAR_LOW_SPEED = "Progressive safety gear (recommended) or instantaneous with buffered effect (per kit)"
SAFETY_GEAR_HIGH_SPEED = "Progressive safety gear (typically required at higher speed)"
SAFETY_GEAR_MOUNTING = "On the car sling, acting on the car guide rails"
SAFETY_GEAR_TRIGGER = "Tripped by the governor through the kit's linkage/cams"

INTERLOCK_TYPE = "Safety door locks (interlocks) for swing landing doors"
INTERLOCK_NOTES = (
    "Each landing door must lock mechanically and provide an electrical safety contact."
)

LIMIT_SWITCHES = {
    "normal_limits": "Upper and lower terminal switches (stop/slowdown)",
    "safety_limits": "Independent final limit switches (cut the control circuit)",
    "inspection": "Car-top inspection mode + emergency stop",
}

BUFFERS_RECOMMENDED = "Pit buffers (car and/or counterweight depending on layout)."

SAFETY_CHAIN_CONTACTS = (
    "Car emergency stop",
    "Car-top stop (inspection)",
    "Pit stop",
    "Door interlocks (all landings)",
    "Upper final limit switch",
    "Lower final limit switch",
    "Governor/safety gear contact",
    "Brake monitoring (if available)",
    "Drive/controller protections (per manufacturer)",
)
SAFETY_CHAIN_NOTES = "Implement with a safety relay or certified controller safety inputs."

PIT_WARNING = (
    "A {pit:.2f} m pit is extremely small for a conventional traction elevator; it may not "
    "provide the required refuge space or room for adequate buffers."
)
BUFFERS_PIT_WARNING = (
    "With a {pit:.2f} m pit the margin is VERY limited; check refuge space and buffer requirements."
)
BUFFERS_PIT_OK = "Pit depth above the minimum heuristic (still to be verified against the standard)."


@dataclass(frozen=True)
class SafetyRecommendation:
    rated_speed_mps: float
    governor_trip_speed_mps: float
    safety_gear_type: str
    door_interlock_count: int
    pit_depth_m: float
    pit_too_shallow: bool


def calculate_governor_trip_speed(rated_speed_mps: float, margin: float = 1.15) -> float:
    """Recommended governor tripping speed, 3 significant figures."""
    return round_sig(margin * rated_speed_mps, 3)


def select_safety_gear(rated_speed_mps: float, threshold_mps: float = 0.63) -> str:
    if rated_speed_mps <= threshold_mps:
        return SAFETY_GEAR_LOW_SPEED
    return SAFETY_GEAR_HIGH_SPEED


def advise_safety_equipment(
    stops: int,
    rated_speed_mps: float,
    c: ElevatorConstants,
    warnings: WarningsLog,
) -> SafetyRecommendation:
    """
    Derive governor, safety gear and interlock recommendations.

    One interlocked landing door per stop. Warns when the pit is shallower
    than the minimum heuristic depth.
    """
    pit_too_shallow = c.pit_depth_m < c.min_pit_depth_m
    if pit_too_shallow:
        warnings.warn(PIT_WARNING.format(pit=c.pit_depth_m))

    return SafetyRecommendation(
        rated_speed_mps=rated_speed_mps,
        governor_trip_speed_mps=calculate_governor_trip_speed(
            rated_speed_mps, c.governor_trip_margin
        ),
        safety_gear_type=select_safety_gear(rated_speed_mps, c.safety_gear_speed_threshold_mps),
        door_interlock_count=stops,
        pit_depth_m=c.pit_depth_m,
        pit_too_shallow=pit_too_shallow,
    )
