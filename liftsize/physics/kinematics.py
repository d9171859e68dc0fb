"""
Rated speed, floor spacing and ride time.
"""

from dataclasses import dataclass
from fractions import Fraction

from liftsize.config import ElevatorConstants
from liftsize.models.warnings_log import WarningsLog
from liftsize.physics.units import round_half_up


@dataclass(frozen=True)
class Kinematics:
    rated_speed_mps: float
    floor_to_floor_m: float
    travel_time_s: float


def select_rated_speed(travel_m: float, c: ElevatorConstants) -> float:
    """
    Pick the rated speed tier for a travel distance.

    Low-cost residential tiers:
        - default 0.35 m/s
        - 0.30 m/s below 3.0 m of travel
        - 0.45 m/s above 8.0 m of travel (checked last, so it wins)
    """
    speed = c.default_speed_mps
    if travel_m < c.short_travel_threshold_m:
        speed = c.short_travel_speed_mps
    if travel_m > c.long_travel_threshold_m:
        speed = c.long_travel_speed_mps
    return speed


def calculate_floor_to_floor(travel_m: float, stops: int) -> float:
    """
    Average spacing between landings. Two stops means one interval.

    Divides exactly so a stop count beyond float range still gives a
    (vanishingly small) spacing.
    """
    return float(Fraction(travel_m) / (stops - 1))


def calculate_travel_time(travel_m: float, speed_mps: float, min_speed_mps: float = 0.1) -> float:
    """Ride time end to end at constant speed, speed floored at min_speed_mps."""
    return travel_m / max(min_speed_mps, speed_mps)


def estimate_kinematics(
    stops: int,
    travel_m: float,
    c: ElevatorConstants,
    warnings: WarningsLog,
) -> Kinematics:
    """
    Derive speed tier, floor spacing and ride time.

    Warns when the average floor spacing is below the tight spacing
    threshold, since real inter-storey heights rarely go that low.
    """
    speed = select_rated_speed(travel_m, c)

    floor_to_floor = calculate_floor_to_floor(travel_m, stops)
    if floor_to_floor < c.tight_floor_spacing_m:
        warnings.warn(
            f"Computed distance between stops (~{round_half_up(floor_to_floor, 2):g} m) is low; "
            "check the actual floor-to-floor heights."
        )

    return Kinematics(
        rated_speed_mps=speed,
        floor_to_floor_m=floor_to_floor,
        travel_time_s=calculate_travel_time(travel_m, speed, c.min_speed_divisor_mps),
    )
