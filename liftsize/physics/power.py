"""
Hoisting force, power and motor rating.

Worst case is the fully loaded cabin travelling up against a counterweight
balanced at 50% of rated load.

ASSUMPTIONS:
- Friction is a fixed fraction of the total moving mass, counting the
  loaded cabin AND the full counterweight (simplified, not an
  equivalent-inertia model)
- Acceleration peak uses a fixed fraction of moving mass
- Combined mechanical + electrical efficiency is a single constant
- Motor rating adds a margin on peak power, then applies two floors:
  2.2 kW, then the 3.0 kW practical minimum
"""

from dataclasses import dataclass

from liftsize.config import ElevatorConstants
from liftsize.physics.masses import MassEstimate
from liftsize.physics.units import W_to_kW, clamp, round_sig, weight_N


@dataclass(frozen=True)
class PowerEstimate:
    unbalance_kg: float
    moving_mass_kg: float
    friction_kg: float
    effective_lift_kg: float
    force_N: float
    acceleration_mps2: float
    acceleration_force_N: float
    steady_power_W: float
    peak_power_W: float
    motor_kW: float


def calculate_unbalance(masses: MassEstimate) -> float:
    """Signed unbalance in kg. Positive means the cabin side is heavier."""
    return masses.loaded_cabin_mass_kg - masses.counterweight_mass_kg


def calculate_moving_mass(masses: MassEstimate) -> float:
    """Both sides of the system, used only as a friction/inertia proxy."""
    return masses.loaded_cabin_mass_kg + masses.counterweight_mass_kg


def calculate_power(force_N: float, speed_mps: float, efficiency: float, min_efficiency: float = 0.01) -> float:
    """Electrical input power in W: P = F * v / eta."""
    return force_N * speed_mps / max(min_efficiency, efficiency)


def suggest_motor_rating(peak_power_W: float, c: ElevatorConstants) -> float:
    """
    Suggested motor rating in kW.

    rating = max(2.2, peak_kW * 1.25), raised to 3.0 if still below it,
    then rounded to 3 significant figures. The order matters: a small
    peak estimate must never surface a 2.2 kW rating.
    """
    motor_kW = max(c.motor_floor_kW, W_to_kW(peak_power_W) * c.motor_margin)
    if motor_kW < c.motor_practical_min_kW:
        motor_kW = c.motor_practical_min_kW
    return round_sig(motor_kW, 3)


def estimate_power(
    masses: MassEstimate,
    speed_mps: float,
    c: ElevatorConstants,
) -> PowerEstimate:
    """
    Estimate steady and peak hoisting power.

    Args:
        masses: Cabin/counterweight masses
        speed_mps: Rated speed
        c: Drive assumptions (efficiency, friction, acceleration)

    Returns:
        PowerEstimate with intermediate forces and the suggested motor rating

    Equations:
        effective = (cabin + load - cw) + friction * (cabin + load + cw)
        F = effective * g
        P_steady = F * v / eta
        F_acc = 0.25 * moving_mass * a
        P_peak = (F + F_acc) * v / eta
    """
    unbalance = calculate_unbalance(masses)
    moving_mass = calculate_moving_mass(masses)
    friction = c.friction_factor * moving_mass
    effective = unbalance + friction

    force = weight_N(effective, c.gravity_mps2)

    accel = clamp(c.acceleration_mps2, c.min_acceleration_mps2, c.max_acceleration_mps2)
    accel_force = c.acceleration_mass_fraction * moving_mass * accel

    steady = calculate_power(force, speed_mps, c.efficiency, c.min_efficiency)
    peak = calculate_power(force + accel_force, speed_mps, c.efficiency, c.min_efficiency)

    return PowerEstimate(
        unbalance_kg=unbalance,
        moving_mass_kg=moving_mass,
        friction_kg=friction,
        effective_lift_kg=effective,
        force_N=force,
        acceleration_mps2=accel,
        acceleration_force_N=accel_force,
        steady_power_W=steady,
        peak_power_W=peak,
        motor_kW=suggest_motor_rating(peak, c),
    )
