"""
Cabin, counterweight and suspension load estimates.

ASSUMPTIONS:
- Cabin + sling mass follows a linear area/load rule of thumb for
  lightweight residential equipment, clamped to a practical range
- Counterweight balances the cabin plus a fixed fraction of rated load
- Suspension load is the heavier (fully loaded cabin) side only
"""

from dataclasses import dataclass

from liftsize.config import ElevatorConstants
from liftsize.physics.units import clamp, weight_N


@dataclass(frozen=True)
class MassEstimate:
    """Masses on each side of the sheave (kg)."""
    cabin_mass_kg: float
    counterweight_mass_kg: float
    loaded_cabin_mass_kg: float


def estimate_cabin_mass(area_m2: float, rated_load_kg: float, c: ElevatorConstants) -> float:
    """
    Estimate cabin + sling mass.

    m = 250 + 120 * area + 0.15 * load, clamped to [300, 650] kg
    """
    mass = (
        c.cabin_mass_base_kg
        + c.cabin_mass_per_area_kg_m2 * area_m2
        + c.cabin_mass_per_load * rated_load_kg
    )
    return clamp(mass, c.cabin_mass_min_kg, c.cabin_mass_max_kg)


def calculate_counterweight_mass(
    cabin_mass_kg: float,
    rated_load_kg: float,
    ratio: float = 0.50,
) -> float:
    """Counterweight = cabin + ratio * rated load."""
    return cabin_mass_kg + ratio * rated_load_kg


def estimate_masses(area_m2: float, rated_load_kg: float, c: ElevatorConstants) -> MassEstimate:
    cabin = estimate_cabin_mass(area_m2, rated_load_kg, c)
    return MassEstimate(
        cabin_mass_kg=cabin,
        counterweight_mass_kg=calculate_counterweight_mass(
            cabin, rated_load_kg, c.counterweight_ratio
        ),
        loaded_cabin_mass_kg=cabin + rated_load_kg,
    )


def calculate_suspension_load(masses: MassEstimate, gravity_mps2: float) -> float:
    """
    Static suspension load in Newtons on the loaded cabin side.

    Used by both rope sizing and the top beam reaction.
    """
    return weight_N(masses.loaded_cabin_mass_kg, gravity_mps2)
