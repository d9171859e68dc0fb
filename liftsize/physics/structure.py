"""
Structural estimates: guide rails, brackets and top beam reaction.

ASSUMPTIONS:
- Rail class and bracket spacing depend on rated load only
- Guide length covers travel + pit + a fixed overhead allowance
- Lateral bracket load is a fraction of rated load weight, shared by half
  the brackets on a rail, with a minimum design load
- Top beam carries the suspension load times a dynamic factor
  (machine on top beam, 1:1 roping)
"""

import math
from dataclasses import dataclass

from liftsize.config import ElevatorConstants, RailTier
from liftsize.physics.units import N_to_kN, clamp, round_sig, weight_N


@dataclass(frozen=True)
class GuideRailEstimate:
    rail_type: str
    bracket_spacing_m: float
    total_guide_length_m: float
    brackets_per_rail: int
    lateral_load_N: float
    bracket_design_load_N: float


@dataclass(frozen=True)
class TopBeamEstimate:
    vertical_reaction_N: float
    vertical_reaction_kN: float


def select_rail_tier(rated_load_kg: float, tiers: tuple[RailTier, ...]) -> RailTier:
    """
    Pick the first tier whose bound covers the load.

    Default tiers:
        - <= 300 kg: T70-1, 2.0 m spacing
        - <= 450 kg: T75-3 / T82, 1.8 m spacing
        - heavier: T89 / T90, 1.6 m spacing
    """
    for tier in tiers:
        if tier.max_load_kg is None or rated_load_kg <= tier.max_load_kg:
            return tier
    return tiers[-1]


def calculate_brackets_per_rail(total_length_m: float, spacing_m: float) -> int:
    """Brackets along one rail: ceil(length / spacing) + 1."""
    return math.ceil(total_length_m / spacing_m) + 1


def estimate_guide_rails(
    rated_load_kg: float,
    travel_m: float,
    c: ElevatorConstants,
) -> GuideRailEstimate:
    """
    Estimate rail class, bracket count and bracket design load.

    Args:
        rated_load_kg: Rated load
        travel_m: Total travel
        c: Rail tiers, spacing limits, pit/overhead and load assumptions

    Returns:
        GuideRailEstimate
    """
    tier = select_rail_tier(rated_load_kg, c.rail_tiers)
    spacing = clamp(tier.bracket_spacing_m, c.min_bracket_spacing_m, c.max_bracket_spacing_m)

    total_length = travel_m + c.pit_depth_m + c.overhead_allowance_m
    brackets = calculate_brackets_per_rail(total_length, spacing)

    lateral = c.lateral_load_fraction * weight_N(rated_load_kg, c.gravity_mps2)
    per_bracket = lateral / max(1, brackets / 2)
    design_load = max(per_bracket, c.min_bracket_design_load_N)

    return GuideRailEstimate(
        rail_type=tier.rail_type,
        bracket_spacing_m=spacing,
        total_guide_length_m=total_length,
        brackets_per_rail=brackets,
        lateral_load_N=lateral,
        bracket_design_load_N=design_load,
    )


def estimate_top_beam(suspension_load_N: float, c: ElevatorConstants) -> TopBeamEstimate:
    """Vertical top beam reaction = dynamic factor * suspension load."""
    reaction = c.top_beam_dynamic_factor * suspension_load_N
    return TopBeamEstimate(
        vertical_reaction_N=reaction,
        vertical_reaction_kN=round_sig(N_to_kN(reaction), 3),
    )
