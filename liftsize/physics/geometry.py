"""
Cabin geometry inside the standard shaft.

The counterweight runs beside the cabin (lateral arrangement), so only the
shaft width loses the counterweight column. Both directions lose the rail
zone and running clearance.

ASSUMPTIONS:
- Single rail zone and running clearance allowance per direction (simplified)
- Uniform wall build-up on all cabin sides
- Minimum interior floors express the smallest cabin still worth offering,
  regardless of how much the envelope heuristic shrinks
"""

from dataclasses import dataclass

from liftsize.config import ElevatorConstants


@dataclass(frozen=True)
class CabinGeometry:
    """Cabin envelope derived from the shaft (all meters / m²)."""
    ext_width_m: float
    ext_depth_m: float
    int_width_m: float
    int_depth_m: float
    area_m2: float


def calculate_cabin_exterior(c: ElevatorConstants) -> tuple[float, float]:
    """
    Cabin exterior envelope (width, depth) left inside the shaft.

    Width = shaft - counterweight column - rail zone - running clearance
    Depth = shaft - rail zone - running clearance
    """
    ext_width = (
        c.shaft_width_m - c.counterweight_column_m - c.rail_zone_m - c.running_clearance_m
    )
    ext_depth = c.shaft_depth_m - c.rail_zone_m - c.running_clearance_m
    return ext_width, ext_depth


def estimate_cabin_geometry(c: ElevatorConstants) -> CabinGeometry:
    """
    Estimate cabin interior dimensions and floor area.

    Args:
        c: Fixed shaft and clearance assumptions

    Returns:
        CabinGeometry with interior dimensions floored at the practical minimum
    """
    ext_width, ext_depth = calculate_cabin_exterior(c)

    int_width = max(c.min_cabin_int_width_m, ext_width - 2 * c.cabin_wall_thickness_m)
    int_depth = max(c.min_cabin_int_depth_m, ext_depth - 2 * c.cabin_wall_thickness_m)

    return CabinGeometry(
        ext_width_m=ext_width,
        ext_depth_m=ext_depth,
        int_width_m=int_width,
        int_depth_m=int_depth,
        area_m2=int_width * int_depth,
    )
