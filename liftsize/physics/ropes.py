"""
Suspension rope selection from a small heuristic table.

The table is flattened into (diameter, count, total break) candidates in
diameter-ascending, then count-ascending order. The first candidate that
meets the required breaking strength wins, so a smaller diameter is always
preferred even when a larger one would need fewer ropes.

NOTE: real selection depends on sheave D/d, groove type, traction and the
applicable standard. This only gives an order of magnitude.
"""

from dataclasses import dataclass

from liftsize.config import ElevatorConstants, RopeOption
from liftsize.models.warnings_log import WarningsLog
from liftsize.physics.units import N_to_kN


@dataclass(frozen=True)
class RopeCandidate:
    diameter_mm: int
    count: int
    total_break_kN: float


@dataclass(frozen=True)
class RopeSelection:
    diameter_mm: int
    count: int
    total_break_kN: float
    required_total_break_kN: float
    safety_factor: float
    fallback: bool


def flatten_rope_table(
    table: tuple[RopeOption, ...],
    min_count: int = 3,
    max_count: int = 8,
) -> list[RopeCandidate]:
    """Expand rope options into ordered (diameter, count, total break) candidates."""
    candidates = []
    for option in sorted(table, key=lambda o: o.diameter_mm):
        for count in range(min_count, max_count + 1):
            candidates.append(
                RopeCandidate(
                    diameter_mm=option.diameter_mm,
                    count=count,
                    total_break_kN=count * option.min_break_kN,
                )
            )
    return candidates


def calculate_required_break(suspension_load_N: float, safety_factor: float) -> float:
    """Required total breaking strength in kN: suspension [kN] * safety factor."""
    return N_to_kN(suspension_load_N) * safety_factor


def find_first_rope(
    candidates: list[RopeCandidate],
    required_kN: float,
) -> RopeCandidate | None:
    """Return the first candidate whose total break meets required_kN."""
    for candidate in candidates:
        if candidate.total_break_kN >= required_kN:
            return candidate
    return None


def select_ropes(
    suspension_load_N: float,
    c: ElevatorConstants,
    warnings: WarningsLog,
) -> RopeSelection:
    """
    Pick rope diameter and count for the suspension load.

    Falls back to the largest diameter at the maximum count when nothing
    in the table is strong enough. The fallback is flagged and a warning
    is logged, but the true required value is still reported.
    """
    required = calculate_required_break(suspension_load_N, c.rope_safety_factor)
    candidates = flatten_rope_table(c.rope_table, c.rope_min_count, c.rope_max_count)

    hit = find_first_rope(candidates, required)
    if hit is not None:
        return RopeSelection(
            diameter_mm=hit.diameter_mm,
            count=hit.count,
            total_break_kN=hit.total_break_kN,
            required_total_break_kN=required,
            safety_factor=c.rope_safety_factor,
            fallback=False,
        )

    warnings.warn(
        "Could not select ropes from the heuristic table; increase rope count or "
        "diameter, or review the assumptions."
    )
    per_rope = {o.diameter_mm: o.min_break_kN for o in c.rope_table}
    fallback_break = per_rope[c.fallback_rope_diameter_mm]
    return RopeSelection(
        diameter_mm=c.fallback_rope_diameter_mm,
        count=c.fallback_rope_count,
        total_break_kN=c.fallback_rope_count * fallback_break,
        required_total_break_kN=required,
        safety_factor=c.rope_safety_factor,
        fallback=True,
    )
