"""
Helpers to turn JSON sizing reports into a compact, human-readable
console summary.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _fmt_float(value: Any, unit: str = "", zero_default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return zero_default
    suffix = f" {unit}" if unit else ""
    if abs(fval) >= 100:
        return f"{fval:,.0f}{suffix}"
    return f"{fval:.2f}{suffix}"


def _fmt_pair(pair: Any, unit: str = "m") -> str:
    """Format a [a, b] list as 'a x b unit'."""
    try:
        a, b = pair
    except (TypeError, ValueError):
        return "n/a"
    return f"{_fmt_float(a)} x {_fmt_float(b)} {unit}"


def print_report_summary(data: dict[str, Any]) -> None:
    """
    Print a human-friendly summary of a report dict.

    Accepts both success and error reports (as produced by model_dump).
    """
    if not data.get("ok", False):
        print("Estimate rejected, invalid inputs:")
        for err in data.get("errors") or []:
            print(f"  - {err}")
        return

    inputs = data.get("inputs", {})
    shaft = data.get("standard_shaft", {})
    geom = data.get("recommended_geometry", {})
    cabin = geom.get("cabin_internal_m", {})
    perf = data.get("performance", {})
    masses = data.get("masses", {})
    motor = data.get("motor_and_drive", {})
    rope = data.get("ropes", {}).get("selection_heuristic", {})
    structural = data.get("structural_requirements_estimates", {})
    rails = structural.get("guide_rails", {})
    top_beam = structural.get("top_beam", {})
    safety = data.get("safety_equipment", {})

    print(
        f"Inputs: {inputs.get('stops', '?')} stops | "
        f"load {_fmt_float(inputs.get('rated_load_kg'), 'kg')} | "
        f"travel {_fmt_float(inputs.get('travel_m'), 'm')}"
    )
    print(f"Shaft: {_fmt_pair(shaft.get('shaft_m'))}, pit {_fmt_float(shaft.get('pit_m'), 'm')}")
    print(
        f"Cabin (internal): {_fmt_float(cabin.get('width'))} x {_fmt_float(cabin.get('depth'))} m "
        f"= {_fmt_float(cabin.get('area_m2'), 'm2')}"
    )
    print(
        f"Speed: {_fmt_float(perf.get('rated_speed_mps'), 'm/s')} | "
        f"ride {_fmt_float(perf.get('estimated_travel_time_s'), 's')} | "
        f"floor-to-floor {_fmt_float(perf.get('floor_to_floor_m'), 'm')}"
    )
    print(
        f"Masses: cabin+sling {_fmt_float(masses.get('estimated_cabin_plus_sling_kg'), 'kg')}, "
        f"counterweight {_fmt_float(masses.get('counterweight_kg'), 'kg')}"
    )
    print(
        f"Motor: {_fmt_float(motor.get('suggested_motor_kW'), 'kW')} "
        f"(peak est. {_fmt_float(motor.get('peak_power_kW_est'), 'kW')})"
    )
    fallback = " [FALLBACK]" if rope.get("fallback") else ""
    print(
        f"Ropes: {rope.get('rope_count', '?')} x {rope.get('rope_diameter_mm', '?')} mm, "
        f"{_fmt_float(rope.get('estimated_total_break_kN'), 'kN')} vs required "
        f"{_fmt_float(rope.get('required_total_break_kN'), 'kN')}{fallback}"
    )
    print(
        f"Rails: {rails.get('suggested_rail_type', '?')}, "
        f"{rails.get('brackets_per_rail_est', '?')} brackets/rail @ "
        f"{_fmt_float(rails.get('bracket_spacing_m'), 'm')}, "
        f"{_fmt_float(rails.get('bracket_design_load_N_est'), 'N')} each"
    )
    print(f"Top beam: {_fmt_float(top_beam.get('vertical_reaction_kN_est'), 'kN')} vertical")

    governor = safety.get("overspeed_governor", {})
    print(
        f"Safety: governor trip {_fmt_float(governor.get('recommended_trip_speed_mps'), 'm/s')}, "
        f"{safety.get('door_interlocks', {}).get('quantity', '?')} door interlocks"
    )
    print(f"  Safety gear: {safety.get('safety_gear', {}).get('type', '?')}")

    warnings = data.get("warnings") or []
    if warnings:
        print("Warnings:")
        for w in warnings:
            print(f"  - {w}")


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly summary of a report JSON file.

    Args:
        json_path: Path to the JSON report file.
    """
    data = json.loads(Path(json_path).read_text())
    print_report_summary(data)
