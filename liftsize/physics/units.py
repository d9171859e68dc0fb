"""
Unit registry and numeric helpers for elevator sizing.

Uses pint for the force and power conversions that appear in the report
(N to kN, W to kW) so the scaling stays dimensionally explicit.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity


def weight_N(mass_kg: float, gravity_mps2: float) -> float:
    """Convert mass in kg to weight in Newtons for the given gravity."""
    return (Q_(mass_kg, "kg") * Q_(gravity_mps2, "m/s^2")).to("N").magnitude


def N_to_kN(force_N: float) -> float:
    """Convert a force in Newtons to kilonewtons."""
    return Q_(force_N, "N").to("kN").magnitude


def W_to_kW(power_W: float) -> float:
    """Convert a power in Watts to kilowatts."""
    return Q_(power_W, "W").to("kW").magnitude


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float, places: int) -> float:
    """Round to a number of decimal places, halves away from zero."""
    return _quantize(value, -places)


def round_sig(value: float, sig: int = 3) -> float:
    """
    Round to a number of significant figures.

    Halves are rounded away from zero (1.25 -> 1.3 at two figures), which is
    how the report values have always been presented. Zero and non-finite
    values are returned unchanged.
    """
    if value == 0 or not math.isfinite(value):
        return value
    return _quantize(value, Decimal(repr(value)).adjusted() - sig + 1)


def _quantize(value: float, exponent: int) -> float:
    # Works on the shortest decimal repr, so 2.675 rounds to 2.68.
    digits = Decimal(repr(value))
    return float(digits.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP))
