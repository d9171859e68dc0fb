"""
Input models for elevator sizing.

CalculationRequest carries the three raw values as received from a boundary
(CLI flags, query string, JSON body). CalculationInput is the validated,
immutable form the estimator works on. This is for PRELIMINARY SIZING ONLY.
"""

import math

from pydantic import BaseModel, Field


class CalculationRequest(BaseModel):
    """
    Raw sizing parameters.

    No range constraints here on purpose: out-of-range values must reach
    validate_request() so every violation can be reported together.
    """
    stops: int = Field(default=2, description="Number of stops (landings served)")
    rated_load_kg: float = Field(default=400.0, description="Rated load in kg")
    travel_m: float = Field(default=4.0, description="Total vertical travel in meters")

    model_config = {
        "json_schema_extra": {
            "example": {
                "stops": 2,
                "rated_load_kg": 400,
                "travel_m": 4,
            }
        }
    }


class CalculationInput(BaseModel):
    """
    Validated sizing parameters.

    Frozen once built. Construct through validate_request() to get the
    collected error messages instead of a pydantic ValidationError.
    """
    stops: int = Field(..., ge=2, description="Number of stops (>= 2)")
    rated_load_kg: float = Field(..., gt=0, allow_inf_nan=False, description="Rated load in kg")
    travel_m: float = Field(..., gt=0, allow_inf_nan=False, description="Total travel in meters")

    model_config = {"frozen": True}

    @property
    def floor_count(self) -> int:
        """Number of floor-to-floor intervals."""
        return self.stops - 1


STOPS_ERROR = "stops must be >= 2."
LOAD_ERROR = "rated_load_kg must be > 0."
TRAVEL_ERROR = "travel_m must be > 0."


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def validate_request(
    request: CalculationRequest,
) -> tuple[CalculationInput | None, list[str]]:
    """
    Check a raw request against the input constraints.

    Every violated constraint produces one message, in the order
    stops, load, travel. Nothing is computed beyond the checks.

    Returns:
        (validated input, []) on success, (None, errors) otherwise
    """
    errors: list[str] = []
    if request.stops < 2:
        errors.append(STOPS_ERROR)
    if not _positive(request.rated_load_kg):
        errors.append(LOAD_ERROR)
    if not _positive(request.travel_m):
        errors.append(TRAVEL_ERROR)

    if errors:
        return None, errors

    return (
        CalculationInput(
            stops=request.stops,
            rated_load_kg=request.rated_load_kg,
            travel_m=request.travel_m,
        ),
        errors,
    )
