"""
Configuration for the elevator sizing tool.

Two layers:
- ElevatorConstants: fixed engineering assumptions used by every estimate.
  A single read-only instance (DEFAULT_CONSTANTS) is shared process-wide.
- Settings: service options for the CLI and HTTP server, read from
  LIFTSIZE_* environment variables or a .env file.

The numbers below are residential rules of thumb with no formal derivation.
They are NOT taken from any code or standard.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RopeOption(BaseModel):
    """One row of the rope table: a diameter and its per-rope breaking strength."""
    diameter_mm: int = Field(..., gt=0, description="Nominal rope diameter (mm)")
    min_break_kN: float = Field(..., gt=0, description="Minimum breaking strength per rope (kN)")

    model_config = {"frozen": True}


class RailTier(BaseModel):
    """Guide rail class and bracket spacing for loads up to max_load_kg."""
    max_load_kg: float | None = Field(
        default=None,
        description="Upper load bound for this tier (inclusive). None = no bound.",
    )
    rail_type: str
    bracket_spacing_m: float = Field(..., gt=0)

    model_config = {"frozen": True}


class ElevatorConstants(BaseModel):
    """
    Fixed assumptions for a 1:1 traction elevator with lateral counterweight
    in a 1.5 x 1.5 m shaft.

    Never mutated after construction. Tests may build their own instance
    to exercise edge cases (e.g. a tiny rope table).
    """

    # Standard shaft
    shaft_width_m: float = 1.5
    shaft_depth_m: float = 1.5
    pit_depth_m: float = 0.20
    door_clear_width_m: float = 0.80
    door_clear_height_m: float = 2.0

    # Cabin envelope inside the shaft
    cabin_wall_thickness_m: float = 0.03
    counterweight_column_m: float = 0.35
    rail_zone_m: float = 0.10
    running_clearance_m: float = 0.05
    min_cabin_int_width_m: float = 0.75
    min_cabin_int_depth_m: float = 0.90

    gravity_mps2: float = 9.81

    # Speed tiers on travel distance
    default_speed_mps: float = 0.35
    short_travel_threshold_m: float = 3.0
    short_travel_speed_mps: float = 0.30
    long_travel_threshold_m: float = 8.0
    long_travel_speed_mps: float = 0.45
    min_speed_divisor_mps: float = 0.1
    tight_floor_spacing_m: float = 2.2

    # Cabin + sling mass: base + per_area * area + per_load * load
    cabin_mass_base_kg: float = 250.0
    cabin_mass_per_area_kg_m2: float = 120.0
    cabin_mass_per_load: float = 0.15
    cabin_mass_min_kg: float = 300.0
    cabin_mass_max_kg: float = 650.0
    counterweight_ratio: float = 0.50

    # Drive
    efficiency: float = 0.70
    min_efficiency: float = 0.01
    friction_factor: float = 0.08
    acceleration_mps2: float = 0.6
    min_acceleration_mps2: float = 0.4
    max_acceleration_mps2: float = 1.0
    acceleration_mass_fraction: float = 0.25
    motor_margin: float = 1.25
    motor_floor_kW: float = 2.2
    motor_practical_min_kW: float = 3.0
    roping: str = "1:1"

    # Ropes
    rope_table: tuple[RopeOption, ...] = (
        RopeOption(diameter_mm=8, min_break_kN=30),
        RopeOption(diameter_mm=10, min_break_kN=45),
        RopeOption(diameter_mm=12, min_break_kN=65),
    )
    rope_min_count: int = 3
    rope_max_count: int = 8
    rope_safety_factor: float = 12
    fallback_rope_diameter_mm: int = 12
    fallback_rope_count: int = 8

    # Guide rails and brackets
    rail_tiers: tuple[RailTier, ...] = (
        RailTier(max_load_kg=300, rail_type="T70-1 (reference)", bracket_spacing_m=2.0),
        RailTier(max_load_kg=450, rail_type="T75-3 / T82 (reference)", bracket_spacing_m=1.8),
        RailTier(max_load_kg=None, rail_type="T89 / T90 (reference)", bracket_spacing_m=1.6),
    )
    min_bracket_spacing_m: float = 1.5
    max_bracket_spacing_m: float = 2.0
    overhead_allowance_m: float = 3.2
    lateral_load_fraction: float = 0.15
    min_bracket_design_load_N: float = 1500.0

    # Top beam
    top_beam_dynamic_factor: float = 1.2

    # Safety
    governor_trip_margin: float = 1.15
    safety_gear_speed_threshold_mps: float = 0.63
    min_pit_depth_m: float = 0.40

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_fallback_rope(self) -> "ElevatorConstants":
        diameters = [o.diameter_mm for o in self.rope_table]
        if self.fallback_rope_diameter_mm not in diameters:
            raise ValueError(
                f"fallback_rope_diameter_mm {self.fallback_rope_diameter_mm} is not in rope_table {diameters}"
            )
        return self


DEFAULT_CONSTANTS = ElevatorConstants()


class Settings(BaseSettings):
    """Service configuration loaded from environment variables."""

    api_title: str = "Elevator Sizing API"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="LIFTSIZE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
