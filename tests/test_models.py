"""
Tests for Pydantic models.

Tests input validation, report immutability and JSON serialization.
"""

import json
import math

import pytest
from pydantic import ValidationError

from liftsize.config import DEFAULT_CONSTANTS, ElevatorConstants, RopeOption
from liftsize.estimator.pipeline import estimate
from liftsize.models.inputs import (
    LOAD_ERROR,
    STOPS_ERROR,
    TRAVEL_ERROR,
    CalculationInput,
    CalculationRequest,
    validate_request,
)
from liftsize.models.outputs import ErrorReport
from liftsize.models.warnings_log import WarningsLog


class TestCalculationRequest:
    """Tests for the raw boundary model."""

    def test_defaults(self):
        """Test default parameter values."""
        request = CalculationRequest()

        assert request.stops == 2
        assert request.rated_load_kg == 400.0
        assert request.travel_m == 4.0

    def test_accepts_out_of_range_values(self):
        """Out-of-range values must reach the validator unchanged."""
        request = CalculationRequest(stops=0, rated_load_kg=-5, travel_m=0)

        assert request.stops == 0
        assert request.rated_load_kg == -5

    def test_rejects_non_numeric(self):
        """Test that garbage types fail at the boundary."""
        with pytest.raises(ValidationError):
            CalculationRequest(stops="many")


class TestValidateRequest:
    """Tests for validate_request."""

    def test_valid_request(self):
        """Test that a valid request yields a CalculationInput and no errors."""
        inputs, errors = validate_request(CalculationRequest(stops=3, rated_load_kg=450, travel_m=6))

        assert errors == []
        assert isinstance(inputs, CalculationInput)
        assert inputs.stops == 3
        assert inputs.floor_count == 2

    def test_single_stop_rejected(self):
        """Test that one stop is rejected with only the stops message."""
        inputs, errors = validate_request(CalculationRequest(stops=1))

        assert inputs is None
        assert errors == [STOPS_ERROR]

    def test_all_errors_collected(self):
        """Test that every violated constraint is reported, in order."""
        inputs, errors = validate_request(
            CalculationRequest(stops=0, rated_load_kg=0, travel_m=-1)
        )

        assert inputs is None
        assert errors == [STOPS_ERROR, LOAD_ERROR, TRAVEL_ERROR]

    def test_nan_load_rejected(self):
        """Test that NaN does not slip past the positivity check."""
        _, errors = validate_request(CalculationRequest(rated_load_kg=math.nan))

        assert errors == [LOAD_ERROR]

    def test_infinite_travel_rejected(self):
        """Test that infinite travel is rejected."""
        _, errors = validate_request(CalculationRequest(travel_m=math.inf))

        assert errors == [TRAVEL_ERROR]


class TestCalculationInput:
    """Tests for the validated input model."""

    def test_is_frozen(self, default_inputs):
        """Test that validated inputs cannot be changed."""
        with pytest.raises(ValidationError):
            default_inputs.stops = 5

    def test_direct_construction_enforces_constraints(self):
        """Test that bypassing the validator still enforces constraints."""
        with pytest.raises(ValidationError):
            CalculationInput(stops=1, rated_load_kg=400, travel_m=4)


class TestWarningsLog:
    """Tests for the per-run warnings collector."""

    def test_preserves_order(self):
        log = WarningsLog()
        log.warn("first")
        log.warn("second")

        assert log.as_list() == ["first", "second"]
        assert len(log) == 2
        assert "second" in log

    def test_snapshot_is_detached(self):
        """Test that mutating a snapshot does not touch the log."""
        log = WarningsLog()
        log.warn("only")

        snapshot = log.as_list()
        snapshot.clear()

        assert log.as_list() == ["only"]


class TestElevatorConstants:
    """Tests for the assumptions model."""

    def test_default_values(self):
        c = DEFAULT_CONSTANTS

        assert (c.shaft_width_m, c.shaft_depth_m) == (1.5, 1.5)
        assert c.pit_depth_m == 0.20
        assert c.counterweight_ratio == 0.50
        assert c.rope_safety_factor == 12
        assert [o.diameter_mm for o in c.rope_table] == [8, 10, 12]

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONSTANTS.pit_depth_m = 1.0

    def test_override_builds_new_instance(self):
        custom = ElevatorConstants(pit_depth_m=0.5)

        assert custom.pit_depth_m == 0.5
        assert DEFAULT_CONSTANTS.pit_depth_m == 0.20

    def test_fallback_rope_must_be_in_table(self):
        table = (RopeOption(diameter_mm=8, min_break_kN=30), RopeOption(diameter_mm=10, min_break_kN=45))

        with pytest.raises(ValidationError, match="fallback_rope_diameter_mm"):
            ElevatorConstants(rope_table=table)

        smaller = ElevatorConstants(rope_table=table, fallback_rope_diameter_mm=10)
        assert smaller.fallback_rope_diameter_mm == 10


class TestReportSerialization:
    """Tests for report JSON output."""

    def test_success_report_sections(self):
        """Test that a success report exposes every section."""
        data = json.loads(estimate().model_dump_json())

        assert data["ok"] is True
        for key in [
            "inputs",
            "standard_shaft",
            "recommended_geometry",
            "performance",
            "masses",
            "motor_and_drive",
            "ropes",
            "structural_requirements_estimates",
            "safety_equipment",
            "warnings",
        ]:
            assert key in data
        assert set(data["structural_requirements_estimates"]) == {
            "guide_rails",
            "top_beam",
            "pit_and_overhead",
        }

    def test_error_report_has_only_ok_and_errors(self):
        """Test that an error report carries no estimate fields."""
        report = estimate(stops=1)

        assert isinstance(report, ErrorReport)
        assert set(report.model_dump()) == {"ok", "errors"}
        assert report.ok is False

    def test_error_report_requires_errors(self):
        with pytest.raises(ValidationError):
            ErrorReport(errors=[])

    def test_report_is_frozen(self):
        report = estimate()

        with pytest.raises(ValidationError):
            report.warnings = []

    def test_report_sequences_are_immutable(self):
        report = estimate()
        error = estimate(stops=1)

        assert isinstance(report.warnings, tuple)
        assert isinstance(report.safety_equipment.safety_chain_concept.series_contacts, tuple)
        assert isinstance(error.errors, tuple)
        assert json.loads(error.model_dump_json())["errors"] == [STOPS_ERROR]
