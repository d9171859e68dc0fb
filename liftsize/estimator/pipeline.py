"""
Elevator sizing estimator.

Runs the sizing stages in dependency order for one set of inputs and
assembles the advisory report.
"""

import logging
from dataclasses import dataclass

from liftsize.config import DEFAULT_CONSTANTS, ElevatorConstants
from liftsize.models.inputs import CalculationInput, CalculationRequest, validate_request
from liftsize.models.outputs import (
    AssumedClearances,
    Buffers,
    CabinInternal,
    DoorInterlocks,
    DriveAssumptions,
    ErrorReport,
    GuideRails,
    InputsEcho,
    LimitSwitches,
    Masses,
    MotorAndDrive,
    OverspeedGovernor,
    Performance,
    PitAndOverhead,
    RecommendedGeometry,
    Report,
    Ropes,
    RopeSelectionOut,
    SafetyChainConcept,
    SafetyEquipment,
    SafetyGear,
    StandardShaft,
    StructuralEstimates,
    TopBeam,
)
from liftsize.models.warnings_log import WarningsLog
from liftsize.physics.geometry import CabinGeometry, estimate_cabin_geometry
from liftsize.physics.kinematics import Kinematics, estimate_kinematics
from liftsize.physics.masses import MassEstimate, calculate_suspension_load, estimate_masses
from liftsize.physics.power import PowerEstimate, estimate_power
from liftsize.physics.ropes import RopeSelection, select_ropes
from liftsize.physics.safety import (
    BUFFERS_PIT_OK,
    BUFFERS_PIT_WARNING,
    BUFFERS_RECOMMENDED,
    GOVERNOR_NOTES,
    GOVERNOR_TYPE,
    INTERLOCK_NOTES,
    INTERLOCK_TYPE,
    LIMIT_SWITCHES,
    SAFETY_CHAIN_CONTACTS,
    SAFETY_CHAIN_NOTES,
    SAFETY_GEAR_MOUNTING,
    SAFETY_GEAR_TRIGGER,
    SafetyRecommendation,
    advise_safety_equipment,
)
from liftsize.physics.structure import (
    GuideRailEstimate,
    TopBeamEstimate,
    estimate_guide_rails,
    estimate_top_beam,
)
from liftsize.physics.units import W_to_kW, round_sig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntermediateResult:
    """Full-precision output of every stage for one estimate."""
    inputs: CalculationInput
    geometry: CabinGeometry
    kinematics: Kinematics
    masses: MassEstimate
    suspension_load_N: float
    power: PowerEstimate
    ropes: RopeSelection
    guide_rails: GuideRailEstimate
    top_beam: TopBeamEstimate
    safety: SafetyRecommendation
    warnings: tuple[str, ...]


class ElevatorEstimator:
    """
    Preliminary sizing for a 1:1 traction elevator with lateral counterweight.

    Stateless apart from the inputs and constants given at construction;
    every call to run() builds a fresh warnings log, so repeated runs give
    identical results.
    """

    def __init__(
        self,
        inputs: CalculationInput,
        constants: ElevatorConstants = DEFAULT_CONSTANTS,
    ):
        """
        Initialize estimator with validated inputs.

        Args:
            inputs: Validated sizing parameters
            constants: Engineering assumptions (defaults to the shared set)
        """
        self.inputs = inputs
        self.constants = constants

    def run(self) -> IntermediateResult:
        """
        Run all sizing stages.

        Returns:
            IntermediateResult with every derived value at full precision
        """
        c = self.constants
        inputs = self.inputs
        warnings = WarningsLog()

        geometry = estimate_cabin_geometry(c)
        logger.debug("cabin interior %.3f x %.3f m", geometry.int_width_m, geometry.int_depth_m)

        kinematics = estimate_kinematics(inputs.stops, inputs.travel_m, c, warnings)
        logger.debug("rated speed %.2f m/s", kinematics.rated_speed_mps)

        masses = estimate_masses(geometry.area_m2, inputs.rated_load_kg, c)
        suspension = calculate_suspension_load(masses, c.gravity_mps2)
        logger.debug(
            "cabin %.1f kg, counterweight %.1f kg, suspension %.0f N",
            masses.cabin_mass_kg,
            masses.counterweight_mass_kg,
            suspension,
        )

        power = estimate_power(masses, kinematics.rated_speed_mps, c)
        logger.debug("peak power %.0f W, motor %.2f kW", power.peak_power_W, power.motor_kW)

        ropes = select_ropes(suspension, c, warnings)
        logger.debug("ropes %d x %d mm (fallback=%s)", ropes.count, ropes.diameter_mm, ropes.fallback)

        guide_rails = estimate_guide_rails(inputs.rated_load_kg, inputs.travel_m, c)
        top_beam = estimate_top_beam(suspension, c)
        safety = advise_safety_equipment(inputs.stops, kinematics.rated_speed_mps, c, warnings)

        return IntermediateResult(
            inputs=inputs,
            geometry=geometry,
            kinematics=kinematics,
            masses=masses,
            suspension_load_N=suspension,
            power=power,
            ropes=ropes,
            guide_rails=guide_rails,
            top_beam=top_beam,
            safety=safety,
            warnings=tuple(warnings),
        )

    def generate_report(self) -> Report:
        """Run the stages and assemble the advisory report."""
        return assemble_report(self.run(), self.constants)


def assemble_report(result: IntermediateResult, c: ElevatorConstants) -> Report:
    """
    Compose stage outputs into the external report.

    Derived floats are rounded to 3 significant figures. Echoed inputs and
    fixed assumptions are reported as given.
    """
    inputs = result.inputs
    geometry = result.geometry
    kinematics = result.kinematics
    masses = result.masses
    power = result.power
    ropes = result.ropes
    rails = result.guide_rails
    safety = result.safety

    if safety.pit_too_shallow:
        buffers_warning = BUFFERS_PIT_WARNING.format(pit=c.pit_depth_m)
        pit_warning = "Very shallow pit for a conventional design; check refuge space and buffers."
    else:
        buffers_warning = BUFFERS_PIT_OK
        pit_warning = "OK (still to be verified against the standard)."

    return Report(
        inputs=InputsEcho(
            stops=inputs.stops,
            rated_load_kg=inputs.rated_load_kg,
            travel_m=inputs.travel_m,
        ),
        standard_shaft=StandardShaft(
            shaft_m=(c.shaft_width_m, c.shaft_depth_m),
            pit_m=c.pit_depth_m,
            note=(
                f"Standard {c.shaft_width_m}x{c.shaft_depth_m} m shaft with a "
                f"{c.pit_depth_m} m pit."
            ),
        ),
        recommended_geometry=RecommendedGeometry(
            configuration=f"Traction {c.roping} with lateral counterweight + swing doors",
            door_clear_opening_m=(c.door_clear_width_m, c.door_clear_height_m),
            cabin_internal_m=CabinInternal(
                width=round_sig(geometry.int_width_m, 3),
                depth=round_sig(geometry.int_depth_m, 3),
                area_m2=round_sig(geometry.area_m2, 3),
            ),
            counterweight_column_m=c.counterweight_column_m,
            assumed_clearances_m=AssumedClearances(
                rail_zone=c.rail_zone_m,
                running_clearance=c.running_clearance_m,
                cabin_wall_thickness=c.cabin_wall_thickness_m,
            ),
        ),
        performance=Performance(
            rated_speed_mps=kinematics.rated_speed_mps,
            estimated_travel_time_s=round_sig(kinematics.travel_time_s, 3),
            floor_to_floor_m=round_sig(kinematics.floor_to_floor_m, 3),
        ),
        masses=Masses(
            estimated_cabin_plus_sling_kg=round_sig(masses.cabin_mass_kg, 3),
            counterweight_kg=round_sig(masses.counterweight_mass_kg, 3),
            counterweight_rule=f"CW = cabin + {c.counterweight_ratio:.2f} x rated load",
        ),
        motor_and_drive=MotorAndDrive(
            suggested_motor_kW=power.motor_kW,
            steady_power_kW_est=round_sig(W_to_kW(power.steady_power_W), 3),
            peak_power_kW_est=round_sig(W_to_kW(power.peak_power_W), 3),
            drive="VVVF drive (inverter) with safety inputs",
            assumptions=DriveAssumptions(
                eta_total=c.efficiency,
                friction_factor=c.friction_factor,
                acceleration_mps2=power.acceleration_mps2,
            ),
            note="Final selection depends on the machine (sheave), real efficiency and control kit.",
        ),
        ropes=Ropes(
            roping=c.roping,
            selection_heuristic=RopeSelectionOut(
                rope_diameter_mm=ropes.diameter_mm,
                rope_count=ropes.count,
                estimated_total_break_kN=ropes.total_break_kN,
                required_total_break_kN=round_sig(ropes.required_total_break_kN, 3),
                assumed_safety_factor=ropes.safety_factor,
                fallback=ropes.fallback,
            ),
            note="REAL selection depends on D/d, groove, traction, standards and supplier.",
        ),
        structural_requirements_estimates=StructuralEstimates(
            guide_rails=GuideRails(
                suggested_rail_type=rails.rail_type,
                total_guide_length_m_est=round_sig(rails.total_guide_length_m, 3),
                bracket_spacing_m=rails.bracket_spacing_m,
                brackets_per_rail_est=rails.brackets_per_rail,
                bracket_design_load_N_est=round_sig(rails.bracket_design_load_N, 3),
                notes="Real loads require impact, alignment and code analysis.",
            ),
            top_beam=TopBeam(
                vertical_reaction_kN_est=result.top_beam.vertical_reaction_kN,
                notes="Real reaction depends on sheave arrangement, machine location and dynamics.",
            ),
            pit_and_overhead=PitAndOverhead(
                pit_depth_m=c.pit_depth_m,
                assumed_overhead_m=c.overhead_allowance_m,
                warning=pit_warning,
            ),
        ),
        safety_equipment=SafetyEquipment(
            overspeed_governor=OverspeedGovernor(
                type=GOVERNOR_TYPE,
                rated_speed_mps=safety.rated_speed_mps,
                recommended_trip_speed_mps=safety.governor_trip_speed_mps,
                notes=GOVERNOR_NOTES,
            ),
            safety_gear=SafetyGear(
                type=safety.safety_gear_type,
                mounting=SAFETY_GEAR_MOUNTING,
                trigger=SAFETY_GEAR_TRIGGER,
            ),
            door_interlocks=DoorInterlocks(
                type=INTERLOCK_TYPE,
                quantity=safety.door_interlock_count,
                notes=INTERLOCK_NOTES,
            ),
            limit_switches=LimitSwitches(**LIMIT_SWITCHES),
            buffers=Buffers(
                pit_depth_m=safety.pit_depth_m,
                recommended=BUFFERS_RECOMMENDED,
                warning=buffers_warning,
            ),
            safety_chain_concept=SafetyChainConcept(
                series_contacts=SAFETY_CHAIN_CONTACTS,
                notes=SAFETY_CHAIN_NOTES,
            ),
        ),
        warnings=result.warnings,
    )


def estimate(
    stops: int = 2,
    rated_load_kg: float = 400.0,
    travel_m: float = 4.0,
    constants: ElevatorConstants = DEFAULT_CONSTANTS,
) -> Report | ErrorReport:
    """
    Validate raw parameters and produce a report.

    Returns an ErrorReport listing every violated constraint when the
    inputs are invalid; no stage runs in that case.
    """
    return estimate_request(
        CalculationRequest(stops=stops, rated_load_kg=rated_load_kg, travel_m=travel_m),
        constants,
    )


def estimate_request(
    request: CalculationRequest,
    constants: ElevatorConstants = DEFAULT_CONSTANTS,
) -> Report | ErrorReport:
    """Same as estimate(), for an already-parsed request."""
    inputs, errors = validate_request(request)
    if inputs is None:
        logger.info("input validation failed: %s", "; ".join(errors))
        return ErrorReport(errors=tuple(errors))

    return ElevatorEstimator(inputs, constants).generate_report()
