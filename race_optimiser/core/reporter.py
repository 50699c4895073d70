"""Race strategy reporter.

Combines the rule checker, the estimator and the recommender into one
report for a user-chosen setup, including a field-by-field comparison
against the track-optimised setup and advisory text.

Advisory policy: each track diagnostic only produces a line when the field
it concerns also differs from the optimal setup.  A diagnostic that fires
on a field already matching the optimum stays silent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.estimator import (
    RaceMetrics,
    estimate_race_metrics,
    fuel_efficiency_km_per_liter,
)
from race_optimiser.core.recommender import recommend
from race_optimiser.core.track import TrackProfile
from race_optimiser.core.validator import (
    ValidationVerdict,
    check_compatibility,
    is_turbo_engine,
)

logger = logging.getLogger(__name__)

CAPACITY_TOLERANCE: float = 5.0

MATCHES_OPTIMAL: str = "Your setup matches the optimal configuration for this track."

# ---------------------------------------------------------------------------
# Report containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldComparison:
    """One field of the chosen setup against the optimal one."""

    field: str
    chosen: str
    recommended: str
    changed: bool


@dataclass(frozen=True)
class TrackDiagnostics:
    """Boolean track/car flags used only to select advisory text.

    Attributes:
        high_wear_track: More than 10 curves or more than 3 chicanes.
        fuel_demanding_track: Over 160 km or more than 100 m elevation gain.
        tyre_temp_mismatch: Ambient temperature outside the tyre window.
        tyre_too_soft_for_corners: High-wear track and wear rate above 0.12.
        fuel_too_low: Fuel-demanding track, non-electric engine and
            efficiency below 6 km/l.
        brakes_too_weak_in_wet: Wet track and brake efficiency below 0.6.
        turbo_in_wet: Wet track and a turbo engine.
    """

    high_wear_track: bool
    fuel_demanding_track: bool
    tyre_temp_mismatch: bool
    tyre_too_soft_for_corners: bool
    fuel_too_low: bool
    brakes_too_weak_in_wet: bool
    turbo_in_wet: bool


@dataclass(frozen=True)
class Report:
    """Full evaluation of a valid setup on a track.

    Attributes:
        car: The evaluated configuration.
        track: The circuit.
        verdict: The (valid) compatibility verdict, with any warnings.
        metrics: Projected race figures for the chosen setup.
        optimal: The recommended configuration for the track.
        comparisons: Per-field comparison against ``optimal``.
        diagnostics: Track/car flags behind the advisories.
        advisories: Advisory lines, or a single "matches optimal" line.
        rationale: Explanation of the recommended setup.
    """

    car: CarConfiguration
    track: TrackProfile
    verdict: ValidationVerdict
    metrics: RaceMetrics
    optimal: CarConfiguration
    comparisons: tuple[FieldComparison, ...]
    diagnostics: TrackDiagnostics
    advisories: tuple[str, ...]
    rationale: str

    @property
    def matches_optimal(self) -> bool:
        return not any(c.changed for c in self.comparisons)

    def changed(self, field: str) -> bool:
        """Whether *field* differs from the optimal setup.

        Fields that were not compared (the extended components of a basic
        car) count as unchanged.
        """
        return any(c.field == field and c.changed for c in self.comparisons)


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def compare_setups(
    car: CarConfiguration, optimal: CarConfiguration
) -> tuple[FieldComparison, ...]:
    """Compare *car* with *optimal* field by field.

    Components compare by kind.  Capacity compares within
    :data:`CAPACITY_TOLERANCE` for a basic car and exactly for a car that
    carries the extended components, which are then compared as well.
    """
    extended = car.is_extended
    if extended:
        capacity_changed = car.capacity != optimal.capacity
    else:
        capacity_changed = abs(car.capacity - optimal.capacity) > CAPACITY_TOLERANCE

    comparisons = [
        FieldComparison(
            "engine",
            car.engine.name,
            optimal.engine.name,
            car.engine.kind != optimal.engine.kind,
        ),
        FieldComparison(
            "tyre",
            car.tyre.type,
            optimal.tyre.type,
            car.tyre.kind != optimal.tyre.kind,
        ),
        FieldComparison(
            "aero_kit",
            car.aero_kit.name,
            optimal.aero_kit.name,
            car.aero_kit.kind != optimal.aero_kit.kind,
        ),
        FieldComparison(
            "capacity",
            f"{car.capacity:.1f}",
            f"{optimal.capacity:.1f}",
            capacity_changed,
        ),
    ]

    if extended:
        for field in ("suspension", "brakes", "gearbox", "traction_control"):
            chosen = getattr(car, field)
            recommended = getattr(optimal, field)
            comparisons.append(
                FieldComparison(field, chosen.value, recommended.value, chosen != recommended)
            )

    return tuple(comparisons)


# ---------------------------------------------------------------------------
# Diagnostics and advisories
# ---------------------------------------------------------------------------


def diagnose(car: CarConfiguration, track: TrackProfile) -> TrackDiagnostics:
    """Compute the advisory flags for *car* on *track*."""
    high_wear = track.number_of_curves > 10 or track.number_of_chicanes > 3
    fuel_demanding = track.total_race_distance_km > 160 or track.elevation_gain_m > 100

    return TrackDiagnostics(
        high_wear_track=high_wear,
        fuel_demanding_track=fuel_demanding,
        tyre_temp_mismatch=not car.tyre.is_temperature_optimal(track.ambient_temp_c),
        tyre_too_soft_for_corners=high_wear and car.tyre.wear_rate_per_lap > 0.12,
        fuel_too_low=(
            fuel_demanding
            and not car.is_electric
            and fuel_efficiency_km_per_liter(car) < 6.0
        ),
        brakes_too_weak_in_wet=track.is_wet and car.aero_kit.brake_efficiency < 0.6,
        turbo_in_wet=track.is_wet and is_turbo_engine(car),
    )


_FIELD_LINES: dict[str, str] = {
    "engine": "Engine selection is suboptimal. Recommended: {}",
    "tyre": "Tyre type differs from the track-optimised compound. Recommended: {}",
    "aero_kit": (
        "Aerodynamic kit choice may not provide the ideal performance. "
        "Recommended: {}"
    ),
    "capacity": "Fuel tank capacity may not meet race distance demands. Recommended: {}",
    "suspension": "Suspension setup differs from the track-optimised setting. Recommended: {}",
    "brakes": "Brake compound differs from the track-optimised compound. Recommended: {}",
    "gearbox": "Gearbox ratio differs from the track-optimised ratio. Recommended: {}",
    "traction_control": (
        "Traction control level differs from the track-optimised level. "
        "Recommended: {}"
    ),
}


def build_advisories(
    diagnostics: TrackDiagnostics,
    comparisons: tuple[FieldComparison, ...],
) -> tuple[str, ...]:
    """Turn diagnostics and the setup comparison into advisory lines.

    Diagnostic lines come first, each gated on its field having changed.
    Then one line per changed field.  When nothing changed the result is
    the single :data:`MATCHES_OPTIMAL` line.
    """
    changed = {c.field: c.changed for c in comparisons}
    if not any(changed.values()):
        return (MATCHES_OPTIMAL,)

    lines: list[str] = []
    if diagnostics.tyre_temp_mismatch and changed["tyre"]:
        lines.append(
            "Tyres do not match track temperature range. Consider changing compound."
        )
    if diagnostics.fuel_too_low and changed["capacity"]:
        lines.append(
            "Fuel efficiency is low for this track. Consider optimising aero "
            "or switching to hybrid/electric."
        )
    if diagnostics.tyre_too_soft_for_corners and changed["tyre"]:
        lines.append(
            "Tyres may degrade quickly on this twisty circuit. "
            "Consider using a harder compound."
        )
    if diagnostics.brakes_too_weak_in_wet and changed["aero_kit"]:
        lines.append(
            "Wet track and low brake efficiency may reduce control. "
            "Consider a downforce kit."
        )
    if diagnostics.turbo_in_wet and changed["engine"]:
        lines.append(
            "Turbo engines may be unstable in wet conditions. "
            "Consider hybrid or electric."
        )

    for comparison in comparisons:
        if comparison.changed:
            lines.append(_FIELD_LINES[comparison.field].format(comparison.recommended))

    return tuple(lines)


def explain_setup_choice(track: TrackProfile) -> str:
    """Return a short rationale for the setup suited to *track*.

    The text is keyed on well-known words in the circuit name.
    """
    name = track.name.lower()

    if "desert" in name:
        return (
            "Turbo engine with hard tyres for heat endurance and low drag "
            "for long straights."
        )
    if "mountain" in name:
        return (
            "Hybrid engine and soft tyres for cold, twisty, wet terrain. "
            "Downforce adds grip in curves."
        )
    if "oval" in name:
        return "V8 engine and low drag kit suit max speed on a flat, high-speed circuit."
    if "urban" in name:
        return (
            "Electric engine and ground effect suit tight chicanes and quick "
            "direction changes in the heat."
        )
    if "grand prix" in name:
        return (
            "Balanced setup. Medium tyres and extreme aero handle both fast "
            "and technical sections well."
        )
    return "Balanced configuration for general racing conditions."


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def evaluate(
    car: CarConfiguration, track: TrackProfile
) -> Report | ValidationVerdict:
    """Evaluate *car* on *track*.

    Args:
        car: The user's configuration.
        track: The circuit.

    Returns:
        The blocking :class:`ValidationVerdict` when the setup is
        incompatible, otherwise a complete :class:`Report`.

    Raises:
        InvalidInputError: If metrics cannot be computed for the inputs.
    """
    verdict = check_compatibility(car, track)
    if not verdict.valid:
        logger.debug("Evaluation of %s stopped: %s", track.name, verdict.block_reason)
        return verdict

    metrics = estimate_race_metrics(car, track)
    optimal = recommend(track)
    comparisons = compare_setups(car, optimal)
    diagnostics = diagnose(car, track)

    return Report(
        car=car,
        track=track,
        verdict=verdict,
        metrics=metrics,
        optimal=optimal,
        comparisons=comparisons,
        diagnostics=diagnostics,
        advisories=build_advisories(diagnostics, comparisons),
        rationale=explain_setup_choice(track),
    )
