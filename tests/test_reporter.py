"""Tests for the race strategy reporter."""

from dataclasses import replace

import pytest

from race_optimiser.core.aero import STANDARD_KIT, AeroKitKind, AeroKitSpec
from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.engine import (
    ELECTRIC_ENGINE,
    STANDARD_ENGINE,
    TURBO_ENGINE,
    EngineSpec,
)
from race_optimiser.core.estimator import estimate_race_metrics
from race_optimiser.core.recommender import recommend
from race_optimiser.core.reporter import (
    MATCHES_OPTIMAL,
    Report,
    diagnose,
    evaluate,
    explain_setup_choice,
)
from race_optimiser.core.track import TrackProfile
from race_optimiser.core.tyre import MEDIUM, TyreSpec
from race_optimiser.core.validator import LOW_DRAG_WET_TRACK, ValidationVerdict

TYRE_TEMP_LINE = "Tyres do not match track temperature range. Consider changing compound."
FUEL_LOW_LINE = (
    "Fuel efficiency is low for this track. Consider optimising aero "
    "or switching to hybrid/electric."
)
TOO_SOFT_LINE = (
    "Tyres may degrade quickly on this twisty circuit. Consider using a harder compound."
)
WEAK_BRAKES_LINE = (
    "Wet track and low brake efficiency may reduce control. Consider a downforce kit."
)
TURBO_WET_LINE = (
    "Turbo engines may be unstable in wet conditions. Consider hybrid or electric."
)


def _sample_track(
    distance: float = 160.0,
    temp: float = 25.0,
    is_wet: bool = False,
    curves: int = 8,
    long_straights: bool = True,
    name: str = "Reporter Test",
) -> TrackProfile:
    """Return a representative test track.

    With the defaults the optimal setup is turbo / medium / standard / 90.
    """
    return TrackProfile(
        name=name,
        lap_length_km=4.0,
        total_race_distance_km=distance,
        ambient_temp_c=temp,
        is_wet=is_wet,
        number_of_curves=curves,
        number_of_chicanes=2,
        has_long_straights=long_straights,
        elevation_gain_m=50.0,
    )


def _report(car: CarConfiguration, track: TrackProfile) -> Report:
    result = evaluate(car, track)
    assert isinstance(result, Report), "expected a valid setup"
    return result


# ---------------------------------------------------------------------------
# Blocking and pass-through
# ---------------------------------------------------------------------------


def test_blocked_setup_returns_verdict() -> None:
    """An incompatible setup yields only the blocking verdict."""
    car = CarConfiguration.from_kinds("standard", "hard", "wet-weather", 80.0)
    result = evaluate(car, _sample_track())
    assert isinstance(result, ValidationVerdict)
    assert not result.valid


def test_report_carries_metrics_and_warnings() -> None:
    car = CarConfiguration.from_kinds("hybrid", "medium", "low-drag", 90.0)
    track = _sample_track(is_wet=True)
    report = _report(car, track)
    assert report.metrics == estimate_race_metrics(car, track)
    assert report.verdict.warnings == (LOW_DRAG_WET_TRACK,)


# ---------------------------------------------------------------------------
# Comparison with the optimal setup
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("capacity", "matches"),
    [(90.0, True), (86.0, True), (85.0, True), (84.0, False), (96.0, False)],
)
def test_basic_capacity_tolerance(capacity: float, matches: bool) -> None:
    """Basic cars compare capacity within 5 units of the optimum."""
    car = CarConfiguration.from_kinds("turbo", "medium", "standard", capacity)
    report = _report(car, _sample_track())
    assert report.matches_optimal is matches
    assert report.changed("capacity") is not matches


def test_matching_setup_gets_single_advisory() -> None:
    car = CarConfiguration.from_kinds("turbo", "medium", "standard", 88.0)
    report = _report(car, _sample_track())
    assert report.advisories == (MATCHES_OPTIMAL,)


def test_recommended_setup_matches_itself() -> None:
    track = _sample_track(is_wet=True, curves=14)
    report = _report(recommend(track), track)
    assert report.matches_optimal
    assert report.advisories == (MATCHES_OPTIMAL,)


def test_basic_car_compares_core_fields_only() -> None:
    car = CarConfiguration.from_kinds("turbo", "medium", "standard", 90.0)
    report = _report(car, _sample_track())
    assert [c.field for c in report.comparisons] == [
        "engine",
        "tyre",
        "aero_kit",
        "capacity",
    ]
    assert not report.changed("suspension")


def test_extended_car_compares_every_field() -> None:
    car = CarConfiguration.from_kinds(
        "turbo",
        "medium",
        "standard",
        90.0,
        suspension="soft",
        brakes="medium-temperature",
        gearbox="close-ratio",
        traction_control="medium",
    )
    report = _report(car, _sample_track())
    assert len(report.comparisons) == 8
    assert report.changed("suspension")
    assert report.changed("gearbox")
    assert not report.changed("brakes")
    assert report.advisories == (
        "Suspension setup differs from the track-optimised setting. Recommended: hard",
        "Gearbox ratio differs from the track-optimised ratio. Recommended: wide-ratio",
    )


def test_extended_car_compares_capacity_exactly() -> None:
    """A capacity within tolerance still counts as changed once extended."""
    fields = dict(
        suspension="hard",
        brakes="medium-temperature",
        gearbox="wide-ratio",
        traction_control="medium",
    )
    exact = CarConfiguration.from_kinds("turbo", "medium", "standard", 90.0, **fields)
    close = CarConfiguration.from_kinds("turbo", "medium", "standard", 89.0, **fields)
    assert _report(exact, _sample_track()).matches_optimal
    assert _report(close, _sample_track()).changed("capacity")


# ---------------------------------------------------------------------------
# Advisories
# ---------------------------------------------------------------------------


def test_tyre_temperature_advice_silent_when_tyre_matches() -> None:
    """A diagnostic on an unchanged field must not produce a line."""
    track = _sample_track(temp=45.0)  # optimal: turbo / hard / standard / 90
    car = CarConfiguration.from_kinds("standard", "hard", "standard", 90.0)
    report = _report(car, track)
    assert report.diagnostics.tyre_temp_mismatch
    assert report.advisories == (
        "Engine selection is suboptimal. Recommended: Turbocharged Engine",
    )


def test_tyre_temperature_advice_when_tyre_changed() -> None:
    track = _sample_track(temp=45.0)
    car = CarConfiguration.from_kinds("turbo", "medium", "standard", 90.0)
    report = _report(car, track)
    assert report.advisories == (
        TYRE_TEMP_LINE,
        "Tyre type differs from the track-optimised compound. Recommended: Hard",
    )


def test_low_fuel_advice_gated_on_capacity() -> None:
    # optimal: standard / medium / standard / 100
    track = _sample_track(distance=200.0, long_straights=False)
    short_tank = CarConfiguration.from_kinds("turbo", "medium", "standard", 60.0)
    full_tank = CarConfiguration.from_kinds("turbo", "medium", "standard", 100.0)

    report = _report(short_tank, track)
    assert report.diagnostics.fuel_too_low
    assert report.advisories == (
        FUEL_LOW_LINE,
        "Engine selection is suboptimal. Recommended: Standard Engine",
        "Fuel tank capacity may not meet race distance demands. Recommended: 100.0",
    )
    assert FUEL_LOW_LINE not in _report(full_tank, track).advisories


def test_electric_car_never_fuel_too_low() -> None:
    track = _sample_track(distance=200.0)
    car = CarConfiguration.from_kinds("electric", "medium", "standard", 60.0)
    assert not diagnose(car, track).fuel_too_low


def test_soft_tyre_advice_on_twisty_track() -> None:
    # optimal: standard / hard / standard / 90
    track = _sample_track(curves=12, long_straights=False)
    car = CarConfiguration.from_kinds("standard", "medium", "standard", 90.0)
    report = _report(car, track)
    assert report.advisories == (
        TOO_SOFT_LINE,
        "Tyre type differs from the track-optimised compound. Recommended: Hard",
    )


def test_weak_brakes_advice_in_wet() -> None:
    # optimal: electric / medium / standard / 90
    track = _sample_track(is_wet=True, long_straights=False)
    slick = AeroKitSpec(
        kind=AeroKitKind.LOW_DRAG,
        name="Slick Kit",
        drag_coefficient=0.25,
        downforce=150.0,
        top_speed=285.0,
        fuel_efficiency_rating=14.0,
        cornering_ability=4,
        brake_efficiency=0.5,
    )
    car = CarConfiguration(engine=ELECTRIC_ENGINE, tyre=MEDIUM, aero_kit=slick, capacity=90.0)
    report = _report(car, track)
    assert report.advisories == (
        WEAK_BRAKES_LINE,
        "Aerodynamic kit choice may not provide the ideal performance. "
        "Recommended: Standard Kit",
    )


def test_turbo_in_wet_advice() -> None:
    track = _sample_track(is_wet=True, long_straights=False)
    car = CarConfiguration.from_kinds("turbo", "medium", "standard", 90.0)
    report = _report(car, track)
    assert report.advisories == (
        TURBO_WET_LINE,
        "Engine selection is suboptimal. Recommended: Electric Engine",
    )


# ---------------------------------------------------------------------------
# Rationale
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("name", "keyword"),
    [
        ("Desert Sprint Circuit", "Turbo"),
        ("Mountain Twistway", "Hybrid"),
        ("High-Speed Oval", "V8"),
        ("Urban Street Loop", "Electric"),
        ("Grand Prix Complex", "Balanced setup"),
        ("DESERT night race", "Turbo"),
    ],
)
def test_explain_setup_choice(name: str, keyword: str) -> None:
    assert keyword in explain_setup_choice(_sample_track(name=name))


def test_explain_setup_choice_default() -> None:
    assert (
        explain_setup_choice(_sample_track(name="Unknown Raceway"))
        == "Balanced configuration for general racing conditions."
    )


# ---------------------------------------------------------------------------
# Diagnostic thresholds
# ---------------------------------------------------------------------------


def _diagnostics_track(
    curves: int = 8,
    chicanes: int = 2,
    distance: float = 160.0,
    elevation: float = 50.0,
    temp: float = 25.0,
    is_wet: bool = False,
) -> TrackProfile:
    return TrackProfile(
        name="Diagnostics Test",
        lap_length_km=4.0,
        total_race_distance_km=distance,
        ambient_temp_c=temp,
        is_wet=is_wet,
        number_of_curves=curves,
        number_of_chicanes=chicanes,
        has_long_straights=False,
        elevation_gain_m=elevation,
    )


def _diagnostics_car(
    engine: EngineSpec = STANDARD_ENGINE,
    tyre: TyreSpec = MEDIUM,
    aero_kit: AeroKitSpec = STANDARD_KIT,
) -> CarConfiguration:
    return CarConfiguration(engine=engine, tyre=tyre, aero_kit=aero_kit, capacity=80.0)


@pytest.mark.parametrize(
    ("curves", "chicanes", "high_wear"),
    [
        (10, 3, False),
        (11, 3, True),
        (10, 4, True),
        (11, 4, True),
    ],
)
def test_high_wear_threshold(curves: int, chicanes: int, high_wear: bool) -> None:
    """More than 10 curves or more than 3 chicanes, each on its own."""
    flags = diagnose(_diagnostics_car(), _diagnostics_track(curves=curves, chicanes=chicanes))
    assert flags.high_wear_track is high_wear


@pytest.mark.parametrize(
    ("distance", "elevation", "demanding"),
    [
        (160.0, 100.0, False),
        (161.0, 100.0, True),
        (160.0, 101.0, True),
        (161.0, 101.0, True),
    ],
)
def test_fuel_demanding_threshold(distance: float, elevation: float, demanding: bool) -> None:
    """Over 160 km or more than 100 m of climbing, each on its own."""
    flags = diagnose(
        _diagnostics_car(),
        _diagnostics_track(distance=distance, elevation=elevation),
    )
    assert flags.fuel_demanding_track is demanding


@pytest.mark.parametrize(
    ("temp", "mismatch"),
    [(15.0, False), (35.0, False), (14.9, True), (35.1, True)],
)
def test_tyre_temperature_mismatch_threshold(temp: float, mismatch: bool) -> None:
    flags = diagnose(_diagnostics_car(), _diagnostics_track(temp=temp))
    assert flags.tyre_temp_mismatch is mismatch


@pytest.mark.parametrize(
    ("wear", "curves", "too_soft"),
    [
        (0.12, 11, False),
        (0.13, 11, True),
        (0.25, 10, False),
    ],
)
def test_tyre_too_soft_threshold(wear: float, curves: int, too_soft: bool) -> None:
    """Wear above 0.12 per lap only matters on a high-wear track."""
    tyre = replace(MEDIUM, wear_rate_per_lap=wear)
    flags = diagnose(_diagnostics_car(tyre=tyre), _diagnostics_track(curves=curves))
    assert flags.tyre_too_soft_for_corners is too_soft


@pytest.mark.parametrize(
    ("fuel_rate", "distance", "too_low"),
    [
        (6.0, 161.0, False),  # efficiency exactly 6.0 km/l
        (6.1, 161.0, True),
        (6.1, 160.0, False),
    ],
)
def test_fuel_too_low_threshold(fuel_rate: float, distance: float, too_low: bool) -> None:
    """Efficiency below 6 km/l only matters on a fuel-demanding track."""
    engine = replace(STANDARD_ENGINE, fuel_consumption_rate=fuel_rate, weight=0.0)
    flags = diagnose(_diagnostics_car(engine=engine), _diagnostics_track(distance=distance))
    assert flags.fuel_too_low is too_low


@pytest.mark.parametrize(
    ("brake", "is_wet", "too_weak"),
    [
        (0.6, True, False),
        (0.59, True, True),
        (0.5, False, False),
    ],
)
def test_brakes_too_weak_threshold(brake: float, is_wet: bool, too_weak: bool) -> None:
    kit = replace(STANDARD_KIT, brake_efficiency=brake)
    flags = diagnose(_diagnostics_car(aero_kit=kit), _diagnostics_track(is_wet=is_wet))
    assert flags.brakes_too_weak_in_wet is too_weak


@pytest.mark.parametrize(
    ("engine", "is_wet", "expected"),
    [
        (TURBO_ENGINE, True, True),
        (TURBO_ENGINE, False, False),
        (STANDARD_ENGINE, True, False),
    ],
)
def test_turbo_in_wet(engine: EngineSpec, is_wet: bool, expected: bool) -> None:
    flags = diagnose(_diagnostics_car(engine=engine), _diagnostics_track(is_wet=is_wet))
    assert flags.turbo_in_wet is expected
