"""Tests for the car configuration model."""

import math

import pytest

from race_optimiser.core.aero import STANDARD_KIT
from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.components import (
    BrakeCompound,
    GearboxRatio,
    SuspensionSetup,
    TractionControlLevel,
)
from race_optimiser.core.engine import STANDARD_ENGINE
from race_optimiser.core.errors import InvalidInputError
from race_optimiser.core.recommender import recommend
from race_optimiser.core.reporter import compare_setups
from race_optimiser.core.track import TrackProfile
from race_optimiser.core.tyre import MEDIUM


def _sample_track() -> TrackProfile:
    """Return a representative test track."""
    return TrackProfile(
        name="Car Test Circuit",
        lap_length_km=4.0,
        total_race_distance_km=160.0,
        ambient_temp_c=25.0,
        is_wet=False,
        number_of_curves=8,
        number_of_chicanes=2,
        has_long_straights=True,
        elevation_gain_m=50.0,
    )


def _car(capacity: float = 80.0, **extended) -> CarConfiguration:
    return CarConfiguration(
        engine=STANDARD_ENGINE,
        tyre=MEDIUM,
        aero_kit=STANDARD_KIT,
        capacity=capacity,
        **extended,
    )


@pytest.mark.parametrize("capacity", [0.0, -10.0, math.nan, math.inf, -math.inf])
def test_invalid_capacity_rejected(capacity: float) -> None:
    """Capacity must be a finite positive number."""
    with pytest.raises(InvalidInputError):
        _car(capacity=capacity)


@pytest.mark.parametrize("capacity", [math.inf, "inf", "nan", "full"])
def test_from_kinds_rejects_bad_capacity(capacity) -> None:
    with pytest.raises(InvalidInputError):
        CarConfiguration.from_kinds("standard", "medium", "standard", capacity)


def test_extended_strings_coerced_to_enums() -> None:
    """Directly constructed cars accept the string values of the enums."""
    car = _car(
        suspension="hard",
        brakes="medium-temperature",
        gearbox="wide-ratio",
        traction_control="medium",
    )
    assert car.suspension is SuspensionSetup.HARD
    assert car.brakes is BrakeCompound.MEDIUM_TEMPERATURE
    assert car.gearbox is GearboxRatio.WIDE_RATIO
    assert car.traction_control is TractionControlLevel.MEDIUM
    assert car.is_extended


def test_coerced_car_compares_against_optimal() -> None:
    car = _car(
        capacity=90.0,
        suspension="soft",
        brakes="medium-temperature",
        gearbox="wide-ratio",
        traction_control="medium",
    )
    changed = {c.field: c.changed for c in compare_setups(car, recommend(_sample_track()))}
    assert changed["suspension"]
    assert not changed["brakes"]


def test_unknown_extended_value_rejected() -> None:
    with pytest.raises(InvalidInputError):
        _car(
            suspension="rubbery",
            brakes="medium-temperature",
            gearbox="wide-ratio",
            traction_control="medium",
        )


def test_partial_extended_set_rejected() -> None:
    with pytest.raises(InvalidInputError):
        _car(suspension=SuspensionSetup.SOFT)


def test_basic_car_properties() -> None:
    car = _car()
    assert not car.is_extended
    assert not car.is_electric
    assert car.suspension is None
