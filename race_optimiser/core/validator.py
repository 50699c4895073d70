"""Compatibility rule checker for car and track combinations.

Components are classified by case-insensitive substring matches on their
display names, so any kit whose name contains "wet" counts as a wet-weather
kit.  Rules run in a fixed order:

1. Hard block: wet-weather kit with hard tyres.  Stops evaluation.
2. Warnings, all evaluated independently once no block fired:

   - turbo engine + soft tyres on a lap of 8 km or longer
   - extreme aero kit + electric engine
   - ground-effect kit + engine heavier than 230 kg
   - low-drag kit on a wet track
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.track import TrackProfile

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Thresholds and messages
# ---------------------------------------------------------------------------

TURBO_SOFT_LAP_LENGTH_KM: float = 8.0
GROUND_EFFECT_MAX_ENGINE_WEIGHT: float = 230.0

WET_KIT_WITH_HARD_TYRES: str = (
    "Wet Weather Kit cannot be used with Hard Tyres."
)
TURBO_SOFT_LONG_LAP: str = (
    "Soft tyres may degrade quickly with a turbo engine on a long lap."
)
EXTREME_AERO_ELECTRIC: str = (
    "Extreme aero kit may significantly reduce electric range and performance."
)
GROUND_EFFECT_HEAVY_ENGINE: str = (
    "Heavy engine may limit the effectiveness of the ground effect kit."
)
LOW_DRAG_WET_TRACK: str = "Low-drag aero kit is not recommended on wet tracks."

# ---------------------------------------------------------------------------
# Verdict
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of a compatibility check.

    Attributes:
        valid: False when a hard-block rule fired.
        warnings: Advisory messages, in rule order.  Always empty when
            the verdict is invalid.
        block_reason: The single reason for an invalid verdict, else None.
    """

    valid: bool
    warnings: tuple[str, ...] = ()
    block_reason: str | None = None

    def __post_init__(self) -> None:
        if self.valid and self.block_reason is not None:
            raise ValueError("A valid verdict cannot carry a block reason.")
        if not self.valid and not self.block_reason:
            raise ValueError("An invalid verdict needs a block reason.")
        if not self.valid and self.warnings:
            raise ValueError("An invalid verdict carries no warnings.")


# ---------------------------------------------------------------------------
# Name classifiers
# ---------------------------------------------------------------------------


def _has(name: str, token: str) -> bool:
    return token in name.lower()


def is_wet_weather_kit(car: CarConfiguration) -> bool:
    return _has(car.aero_kit.name, "wet")


def is_hard_tyre(car: CarConfiguration) -> bool:
    return _has(car.tyre.type, "hard")


def is_soft_tyre(car: CarConfiguration) -> bool:
    return _has(car.tyre.type, "soft")


def is_turbo_engine(car: CarConfiguration) -> bool:
    return _has(car.engine.name, "turbo")


def is_electric_engine_name(car: CarConfiguration) -> bool:
    return _has(car.engine.name, "electric")


def is_extreme_kit(car: CarConfiguration) -> bool:
    return _has(car.aero_kit.name, "extreme")


def is_ground_effect_kit(car: CarConfiguration) -> bool:
    return _has(car.aero_kit.name, "ground")


def is_low_drag_kit(car: CarConfiguration) -> bool:
    return _has(car.aero_kit.name, "low")


# ---------------------------------------------------------------------------
# Rule evaluation
# ---------------------------------------------------------------------------


def check_compatibility(car: CarConfiguration, track: TrackProfile) -> ValidationVerdict:
    """Validate *car* against *track*.

    Args:
        car: The configuration to check.
        track: The circuit it will race on.

    Returns:
        An invalid verdict carrying the block reason if the hard-block rule
        fires, otherwise a valid verdict with every matching warning.
    """
    if is_wet_weather_kit(car) and is_hard_tyre(car):
        logger.debug(
            "Blocked %s with %s tyres on %s",
            car.aero_kit.name,
            car.tyre.type,
            track.name,
        )
        return ValidationVerdict(valid=False, block_reason=WET_KIT_WITH_HARD_TYRES)

    warnings: list[str] = []

    if (
        is_turbo_engine(car)
        and is_soft_tyre(car)
        and track.lap_length_km >= TURBO_SOFT_LAP_LENGTH_KM
    ):
        warnings.append(TURBO_SOFT_LONG_LAP)

    if is_extreme_kit(car) and is_electric_engine_name(car):
        warnings.append(EXTREME_AERO_ELECTRIC)

    if is_ground_effect_kit(car) and car.engine.weight > GROUND_EFFECT_MAX_ENGINE_WEIGHT:
        warnings.append(GROUND_EFFECT_HEAVY_ENGINE)

    if is_low_drag_kit(car) and track.is_wet:
        warnings.append(LOW_DRAG_WET_TRACK)

    logger.debug("Setup valid on %s with %d warning(s)", track.name, len(warnings))
    return ValidationVerdict(valid=True, warnings=tuple(warnings))
