"""Setup recommender: derives a track-optimised car configuration.

Every selector is a pure function of the track.  Branches are evaluated
top to bottom and the first match wins.
"""

from __future__ import annotations

import logging

from race_optimiser.core.aero import AeroKitKind
from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.components import (
    BrakeCompound,
    GearboxRatio,
    SuspensionSetup,
    TractionControlLevel,
)
from race_optimiser.core.engine import EngineKind
from race_optimiser.core.track import TrackProfile, difficulty_score
from race_optimiser.core.tyre import TyreKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Core component selectors
# ---------------------------------------------------------------------------


def recommend_engine(track: TrackProfile) -> EngineKind:
    """Pick the engine variant for *track*."""
    if track.is_wet and track.number_of_curves > 10:
        # control in twisty wet conditions
        return EngineKind.ELECTRIC
    if track.is_wet or track.lap_length_km < 3.5:
        return EngineKind.ELECTRIC
    if track.number_of_curves > 15:
        return EngineKind.HYBRID
    if track.has_long_straights:
        return EngineKind.TURBO
    return EngineKind.STANDARD


def recommend_tyre(track: TrackProfile) -> TyreKind:
    """Pick the tyre compound for *track*."""
    if track.ambient_temp_c < 20:
        return TyreKind.SOFT
    if track.ambient_temp_c > 30 or track.number_of_curves > 10:
        return TyreKind.HARD
    return TyreKind.MEDIUM


def recommend_aero_kit(track: TrackProfile) -> AeroKitKind:
    """Pick the aerodynamic package for *track*."""
    if track.number_of_chicanes > 3 or track.number_of_curves > 12:
        return AeroKitKind.DOWNFORCE
    if track.has_long_straights and track.number_of_curves < 6:
        return AeroKitKind.LOW_DRAG
    return AeroKitKind.STANDARD


def recommend_capacity(track: TrackProfile) -> float:
    """Pick the fuel (l) or battery (kWh) capacity for the race distance."""
    distance = track.total_race_distance_km
    if distance > 180:
        return 100.0
    if distance > 150:
        return 90.0
    if distance < 120:
        return 70.0
    return 80.0


# ---------------------------------------------------------------------------
# Extended component selectors
# ---------------------------------------------------------------------------


def recommend_suspension(track: TrackProfile) -> SuspensionSetup:
    """Stiffer on easy tracks, softer as difficulty rises."""
    score = difficulty_score(track)
    if score <= 3:
        return SuspensionSetup.HARD
    if score <= 7:
        return SuspensionSetup.MEDIUM
    return SuspensionSetup.SOFT


def recommend_brakes(track: TrackProfile) -> BrakeCompound:
    if track.is_wet:
        return BrakeCompound.HIGH_TEMPERATURE
    return BrakeCompound.MEDIUM_TEMPERATURE


def recommend_gearbox(track: TrackProfile) -> GearboxRatio:
    if track.has_long_straights:
        return GearboxRatio.WIDE_RATIO
    return GearboxRatio.CLOSE_RATIO


def recommend_traction_control(track: TrackProfile) -> TractionControlLevel:
    if track.is_wet:
        return TractionControlLevel.HIGH
    return TractionControlLevel.MEDIUM


# ---------------------------------------------------------------------------
# Full recommendation
# ---------------------------------------------------------------------------


def recommend(track: TrackProfile) -> CarConfiguration:
    """Build the optimal setup for *track*.

    The result always carries the extended components, so it can be
    compared field by field against any user configuration.

    Args:
        track: The circuit to optimise for.

    Returns:
        The recommended :class:`CarConfiguration`.
    """
    optimal = CarConfiguration.from_kinds(
        engine=recommend_engine(track),
        tyre=recommend_tyre(track),
        aero_kit=recommend_aero_kit(track),
        capacity=recommend_capacity(track),
        suspension=recommend_suspension(track),
        brakes=recommend_brakes(track),
        gearbox=recommend_gearbox(track),
        traction_control=recommend_traction_control(track),
    )
    logger.debug(
        "Recommended for %s: %s / %s / %s, %.0f",
        track.name,
        optimal.engine.kind.value,
        optimal.tyre.kind.value,
        optimal.aero_kit.kind.value,
        optimal.capacity,
    )
    return optimal
