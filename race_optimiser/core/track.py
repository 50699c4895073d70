"""Track model for the race setup engine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from race_optimiser.core.errors import InvalidInputError

MAX_DIFFICULTY: int = 10

_FINITE_FIELDS: tuple[str, ...] = (
    "lap_length_km",
    "total_race_distance_km",
    "ambient_temp_c",
    "elevation_gain_m",
)


@dataclass(frozen=True)
class TrackProfile:
    """Deterministic representation of a race circuit and its conditions.

    Attributes:
        name: Circuit name.
        lap_length_km: Length of one lap in km (> 0).
        total_race_distance_km: Race distance in km (>= 0).
        ambient_temp_c: Ambient temperature in Celsius.
        is_wet: Whether the race runs in wet conditions.
        number_of_curves: Sharp or medium-speed corners per lap (>= 0).
        number_of_chicanes: Chicanes and S-bends per lap (>= 0).
        has_long_straights: Whether the lap favours top speed.
        elevation_gain_m: Total elevation gain per lap in metres (>= 0).
    """

    name: str
    lap_length_km: float
    total_race_distance_km: float
    ambient_temp_c: float
    is_wet: bool
    number_of_curves: int
    number_of_chicanes: int
    has_long_straights: bool
    elevation_gain_m: float

    def __post_init__(self) -> None:
        """Validate track parameters."""
        if not self.name:
            raise InvalidInputError("Track name must not be empty.")
        for field in _FINITE_FIELDS:
            if not math.isfinite(getattr(self, field)):
                raise InvalidInputError(f"{field} must be finite, got {getattr(self, field)}.")
        if self.lap_length_km <= 0.0:
            raise InvalidInputError("lap_length_km must be > 0.")
        if self.total_race_distance_km < 0.0:
            raise InvalidInputError("total_race_distance_km must be >= 0.")
        if self.number_of_curves < 0:
            raise InvalidInputError("number_of_curves must be >= 0.")
        if self.number_of_chicanes < 0:
            raise InvalidInputError("number_of_chicanes must be >= 0.")
        if self.elevation_gain_m < 0.0:
            raise InvalidInputError("elevation_gain_m must be >= 0.")


def difficulty_score(track: TrackProfile) -> int:
    """Rate how demanding *track* is on a 0-10 scale.

    The score is additive, each term capped on its own before the total is
    capped at :data:`MAX_DIFFICULTY`::

        elevation = min(3, elevation_gain_m // 75)
        curves    = min(3, number_of_curves // 5)
        chicanes  = 1 if number_of_chicanes >= 3 else 0
        wet       = 2 if is_wet else 0

    Integer division floors towards negative infinity.

    Args:
        track: The circuit to rate.

    Returns:
        Difficulty score.
    """
    elevation_term = min(3, int(track.elevation_gain_m // 75))
    curves_term = min(3, track.number_of_curves // 5)
    chicane_term = 1 if track.number_of_chicanes >= 3 else 0
    wet_term = 2 if track.is_wet else 0

    return min(MAX_DIFFICULTY, elevation_term + curves_term + chicane_term + wet_term)
