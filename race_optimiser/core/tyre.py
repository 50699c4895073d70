"""Tyre compound catalog for the race setup engine.

Each compound defines a per-lap wear rate, a grip level and the ambient
temperature window in which it works as intended.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from race_optimiser.core.errors import InvalidInputError

# ---------------------------------------------------------------------------
# Tyre compound model
# ---------------------------------------------------------------------------


class TyreKind(str, Enum):
    """Closed set of tyre compounds."""

    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class TyreSpec:
    """Immutable description of a tyre compound.

    Attributes:
        kind: Compound tag.
        type: Human-readable compound label (e.g. "Soft").
        wear_rate_per_lap: Fraction of a tyre set consumed per lap.
        grip: Relative grip level (higher grips more).
        min_optimal_temp_c: Lower bound of the working window in Celsius.
        max_optimal_temp_c: Upper bound of the working window in Celsius.
    """

    kind: TyreKind
    type: str
    wear_rate_per_lap: float
    grip: float
    min_optimal_temp_c: float
    max_optimal_temp_c: float

    def __post_init__(self) -> None:
        if not self.type:
            raise InvalidInputError("Tyre type must be non-empty.")
        if self.wear_rate_per_lap < 0.0:
            raise InvalidInputError("wear_rate_per_lap must be >= 0.")
        if self.min_optimal_temp_c > self.max_optimal_temp_c:
            raise InvalidInputError(
                "min_optimal_temp_c must be <= max_optimal_temp_c."
            )

    def is_temperature_optimal(self, temperature_c: float) -> bool:
        """Return True if *temperature_c* lies inside the working window.

        Both bounds are inclusive.
        """
        return self.min_optimal_temp_c <= temperature_c <= self.max_optimal_temp_c


# Pre-defined compounds -------------------------------------------------------

SOFT = TyreSpec(
    kind=TyreKind.SOFT,
    type="Soft",
    wear_rate_per_lap=0.25,
    grip=0.9,
    min_optimal_temp_c=20.0,
    max_optimal_temp_c=30.0,
)
MEDIUM = TyreSpec(
    kind=TyreKind.MEDIUM,
    type="Medium",
    wear_rate_per_lap=0.15,
    grip=0.8,
    min_optimal_temp_c=15.0,
    max_optimal_temp_c=35.0,
)
HARD = TyreSpec(
    kind=TyreKind.HARD,
    type="Hard",
    wear_rate_per_lap=0.1,
    grip=0.6,
    min_optimal_temp_c=10.0,
    max_optimal_temp_c=40.0,
)

TYRES: dict[TyreKind, TyreSpec] = {spec.kind: spec for spec in (SOFT, MEDIUM, HARD)}


def get_tyre(kind: TyreKind | str) -> TyreSpec:
    """Look up the catalog compound for *kind*.

    Raises:
        InvalidInputError: If *kind* names no known compound.
    """
    try:
        return TYRES[TyreKind(kind)]
    except ValueError as exc:
        raise InvalidInputError(f"Unknown tyre kind: {kind!r}") from exc
