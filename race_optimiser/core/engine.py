"""Engine catalog for the race setup engine.

Each engine variant is an immutable bundle of performance attributes.  The
``kind`` tag drives estimator dispatch (electric vs. combustion), while the
``name`` is what the compatibility rules match against.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from race_optimiser.core.errors import InvalidInputError

# ---------------------------------------------------------------------------
# Engine kinds
# ---------------------------------------------------------------------------


class EngineKind(str, Enum):
    """Closed set of engine variants."""

    STANDARD = "standard"
    TURBO = "turbo"
    HYBRID = "hybrid"
    V8 = "v8"
    ELECTRIC = "electric"

    @property
    def is_electric(self) -> bool:
        """Whether this variant runs on stored energy instead of fuel."""
        return self is EngineKind.ELECTRIC


# ---------------------------------------------------------------------------
# Engine specification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EngineSpec:
    """Immutable description of an engine variant.

    Attributes:
        kind: Variant tag used for resource-model dispatch.
        name: Display name (e.g. "Turbocharged Engine").
        speed_boost: Top-speed contribution in km/h.
        fuel_consumption_rate: Efficiency penalty in km/l.  Zero for
            non-combustion variants.
        acceleration_rating: 0-100 km/h time in seconds.
        weight: Engine mass in kg.
        energy_consumption_per_100km: kWh drawn per 100 km.  Only
            meaningful for the electric variant.
    """

    kind: EngineKind
    name: str
    speed_boost: float
    fuel_consumption_rate: float
    acceleration_rating: float
    weight: float
    energy_consumption_per_100km: float | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidInputError("Engine name must not be empty.")
        if self.weight < 0.0:
            raise InvalidInputError("weight must be >= 0.")
        if self.fuel_consumption_rate < 0.0:
            raise InvalidInputError("fuel_consumption_rate must be >= 0.")
        if self.kind.is_electric:
            if (
                self.energy_consumption_per_100km is None
                or self.energy_consumption_per_100km <= 0.0
            ):
                raise InvalidInputError(
                    "Electric engines need energy_consumption_per_100km > 0."
                )


# Pre-defined engines ---------------------------------------------------------

STANDARD_ENGINE = EngineSpec(
    kind=EngineKind.STANDARD,
    name="Standard Engine",
    speed_boost=20.0,
    fuel_consumption_rate=4.5,
    acceleration_rating=4.0,
    weight=180.0,
)
TURBO_ENGINE = EngineSpec(
    kind=EngineKind.TURBO,
    name="Turbocharged Engine",
    speed_boost=40.0,
    fuel_consumption_rate=6.5,
    acceleration_rating=3.2,
    weight=220.0,
)
HYBRID_ENGINE = EngineSpec(
    kind=EngineKind.HYBRID,
    name="Hybrid Engine",
    speed_boost=35.0,
    fuel_consumption_rate=4.0,
    acceleration_rating=3.5,
    weight=200.0,
)
V8_ENGINE = EngineSpec(
    kind=EngineKind.V8,
    name="V8 Engine",
    speed_boost=45.0,
    fuel_consumption_rate=7.0,
    acceleration_rating=3.8,
    weight=250.0,
)
ELECTRIC_ENGINE = EngineSpec(
    kind=EngineKind.ELECTRIC,
    name="Electric Engine",
    speed_boost=50.0,
    fuel_consumption_rate=0.0,
    acceleration_rating=2.9,
    weight=140.0,
    energy_consumption_per_100km=18.0,
)

ENGINES: dict[EngineKind, EngineSpec] = {
    spec.kind: spec
    for spec in (
        STANDARD_ENGINE,
        TURBO_ENGINE,
        HYBRID_ENGINE,
        V8_ENGINE,
        ELECTRIC_ENGINE,
    )
}


def get_engine(kind: EngineKind | str) -> EngineSpec:
    """Look up the catalog engine for *kind*.

    Raises:
        InvalidInputError: If *kind* names no known variant.
    """
    try:
        return ENGINES[EngineKind(kind)]
    except ValueError as exc:
        raise InvalidInputError(f"Unknown engine kind: {kind!r}") from exc
