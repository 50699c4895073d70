"""Aerodynamic kit catalog for the race setup engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from race_optimiser.core.errors import InvalidInputError


class AeroKitKind(str, Enum):
    """Closed set of aerodynamic packages."""

    STANDARD = "standard"
    DOWNFORCE = "downforce"
    LOW_DRAG = "low-drag"
    GROUND_EFFECT = "ground-effect"
    WET_WEATHER = "wet-weather"
    EXTREME = "extreme"


@dataclass(frozen=True)
class AeroKitSpec:
    """Immutable description of an aerodynamic kit.

    Attributes:
        kind: Kit tag.
        name: Display name, matched by the compatibility rules.
        drag_coefficient: Aerodynamic drag coefficient.
        downforce: Downforce at reference speed (kg).
        top_speed: Base top speed in km/h before engine contribution.
        fuel_efficiency_rating: Base efficiency in km/l before engine penalties.
        cornering_ability: Cornering rating on a 0-10 scale.
        brake_efficiency: Braking effectiveness as a 0-1 fraction.
    """

    kind: AeroKitKind
    name: str
    drag_coefficient: float
    downforce: float
    top_speed: float
    fuel_efficiency_rating: float
    cornering_ability: int
    brake_efficiency: float

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidInputError("Aero kit name must not be empty.")
        if not 0 <= self.cornering_ability <= 10:
            raise InvalidInputError("cornering_ability must be between 0 and 10.")
        if not 0.0 <= self.brake_efficiency <= 1.0:
            raise InvalidInputError("brake_efficiency must be between 0.0 and 1.0.")


# Pre-defined kits ------------------------------------------------------------

STANDARD_KIT = AeroKitSpec(
    kind=AeroKitKind.STANDARD,
    name="Standard Kit",
    drag_coefficient=0.30,
    downforce=250.0,
    top_speed=250.0,
    fuel_efficiency_rating=12.0,
    cornering_ability=6,
    brake_efficiency=0.7,
)
DOWNFORCE_KIT = AeroKitSpec(
    kind=AeroKitKind.DOWNFORCE,
    name="Downforce-Focussed Kit",
    drag_coefficient=0.35,
    downforce=350.0,
    top_speed=220.0,
    fuel_efficiency_rating=10.0,
    cornering_ability=9,
    brake_efficiency=0.85,
)
LOW_DRAG_KIT = AeroKitSpec(
    kind=AeroKitKind.LOW_DRAG,
    name="Low-Drag Kit",
    drag_coefficient=0.25,
    downforce=150.0,
    top_speed=280.0,
    fuel_efficiency_rating=14.0,
    cornering_ability=5,
    brake_efficiency=0.6,
)
GROUND_EFFECT_KIT = AeroKitSpec(
    kind=AeroKitKind.GROUND_EFFECT,
    name="Ground Effect Kit",
    drag_coefficient=0.28,
    downforce=300.0,
    top_speed=240.0,
    fuel_efficiency_rating=12.0,
    cornering_ability=8,
    brake_efficiency=0.75,
)
WET_WEATHER_KIT = AeroKitSpec(
    kind=AeroKitKind.WET_WEATHER,
    name="Wet Weather Kit",
    drag_coefficient=0.32,
    downforce=320.0,
    top_speed=230.0,
    fuel_efficiency_rating=11.0,
    cornering_ability=7,
    brake_efficiency=0.9,
)
EXTREME_KIT = AeroKitSpec(
    kind=AeroKitKind.EXTREME,
    name="Extreme Aero Kit",
    drag_coefficient=0.40,
    downforce=400.0,
    top_speed=200.0,
    fuel_efficiency_rating=9.0,
    cornering_ability=10,
    brake_efficiency=0.88,
)

AERO_KITS: dict[AeroKitKind, AeroKitSpec] = {
    spec.kind: spec
    for spec in (
        STANDARD_KIT,
        DOWNFORCE_KIT,
        LOW_DRAG_KIT,
        GROUND_EFFECT_KIT,
        WET_WEATHER_KIT,
        EXTREME_KIT,
    )
}


def get_aero_kit(kind: AeroKitKind | str) -> AeroKitSpec:
    """Look up the catalog kit for *kind*.

    Raises:
        InvalidInputError: If *kind* names no known kit.
    """
    try:
        return AERO_KITS[AeroKitKind(kind)]
    except ValueError as exc:
        raise InvalidInputError(f"Unknown aero kit kind: {kind!r}") from exc
