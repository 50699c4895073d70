"""Car configuration model for the race setup engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from race_optimiser.core.aero import AeroKitKind, AeroKitSpec, get_aero_kit
from race_optimiser.core.components import (
    BrakeCompound,
    GearboxRatio,
    SuspensionSetup,
    TractionControlLevel,
)
from race_optimiser.core.engine import EngineKind, EngineSpec, get_engine
from race_optimiser.core.errors import InvalidInputError
from race_optimiser.core.tyre import TyreKind, TyreSpec, get_tyre


@dataclass(frozen=True)
class CarConfiguration:
    """Deterministic representation of a race car setup.

    The extended components are optional but come as a group: a car either
    carries all four (the extended variant) or none of them.

    Attributes:
        engine: Fitted engine.
        tyre: Fitted tyre compound.
        aero_kit: Fitted aerodynamic package.
        capacity: Fuel tank size in litres, or battery size in kWh when the
            engine is electric.
        suspension: Suspension stiffness (extended variant only).
        brakes: Brake compound (extended variant only).
        gearbox: Gearbox ratio spacing (extended variant only).
        traction_control: Traction control level (extended variant only).
    """

    engine: EngineSpec
    tyre: TyreSpec
    aero_kit: AeroKitSpec
    capacity: float
    suspension: SuspensionSetup | None = None
    brakes: BrakeCompound | None = None
    gearbox: GearboxRatio | None = None
    traction_control: TractionControlLevel | None = None

    def __post_init__(self) -> None:
        """Validate car parameters.

        Extended components given as their string values are converted to
        the matching enum members.
        """
        if not math.isfinite(self.capacity) or self.capacity <= 0.0:
            raise InvalidInputError(f"capacity must be finite and > 0, got {self.capacity}.")

        for field, enum_cls in _EXTENDED_FIELDS.items():
            object.__setattr__(self, field, _optional(enum_cls, getattr(self, field)))

        extended = (self.suspension, self.brakes, self.gearbox, self.traction_control)
        present = sum(value is not None for value in extended)
        if present not in (0, len(extended)):
            raise InvalidInputError(
                "suspension, brakes, gearbox and traction_control must be "
                "given together."
            )

    @property
    def is_extended(self) -> bool:
        """Whether the car carries the extended chassis components."""
        return self.suspension is not None

    @property
    def is_electric(self) -> bool:
        """Whether capacity is measured in kWh rather than litres."""
        return self.engine.kind.is_electric

    @classmethod
    def from_kinds(
        cls,
        engine: EngineKind | str,
        tyre: TyreKind | str,
        aero_kit: AeroKitKind | str,
        capacity: float,
        suspension: SuspensionSetup | str | None = None,
        brakes: BrakeCompound | str | None = None,
        gearbox: GearboxRatio | str | None = None,
        traction_control: TractionControlLevel | str | None = None,
    ) -> CarConfiguration:
        """Build a configuration from catalog kinds.

        Args:
            engine: Engine kind or its string value (e.g. ``"turbo"``).
            tyre: Tyre kind or its string value.
            aero_kit: Aero kit kind or its string value.
            capacity: Fuel (l) or battery (kWh) capacity.
            suspension: Optional suspension setup.
            brakes: Optional brake compound.
            gearbox: Optional gearbox ratio.
            traction_control: Optional traction control level.

        Returns:
            A validated :class:`CarConfiguration`.

        Raises:
            InvalidInputError: If a kind is unknown or the values are invalid.
        """
        try:
            capacity = float(capacity)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"capacity must be a number, got {capacity!r}.") from exc

        return cls(
            engine=get_engine(engine),
            tyre=get_tyre(tyre),
            aero_kit=get_aero_kit(aero_kit),
            capacity=capacity,
            suspension=suspension,
            brakes=brakes,
            gearbox=gearbox,
            traction_control=traction_control,
        )


E = TypeVar("E", bound=Enum)

_EXTENDED_FIELDS: dict[str, type[Enum]] = {
    "suspension": SuspensionSetup,
    "brakes": BrakeCompound,
    "gearbox": GearboxRatio,
    "traction_control": TractionControlLevel,
}


def _optional(enum_cls: type[E], value: E | str | None) -> E | None:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise InvalidInputError(
            f"Unknown {enum_cls.__name__} value: {value!r}"
        ) from exc
