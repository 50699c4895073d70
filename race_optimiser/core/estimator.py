"""Closed-form race projections for a car on a track.

All functions are pure.  Resource projections branch on the engine kind:
electric cars get an energy projection, every other kind a fuel projection.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.errors import InvalidInputError
from race_optimiser.core.track import TrackProfile

logger = logging.getLogger(__name__)

MIN_FUEL_EFFICIENCY: float = 1.0  # km/l floor
OFF_WINDOW_TEMP_PENALTY: float = 1.1

# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FuelProjection:
    """Fuel demand for a combustion or hybrid car.

    Attributes:
        fuel_efficiency_km_per_liter: Distance covered per litre.
        fuel_needed_liters: Fuel needed for the full race distance.
        fuel_stops_required: Tank fills needed, the first one included.
    """

    fuel_efficiency_km_per_liter: float
    fuel_needed_liters: float
    fuel_stops_required: int


@dataclass(frozen=True)
class EnergyProjection:
    """Energy demand for an electric car.

    Attributes:
        energy_consumption_kwh_per_100km: Consumption rate of the engine.
        total_energy_needed_kwh: Energy needed for the full race distance.
        charging_stops_required: Battery charges needed, the first one included.
    """

    energy_consumption_kwh_per_100km: float
    total_energy_needed_kwh: float
    charging_stops_required: int

    @property
    def km_per_kwh(self) -> float:
        return 100.0 / self.energy_consumption_kwh_per_100km


ResourceProjection = FuelProjection | EnergyProjection


@dataclass(frozen=True)
class RaceMetrics:
    """Projected race figures for one car on one track.

    Attributes:
        overall_speed_kmh: Combined aero and engine top-speed estimate.
        lap_time_minutes: Time for one lap.
        total_race_time_minutes: ``lap_time_minutes * total_laps``.
        total_laps: Whole laps that fit in the race distance.
        tyre_changes_estimated: Tyre sets worn through over the race.
        resource: Fuel or energy projection, selected by engine kind.
    """

    overall_speed_kmh: float
    lap_time_minutes: float
    total_race_time_minutes: float
    total_laps: int
    tyre_changes_estimated: int
    resource: ResourceProjection

    @property
    def is_electric(self) -> bool:
        return isinstance(self.resource, EnergyProjection)

    @property
    def stops_required(self) -> int:
        """Refuelling or charging stops, whichever applies."""
        if isinstance(self.resource, EnergyProjection):
            return self.resource.charging_stops_required
        return self.resource.fuel_stops_required


# ---------------------------------------------------------------------------
# Pace
# ---------------------------------------------------------------------------


def overall_speed(car: CarConfiguration) -> float:
    """Top-speed estimate in km/h.

    ``aero.top_speed + engine.speed_boost - engine.weight / 100``
    """
    return car.aero_kit.top_speed + car.engine.speed_boost - car.engine.weight / 100.0


def lap_time_minutes(car: CarConfiguration, track: TrackProfile) -> float:
    """Calculate the lap time for *car* on *track*.

    The formula scales the straight-line lap time by tyre temperature fit,
    cornering and braking::

        lap_time = (lap_length / overall_speed)
                   * temp_penalty * cornering_modifier * brake_modifier * 60

    Where:
        temp_penalty       = 1.0 inside the tyre window, 1.1 outside
        cornering_modifier = 1 - aero.cornering_ability / 20
        brake_modifier     = 1 - aero.brake_efficiency

    Args:
        car: The car being driven.
        track: The circuit being raced on.

    Returns:
        Lap time in minutes.

    Raises:
        InvalidInputError: If the lap length or the overall speed is not
            positive.
    """
    _require_positive(track.lap_length_km, "lap_length_km")
    speed = overall_speed(car)
    _require_positive(speed, "overall speed")

    temp_penalty: float = (
        1.0
        if car.tyre.is_temperature_optimal(track.ambient_temp_c)
        else OFF_WINDOW_TEMP_PENALTY
    )
    cornering_modifier: float = 1.0 - car.aero_kit.cornering_ability / 20.0
    brake_modifier: float = 1.0 - car.aero_kit.brake_efficiency
    base_time_hours: float = track.lap_length_km / speed

    return base_time_hours * temp_penalty * cornering_modifier * brake_modifier * 60.0


def total_laps(track: TrackProfile) -> int:
    """Whole laps in the race distance (floored)."""
    _require_positive(track.lap_length_km, "lap_length_km")
    return math.floor(track.total_race_distance_km / track.lap_length_km)


def total_race_time_minutes(car: CarConfiguration, track: TrackProfile) -> float:
    return lap_time_minutes(car, track) * total_laps(track)


def tyre_changes_estimated(car: CarConfiguration, track: TrackProfile) -> int:
    """Tyre sets worn through over the race (floored)."""
    return math.floor(total_laps(track) * car.tyre.wear_rate_per_lap)


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


def fuel_efficiency_km_per_liter(car: CarConfiguration) -> float:
    """Fuel efficiency after engine and weight penalties, floored at 1 km/l.

    ``max(1.0, aero.fuel_efficiency_rating - engine.fuel_consumption_rate
    - engine.weight / 300)``
    """
    efficiency = (
        car.aero_kit.fuel_efficiency_rating
        - car.engine.fuel_consumption_rate
        - car.engine.weight / 300.0
    )
    return max(MIN_FUEL_EFFICIENCY, efficiency)


def project_resources(car: CarConfiguration, track: TrackProfile) -> ResourceProjection:
    """Project fuel or energy demand over the race distance.

    Args:
        car: The car being driven.
        track: The circuit being raced on.

    Returns:
        An :class:`EnergyProjection` for electric engines, otherwise a
        :class:`FuelProjection`.

    Raises:
        InvalidInputError: If the car capacity is not positive.
    """
    _require_positive(car.capacity, "capacity")
    distance = track.total_race_distance_km

    if car.engine.kind.is_electric:
        per_100km = car.engine.energy_consumption_per_100km
        if per_100km is None:
            raise InvalidInputError(
                f"{car.engine.name} has no energy_consumption_per_100km."
            )
        total_energy = distance / 100.0 * per_100km
        return EnergyProjection(
            energy_consumption_kwh_per_100km=per_100km,
            total_energy_needed_kwh=total_energy,
            charging_stops_required=math.ceil(total_energy / car.capacity),
        )

    efficiency = fuel_efficiency_km_per_liter(car)
    fuel_needed = distance / efficiency
    return FuelProjection(
        fuel_efficiency_km_per_liter=efficiency,
        fuel_needed_liters=fuel_needed,
        fuel_stops_required=math.ceil(fuel_needed / car.capacity),
    )


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------


def estimate_race_metrics(car: CarConfiguration, track: TrackProfile) -> RaceMetrics:
    """Compute every race projection for *car* on *track*."""
    lap_time = lap_time_minutes(car, track)
    laps = total_laps(track)

    metrics = RaceMetrics(
        overall_speed_kmh=overall_speed(car),
        lap_time_minutes=lap_time,
        total_race_time_minutes=lap_time * laps,
        total_laps=laps,
        tyre_changes_estimated=tyre_changes_estimated(car, track),
        resource=project_resources(car, track),
    )
    logger.debug(
        "%s on %s: %.3f min/lap over %d laps",
        car.engine.name,
        track.name,
        lap_time,
        laps,
    )
    return metrics


def _require_positive(value: float, label: str) -> None:
    if not (math.isfinite(value) and value > 0.0):
        raise InvalidInputError(f"{label} must be finite and > 0, got {value}.")
