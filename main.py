"""CLI entrypoint for the Race Strategy Optimiser."""

from __future__ import annotations

import argparse
import logging
import sys

from race_optimiser import __version__
from race_optimiser.config import find_track, load_track_presets
from race_optimiser.core.aero import AeroKitKind
from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.components import (
    BrakeCompound,
    GearboxRatio,
    SuspensionSetup,
    TractionControlLevel,
)
from race_optimiser.core.engine import EngineKind
from race_optimiser.core.errors import InvalidInputError
from race_optimiser.core.estimator import EnergyProjection
from race_optimiser.core.recommender import recommend
from race_optimiser.core.reporter import Report, evaluate
from race_optimiser.core.track import difficulty_score
from race_optimiser.core.tyre import TyreKind

logger = logging.getLogger(__name__)


def _values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Validate a race car setup and project its race on a preset track.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--track",
        default="Desert Sprint Circuit",
        help="Preset track name (case-insensitive).",
    )
    parser.add_argument(
        "--list-tracks",
        action="store_true",
        help="List the preset tracks and exit.",
    )
    parser.add_argument(
        "--recommended",
        action="store_true",
        help="Evaluate the recommended setup instead of a manual one.",
    )
    parser.add_argument("--engine", choices=_values(EngineKind), default="standard")
    parser.add_argument("--tyre", choices=_values(TyreKind), default="medium")
    parser.add_argument("--aero", choices=_values(AeroKitKind), default="standard")
    parser.add_argument(
        "--capacity",
        type=float,
        default=70.0,
        help="Fuel tank (l) or battery (kWh) capacity.",
    )
    parser.add_argument("--suspension", choices=_values(SuspensionSetup))
    parser.add_argument("--brakes", choices=_values(BrakeCompound))
    parser.add_argument("--gearbox", choices=_values(GearboxRatio))
    parser.add_argument("--traction-control", choices=_values(TractionControlLevel))
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _print_report(report: Report) -> None:
    car = report.car
    metrics = report.metrics
    unit = "kWh" if car.is_electric else "L"

    print("\nSelected Car Setup:")
    print(f"  Engine   : {car.engine.name}")
    print(f"  Tyres    : {car.tyre.type}")
    print(f"  Aero Kit : {car.aero_kit.name}")
    print(f"  Capacity : {car.capacity:.1f} {unit}")
    if car.is_extended:
        print(f"  Suspension: {car.suspension.value}  Brakes: {car.brakes.value}")
        print(f"  Gearbox   : {car.gearbox.value}  TC: {car.traction_control.value}")

    for warning in report.verdict.warnings:
        print(f"  Warning: {warning}")

    print("\nRace Projection:")
    print(f"  Estimated Lap Time       : {metrics.lap_time_minutes:.2f} minutes")
    print(f"  Estimated Total Race Time: {metrics.total_race_time_minutes:.2f} minutes")
    print(f"  Total Laps               : {metrics.total_laps}")
    print(f"  Tyre Changes Estimated   : {metrics.tyre_changes_estimated}")

    resource = metrics.resource
    if isinstance(resource, EnergyProjection):
        print(f"  Energy Consumption       : {resource.energy_consumption_kwh_per_100km:.2f} kWh/100km")
        print(f"  Estimated Energy Needed  : {resource.total_energy_needed_kwh:.2f} kWh")
        print(f"  Charging Stops Required  : {resource.charging_stops_required}")
    else:
        print(f"  Fuel Efficiency          : {resource.fuel_efficiency_km_per_liter:.2f} km/l")
        print(f"  Estimated Fuel Needed    : {resource.fuel_needed_liters:.2f} L")
        print(f"  Fuel Stops Required      : {resource.fuel_stops_required}")

    print("\nStrategy Recommendation:")
    for line in report.advisories:
        print(f"  - {line}")
    print(f"\nWhy this setup? {report.rationale}")


def main(argv: list[str] | None = None) -> int:
    """Run one evaluation and print the report."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tracks = load_track_presets()
    if args.list_tracks:
        for track in tracks:
            print(f"{track.name} (Difficulty: {difficulty_score(track)}/10)")
        return 0

    try:
        track = find_track(args.track, tracks)
    except KeyError as exc:
        print(exc.args[0], file=sys.stderr)
        return 2

    print(f"Race Strategy Optimiser v{__version__}")
    print("=" * 56)
    print(f"Track: {track.name} (Difficulty: {difficulty_score(track)}/10)")

    try:
        if args.recommended:
            car = recommend(track)
        else:
            car = CarConfiguration.from_kinds(
                engine=args.engine,
                tyre=args.tyre,
                aero_kit=args.aero,
                capacity=args.capacity,
                suspension=args.suspension,
                brakes=args.brakes,
                gearbox=args.gearbox,
                traction_control=args.traction_control,
            )
        result = evaluate(car, track)
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    if not isinstance(result, Report):
        print(f"\nInvalid Configuration: {result.block_reason}")
        return 1

    _print_report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
