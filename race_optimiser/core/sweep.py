"""Multi-track comparison tables.

Runs the single-track engine over a list of circuits and collects the
results into :class:`pandas.DataFrame` objects for display or export.
"""

from __future__ import annotations

import pandas as pd

from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.recommender import recommend
from race_optimiser.core.reporter import Report, evaluate
from race_optimiser.core.track import TrackProfile, difficulty_score

SWEEP_COLUMNS: list[str] = [
    "track",
    "difficulty",
    "valid",
    "block_reason",
    "warnings",
    "total_laps",
    "lap_time_min",
    "race_time_min",
    "tyre_changes",
    "stops",
    "matches_optimal",
]

RECOMMENDATION_COLUMNS: list[str] = [
    "track",
    "difficulty",
    "engine",
    "tyre",
    "aero_kit",
    "capacity",
    "suspension",
    "brakes",
    "gearbox",
    "traction_control",
]


def evaluate_across_tracks(
    car: CarConfiguration,
    tracks: list[TrackProfile],
) -> pd.DataFrame:
    """Evaluate one car on every track in *tracks*.

    Blocked setups keep their row with the block reason and empty metric
    columns.

    Args:
        car: The configuration to evaluate.
        tracks: Circuits to evaluate on, in display order.

    Returns:
        DataFrame with one row per track and the columns in
        :data:`SWEEP_COLUMNS`.
    """
    rows: list[dict] = []
    for track in tracks:
        result = evaluate(car, track)
        row: dict = {
            "track": track.name,
            "difficulty": difficulty_score(track),
            "valid": isinstance(result, Report),
            "block_reason": None,
            "warnings": 0,
            "total_laps": None,
            "lap_time_min": None,
            "race_time_min": None,
            "tyre_changes": None,
            "stops": None,
            "matches_optimal": None,
        }
        if isinstance(result, Report):
            metrics = result.metrics
            row.update(
                warnings=len(result.verdict.warnings),
                total_laps=metrics.total_laps,
                lap_time_min=metrics.lap_time_minutes,
                race_time_min=metrics.total_race_time_minutes,
                tyre_changes=metrics.tyre_changes_estimated,
                stops=metrics.stops_required,
                matches_optimal=result.matches_optimal,
            )
        else:
            row["block_reason"] = result.block_reason
        rows.append(row)

    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def recommendation_table(tracks: list[TrackProfile]) -> pd.DataFrame:
    """Tabulate the recommended setup for every track, indexed by track name."""
    records: list[dict] = []
    for track in tracks:
        optimal = recommend(track)
        records.append(
            {
                "track": track.name,
                "difficulty": difficulty_score(track),
                "engine": optimal.engine.kind.value,
                "tyre": optimal.tyre.kind.value,
                "aero_kit": optimal.aero_kit.kind.value,
                "capacity": optimal.capacity,
                "suspension": optimal.suspension.value,
                "brakes": optimal.brakes.value,
                "gearbox": optimal.gearbox.value,
                "traction_control": optimal.traction_control.value,
            }
        )
    return pd.DataFrame(records, columns=RECOMMENDATION_COLUMNS).set_index("track")
