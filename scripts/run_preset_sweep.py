#!/usr/bin/env python
"""Evaluate recommended and reference setups across every preset track.

This script:

1. Loads the preset tracks.
2. Tabulates the recommended setup for each track.
3. Evaluates a fixed reference car (standard engine, medium tyres,
   standard kit, 80 l) on every track.
4. Saves both tables as CSV under ``results/``.

Usage
-----
::

    python scripts/run_preset_sweep.py
"""

from __future__ import annotations

import os
import sys

# Ensure the project root is on the import path.
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from race_optimiser.config import load_track_presets  # noqa: E402
from race_optimiser.core.car import CarConfiguration  # noqa: E402
from race_optimiser.core.sweep import (  # noqa: E402
    evaluate_across_tracks,
    recommendation_table,
)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

RESULTS_DIR: str = os.path.join(_project_root, "results")
RECOMMENDATIONS_PATH: str = os.path.join(RESULTS_DIR, "recommended_setups.csv")
SWEEP_PATH: str = os.path.join(RESULTS_DIR, "reference_car_sweep.csv")

REFERENCE_CAR = CarConfiguration.from_kinds(
    engine="standard",
    tyre="medium",
    aero_kit="standard",
    capacity=80.0,
)


# ---------------------------------------------------------------------------
# Main pipeline
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the preset sweep and save the tables."""
    print("=" * 60)
    print("PRESET TRACK SWEEP")
    print("=" * 60)
    print()

    # -- Step 1: Load presets -----------------------------------------------
    tracks = load_track_presets()
    print(f"[1/3] Loaded {len(tracks)} preset tracks.")
    print()

    # -- Step 2: Recommendations ---------------------------------------------
    print("[2/3] Tabulating recommended setups")
    recommendations = recommendation_table(tracks)
    print(recommendations.to_string())
    print()

    # -- Step 3: Reference car sweep -----------------------------------------
    print("[3/3] Evaluating reference car on every track")
    sweep = evaluate_across_tracks(REFERENCE_CAR, tracks)
    print(sweep.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    print()

    os.makedirs(RESULTS_DIR, exist_ok=True)
    recommendations.to_csv(RECOMMENDATIONS_PATH)
    sweep.to_csv(SWEEP_PATH, index=False)
    print(f"Results saved to {RECOMMENDATIONS_PATH} and {SWEEP_PATH}")


if __name__ == "__main__":
    main()
