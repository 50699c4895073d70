"""Race Setup Dashboard.

Interactive front end built with Streamlit and Plotly.  Pick a preset
track and a car setup to see the compatibility verdict, the race
projection, the comparison against the recommended setup, and how the
same car fares across every preset circuit.

Launch with::

    streamlit run dashboard/app.py
"""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from race_optimiser.config import load_track_presets
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
from race_optimiser.core.estimator import EnergyProjection, estimate_race_metrics
from race_optimiser.core.reporter import Report, evaluate
from race_optimiser.core.sweep import evaluate_across_tracks, recommendation_table
from race_optimiser.core.track import TrackProfile, difficulty_score
from race_optimiser.core.tyre import TyreKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _options(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def _sidebar_car() -> CarConfiguration:
    """Collect a car configuration from the sidebar widgets."""
    st.sidebar.header("Car Setup")

    engine = st.sidebar.selectbox("Engine", _options(EngineKind))
    tyre = st.sidebar.selectbox("Tyres", _options(TyreKind), index=1)
    aero = st.sidebar.selectbox("Aero kit", _options(AeroKitKind))
    capacity: float = st.sidebar.slider(
        "Fuel / battery capacity",
        min_value=30.0,
        max_value=150.0,
        value=70.0,
        step=5.0,
    )

    extended: bool = st.sidebar.toggle("Extended components", value=False)
    if not extended:
        return CarConfiguration.from_kinds(engine, tyre, aero, capacity)

    return CarConfiguration.from_kinds(
        engine,
        tyre,
        aero,
        capacity,
        suspension=st.sidebar.selectbox("Suspension", _options(SuspensionSetup)),
        brakes=st.sidebar.selectbox("Brakes", _options(BrakeCompound)),
        gearbox=st.sidebar.selectbox("Gearbox", _options(GearboxRatio)),
        traction_control=st.sidebar.selectbox(
            "Traction control", _options(TractionControlLevel)
        ),
    )


def _lap_time_chart(report: Report) -> go.Figure:
    """Bar chart of the chosen vs. recommended lap time."""
    optimal_metrics = estimate_race_metrics(report.optimal, report.track)
    fig = go.Figure(
        go.Bar(
            x=["Your setup", "Recommended"],
            y=[report.metrics.lap_time_minutes, optimal_metrics.lap_time_minutes],
            marker_color=["#e10600", "#1e1e1e"],
        )
    )
    fig.update_layout(
        title="Lap Time (minutes)",
        yaxis_title="Minutes",
        height=350,
    )
    return fig


# ---------------------------------------------------------------------------
# Streamlit app
# ---------------------------------------------------------------------------


def main() -> None:
    """Entry point for the Streamlit dashboard."""
    st.set_page_config(page_title="Race Setup Optimiser", layout="wide")
    st.title("Race Setup Optimiser")

    tracks: list[TrackProfile] = load_track_presets()
    track_names = [t.name for t in tracks]

    st.sidebar.header("Track")
    selected: str = st.sidebar.selectbox("Preset track", track_names)
    track = tracks[track_names.index(selected)]

    try:
        car = _sidebar_car()
    except InvalidInputError as exc:
        st.error(f"Invalid input: {exc}")
        return

    st.caption(f"Difficulty: {difficulty_score(track)}/10")

    # ── Section 1: Verdict ───────────────────────────────────────────────
    st.header("1 -- Compatibility")

    result = evaluate(car, track)
    if not isinstance(result, Report):
        st.error(f"Invalid configuration: {result.block_reason}")
        return

    st.success("Setup is valid.")
    for warning in result.verdict.warnings:
        st.warning(warning)

    # ── Section 2: Race projection ───────────────────────────────────────
    st.header("2 -- Race Projection")

    metrics = result.metrics
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Lap time (min)", f"{metrics.lap_time_minutes:.2f}")
    col2.metric("Race time (min)", f"{metrics.total_race_time_minutes:.2f}")
    col3.metric("Laps", metrics.total_laps)
    col4.metric("Tyre changes", metrics.tyre_changes_estimated)

    resource = metrics.resource
    col5, col6, col7 = st.columns(3)
    if isinstance(resource, EnergyProjection):
        col5.metric("kWh / 100 km", f"{resource.energy_consumption_kwh_per_100km:.2f}")
        col6.metric("Energy needed (kWh)", f"{resource.total_energy_needed_kwh:.2f}")
        col7.metric("Charging stops", resource.charging_stops_required)
    else:
        col5.metric("Efficiency (km/l)", f"{resource.fuel_efficiency_km_per_liter:.2f}")
        col6.metric("Fuel needed (l)", f"{resource.fuel_needed_liters:.2f}")
        col7.metric("Fuel stops", resource.fuel_stops_required)

    st.plotly_chart(_lap_time_chart(result), use_container_width=True)

    # ── Section 3: Comparison with the recommended setup ─────────────────
    st.header("3 -- Recommended Setup")

    st.table(
        [
            {
                "Field": c.field,
                "Yours": c.chosen,
                "Recommended": c.recommended,
                "Changed": "yes" if c.changed else "",
            }
            for c in result.comparisons
        ]
    )
    for line in result.advisories:
        st.write(f"- {line}")
    st.info(result.rationale)

    # ── Section 4: All presets ───────────────────────────────────────────
    st.header("4 -- Across All Presets")

    st.dataframe(evaluate_across_tracks(car, tracks), use_container_width=True)
    st.subheader("Recommended setups")
    st.dataframe(recommendation_table(tracks), use_container_width=True)


if __name__ == "__main__":
    main()
