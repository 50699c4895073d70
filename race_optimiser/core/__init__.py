"""Core decision and estimation modules for the race setup engine."""

from race_optimiser.core.aero import (
    AERO_KITS,
    DOWNFORCE_KIT,
    EXTREME_KIT,
    GROUND_EFFECT_KIT,
    LOW_DRAG_KIT,
    STANDARD_KIT,
    WET_WEATHER_KIT,
    AeroKitKind,
    AeroKitSpec,
    get_aero_kit,
)
from race_optimiser.core.car import CarConfiguration
from race_optimiser.core.components import (
    BrakeCompound,
    GearboxRatio,
    SuspensionSetup,
    TractionControlLevel,
)
from race_optimiser.core.engine import (
    ELECTRIC_ENGINE,
    ENGINES,
    HYBRID_ENGINE,
    STANDARD_ENGINE,
    TURBO_ENGINE,
    V8_ENGINE,
    EngineKind,
    EngineSpec,
    get_engine,
)
from race_optimiser.core.errors import InvalidInputError
from race_optimiser.core.estimator import (
    EnergyProjection,
    FuelProjection,
    RaceMetrics,
    estimate_race_metrics,
    fuel_efficiency_km_per_liter,
    lap_time_minutes,
    overall_speed,
    project_resources,
    total_laps,
    total_race_time_minutes,
    tyre_changes_estimated,
)
from race_optimiser.core.recommender import recommend
from race_optimiser.core.reporter import (
    FieldComparison,
    Report,
    TrackDiagnostics,
    evaluate,
    explain_setup_choice,
)
from race_optimiser.core.sweep import evaluate_across_tracks, recommendation_table
from race_optimiser.core.track import TrackProfile, difficulty_score
from race_optimiser.core.tyre import HARD, MEDIUM, SOFT, TYRES, TyreKind, TyreSpec, get_tyre
from race_optimiser.core.validator import ValidationVerdict, check_compatibility

__all__ = [
    "AERO_KITS",
    "AeroKitKind",
    "AeroKitSpec",
    "BrakeCompound",
    "CarConfiguration",
    "DOWNFORCE_KIT",
    "ELECTRIC_ENGINE",
    "ENGINES",
    "EXTREME_KIT",
    "EnergyProjection",
    "EngineKind",
    "EngineSpec",
    "FieldComparison",
    "FuelProjection",
    "GROUND_EFFECT_KIT",
    "GearboxRatio",
    "HARD",
    "HYBRID_ENGINE",
    "InvalidInputError",
    "LOW_DRAG_KIT",
    "MEDIUM",
    "RaceMetrics",
    "Report",
    "SOFT",
    "STANDARD_ENGINE",
    "STANDARD_KIT",
    "SuspensionSetup",
    "TURBO_ENGINE",
    "TYRES",
    "TrackDiagnostics",
    "TrackProfile",
    "TractionControlLevel",
    "TyreKind",
    "TyreSpec",
    "V8_ENGINE",
    "ValidationVerdict",
    "WET_WEATHER_KIT",
    "check_compatibility",
    "difficulty_score",
    "estimate_race_metrics",
    "evaluate",
    "evaluate_across_tracks",
    "explain_setup_choice",
    "fuel_efficiency_km_per_liter",
    "get_aero_kit",
    "get_engine",
    "get_tyre",
    "lap_time_minutes",
    "overall_speed",
    "project_resources",
    "recommend",
    "recommendation_table",
    "total_laps",
    "total_race_time_minutes",
    "tyre_changes_estimated",
]
