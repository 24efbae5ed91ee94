"""Theoretical best lap synthesis and coaching metrics from lap telemetry."""

from perfect_lap.analysis import (
    analyze_telemetry,
    analyze_file,
    save_result,
    build_coaching_summary,
)
from perfect_lap.errors import (
    TelemetryAnalysisError,
    WrongFileKindError,
    EmptyOrInvalidDataError,
    NoLapsDetectedError,
    NoValidSectorsError,
)
from perfect_lap.schemas import AnalysisConfig, SectorDefinition, PerfectLapResult
from perfect_lap.utils.time_utils import format_lap_time

__version__ = "0.1.0"

__all__ = [
    "analyze_telemetry",
    "analyze_file",
    "save_result",
    "build_coaching_summary",
    "format_lap_time",
    "AnalysisConfig",
    "SectorDefinition",
    "PerfectLapResult",
    "TelemetryAnalysisError",
    "WrongFileKindError",
    "EmptyOrInvalidDataError",
    "NoLapsDetectedError",
    "NoValidSectorsError",
]
