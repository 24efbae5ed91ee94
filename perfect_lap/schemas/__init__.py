"""Data schemas and contracts for telemetry analysis."""

from .raw import TelemetrySample, TelemetryColumns, iter_samples
from .config import SectorDefinition, AnalysisConfig
from .laps import Lap, Sector
from .results import (
    Priority,
    SectorStat,
    ChartPoint,
    ConsistencyMetrics,
    BrakingZone,
    AccelerationZone,
    CornerObservation,
    SpeedDeficitPoint,
    ImprovementArea,
    PerfectLapResult,
)

__all__ = [
    # Raw data
    "TelemetrySample",
    "TelemetryColumns",
    "iter_samples",
    # Configuration
    "SectorDefinition",
    "AnalysisConfig",
    # Laps
    "Lap",
    "Sector",
    # Results
    "Priority",
    "SectorStat",
    "ChartPoint",
    "ConsistencyMetrics",
    "BrakingZone",
    "AccelerationZone",
    "CornerObservation",
    "SpeedDeficitPoint",
    "ImprovementArea",
    "PerfectLapResult",
]
