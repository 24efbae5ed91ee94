"""Analysis result schemas.

Serialized with camelCase keys, which is the record shape the API,
persistence and coaching layers consume.
"""

from enum import Enum
from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ResultModel(BaseModel):
    """Base for result records: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Priority(str, Enum):
    """Priority levels for improvement areas."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank (0 = most urgent)."""
        return {"high": 0, "medium": 1, "low": 2}[self.value]


class SectorStat(ResultModel):
    """Best time for one sector across all laps."""

    sector_name: str = Field(..., description="Sector label")
    best_time: float = Field(..., description="Fastest non-drafting sector time (s)")
    lap_number: int = Field(..., description="Lap the best time came from", ge=1)
    time_gain: float = Field(
        ..., description="Mean non-drafting sector time minus best time (s)", ge=0
    )
    avg_speed: float = Field(..., description="Mean speed over the best sector")


class ChartPoint(ResultModel):
    """One point of the synthesized lap speed trace."""

    distance: float
    speed: float
    sector_name: str


class ConsistencyMetrics(ResultModel):
    """Lap-to-lap variance summary."""

    avg_lap_time: float = Field(..., description="Mean lap time (s)")
    best_lap_time: float = Field(..., description="Fastest lap time (s)")
    worst_lap_time: float = Field(..., description="Slowest lap time (s)")
    std_deviation: float = Field(..., description="Population std dev of lap times (s)", ge=0)
    per_lap_deviation: List[float] = Field(
        default_factory=list, description="Lap time minus best lap time, per lap"
    )
    consistency_score: float = Field(..., description="0-100 consistency index", ge=0, le=100)


class BrakingZone(ResultModel):
    """A debounced stretch of brake application."""

    sector: str
    distance: float = Field(..., description="Lap distance at the zone midpoint")
    entry_speed: float
    exit_speed: float
    avg_pressure: float
    lap_number: int


class AccelerationZone(ResultModel):
    """A debounced stretch of throttle application without braking."""

    sector: str
    distance: float = Field(..., description="Lap distance at the zone midpoint")
    entry_speed: float
    exit_speed: float
    avg_throttle: float
    lap_number: int


class CornerObservation(ResultModel):
    """Apex (minimum speed point) of a sector on one lap."""

    sector: str
    distance: float = Field(..., description="Lap distance of the apex")
    min_speed: float
    lap_number: int
    entry_speed: float
    exit_speed: float


class SpeedDeficitPoint(ResultModel):
    """A point where the average lap is markedly slower than the best."""

    sector: str
    distance: float
    speed_loss: float = Field(..., description="Best speed minus average speed", gt=0)
    best_speed: float
    avg_speed: float
    description: str


class ImprovementArea(ResultModel):
    """A ranked coaching item."""

    area: str = Field(..., description="Short label (e.g., 'S2 Pace')")
    sector: str
    time_loss: float = Field(..., description="Severity used for ranking")
    description: str
    recommendation: str
    priority: Priority


class PerfectLapResult(ResultModel):
    """Everything computed for one analysis run."""

    theoretical_time: float = Field(..., description="Sum of best sector times (s)")
    chart_data: List[ChartPoint] = Field(default_factory=list)
    sector_stats: List[SectorStat] = Field(default_factory=list)
    consistency: ConsistencyMetrics
    improvement_areas: List[ImprovementArea] = Field(default_factory=list)
    braking_zones: List[BrakingZone] = Field(default_factory=list)
    acceleration_zones: List[AccelerationZone] = Field(default_factory=list)
    corner_analysis: List[CornerObservation] = Field(default_factory=list)
    speed_deficits: List[SpeedDeficitPoint] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Output record with camelCase keys and JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)
