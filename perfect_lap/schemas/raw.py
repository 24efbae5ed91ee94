"""Raw telemetry sample schemas."""

from typing import Dict, Iterator, List
from pydantic import BaseModel, ConfigDict, Field
import pandas as pd


class TelemetrySample(BaseModel):
    """One parsed telemetry row.

    Missing or unparseable channels are stored as 0.0, never None.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "timestamp": 1532.45,
                "lap_distance": 1204.7,
                "speed": 148.2,
                "steering_angle": -12.5,
                "front_brake_pressure": 0.0,
                "throttle_position": 0.98,
            }
        },
    )

    timestamp: float = Field(0.0, description="Sample time in seconds")
    lap_distance: float = Field(0.0, description="Distance from start/finish line (m)")
    speed: float = Field(0.0, description="Vehicle speed (km/h)")
    steering_angle: float = Field(0.0, description="Steering wheel angle (deg)")
    front_brake_pressure: float = Field(0.0, description="Front brake pressure")
    throttle_position: float = Field(0.0, description="Throttle pedal position (0-1)")


class TelemetryColumns(BaseModel):
    """Canonical sample columns and the header aliases that map onto them.

    Aliases are listed in priority order. The first alias that matches a
    header (exact, then case-insensitive, then substring) wins.
    """

    aliases: Dict[str, List[str]] = Field(
        default_factory=lambda: {
            "timestamp": ["timestamp", "time", "elapsed_time", "Time_s"],
            "lap_distance": [
                "Laptrigger_lapdist_dls",
                "lap_distance",
                "lapdist",
                "LapDist",
                "distance",
            ],
            "speed": ["Speed", "speed", "vCar", "speed_kph"],
            "steering_angle": ["Steering_Angle", "steering_angle", "steering", "SteeringWheelAngle"],
            "front_brake_pressure": ["pbrake_f", "brake_pressure_front", "brake_front", "brake"],
            "throttle_position": ["aps", "ath", "throttle_position", "throttle"],
        },
        description="Canonical column -> header aliases (priority order)",
    )

    # Race results exports share none of the telemetry channels but are the
    # file most often uploaded by mistake.
    standings_vocabulary: List[str] = Field(
        default=[
            "POSITION",
            "NUMBER",
            "STATUS",
            "LAPS",
            "TOTAL_TIME",
            "GAP_FIRST",
            "GAP_PREVIOUS",
            "FL_LAPNUM",
            "FL_TIME",
            "FL_KPH",
            "CLASS",
            "VEHICLE",
        ],
        description="Header names that identify a race-standings file",
    )

    @property
    def canonical_columns(self) -> List[str]:
        """Canonical column names in TelemetrySample field order."""
        return list(TelemetrySample.model_fields.keys())


def iter_samples(frame: pd.DataFrame) -> Iterator[TelemetrySample]:
    """Yield TelemetrySample models for each row of a sample frame."""
    columns = list(TelemetrySample.model_fields.keys())
    for row in frame[columns].itertuples(index=False):
        yield TelemetrySample(**dict(zip(columns, map(float, row))))
