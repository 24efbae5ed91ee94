"""Track layout and analysis threshold schemas."""

import math
from typing import Optional, Tuple, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from perfect_lap.conf.settings import Settings


class SectorDefinition(BaseModel):
    """A fixed distance range of the circuit."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Sector label (e.g., S1)", min_length=1)
    start_distance: float = Field(..., description="Inclusive start distance", ge=0)
    end_distance: float = Field(..., description="Exclusive end distance (may be inf)")

    def contains(self, distance: float) -> bool:
        """Whether distance falls in [start_distance, end_distance)."""
        return self.start_distance <= distance < self.end_distance


class AnalysisConfig(BaseModel):
    """Immutable configuration threaded through every analysis stage.

    The sector tuple must partition [0, inf) in order: the first sector
    starts at 0, each sector ends where the next begins, and the last one
    is open-ended.
    """

    model_config = ConfigDict(frozen=True)

    sectors: Tuple[SectorDefinition, ...] = Field(..., min_length=1)

    # Ingestion
    plausibility_sample_rows: int = Field(10, gt=0)
    standings_header_min_matches: int = Field(3, gt=0)

    # Lap detection
    lap_reset_high_threshold: float = 3000.0
    lap_reset_low_threshold: float = 200.0
    min_lap_samples: int = Field(10, ge=0)

    # Sectors and drafting
    min_sector_samples: int = Field(2, ge=2)
    drafting_speed_threshold: float = 162.0

    # Zones
    braking_pressure_threshold: float = 0.3
    acceleration_throttle_threshold: float = 0.7
    acceleration_brake_ceiling: float = 0.1
    zone_debounce_samples: int = Field(3, ge=0)

    # Corners
    min_corner_samples: int = Field(5, gt=0)

    # Speed deficits
    speed_deficit_sample_points: int = Field(5, gt=0)
    speed_deficit_threshold: float = 5.0

    # Consistency
    consistency_penalty_per_second: float = 10.0

    # Improvement ranking
    pace_loss_threshold: float = 0.1
    pace_medium_threshold: float = 0.15
    pace_high_threshold: float = 0.3
    consistency_alert_score: float = 70.0
    distance_bucket: float = Field(100.0, gt=0)
    braking_spread_threshold: float = 30.0
    corner_spread_threshold: float = 3.0
    corner_spread_high_threshold: float = 8.0
    max_improvement_areas: int = Field(8, gt=0)

    # Display units
    speed_unit: str = "km/h"
    distance_unit: str = "m"

    @model_validator(mode="after")
    def check_partition(self) -> "AnalysisConfig":
        names = [s.name for s in self.sectors]
        if len(set(names)) != len(names):
            raise ValueError(f"Sector names must be unique: {names}")

        if self.sectors[0].start_distance != 0:
            raise ValueError("First sector must start at distance 0")

        for current, following in zip(self.sectors, self.sectors[1:]):
            if current.end_distance != following.start_distance:
                raise ValueError(
                    f"Sectors {current.name} and {following.name} leave a gap or overlap "
                    f"({current.end_distance} != {following.start_distance})"
                )

        for sector in self.sectors:
            if sector.start_distance >= sector.end_distance:
                raise ValueError(f"Sector {sector.name} has an empty distance range")

        if not math.isinf(self.sectors[-1].end_distance):
            raise ValueError("Last sector must be open-ended (end_distance = inf)")

        return self

    @property
    def straight_sector_name(self) -> str:
        """Name of the opening straight, exempt from the drafting filter."""
        return self.sectors[0].name

    def sector_for_distance(self, distance: float) -> Optional[SectorDefinition]:
        """Return the sector containing distance, or None (negative distances)."""
        for sector in self.sectors:
            if sector.contains(distance):
                return sector
        return None

    def sector_by_name(self, name: str) -> Optional[SectorDefinition]:
        for sector in self.sectors:
            if sector.name == name:
                return sector
        return None

    @classmethod
    def from_settings(cls, settings: "Settings", **overrides) -> "AnalysisConfig":
        """Build the run configuration from process settings.

        Args:
            settings: Settings instance
            **overrides: Field values taking precedence over settings

        Returns:
            AnalysisConfig
        """
        from perfect_lap.conf.track_layouts import load_track_layout

        values = dict(
            sectors=load_track_layout(settings.track_layout, settings.track_layouts_file),
            lap_reset_high_threshold=settings.lap_reset_high_threshold,
            lap_reset_low_threshold=settings.lap_reset_low_threshold,
            min_lap_samples=settings.min_lap_samples,
            drafting_speed_threshold=settings.drafting_speed_threshold,
            braking_pressure_threshold=settings.braking_pressure_threshold,
            acceleration_throttle_threshold=settings.acceleration_throttle_threshold,
            acceleration_brake_ceiling=settings.acceleration_brake_ceiling,
            zone_debounce_samples=settings.zone_debounce_samples,
            speed_deficit_threshold=settings.speed_deficit_threshold,
            consistency_alert_score=settings.consistency_alert_score,
            max_improvement_areas=settings.max_improvement_areas,
        )
        values.update(overrides)
        return cls(**values)
