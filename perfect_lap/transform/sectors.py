"""Sector slicing and the drafting filter."""

from typing import Optional
import pandas as pd

from perfect_lap.schemas.config import AnalysisConfig, SectorDefinition
from perfect_lap.schemas.laps import Lap, Sector
from perfect_lap.utils.time_utils import elapsed


def sector_samples(lap: Lap, definition: SectorDefinition) -> pd.DataFrame:
    """Samples of a lap with lap_distance in [start, end), positional index."""
    distance = lap.samples["lap_distance"]
    mask = (distance >= definition.start_distance) & (distance < definition.end_distance)
    return lap.samples[mask].reset_index(drop=True)


def extract_sector(
    lap: Lap,
    definition: SectorDefinition,
    min_samples: int = 2,
) -> Optional[Sector]:
    """Cut one sector out of a lap.

    Args:
        lap: Source lap
        definition: Sector definition
        min_samples: Fewer matching samples than this yields no sector

    Returns:
        Sector, or None if the lap has too few samples in the range
    """
    data = sector_samples(lap, definition)
    if len(data) < min_samples:
        return None

    return Sector(
        name=definition.name,
        start_distance=definition.start_distance,
        end_distance=definition.end_distance,
        time=elapsed(data["timestamp"].to_numpy()),
        samples=data,
        lap_number=lap.lap_number,
        max_speed=float(data["speed"].max()),
    )


def is_drafting(sector: Sector, config: AnalysisConfig) -> bool:
    """Whether a sector's top speed shows a slipstream tow.

    High speed on the opening straight is normal, so the first sector of
    the layout is never flagged.
    """
    if sector.name == config.straight_sector_name:
        return False
    return sector.max_speed > config.drafting_speed_threshold
