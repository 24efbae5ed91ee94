"""Apex speed extraction per sector."""

from typing import List

from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap
from perfect_lap.schemas.results import CornerObservation
from perfect_lap.transform.sectors import sector_samples


def analyze_corners(laps: List[Lap], config: AnalysisConfig) -> List[CornerObservation]:
    """Find the minimum-speed sample of every sector on every lap.

    Sectors with fewer than min_corner_samples samples on a lap are skipped.
    On ties the earliest sample is the apex.
    """
    corners = []
    for lap in laps:
        for definition in config.sectors:
            data = sector_samples(lap, definition)
            if len(data) < config.min_corner_samples:
                continue

            apex = data.loc[data["speed"].idxmin()]
            corners.append(
                CornerObservation(
                    sector=definition.name,
                    distance=float(apex["lap_distance"]),
                    min_speed=float(apex["speed"]),
                    lap_number=lap.lap_number,
                    entry_speed=float(data["speed"].iloc[0]),
                    exit_speed=float(data["speed"].iloc[-1]),
                )
            )

    return corners
