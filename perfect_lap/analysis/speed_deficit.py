"""Speed deficits: where the average lap falls short of the best one."""

from typing import List
import numpy as np

from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap, Sector
from perfect_lap.schemas.results import SpeedDeficitPoint
from perfect_lap.transform.sectors import sector_samples


def sample_indices(length: int, points: int = 5) -> List[int]:
    """Evenly spaced indices into a sequence of the given length.

    Returns at most points indices starting at 0, spaced length // points
    apart (at least 1).
    """
    if length <= 0:
        return []
    step = max(1, length // points)
    return list(range(0, length, step))[:points]


def analyze_speed_deficits(
    laps: List[Lap],
    best_sectors: List[Sector],
    config: AnalysisConfig,
) -> List[SpeedDeficitPoint]:
    """Compare speed across laps at sampled points of each winning sector.

    Each lap's speed trace through the sector is truncated to the shortest
    trace; sectors seen on fewer than two laps are skipped.

    Args:
        laps: Detected laps
        best_sectors: Winning sectors from the synthesizer
        config: Run configuration

    Returns:
        Points where best speed exceeds average speed by more than
        speed_deficit_threshold
    """
    deficits = []
    for best in best_sectors:
        definition = config.sector_by_name(best.name)
        if definition is None:
            continue

        traces = []
        for lap in laps:
            speeds = sector_samples(lap, definition)["speed"].to_numpy()
            if len(speeds) > 0:
                traces.append(speeds)

        if len(traces) < 2:
            continue

        min_length = min(len(t) for t in traces)
        aligned = np.vstack([t[:min_length] for t in traces])
        best_distances = best.samples["lap_distance"].to_numpy()

        for i in sample_indices(min_length, config.speed_deficit_sample_points):
            speeds_at_point = aligned[:, i]
            avg_speed = float(speeds_at_point.mean())
            best_speed = float(speeds_at_point.max())
            speed_loss = best_speed - avg_speed

            if speed_loss <= config.speed_deficit_threshold:
                continue

            if len(best_distances):
                distance = float(best_distances[min(i, len(best_distances) - 1)])
            else:
                distance = definition.start_distance

            deficits.append(
                SpeedDeficitPoint(
                    sector=best.name,
                    distance=distance,
                    speed_loss=speed_loss,
                    best_speed=best_speed,
                    avg_speed=avg_speed,
                    description=(
                        f"{speed_loss:.1f} {config.speed_unit} slower than best "
                        f"at {distance:.0f}{config.distance_unit}"
                    ),
                )
            )

    return deficits
