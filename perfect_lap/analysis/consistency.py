"""Lap-to-lap consistency scoring."""

from typing import List
import numpy as np

from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap
from perfect_lap.schemas.results import ConsistencyMetrics


def analyze_consistency(laps: List[Lap], config: AnalysisConfig) -> ConsistencyMetrics:
    """Score lap time variance.

    The score starts at 100 and loses consistency_penalty_per_second points
    per second of population standard deviation, clamped to [0, 100].

    Args:
        laps: Detected laps (at least one)
        config: Run configuration

    Returns:
        ConsistencyMetrics
    """
    lap_times = np.array([lap.lap_time for lap in laps], dtype=np.float64)

    avg_lap_time = float(lap_times.mean())
    best_lap_time = float(lap_times.min())
    std_deviation = float(np.sqrt(np.mean((lap_times - avg_lap_time) ** 2)))

    score = 100.0 - std_deviation * config.consistency_penalty_per_second

    return ConsistencyMetrics(
        avg_lap_time=avg_lap_time,
        best_lap_time=best_lap_time,
        worst_lap_time=float(lap_times.max()),
        std_deviation=std_deviation,
        per_lap_deviation=[float(t - best_lap_time) for t in lap_times],
        consistency_score=float(np.clip(score, 0.0, 100.0)),
    )
