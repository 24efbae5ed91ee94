"""Braking and acceleration zone extraction."""

from typing import List, Tuple
import numpy as np
import pandas as pd

from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap
from perfect_lap.schemas.results import AccelerationZone, BrakingZone
from perfect_lap.utils.logging_utils import get_logger

logger = get_logger(__name__)

UNKNOWN_SECTOR = "Unknown"


def find_zones(active: np.ndarray, debounce_samples: int = 3) -> List[Tuple[int, int]]:
    """Find runs of active samples.

    A zone opens on the first active sample and is committed when the
    signal goes inactive, if it lasted more than debounce_samples samples.
    A zone still open at the last sample is not committed.

    Args:
        active: Boolean array, one entry per sample
        debounce_samples: Minimum run length (exclusive)

    Returns:
        List of half-open (start, end) index ranges
    """
    zones = []
    in_zone = False
    zone_start = 0

    for i, is_active in enumerate(active):
        if is_active and not in_zone:
            zone_start = i
            in_zone = True
        elif not is_active and in_zone:
            if i - zone_start > debounce_samples:
                zones.append((zone_start, i))
            in_zone = False

    return zones


def _zone_summary(samples: pd.DataFrame, start: int, end: int, config: AnalysisConfig) -> dict:
    zone = samples.iloc[start:end]
    distance = float(zone["lap_distance"].iloc[len(zone) // 2])
    sector = config.sector_for_distance(distance)

    return {
        "sector": sector.name if sector else UNKNOWN_SECTOR,
        "distance": distance,
        "entry_speed": float(zone["speed"].iloc[0]),
        "exit_speed": float(zone["speed"].iloc[-1]),
        "zone": zone,
    }


def analyze_braking_zones(laps: List[Lap], config: AnalysisConfig) -> List[BrakingZone]:
    """Extract braking zones (front brake pressure above threshold) per lap."""
    zones = []
    for lap in laps:
        active = (lap.samples["front_brake_pressure"] > config.braking_pressure_threshold).to_numpy()

        for start, end in find_zones(active, config.zone_debounce_samples):
            summary = _zone_summary(lap.samples, start, end, config)
            zones.append(
                BrakingZone(
                    sector=summary["sector"],
                    distance=summary["distance"],
                    entry_speed=summary["entry_speed"],
                    exit_speed=summary["exit_speed"],
                    avg_pressure=float(summary["zone"]["front_brake_pressure"].mean()),
                    lap_number=lap.lap_number,
                )
            )

    logger.info(f"Found {len(zones)} braking zones over {len(laps)} laps")
    return zones


def analyze_acceleration_zones(laps: List[Lap], config: AnalysisConfig) -> List[AccelerationZone]:
    """Extract acceleration zones (high throttle, brakes off) per lap."""
    zones = []
    for lap in laps:
        samples = lap.samples
        active = (
            (samples["throttle_position"] > config.acceleration_throttle_threshold)
            & (samples["front_brake_pressure"] < config.acceleration_brake_ceiling)
        ).to_numpy()

        for start, end in find_zones(active, config.zone_debounce_samples):
            summary = _zone_summary(samples, start, end, config)
            zones.append(
                AccelerationZone(
                    sector=summary["sector"],
                    distance=summary["distance"],
                    entry_speed=summary["entry_speed"],
                    exit_speed=summary["exit_speed"],
                    avg_throttle=float(summary["zone"]["throttle_position"].mean()),
                    lap_number=lap.lap_number,
                )
            )

    logger.info(f"Found {len(zones)} acceleration zones over {len(laps)} laps")
    return zones
