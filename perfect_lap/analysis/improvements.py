"""Ranking of coaching items from all analyzer outputs."""

from typing import List, Optional
import numpy as np
import pandas as pd

from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.results import (
    BrakingZone,
    ConsistencyMetrics,
    CornerObservation,
    ImprovementArea,
    Priority,
    SectorStat,
    SpeedDeficitPoint,
)
from perfect_lap.utils.logging_utils import get_logger

logger = get_logger(__name__)


def pace_priority(time_gain: float, config: AnalysisConfig) -> Priority:
    if time_gain > config.pace_high_threshold:
        return Priority.HIGH
    if time_gain > config.pace_medium_threshold:
        return Priority.MEDIUM
    return Priority.LOW


def pace_items(
    sector_stats: List[SectorStat],
    speed_deficits: List[SpeedDeficitPoint],
    config: AnalysisConfig,
) -> List[ImprovementArea]:
    items = []
    for stat in sector_stats:
        if stat.time_gain <= config.pace_loss_threshold:
            continue

        deficit = next((d for d in speed_deficits if d.sector == stat.sector_name), None)
        if deficit is not None:
            description = (
                f"Losing {stat.time_gain:.3f}s in {stat.sector_name}. {deficit.description}."
            )
        else:
            description = (
                f"Losing {stat.time_gain:.3f}s in {stat.sector_name} compared to your best."
            )

        items.append(
            ImprovementArea(
                area=f"{stat.sector_name} Pace",
                sector=stat.sector_name,
                time_loss=stat.time_gain,
                description=description,
                recommendation=(
                    "Focus on maintaining higher minimum speeds through corners "
                    "and earlier throttle application."
                ),
                priority=pace_priority(stat.time_gain, config),
            )
        )
    return items


def consistency_item(
    consistency: ConsistencyMetrics, config: AnalysisConfig
) -> Optional[ImprovementArea]:
    if consistency.consistency_score >= config.consistency_alert_score:
        return None

    return ImprovementArea(
        area="Consistency",
        sector="All",
        time_loss=consistency.std_deviation,
        description=(
            f"Lap times vary by {consistency.std_deviation:.2f}s "
            f"(score: {consistency.consistency_score:.0f}/100)."
        ),
        recommendation=(
            "Work on repeatable reference points for braking and turn-in "
            "to improve consistency."
        ),
        priority=Priority.HIGH,
    )


def _bucketed(records: pd.DataFrame, bucket: float):
    """Group records by (sector, distance bucket) in first-seen order."""
    records = records.assign(bucket=np.floor(records["distance"] / bucket) * bucket)
    return records.groupby(["sector", "bucket"], sort=False)


def braking_items(
    braking_zones: List[BrakingZone], config: AnalysisConfig
) -> List[ImprovementArea]:
    if not braking_zones:
        return []

    records = pd.DataFrame([{"sector": z.sector, "distance": z.distance} for z in braking_zones])

    items = []
    for (sector, _), group in _bucketed(records, config.distance_bucket):
        if len(group) < 2:
            continue

        spread = float(group["distance"].max() - group["distance"].min())
        if spread <= config.braking_spread_threshold:
            continue

        items.append(
            ImprovementArea(
                area="Braking Consistency",
                sector=sector,
                time_loss=spread / 100,
                description=(
                    f"Braking point varies by {spread:.0f}{config.distance_unit} in {sector}."
                ),
                recommendation=(
                    "Establish fixed reference points for braking zones to improve consistency."
                ),
                priority=Priority.MEDIUM,
            )
        )
    return items


def corner_items(
    corners: List[CornerObservation], config: AnalysisConfig
) -> List[ImprovementArea]:
    if not corners:
        return []

    records = pd.DataFrame(
        [{"sector": c.sector, "distance": c.distance, "min_speed": c.min_speed} for c in corners]
    )

    items = []
    for (sector, _), group in _bucketed(records, config.distance_bucket):
        if len(group) < 2:
            continue

        spread = float(group["min_speed"].max() - group["min_speed"].min())
        if spread <= config.corner_spread_threshold:
            continue

        items.append(
            ImprovementArea(
                area="Corner Speed",
                sector=sector,
                time_loss=spread / 50,
                description=(
                    f"Minimum speed varies by {spread:.1f} {config.speed_unit} "
                    f"between laps in {sector}."
                ),
                recommendation=(
                    "Work on carrying more speed through the corner with smoother "
                    "inputs and better line."
                ),
                priority=(
                    Priority.HIGH if spread > config.corner_spread_high_threshold else Priority.MEDIUM
                ),
            )
        )
    return items


def rank_improvement_areas(
    sector_stats: List[SectorStat],
    consistency: ConsistencyMetrics,
    braking_zones: List[BrakingZone],
    corners: List[CornerObservation],
    speed_deficits: List[SpeedDeficitPoint],
    config: AnalysisConfig,
) -> List[ImprovementArea]:
    """Build the prioritized coaching agenda.

    Items are sorted by priority (high first), then by descending
    time_loss, and truncated to max_improvement_areas.
    """
    items = pace_items(sector_stats, speed_deficits, config)

    item = consistency_item(consistency, config)
    if item is not None:
        items.append(item)

    items.extend(braking_items(braking_zones, config))
    items.extend(corner_items(corners, config))

    items.sort(key=lambda a: (a.priority.rank, -a.time_loss))

    logger.info(
        f"Ranked {len(items)} improvement areas, keeping {min(len(items), config.max_improvement_areas)}"
    )

    return items[: config.max_improvement_areas]
