"""Perfect-lap synthesis from the best non-drafting sector of each lap."""

from dataclasses import dataclass
from typing import Dict, List

from perfect_lap.errors import NoValidSectorsError
from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap, Sector
from perfect_lap.schemas.results import ChartPoint, SectorStat
from perfect_lap.transform.sectors import extract_sector, is_drafting
from perfect_lap.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class SynthesizedLap:
    """Winning sectors and their statistics, in sector definition order."""

    best_sectors: List[Sector]
    sector_stats: List[SectorStat]
    theoretical_time: float
    chart_data: List[ChartPoint]


def collect_candidates(laps: List[Lap], config: AnalysisConfig) -> Dict[str, List[Sector]]:
    """Non-drafting sector instances per definition name, in lap order."""
    candidates = {}
    for definition in config.sectors:
        valid = []
        for lap in laps:
            sector = extract_sector(lap, definition, min_samples=config.min_sector_samples)
            if sector is None:
                continue
            if is_drafting(sector, config):
                logger.warning(
                    f"  {definition.name} lap {lap.lap_number}: excluded as drafting "
                    f"(max speed {sector.max_speed:.1f} > {config.drafting_speed_threshold:.1f})"
                )
                continue
            valid.append(sector)
        candidates[definition.name] = valid
    return candidates


def synthesize_perfect_lap(laps: List[Lap], config: AnalysisConfig) -> SynthesizedLap:
    """Combine the fastest valid sector of each definition into one lap.

    Args:
        laps: Detected laps
        config: Run configuration

    Returns:
        SynthesizedLap

    Raises:
        NoValidSectorsError: If no definition has a non-drafting instance
    """
    logger.info(f"Synthesizing perfect lap from {len(laps)} laps")

    candidates = collect_candidates(laps, config)

    best_sectors = []
    sector_stats = []
    for definition in config.sectors:
        valid = candidates[definition.name]
        if not valid:
            logger.warning(f"  {definition.name}: no valid sector on any lap")
            continue

        # min() keeps the first of equal times, i.e. the earliest lap
        best = min(valid, key=lambda s: s.time)
        mean_time = sum(s.time for s in valid) / len(valid)

        best_sectors.append(best)
        sector_stats.append(
            SectorStat(
                sector_name=best.name,
                best_time=best.time,
                lap_number=best.lap_number,
                time_gain=max(0.0, mean_time - best.time),
                avg_speed=float(best.samples["speed"].mean()),
            )
        )

        logger.info(
            f"  {best.name}: best {best.time:.3f}s on lap {best.lap_number} "
            f"({len(valid)} valid laps, mean {mean_time:.3f}s)"
        )

    if not best_sectors:
        raise NoValidSectorsError(
            "Could not find any valid sectors: every sector was missing or drafting-affected"
        )

    chart_data = [
        ChartPoint(distance=float(distance), speed=float(speed), sector_name=sector.name)
        for sector in best_sectors
        for distance, speed in zip(sector.samples["lap_distance"], sector.samples["speed"])
    ]

    theoretical_time = sum(s.time for s in best_sectors)
    logger.info(f"  Theoretical best: {theoretical_time:.3f}s")

    return SynthesizedLap(
        best_sectors=best_sectors,
        sector_stats=sector_stats,
        theoretical_time=theoretical_time,
        chart_data=chart_data,
    )
