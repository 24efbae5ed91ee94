"""End-to-end analysis: CSV text in, PerfectLapResult out."""

from pathlib import Path
from typing import List, Optional
import pandas as pd

from perfect_lap.conf.settings import settings
from perfect_lap.ingestion.ingest import ingest_telemetry_text
from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap
from perfect_lap.schemas.results import PerfectLapResult
from perfect_lap.transform.lap_detection import detect_laps
from perfect_lap.utils.io_utils import read_text, save_json
from perfect_lap.utils.logging_utils import get_logger
from perfect_lap.utils.time_utils import format_lap_time
from .consistency import analyze_consistency
from .corners import analyze_corners
from .improvements import rank_improvement_areas
from .speed_deficit import analyze_speed_deficits
from .synthesis import synthesize_perfect_lap
from .zones import analyze_acceleration_zones, analyze_braking_zones

logger = get_logger(__name__)


def analyze_laps(laps: List[Lap], config: AnalysisConfig) -> PerfectLapResult:
    """Run the synthesizer and every analyzer over detected laps.

    Raises:
        NoValidSectorsError: If no sector has a non-drafting instance
    """
    synthesized = synthesize_perfect_lap(laps, config)

    consistency = analyze_consistency(laps, config)
    braking_zones = analyze_braking_zones(laps, config)
    acceleration_zones = analyze_acceleration_zones(laps, config)
    corners = analyze_corners(laps, config)
    speed_deficits = analyze_speed_deficits(laps, synthesized.best_sectors, config)

    improvement_areas = rank_improvement_areas(
        synthesized.sector_stats,
        consistency,
        braking_zones,
        corners,
        speed_deficits,
        config,
    )

    return PerfectLapResult(
        theoretical_time=synthesized.theoretical_time,
        chart_data=synthesized.chart_data,
        sector_stats=synthesized.sector_stats,
        consistency=consistency,
        improvement_areas=improvement_areas,
        braking_zones=braking_zones,
        acceleration_zones=acceleration_zones,
        corner_analysis=corners,
        speed_deficits=speed_deficits,
    )


def analyze_samples(samples: pd.DataFrame, config: AnalysisConfig) -> PerfectLapResult:
    """Detect laps in a sample frame and analyze them.

    Raises:
        NoLapsDetectedError: If no lap is retained
        NoValidSectorsError: If no sector has a non-drafting instance
    """
    laps = detect_laps(samples, config)
    return analyze_laps(laps, config)


def analyze_telemetry(text: str, config: Optional[AnalysisConfig] = None) -> PerfectLapResult:
    """Analyze one outing of telemetry CSV text.

    Args:
        text: UTF-8 CSV text, header row first
        config: Run configuration (defaults to AnalysisConfig.from_settings(settings))

    Returns:
        PerfectLapResult

    Raises:
        WrongFileKindError, EmptyOrInvalidDataError, NoLapsDetectedError,
        NoValidSectorsError
    """
    config = config or AnalysisConfig.from_settings(settings)

    logger.info("=" * 60)
    logger.info(f"Perfect lap analysis ({len(config.sectors)} sectors)")
    logger.info("=" * 60)

    samples, stats = ingest_telemetry_text(text, config)
    result = analyze_samples(samples, config)

    logger.info("=" * 60)
    logger.info("Analysis Summary:")
    logger.info(f"  Samples: {stats.total_rows:,}")
    logger.info(f"  Laps: {len(result.consistency.per_lap_deviation)}")
    logger.info(f"  Theoretical best: {format_lap_time(result.theoretical_time)}")
    logger.info(f"  Consistency score: {result.consistency.consistency_score:.1f}")
    logger.info(f"  Improvement areas: {len(result.improvement_areas)}")
    logger.info("=" * 60)

    return result


def analyze_file(file_path: str | Path, config: Optional[AnalysisConfig] = None) -> PerfectLapResult:
    """Analyze a telemetry CSV file.

    Raises:
        FileNotFoundError: If file_path does not exist
    """
    logger.info(f"Loading telemetry from {file_path}")
    return analyze_telemetry(read_text(file_path), config)


def save_result(result: PerfectLapResult, file_path: str | Path, pretty: bool = True) -> None:
    """Write the result record as JSON."""
    save_json(result.to_dict(), file_path, pretty=pretty)
    logger.info(f"Saved analysis to {file_path}")
