"""Lap boundary detection from lap distance resets.

The ECU lap counter is unreliable, so laps are cut where the lap distance
drops from near the end of the track to near the start/finish line.
"""

from typing import List
import pandas as pd

from perfect_lap.errors import NoLapsDetectedError
from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.laps import Lap
from perfect_lap.utils.logging_utils import get_logger
from perfect_lap.utils.time_utils import elapsed

logger = get_logger(__name__)


def detect_lapdist_resets(
    lapdist: pd.Series,
    high_threshold: float = 3000.0,
    low_threshold: float = 200.0,
) -> pd.Series:
    """Detect lap boundaries from track distance resets.

    Args:
        lapdist: Lap distance series (positional index)
        high_threshold: Previous sample must be above this (m)
        low_threshold: Current sample must be below this (m)

    Returns:
        Boolean series where True marks the first sample of a new lap
    """
    return (lapdist.shift(1) > high_threshold) & (lapdist < low_threshold)


def detect_laps(samples: pd.DataFrame, config: AnalysisConfig) -> List[Lap]:
    """Split the sample stream into laps.

    Segments with min_lap_samples or fewer samples are discarded as noise;
    lap numbers are assigned sequentially to retained laps only.

    Args:
        samples: Sample frame from ingestion (positional index)
        config: Run configuration

    Returns:
        Retained laps in stream order

    Raises:
        NoLapsDetectedError: If no lap is retained
    """
    logger.info(f"Detecting lap boundaries over {len(samples):,} samples")

    samples = samples.reset_index(drop=True)
    is_reset = detect_lapdist_resets(
        samples["lap_distance"],
        high_threshold=config.lap_reset_high_threshold,
        low_threshold=config.lap_reset_low_threshold,
    )
    boundary_indices = samples.index[is_reset].tolist()

    logger.info(f"  Found {len(boundary_indices)} lap distance resets")

    # Closed ranges [start, end]; the trailing range runs to end of stream
    starts = [0] + boundary_indices
    ends = [i - 1 for i in boundary_indices] + [len(samples) - 1]

    laps = []
    timestamps = samples["timestamp"].to_numpy()
    for start, end in zip(starts, ends):
        count = end - start + 1
        if count <= config.min_lap_samples:
            if count > 0:
                logger.warning(
                    f"  Discarding segment [{start}, {end}]: {count} samples "
                    f"(need > {config.min_lap_samples})"
                )
            continue

        laps.append(
            Lap(
                lap_number=len(laps) + 1,
                start_index=start,
                end_index=end,
                samples=samples.iloc[start : end + 1].reset_index(drop=True),
                lap_time=elapsed(timestamps[start : end + 1]),
            )
        )

    if not laps:
        raise NoLapsDetectedError(
            f"No valid laps detected in {len(samples):,} samples "
            f"(laps need more than {config.min_lap_samples} samples between lap distance resets)"
        )

    for lap in laps:
        logger.info(f"  Lap {lap.lap_number}: {lap.sample_count} samples, {lap.lap_time:.3f}s")

    return laps
