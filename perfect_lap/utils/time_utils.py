"""Lap-time formatting and timing helpers."""

import math
from typing import Sequence

import numpy as np


def format_lap_time(seconds: float) -> str:
    """Format seconds as M:SS.mmm.

    Negative times, which only come from degraded timestamps, get a
    leading '-'.

    Args:
        seconds: Lap or sector time in seconds

    Returns:
        String like "1:30.125"

    Raises:
        ValueError: If seconds is not finite
    """
    if not math.isfinite(seconds):
        raise ValueError(f"Cannot format lap time: {seconds}")

    total_ms = int(round(abs(seconds) * 1000))
    sign = "-" if seconds < 0 and total_ms > 0 else ""
    minutes, remainder_ms = divmod(total_ms, 60_000)
    secs, millis = divmod(remainder_ms, 1000)

    return f"{sign}{minutes}:{secs:02d}.{millis:03d}"


def elapsed(timestamps: Sequence[float] | np.ndarray) -> float:
    """Time between first and last sample (0.0 for fewer than two samples)."""
    if len(timestamps) < 2:
        return 0.0
    return float(timestamps[-1] - timestamps[0])
