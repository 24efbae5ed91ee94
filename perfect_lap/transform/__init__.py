"""Transformation modules: laps and sectors."""

from .lap_detection import detect_lapdist_resets, detect_laps
from .sectors import sector_samples, extract_sector, is_drafting

__all__ = [
    # Lap detection
    "detect_lapdist_resets",
    "detect_laps",
    # Sectors
    "sector_samples",
    "extract_sector",
    "is_drafting",
]
