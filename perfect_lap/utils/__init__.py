"""Utility modules for telemetry analysis."""

from .logging_utils import setup_logger, get_logger
from .time_utils import format_lap_time, elapsed
from .io_utils import (
    ensure_dir,
    compute_text_hash,
    read_text,
    save_json,
    load_json,
)

__all__ = [
    # Logging
    "setup_logger",
    "get_logger",
    # Time
    "format_lap_time",
    "elapsed",
    # IO
    "ensure_dir",
    "compute_text_hash",
    "read_text",
    "save_json",
    "load_json",
]
