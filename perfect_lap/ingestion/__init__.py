"""Ingestion module for telemetry CSV text."""

from .ingest import (
    ingest_telemetry_text,
    parse_telemetry_csv,
    read_raw_csv,
    IngestionStats,
)
from .anomalies import (
    detect_standings_file,
    match_header,
    resolve_columns,
    check_plausibility,
)

__all__ = [
    "ingest_telemetry_text",
    "parse_telemetry_csv",
    "read_raw_csv",
    "IngestionStats",
    "detect_standings_file",
    "match_header",
    "resolve_columns",
    "check_plausibility",
]
