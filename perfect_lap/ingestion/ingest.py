"""CSV ingestion: raw text to a typed sample frame."""

import io
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple
import numpy as np
import pandas as pd

from perfect_lap.errors import EmptyOrInvalidDataError
from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.schemas.raw import TelemetryColumns
from perfect_lap.utils.io_utils import compute_text_hash
from perfect_lap.utils.logging_utils import get_logger
from .anomalies import check_plausibility, detect_standings_file, resolve_columns

logger = get_logger(__name__)


@dataclass
class IngestionStats:
    """Statistics from ingestion process."""

    input_hash: str
    total_rows: int
    resolved_columns: Dict[str, Optional[str]]
    unresolved_columns: List[str]
    missing_channels: List[str]
    unparseable_cells: int
    processing_time_sec: float
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


def read_raw_csv(text: str) -> pd.DataFrame:
    """Read delimited text into a frame of strings.

    Rows with more fields than the header are truncated to the header width;
    short rows are padded with NaN.

    Raises:
        EmptyOrInvalidDataError: If the text has no header row
    """
    try:
        header_only = pd.read_csv(io.StringIO(text), nrows=0)
    except pd.errors.EmptyDataError as e:
        raise EmptyOrInvalidDataError("Telemetry file is empty") from e

    width = len(header_only.columns)

    def truncate(bad_line: List[str]) -> List[str]:
        return bad_line[:width]

    return pd.read_csv(
        io.StringIO(text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
        engine="python",
        on_bad_lines=truncate,
    )


def ingest_telemetry_text(
    text: str,
    config: AnalysisConfig,
    columns: Optional[TelemetryColumns] = None,
) -> Tuple[pd.DataFrame, IngestionStats]:
    """Parse telemetry CSV text into canonical samples.

    Args:
        text: UTF-8 CSV text with a header row
        config: Run configuration
        columns: Alias table (defaults to TelemetryColumns())

    Returns:
        (frame, stats) tuple. The frame has one float64 column per
        TelemetrySample field and one row per input row, in input order.

    Raises:
        WrongFileKindError: If the headers identify a standings file
        EmptyOrInvalidDataError: If no plausible signal is found
    """
    start_time = datetime.now()
    columns = columns or TelemetryColumns()

    raw = read_raw_csv(text)
    raw.columns = [str(c).strip() for c in raw.columns]

    duplicated = raw.columns.duplicated()
    if duplicated.any():
        logger.warning(
            f"Duplicate headers after stripping, keeping first: "
            f"{sorted(set(raw.columns[duplicated]))}"
        )
        raw = raw.loc[:, ~duplicated]
    headers = list(raw.columns)

    logger.info(f"Read {len(raw):,} rows x {len(headers)} columns")

    detect_standings_file(
        headers,
        columns.standings_vocabulary,
        min_matches=config.standings_header_min_matches,
    )

    mapping = resolve_columns(headers, columns)

    frame = pd.DataFrame(index=raw.index)
    unparseable = 0
    for canonical in columns.canonical_columns:
        header = mapping.get(canonical)
        if header is None:
            frame[canonical] = np.zeros(len(raw), dtype=np.float64)
            continue

        cells = raw[header]
        values = pd.to_numeric(cells.str.strip(), errors="coerce")
        values = values.where(np.isfinite(values))
        bad = values.isna() & cells.notna() & (cells.str.strip() != "")
        unparseable += int(bad.sum())
        frame[canonical] = values.fillna(0.0).astype(np.float64)

    frame = frame.reset_index(drop=True)

    if unparseable:
        logger.warning(f"{unparseable:,} unparseable cells defaulted to 0")

    missing = check_plausibility(frame, sample_rows=config.plausibility_sample_rows)

    stats = IngestionStats(
        input_hash=compute_text_hash(text),
        total_rows=len(frame),
        resolved_columns=mapping,
        unresolved_columns=[name for name, header in mapping.items() if header is None],
        missing_channels=missing,
        unparseable_cells=unparseable,
        processing_time_sec=(datetime.now() - start_time).total_seconds(),
    )

    logger.info(f"Ingested {stats.total_rows:,} samples (hash {stats.input_hash[:12]})")

    return frame, stats


def parse_telemetry_csv(text: str, config: AnalysisConfig) -> pd.DataFrame:
    """Parse telemetry CSV text, returning only the sample frame."""
    frame, _ = ingest_telemetry_text(text, config)
    return frame

