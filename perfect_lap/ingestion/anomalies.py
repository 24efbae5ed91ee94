"""Header and data sanity checks for telemetry ingestion."""

from typing import Dict, List, Optional
import pandas as pd

from perfect_lap.errors import EmptyOrInvalidDataError, WrongFileKindError
from perfect_lap.schemas.raw import TelemetryColumns
from perfect_lap.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Channels whose presence makes a file worth analyzing at all
PLAUSIBILITY_CHANNELS = ("timestamp", "speed", "lap_distance")


def detect_standings_file(
    headers: List[str],
    vocabulary: List[str],
    min_matches: int = 3,
) -> None:
    """Reject race-standings exports uploaded in place of telemetry.

    Headers are also split on ';' because results exports are usually
    semicolon delimited and arrive here as a single header cell.

    Args:
        headers: Header names (stripped)
        vocabulary: Standings header names
        min_matches: Number of exact matches that identifies the file

    Raises:
        WrongFileKindError: If min_matches or more vocabulary names appear
    """
    tokens = set()
    for header in headers:
        tokens.update(part.strip() for part in header.split(";"))

    matches = sorted(tokens & set(vocabulary))

    if len(matches) >= min_matches:
        logger.error(f"Header matches race standings vocabulary: {matches}")
        raise WrongFileKindError(
            "This looks like a race results/standings file, not telemetry "
            f"(found columns {', '.join(matches)}). Upload the per-sample telemetry CSV."
        )


def match_header(headers: List[str], aliases: List[str]) -> Optional[str]:
    """Find the header for the first alias that matches.

    Each alias is tried exact, then case-insensitive, then as a
    case-insensitive substring in either direction.

    Args:
        headers: Header names (stripped)
        aliases: Candidate names in priority order

    Returns:
        Matching header, or None
    """
    for alias in aliases:
        if alias in headers:
            return alias

        alias_lower = alias.lower()
        for header in headers:
            if header.lower() == alias_lower:
                return header

        for header in headers:
            header_lower = header.lower()
            if header_lower and (alias_lower in header_lower or header_lower in alias_lower):
                return header

    return None


def resolve_columns(
    headers: List[str], columns: TelemetryColumns
) -> Dict[str, Optional[str]]:
    """Map each canonical channel to a header.

    Args:
        headers: Header names (stripped)
        columns: Alias table

    Returns:
        Dict canonical name -> header (None when unresolved)
    """
    mapping = {}
    for canonical, aliases in columns.aliases.items():
        header = match_header(headers, aliases)
        mapping[canonical] = header

        if header is None:
            logger.warning(f"No header found for '{canonical}' - defaulting channel to 0")
        elif header != aliases[0]:
            logger.info(f"  Resolved '{canonical}' -> '{header}'")

    return mapping


def check_plausibility(frame: pd.DataFrame, sample_rows: int = 10) -> List[str]:
    """Check that the leading rows carry real signal.

    Args:
        frame: Parsed sample frame (canonical columns)
        sample_rows: Number of leading rows to inspect

    Returns:
        Channels with no positive value in the inspected rows

    Raises:
        EmptyOrInvalidDataError: If none of the channels has a positive value
    """
    head = frame.head(sample_rows)

    present = {
        channel: bool((head[channel] > 0).any()) if len(head) else False
        for channel in PLAUSIBILITY_CHANNELS
    }

    if not any(present.values()):
        raise EmptyOrInvalidDataError(
            f"No valid timestamp, speed or lap distance values in the first "
            f"{sample_rows} rows ({len(frame)} rows total). Check the CSV format."
        )

    missing = [channel for channel, ok in present.items() if not ok]
    for channel in missing:
        logger.warning(
            f"Channel '{channel}' has no positive values in the first {sample_rows} rows"
        )

    return missing
