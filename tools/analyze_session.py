"""Analyze one telemetry outing and print the theoretical best lap.

Usage:
    python tools/analyze_session.py --input data/cota_r1.csv --track cota \
        --output reports/cota_r1.json --summary
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from perfect_lap.analysis import analyze_file, build_coaching_summary, save_result
from perfect_lap.conf.settings import settings
from perfect_lap.errors import TelemetryAnalysisError
from perfect_lap.schemas.config import AnalysisConfig
from perfect_lap.utils.logging_utils import setup_logger
from perfect_lap.utils.time_utils import format_lap_time


def main() -> int:
    parser = argparse.ArgumentParser(description="Synthesize a theoretical best lap from telemetry CSV")
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to telemetry CSV file",
    )
    parser.add_argument(
        "--track",
        type=str,
        default=settings.track_layout,
        help=f"Track layout name (default: {settings.track_layout})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the full result as JSON to this path",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the coaching summary text",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args()

    logger = setup_logger("perfect_lap", log_level=args.log_level)

    config = AnalysisConfig.from_settings(settings.model_copy(update={"track_layout": args.track}))

    try:
        result = analyze_file(args.input, config)
    except FileNotFoundError as e:
        logger.error(str(e))
        return 1
    except TelemetryAnalysisError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 2

    if args.output:
        save_result(result, args.output)

    print(f"\n{'='*80}")
    print(f"Theoretical best lap: {format_lap_time(result.theoretical_time)}")
    print("=" * 80)

    for stat in result.sector_stats:
        print(
            f"  {stat.sector_name}: {format_lap_time(stat.best_time)} (lap {stat.lap_number}), "
            f"gain {stat.time_gain:.3f}s"
        )

    if result.improvement_areas:
        print("\nImprovement areas:")
        for area in result.improvement_areas:
            print(f"  [{area.priority.value:>6}] {area.area} ({area.sector}): {area.description}")

    if args.summary:
        print(f"\n{build_coaching_summary(result, track_name=args.track)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
