"""Plain-text analysis summary handed to the coaching generator."""

from typing import Optional

from perfect_lap.schemas.results import PerfectLapResult
from perfect_lap.utils.time_utils import format_lap_time


def build_coaching_summary(
    result: PerfectLapResult,
    track_name: Optional[str] = None,
    speed_unit: str = "km/h",
    max_areas: int = 3,
) -> str:
    """Render the numeric result as the context block for coaching text.

    Args:
        result: Analysis result
        track_name: Track label for the heading
        speed_unit: Unit label for average speeds
        max_areas: Number of top improvement areas to list

    Returns:
        Multi-line summary
    """
    lines = [
        f"Perfect Lap Analysis for Track: {track_name or 'Unknown Track'}",
        "",
        f"Theoretical Best Lap Time: {format_lap_time(result.theoretical_time)}",
        "",
        "Sector Breakdown:",
    ]

    for stat in result.sector_stats:
        lines.append(
            f"- {stat.sector_name}: Best Time {format_lap_time(stat.best_time)} from Lap "
            f"{stat.lap_number}. Average Speed: {stat.avg_speed:.1f} {speed_unit}. "
            f"Potential Time Gain: {stat.time_gain:.3f}s compared to average sector time."
        )

    consistency = result.consistency
    lines += [
        "",
        f"Best Lap: {format_lap_time(consistency.best_lap_time)} | "
        f"Average Lap: {format_lap_time(consistency.avg_lap_time)} | "
        f"Consistency Score: {consistency.consistency_score:.0f}/100",
    ]

    if result.improvement_areas:
        lines += ["", "Top Improvement Areas:"]
        for area in result.improvement_areas[:max_areas]:
            lines.append(f"- [{area.priority.value}] {area.area}: {area.description}")

    lines += [
        "",
        f"Total Data Points: {len(result.chart_data)}",
        f"Number of Sectors Analyzed: {len(result.sector_stats)}",
    ]

    return "\n".join(lines)
