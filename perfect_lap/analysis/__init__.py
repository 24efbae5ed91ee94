"""Perfect-lap synthesis, analyzers and improvement ranking."""

from .synthesis import synthesize_perfect_lap, collect_candidates, SynthesizedLap
from .consistency import analyze_consistency
from .zones import find_zones, analyze_braking_zones, analyze_acceleration_zones
from .corners import analyze_corners
from .speed_deficit import analyze_speed_deficits, sample_indices
from .improvements import rank_improvement_areas
from .coaching import build_coaching_summary
from .pipeline import (
    analyze_laps,
    analyze_samples,
    analyze_telemetry,
    analyze_file,
    save_result,
)

__all__ = [
    # Synthesis
    "synthesize_perfect_lap",
    "collect_candidates",
    "SynthesizedLap",
    # Analyzers
    "analyze_consistency",
    "find_zones",
    "analyze_braking_zones",
    "analyze_acceleration_zones",
    "analyze_corners",
    "analyze_speed_deficits",
    "sample_indices",
    # Ranking
    "rank_improvement_areas",
    # Reporting
    "build_coaching_summary",
    # Pipeline
    "analyze_laps",
    "analyze_samples",
    "analyze_telemetry",
    "analyze_file",
    "save_result",
]
