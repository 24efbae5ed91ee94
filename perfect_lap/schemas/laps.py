"""Lap and sector containers produced during a single analysis run."""

from dataclasses import dataclass
import pandas as pd


@dataclass(frozen=True)
class Lap:
    """A lap cut from the sample stream by the lap detector.

    samples is a copy of rows [start_index, end_index] of the stream with a
    fresh positional index.
    """

    lap_number: int
    start_index: int
    end_index: int
    samples: pd.DataFrame
    lap_time: float

    @property
    def sample_count(self) -> int:
        return len(self.samples)


@dataclass(frozen=True)
class Sector:
    """One lap's slice of a sector definition."""

    name: str
    start_distance: float
    end_distance: float
    time: float
    samples: pd.DataFrame
    lap_number: int
    max_speed: float
