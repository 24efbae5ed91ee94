"""Synthetic telemetry builders shared by the test modules."""

import numpy as np
import pandas as pd
import pytest

from perfect_lap.conf.track_layouts import load_track_layout
from perfect_lap.schemas.config import AnalysisConfig

# Header names as written by the GR Cup data logger
LOGGER_HEADERS = {
    "timestamp": "timestamp",
    "lap_distance": "Laptrigger_lapdist_dls",
    "speed": "Speed",
    "steering_angle": "Steering_Angle",
    "front_brake_pressure": "pbrake_f",
    "throttle_position": "aps",
}


def make_lap(
    n=200,
    t0=0.0,
    duration=100.0,
    start=0.0,
    end=3990.0,
    speed=120.0,
    brake=0.0,
    throttle=0.5,
    steering=0.0,
):
    """One lap of evenly spaced samples as a canonical sample frame."""
    return pd.DataFrame(
        {
            "timestamp": np.linspace(t0, t0 + duration, n),
            "lap_distance": np.linspace(start, end, n),
            "speed": np.broadcast_to(np.asarray(speed, dtype=float), (n,)).copy(),
            "steering_angle": np.broadcast_to(np.asarray(steering, dtype=float), (n,)).copy(),
            "front_brake_pressure": np.broadcast_to(np.asarray(brake, dtype=float), (n,)).copy(),
            "throttle_position": np.broadcast_to(np.asarray(throttle, dtype=float), (n,)).copy(),
        }
    )


def make_session(durations, gap=0.5, **lap_kwargs):
    """Consecutive laps with the given durations, as one sample frame."""
    frames = []
    t0 = 0.0
    for duration in durations:
        frames.append(make_lap(t0=t0, duration=duration, **lap_kwargs))
        t0 += duration + gap
    return pd.concat(frames, ignore_index=True)


def to_csv_text(frame, headers=None):
    """Render a canonical sample frame as logger CSV text."""
    return frame.rename(columns=headers or LOGGER_HEADERS).to_csv(index=False)


@pytest.fixture
def config():
    return AnalysisConfig(sectors=tuple(load_track_layout("cota")))


@pytest.fixture
def session_text():
    return to_csv_text(make_session([100.0, 98.0, 99.0, 101.0]))
