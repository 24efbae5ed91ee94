"""Tests for lap boundary detection."""

import numpy as np
import pandas as pd
import pytest

from conftest import make_lap, make_session
from perfect_lap.errors import NoLapsDetectedError
from perfect_lap.transform import detect_lapdist_resets, detect_laps


def _stream(distances, dt=0.1):
    n = len(distances)
    return pd.DataFrame(
        {
            "timestamp": np.arange(n) * dt,
            "lap_distance": np.asarray(distances, dtype=float),
            "speed": np.full(n, 100.0),
            "steering_angle": np.zeros(n),
            "front_brake_pressure": np.zeros(n),
            "throttle_position": np.zeros(n),
        }
    )


def test_detect_lapdist_resets_flags_first_sample_of_new_lap():
    lapdist = pd.Series([2900.0, 3050.0, 3100.0, 150.0, 300.0])
    assert detect_lapdist_resets(lapdist).tolist() == [False, False, False, True, False]


def test_reset_requires_both_thresholds():
    # Drop from below the high threshold, and drop to above the low threshold
    lapdist = pd.Series([2990.0, 100.0, 3100.0, 250.0])
    assert not detect_lapdist_resets(lapdist).any()


def test_single_transition_yields_two_laps(config):
    distances = np.concatenate([np.linspace(0, 3100, 250), np.linspace(150, 2900, 250)])
    laps = detect_laps(_stream(distances), config)

    assert len(laps) == 2
    assert [lap.lap_number for lap in laps] == [1, 2]
    assert (laps[0].start_index, laps[0].end_index) == (0, 249)
    assert (laps[1].start_index, laps[1].end_index) == (250, 499)
    assert laps[0].samples["lap_distance"].iloc[-1] == 3100.0
    assert laps[1].samples["lap_distance"].iloc[0] == 150.0
    assert laps[0].lap_time == pytest.approx(24.9)


def test_short_trailing_segment_is_discarded(config):
    distances = np.concatenate([np.linspace(0, 3100, 100), np.linspace(150, 290, 8)])
    laps = detect_laps(_stream(distances), config)

    assert len(laps) == 1
    assert laps[0].sample_count == 100


def test_discarded_segments_do_not_consume_lap_numbers(config):
    distances = np.concatenate(
        [
            np.linspace(0, 3100, 50),
            np.linspace(100, 3200, 5),  # out-lap fragment
            np.linspace(50, 3500, 60),
        ]
    )
    laps = detect_laps(_stream(distances), config)

    assert [lap.lap_number for lap in laps] == [1, 2]
    assert laps[1].start_index == 55


def test_eleven_samples_is_enough(config):
    laps = detect_laps(_stream(np.linspace(0, 500, 11)), config)
    assert len(laps) == 1
    assert laps[0].lap_time == pytest.approx(1.0)


def test_no_laps_raises(config):
    with pytest.raises(NoLapsDetectedError):
        detect_laps(_stream(np.linspace(0, 500, 10)), config)


def test_empty_stream_raises(config):
    with pytest.raises(NoLapsDetectedError):
        detect_laps(_stream([]), config)


def test_laps_from_session(config):
    laps = detect_laps(make_session([100.0, 98.0, 99.0]), config)

    assert [lap.lap_time for lap in laps] == pytest.approx([100.0, 98.0, 99.0])
    assert all(lap.sample_count == 200 for lap in laps)


def test_lap_samples_have_positional_index(config):
    laps = detect_laps(make_session([100.0, 98.0]), config)
    assert laps[1].samples.index[0] == 0
    assert laps[1].samples["timestamp"].iloc[0] == pytest.approx(100.5)


def test_custom_thresholds(config):
    short_track = config.model_copy(
        update={"lap_reset_high_threshold": 900.0, "lap_reset_low_threshold": 50.0}
    )
    frame = pd.concat([make_lap(end=1000.0), make_lap(t0=101.0, end=1000.0)], ignore_index=True)

    assert len(detect_laps(frame, config)) == 1
    assert len(detect_laps(frame, short_track)) == 2
