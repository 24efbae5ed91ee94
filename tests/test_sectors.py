"""Tests for sector extraction, the drafting filter and layout config."""

import math

import pandas as pd
import pytest
from pydantic import ValidationError

from conftest import make_lap
from perfect_lap.conf.settings import Settings
from perfect_lap.conf.track_layouts import load_track_layout
from perfect_lap.schemas.config import AnalysisConfig, SectorDefinition
from perfect_lap.schemas.laps import Lap, Sector
from perfect_lap.transform import extract_sector, is_drafting, sector_samples


def _lap(frame, lap_number=1):
    return Lap(
        lap_number=lap_number,
        start_index=0,
        end_index=len(frame) - 1,
        samples=frame,
        lap_time=float(frame["timestamp"].iloc[-1] - frame["timestamp"].iloc[0]),
    )


def _sector(name, max_speed):
    return Sector(
        name=name,
        start_distance=0.0,
        end_distance=1.0,
        time=1.0,
        samples=pd.DataFrame(),
        lap_number=1,
        max_speed=max_speed,
    )


def test_extract_sector_filters_half_open_range(config):
    frame = make_lap(n=5, duration=4.0, start=0.0, end=2000.0, speed=[90, 100, 110, 120, 130])
    # distances 0, 500, 1000, 1500, 2000
    sector = extract_sector(_lap(frame), config.sectors[0])

    assert sector is not None
    assert sector.name == "S1"
    assert sector.samples["lap_distance"].tolist() == [0.0, 500.0]
    assert sector.time == pytest.approx(1.0)
    assert sector.max_speed == 100.0
    assert sector.lap_number == 1

    s2 = extract_sector(_lap(frame), config.sectors[1])
    assert s2.samples["lap_distance"].tolist() == [1000.0, 1500.0, 2000.0]


def test_open_ended_last_sector(config):
    frame = make_lap(n=4, duration=3.0, start=3500.0, end=9500.0)
    sector = extract_sector(_lap(frame), config.sectors[-1])

    assert math.isinf(sector.end_distance)
    assert len(sector.samples) == 4
    assert sector.time == pytest.approx(3.0)


def test_fewer_than_two_samples_is_no_sector(config):
    frame = make_lap(n=3, start=900.0, end=1100.0)
    # distances 900, 1000, 1100: a single S1 sample
    assert extract_sector(_lap(frame), config.sectors[0]) is None
    assert extract_sector(_lap(frame), config.sectors[2]) is None


def test_sector_samples_have_positional_index(config):
    frame = make_lap(n=10, start=0.0, end=1800.0)
    data = sector_samples(_lap(frame), config.sectors[1])
    assert data.index.tolist() == list(range(len(data)))


def test_drafting_only_outside_the_opening_straight(config):
    assert is_drafting(_sector("S2", 165.0), config)
    assert not is_drafting(_sector("S2", 162.0), config)
    assert not is_drafting(_sector("S2", 150.0), config)
    assert not is_drafting(_sector("S1", 190.0), config)


def test_drafting_exemption_follows_first_definition():
    layout = AnalysisConfig(
        sectors=(
            SectorDefinition(name="Main Straight", start_distance=0, end_distance=800),
            SectorDefinition(name="S1", start_distance=800, end_distance=float("inf")),
        )
    )
    assert not is_drafting(_sector("Main Straight", 200.0), layout)
    assert is_drafting(_sector("S1", 200.0), layout)


def test_cota_layout_partitions_distance(config):
    names = [s.name for s in config.sectors]
    assert names == ["S1", "S2", "S3", "S4"]

    for distance in [0.0, 999.9, 1000.0, 2199.0, 2200.0, 3500.0, 1e9]:
        matches = [s for s in config.sectors if s.contains(distance)]
        assert len(matches) == 1

    assert config.sector_for_distance(1000.0).name == "S2"
    assert config.sector_for_distance(-1.0) is None


@pytest.mark.parametrize(
    "sectors",
    [
        [(0, 1000), (1100, float("inf"))],  # gap
        [(0, 1000), (900, float("inf"))],  # overlap
        [(100, 1000), (1000, float("inf"))],  # does not start at 0
        [(0, 1000), (1000, 5000)],  # closed last sector
    ],
)
def test_invalid_partitions_rejected(sectors):
    with pytest.raises(ValidationError):
        AnalysisConfig(
            sectors=tuple(
                SectorDefinition(name=f"S{i}", start_distance=a, end_distance=b)
                for i, (a, b) in enumerate(sectors, start=1)
            )
        )


def test_duplicate_sector_names_rejected():
    with pytest.raises(ValidationError):
        AnalysisConfig(
            sectors=(
                SectorDefinition(name="S1", start_distance=0, end_distance=10),
                SectorDefinition(name="S1", start_distance=10, end_distance=float("inf")),
            )
        )


def test_config_is_immutable(config):
    with pytest.raises(ValidationError):
        config.drafting_speed_threshold = 200.0


def test_unknown_layout_rejected():
    with pytest.raises(ValueError, match="not found"):
        load_track_layout("nordschleife")


def test_layout_from_custom_file(tmp_path):
    layouts = tmp_path / "layouts.yaml"
    layouts.write_text(
        "barber:\n"
        "  sectors:\n"
        "    - {name: A, start: 0, end: 1200}\n"
        "    - {name: B, start: 1200}\n"
    )
    sectors = load_track_layout("barber", layouts)

    assert [s.name for s in sectors] == ["A", "B"]
    assert math.isinf(sectors[1].end_distance)


def test_config_from_settings():
    settings = Settings(drafting_speed_threshold=170.0, max_improvement_areas=5)
    config = AnalysisConfig.from_settings(settings, zone_debounce_samples=4)

    assert config.drafting_speed_threshold == 170.0
    assert config.max_improvement_areas == 5
    assert config.zone_debounce_samples == 4
    assert len(config.sectors) == 4


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PERFECT_LAP_DRAFTING_SPEED_THRESHOLD", "155")
    assert Settings().drafting_speed_threshold == 155.0
