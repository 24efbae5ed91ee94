"""End-to-end tests for the analysis entry points and reporting."""

import math

import pytest

from conftest import make_lap, make_session, to_csv_text
from perfect_lap import (
    analyze_file,
    analyze_telemetry,
    build_coaching_summary,
    format_lap_time,
    save_result,
)
from perfect_lap.errors import (
    EmptyOrInvalidDataError,
    NoLapsDetectedError,
    TelemetryAnalysisError,
    WrongFileKindError,
)
from perfect_lap.utils.io_utils import load_json

STANDINGS_TEXT = (
    "POSITION,NUMBER,STATUS,LAPS,TOTAL_TIME,GAP_FIRST\n"
    "1,13,Classified,20,45:02.113,-\n"
    "2,7,Classified,20,45:04.870,+2.757\n"
)


def test_session_result(config, session_text):
    result = analyze_telemetry(session_text, config)

    assert [s.sector_name for s in result.sector_stats] == ["S1", "S2", "S3", "S4"]
    assert all(s.lap_number == 2 for s in result.sector_stats)
    assert result.theoretical_time == pytest.approx(196 * 98.0 / 199)
    assert result.theoretical_time == sum(s.best_time for s in result.sector_stats)

    consistency = result.consistency
    assert consistency.best_lap_time == pytest.approx(98.0)
    assert consistency.std_deviation == pytest.approx(math.sqrt(1.25))
    assert len(consistency.per_lap_deviation) == 4

    assert [a.area for a in result.improvement_areas] == ["S3 Pace", "S2 Pace", "S1 Pace", "S4 Pace"]
    assert result.braking_zones == []
    assert result.speed_deficits == []
    assert len(result.corner_analysis) == 16
    assert len(result.chart_data) == 200


def test_default_config_comes_from_settings(session_text):
    result = analyze_telemetry(session_text)
    assert len(result.sector_stats) == 4


def test_analysis_is_deterministic(config, session_text):
    first = analyze_telemetry(session_text, config).to_dict()
    second = analyze_telemetry(session_text, config).to_dict()
    assert first == second


def test_result_record_uses_camel_case(config, session_text):
    record = analyze_telemetry(session_text, config).to_dict()

    assert set(record) == {
        "theoreticalTime",
        "chartData",
        "sectorStats",
        "consistency",
        "improvementAreas",
        "brakingZones",
        "accelerationZones",
        "cornerAnalysis",
        "speedDeficits",
    }
    assert set(record["sectorStats"][0]) == {
        "sectorName",
        "bestTime",
        "lapNumber",
        "timeGain",
        "avgSpeed",
    }
    assert set(record["chartData"][0]) == {"distance", "speed", "sectorName"}
    assert "consistencyScore" in record["consistency"]
    assert record["improvementAreas"][0]["priority"] == "high"


def test_standings_file_rejected_before_lap_detection(config, monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("lap detection should not run")

    monkeypatch.setattr("perfect_lap.analysis.pipeline.detect_laps", fail)

    with pytest.raises(WrongFileKindError):
        analyze_telemetry(STANDINGS_TEXT, config)


def test_error_kinds_share_a_base(config):
    with pytest.raises(TelemetryAnalysisError):
        analyze_telemetry(STANDINGS_TEXT, config)
    with pytest.raises(EmptyOrInvalidDataError):
        analyze_telemetry("", config)
    with pytest.raises(NoLapsDetectedError):
        analyze_telemetry(to_csv_text(make_lap(n=5)), config)


def _replace_timestamp_cell(text, row, value):
    lines = text.splitlines()
    fields = lines[row + 1].split(",")
    fields[0] = value
    lines[row + 1] = ",".join(fields)
    return "\n".join(lines) + "\n"


def test_blank_timestamp_gives_best_effort_result(config):
    # Row 249 is the last S1 sample of lap 2; its time reads as 0
    text = _replace_timestamp_cell(to_csv_text(make_session([100.0, 98.0, 99.0])), 249, "")
    result = analyze_telemetry(text, config)

    s1 = result.sector_stats[0]
    assert s1.sector_name == "S1"
    assert s1.lap_number == 2
    assert s1.best_time == pytest.approx(-100.5)
    assert s1.time_gain >= 0
    assert result.theoretical_time == sum(s.best_time for s in result.sector_stats)
    assert "Best Time -1:40.500 from Lap 2" in build_coaching_summary(result)
    assert result.to_dict()["sectorStats"][0]["bestTime"] == pytest.approx(-100.5)


@pytest.mark.parametrize("cell", ["inf", "-inf", "nan"])
def test_non_finite_timestamp_keeps_score_in_range(config, cell):
    # Row 399 is the last sample of lap 2
    text = _replace_timestamp_cell(to_csv_text(make_session([100.0, 98.0, 99.0])), 399, cell)
    result = analyze_telemetry(text, config)

    consistency = result.consistency
    assert math.isfinite(consistency.std_deviation)
    assert 0.0 <= consistency.consistency_score <= 100.0
    assert consistency.best_lap_time == pytest.approx(-100.5)


def test_analyze_file(config, session_text, tmp_path):
    path = tmp_path / "session.csv"
    path.write_text("\ufeff" + session_text, encoding="utf-8")

    result = analyze_file(path, config)
    assert len(result.sector_stats) == 4

    with pytest.raises(FileNotFoundError):
        analyze_file(tmp_path / "missing.csv", config)


@pytest.mark.parametrize("pretty", [True, False])
def test_save_result_round_trips(config, session_text, tmp_path, pretty):
    result = analyze_telemetry(session_text, config)
    path = tmp_path / "out" / "result.json"

    save_result(result, path, pretty=pretty)

    loaded = load_json(path)
    assert loaded["theoreticalTime"] == pytest.approx(result.theoretical_time)
    assert len(loaded["sectorStats"]) == 4


def test_coaching_summary(config, session_text):
    result = analyze_telemetry(session_text, config)
    summary = build_coaching_summary(result, track_name="COTA")
    lines = summary.splitlines()

    assert lines[0] == "Perfect Lap Analysis for Track: COTA"
    assert f"Theoretical Best Lap Time: {format_lap_time(result.theoretical_time)}" in lines
    assert "Sector Breakdown:" in lines
    assert any(line.startswith("- S1: Best Time 0:24.131 from Lap 2.") for line in lines)
    assert "Top Improvement Areas:" in lines
    assert sum(line.startswith("- [") for line in lines) == 3
    assert lines[-2] == "Total Data Points: 200"
    assert lines[-1] == "Number of Sectors Analyzed: 4"


def test_coaching_summary_without_track_name(config, session_text):
    result = analyze_telemetry(session_text, config)
    assert build_coaching_summary(result).startswith("Perfect Lap Analysis for Track: Unknown Track")


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (90.125, "1:30.125"),
        (0.0, "0:00.000"),
        (59.9996, "1:00.000"),
        (24.1306, "0:24.131"),
        (3725.5, "62:05.500"),
        (-100.5, "-1:40.500"),
        (-0.0004, "0:00.000"),
    ],
)
def test_format_lap_time(seconds, expected):
    assert format_lap_time(seconds) == expected


@pytest.mark.parametrize("seconds", [float("nan"), float("inf"), float("-inf")])
def test_format_lap_time_rejects_invalid(seconds):
    with pytest.raises(ValueError):
        format_lap_time(seconds)
