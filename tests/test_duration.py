"""소요 시간 계산 및 등급 판정 테스트."""
from datetime import time, timedelta

import pytest

from joblog.core.config import Settings
from joblog.core.timeofday import format_duration, parse_time_of_day
from joblog.schemas import EventType, JobStatus, Severity
from joblog.services.duration import build_report, calculate_duration, classify


class TestCalculateDuration:
    """소요 시간 계산."""

    def test_same_day(self):
        assert calculate_duration("09:15:30", "09:17:45") == timedelta(minutes=2, seconds=15)

    def test_crosses_midnight(self):
        """자정 통과 시 24시간 보정."""
        assert calculate_duration("23:45:00", "01:15:00") == timedelta(hours=1, minutes=30)

    def test_accepts_time_objects(self):
        assert calculate_duration(time(10, 0, 0), time(10, 0, 0)) == timedelta(0)

    def test_invalid_text_raises(self):
        with pytest.raises(ValueError):
            calculate_duration("10:00", "11:00:00")


class TestFormatDuration:
    """경과 시간 문자열."""

    @pytest.mark.parametrize("delta, expected", [
        (timedelta(0), "0s"),
        (timedelta(seconds=45), "45s"),
        (timedelta(minutes=2, seconds=15), "2m15s"),
        (timedelta(minutes=6), "6m0s"),
        (timedelta(hours=1, minutes=30), "1h30m0s"),
        (timedelta(hours=23, seconds=5), "23h0m5s"),
    ])
    def test_format(self, delta, expected):
        assert format_duration(delta) == expected

    def test_parse_time_of_day(self):
        assert parse_time_of_day("00:00:01") == time(0, 0, 1)


class TestClassify:
    """임계값 판정 (초과 기준)."""

    @pytest.mark.parametrize("minutes, expected", [
        (3, Severity.INFO),
        (5, Severity.INFO),
        (6, Severity.WARNING),
        (10, Severity.WARNING),
        (11, Severity.ERROR),
    ])
    def test_default_thresholds(self, settings, minutes, expected):
        assert classify(timedelta(minutes=minutes), settings) == expected

    def test_just_over_threshold(self, settings):
        assert classify(timedelta(minutes=5, seconds=1), settings) == Severity.WARNING
        assert classify(timedelta(minutes=10, seconds=1), settings) == Severity.ERROR

    def test_custom_thresholds(self):
        custom = Settings(warning_threshold_minutes=1, error_threshold_minutes=2)
        assert classify(timedelta(minutes=3), custom) == Severity.ERROR

    def test_invalid_threshold_order(self):
        with pytest.raises(ValueError):
            Settings(warning_threshold_minutes=10, error_threshold_minutes=5)


class TestBuildReport:
    """리포트 생성 및 메시지."""

    def test_info_report(self, settings):
        report = build_report("PID001", JobStatus(start=time(9, 15, 30), end=time(9, 17, 45)), settings)

        assert report.severity == Severity.INFO
        assert report.message() == "Job PID001 duration: 2m15s"

    def test_warning_report(self, settings):
        report = build_report("J2", JobStatus(start=time(9, 0, 0), end=time(9, 6, 0)), settings)

        assert report.severity == Severity.WARNING
        assert report.message() == "Warning: Job J2 took longer than 5 minutes: 6m0s"

    def test_error_report(self, settings):
        report = build_report("J3", JobStatus(start=time(9, 0, 0), end=time(9, 11, 0)), settings)

        assert report.severity == Severity.ERROR
        assert report.message() == "Error: Job J3 took longer than 10 minutes: 11m0s"

    def test_incomplete_missing_end(self, settings):
        report = build_report("J4", JobStatus(start=time(9, 0, 0)), settings)

        assert report.severity == Severity.INCOMPLETE
        assert report.missing == EventType.END
        assert report.duration is None
        assert report.message() == "Incomplete job J4: missing END"

    def test_incomplete_missing_start(self, settings):
        report = build_report("J5", JobStatus(end=time(9, 0, 0)), settings)

        assert report.message() == "Incomplete job J5: missing START"

    def test_message_uses_configured_threshold(self):
        custom = Settings(warning_threshold_minutes=2, error_threshold_minutes=30)
        report = build_report("J6", JobStatus(start=time(9, 0, 0), end=time(9, 3, 0)), custom)

        assert report.message() == "Warning: Job J6 took longer than 2 minutes: 3m0s"
