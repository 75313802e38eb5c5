"""작업 소요 시간 계산 및 지연 등급 판정."""
from datetime import time, timedelta
from typing import Optional, Union

from joblog.core.config import Settings, get_settings
from joblog.core.timeofday import TIME_FORMAT, as_time, elapsed
from joblog.schemas import JobReport, JobStatus, Severity


def calculate_duration(
    start: Union[time, str],
    end: Union[time, str],
    fmt: str = TIME_FORMAT,
) -> timedelta:
    """
    START → END 소요 시간.

    날짜 없는 시각끼리의 차이이며, 음수면 자정을 넘긴 것으로 보고 24시간을 더한다.
        calculate_duration("09:15:30", "09:17:45") → 2m15s
        calculate_duration("23:45:00", "01:15:00") → 1h30m
    """
    return elapsed(as_time(start, fmt), as_time(end, fmt))


def classify(duration: timedelta, settings: Optional[Settings] = None) -> Severity:
    """임계값 초과 여부 판정 (초과 기준, 같으면 하위 등급)."""
    settings = settings or get_settings()
    if duration > settings.error_threshold:
        return Severity.ERROR
    if duration > settings.warning_threshold:
        return Severity.WARNING
    return Severity.INFO


def build_report(job_id: str, status: JobStatus, settings: Optional[Settings] = None) -> JobReport:
    """JobStatus 로부터 리포트 생성. 한쪽만 있으면 INCOMPLETE."""
    settings = settings or get_settings()
    if not status.is_complete:
        return JobReport(job_id=job_id, severity=Severity.INCOMPLETE, missing=status.missing)

    duration = calculate_duration(status.start, status.end)
    severity = classify(duration, settings)
    threshold = None
    if severity == Severity.ERROR:
        threshold = settings.error_threshold_minutes
    elif severity == Severity.WARNING:
        threshold = settings.warning_threshold_minutes
    return JobReport(job_id=job_id, severity=severity, duration=duration, threshold_minutes=threshold)
