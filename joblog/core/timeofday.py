"""시각(time-of-day) 유틸리티.

로그의 타임스탬프는 날짜 없이 HH:MM:SS 만 가지므로 datetime 대신 time 을 다룬다.
두 시각의 차이는 하루(24h) 안에서만 의미가 있고, 음수면 자정을 넘긴 것으로 본다.
"""
import re
from datetime import datetime, date, time, timedelta
from typing import Union

TIME_FORMAT = "%H:%M:%S"
ONE_DAY = timedelta(hours=24)

_HHMMSS = re.compile(r"^\d{2}:\d{2}:\d{2}$", re.ASCII)


def parse_time_of_day(raw: str, fmt: str = TIME_FORMAT) -> time:
    """'HH:MM:SS' 문자열을 time 으로 변환. 형식 오류 시 ValueError."""
    if fmt == TIME_FORMAT and not _HHMMSS.match(raw):
        raise ValueError(f"expected HH:MM:SS, got {raw!r}")
    return datetime.strptime(raw, fmt).time()


def as_time(value: Union[time, str], fmt: str = TIME_FORMAT) -> time:
    if isinstance(value, time):
        return value
    return parse_time_of_day(value, fmt)


def elapsed(start: time, end: time) -> timedelta:
    """start → end 경과 시간. 음수면 24시간을 더한다 (자정 통과)."""
    delta = datetime.combine(date.min, end) - datetime.combine(date.min, start)
    if delta < timedelta(0):
        delta += ONE_DAY
    return delta


def format_duration(duration: timedelta) -> str:
    """경과 시간 문자열. 예: 45s, 2m15s, 1h30m0s."""
    total = int(duration.total_seconds())
    if total == 0:
        return "0s"
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"
