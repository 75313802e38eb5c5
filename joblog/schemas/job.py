from datetime import time, timedelta
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from joblog.core.timeofday import TIME_FORMAT, format_duration


class EventType(str, Enum):
    START = "START"
    END = "END"


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    INCOMPLETE = "INCOMPLETE"


class JobEvent(BaseModel):
    """로그 한 줄에서 파싱된 작업 이벤트"""
    timestamp: time
    description: str
    status: EventType
    job_id: str = Field(min_length=1)
    line_no: Optional[int] = None

    @property
    def timestamp_text(self) -> str:
        return self.timestamp.strftime(TIME_FORMAT)


class JobStatus(BaseModel):
    """job_id 별 START/END 누적 상태"""
    start: Optional[time] = None
    end: Optional[time] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def missing(self) -> Optional[EventType]:
        if self.start is None:
            return EventType.START
        if self.end is None:
            return EventType.END
        return None

    def get(self, status: EventType) -> Optional[time]:
        return self.start if status == EventType.START else self.end

    def set(self, status: EventType, value: time) -> None:
        if status == EventType.START:
            self.start = value
        else:
            self.end = value


class JobReport(BaseModel):
    """작업 하나에 대한 최종 판정"""
    job_id: str
    severity: Severity
    duration: Optional[timedelta] = None
    missing: Optional[EventType] = None
    # 판정에 사용된 임계값 (분)
    threshold_minutes: Optional[int] = None

    def message(self) -> str:
        if self.severity == Severity.INCOMPLETE:
            return f"Incomplete job {self.job_id}: missing {self.missing.value}"
        elapsed = format_duration(self.duration)
        if self.severity == Severity.ERROR:
            return f"Error: Job {self.job_id} took longer than {self.threshold_minutes} minutes: {elapsed}"
        if self.severity == Severity.WARNING:
            return f"Warning: Job {self.job_id} took longer than {self.threshold_minutes} minutes: {elapsed}"
        return f"Job {self.job_id} duration: {elapsed}"
