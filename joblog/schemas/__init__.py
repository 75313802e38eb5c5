from .job import (
    EventType,
    Severity,
    JobEvent,
    JobStatus,
    JobReport,
)

__all__ = [
    "EventType",
    "Severity",
    "JobEvent",
    "JobStatus",
    "JobReport",
]
