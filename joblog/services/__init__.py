from .line_parser import LineParser, ParsedLine
from .duration import calculate_duration, classify, build_report
from .reconciler import Reconciler
from .log_processor import LogProcessor, ProcessResult

__all__ = [
    "LineParser",
    "ParsedLine",
    "calculate_duration",
    "classify",
    "build_report",
    "Reconciler",
    "LogProcessor",
    "ProcessResult",
]
