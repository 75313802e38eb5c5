"""로그 파일 처리 서비스 - 라인 스트리밍, 대사, 리포트 출력."""
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from joblog.core.config import Settings, get_settings
from joblog.schemas import JobReport, Severity
from joblog.services.line_parser import LineParser
from joblog.services.reconciler import Reconciler

logger = logging.getLogger(__name__)

# 리포트 등급 → 로그 레벨
SEVERITY_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.INCOMPLETE: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass
class ProcessResult:
    """처리 결과."""
    total: int = 0
    parsed: int = 0
    skipped: int = 0
    jobs: int = 0
    complete: int = 0
    incomplete: int = 0
    reports: List[JobReport] = None
    errors: List[str] = None
    read_error: Optional[str] = None

    def __post_init__(self):
        if self.reports is None:
            self.reports = []
        if self.errors is None:
            self.errors = []

    def summary(self) -> str:
        return (
            f"Processed {self.total} lines: {self.parsed} parsed, {self.skipped} skipped, "
            f"{self.jobs} jobs ({self.complete} complete, {self.incomplete} incomplete)"
        )


class LogProcessor:
    """작업 로그 처리기.

    파일을 한 줄씩 읽어 파싱 → 대사 → 리포트 순으로 처리한다.
    잘못된 라인은 진단 메시지만 남기고 건너뛴다.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.parser = LineParser(self.settings)

    def process_file(self, path: str) -> ProcessResult:
        """
        로그 파일 처리.

        파일 열기 실패(OSError)는 호출자에게 전파한다.
        읽는 도중 실패하면 그때까지 읽은 라인으로 리포트를 만들고 오류를 한 번 기록한다.

        Args:
            path: 로그 파일 경로

        Returns:
            ProcessResult 객체
        """
        with open(path, encoding=self.settings.encoding) as f:
            return self.process_lines(f)

    def process_lines(self, lines: Iterable[str]) -> ProcessResult:
        """라인 이터러블 처리 (파일 객체 또는 문자열 리스트)."""
        result = ProcessResult()
        reconciler = Reconciler(self.settings)

        try:
            for line_no, raw in enumerate(lines, start=1):
                result.total += 1
                self._process_line(raw.rstrip("\r\n"), line_no, reconciler, result)
        except (OSError, UnicodeDecodeError) as e:
            result.read_error = f"Error reading log file: {e}"

        if result.read_error:
            logger.error(result.read_error)

        for report in reconciler.finalize():
            self._emit(report, result)

        result.jobs = len(reconciler.registry)
        result.complete = reconciler.complete_count
        result.incomplete = reconciler.incomplete_count
        return result

    def _process_line(self, line: str, line_no: int, reconciler: Reconciler, result: ProcessResult) -> None:
        parsed = self.parser.parse(line, line_no)
        if not parsed.is_valid:
            result.skipped += 1
            result.errors.append(parsed.error)
            logger.warning(parsed.error)
            return

        event = parsed.event
        result.parsed += 1
        logger.debug(f"Parsed line {line_no}: job {event.job_id} {event.status.value} at {event.timestamp_text}")

        report = reconciler.apply(event)
        if report:
            self._emit(report, result)

    def _emit(self, report: JobReport, result: ProcessResult) -> None:
        result.reports.append(report)
        logger.log(SEVERITY_LEVELS[report.severity], report.message())
