"""START/END 이벤트 대사(reconcile) 서비스."""
import logging
from typing import Dict, List, Optional

from joblog.core.config import Settings, get_settings
from joblog.core.timeofday import TIME_FORMAT
from joblog.schemas import JobEvent, JobReport, JobStatus
from joblog.services.duration import build_report
from joblog.services.line_parser import with_line_no

logger = logging.getLogger(__name__)


class Reconciler:
    """job_id → JobStatus 레지스트리를 소유하는 대사기.

    report_mode:
    - incremental: START/END 가 모두 채워지는 순간 리포트 반환, 끝에서는 미완료 작업만
    - final: 끝에서 전체 레지스트리를 한 번 순회하며 모든 작업 리포트
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        # 최초 등장 순서 유지 (출력 결정성)
        self.registry: Dict[str, JobStatus] = {}

    @property
    def incremental(self) -> bool:
        return self.settings.report_mode == "incremental"

    def apply(self, event: JobEvent) -> Optional[JobReport]:
        """이벤트 반영. incremental 모드에서 작업이 완료되면 리포트 반환."""
        status = self.registry.setdefault(event.job_id, JobStatus())

        previous = status.get(event.status)
        if previous is not None and self.settings.warn_on_duplicate:
            # 중복 이벤트는 나중 값으로 덮어씀
            message = (
                f"Duplicate {event.status.value} for job {event.job_id}: "
                f"{previous.strftime(TIME_FORMAT)} replaced by {event.timestamp_text}"
            )
            logger.warning(with_line_no(message, event.line_no, self.settings))
        status.set(event.status, event.timestamp)

        if self.incremental and status.is_complete:
            return build_report(event.job_id, status, self.settings)
        return None

    def finalize(self) -> List[JobReport]:
        """입력 종료 후 리포트 목록."""
        reports = []
        for job_id, status in self.registry.items():
            if self.incremental and status.is_complete:
                continue
            reports.append(build_report(job_id, status, self.settings))
        return reports

    @property
    def complete_count(self) -> int:
        return sum(1 for s in self.registry.values() if s.is_complete)

    @property
    def incomplete_count(self) -> int:
        return len(self.registry) - self.complete_count
