"""로그 라인 파싱 서비스 - `HH:MM:SS,description,STATUS,job_id` 형식."""
import logging
from dataclasses import dataclass
from typing import Optional, List

from pydantic import ValidationError

from joblog.core.config import Settings, get_settings
from joblog.core.timeofday import parse_time_of_day
from joblog.schemas import EventType, JobEvent

logger = logging.getLogger(__name__)

FIELD_COUNT = 4


def with_line_no(message: str, line_no: Optional[int], settings: Settings) -> str:
    """라인 번호 옵션이 켜져 있으면 진단 메시지 앞에 `Line N: ` 추가."""
    if settings.show_line_numbers and line_no is not None:
        return f"Line {line_no}: {message}"
    return message


@dataclass
class ParsedLine:
    """파싱된 로그 라인."""
    raw_text: str = ""
    line_no: Optional[int] = None
    event: Optional[JobEvent] = None
    is_valid: bool = False
    error: Optional[str] = None


class LineParser:
    """로그 라인 파서."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def split_fields(self, line: str) -> List[str]:
        """구분자로 분리 후 각 필드 공백 제거."""
        return [part.strip() for part in line.split(self.settings.delimiter)]

    def parse(self, line: str, line_no: Optional[int] = None) -> ParsedLine:
        """
        로그 한 줄 파싱.

        지원 형식:
            - "09:15:30,Database Backup,START,PID001"
            - " 09:17:45 , Database Backup , END , PID001 " (필드별 공백 허용)

        실패 사유 (error 에 사용자용 메시지 설정, 라인은 건너뜀):
            - 필드 수가 4개가 아님 → Invalid log line
            - 타임스탬프 형식 오류 → Error parsing timestamp
            - START/END 외의 상태값 → Status Unknown

        Args:
            line: 원본 라인 (개행 제외)
            line_no: 1부터 시작하는 라인 번호 (없으면 None)

        Returns:
            ParsedLine 객체
        """
        result = ParsedLine(raw_text=line, line_no=line_no)

        parts = self.split_fields(line)
        if len(parts) != FIELD_COUNT:
            result.error = with_line_no(f"Invalid log line: {line}", line_no, self.settings)
            return result

        raw_ts, description, raw_status, job_id = parts

        try:
            timestamp = parse_time_of_day(raw_ts, self.settings.timestamp_format)
        except ValueError as e:
            result.error = with_line_no(f"Error parsing timestamp '{raw_ts}': {e}", line_no, self.settings)
            return result

        try:
            status = EventType(raw_status)
        except ValueError:
            result.error = with_line_no(f"Status Unknown '{raw_status}'", line_no, self.settings)
            return result

        try:
            result.event = JobEvent(
                timestamp=timestamp,
                description=description,
                status=status,
                job_id=job_id,
                line_no=line_no,
            )
        except ValidationError:
            # job_id 가 비어있는 경우
            result.error = with_line_no(f"Invalid log line: {line}", line_no, self.settings)
            return result

        result.is_valid = True
        return result

