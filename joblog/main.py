"""작업 로그 대사 CLI.

사용법:
    joblog <log_file> [--mode final|incremental] [--line-numbers] [--summary] [-v]

기능:
    1. 로그 파일을 한 줄씩 읽어 HH:MM:SS,description,STATUS,job_id 파싱
    2. job_id 별 START/END 대사
    3. 소요 시간 5분/10분 초과 시 Warning/Error, 한쪽만 있으면 Incomplete
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from joblog.core.config import Settings, get_settings
from joblog.services.log_processor import LogProcessor

logger = logging.getLogger(__name__)


class UsageArgumentParser(argparse.ArgumentParser):
    """인자 오류 시 사용법을 stdout 에 출력하고 종료 코드 1."""

    def error(self, message):
        self.print_usage(sys.stdout)
        print(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageArgumentParser(prog="joblog", description="작업 로그 START/END 대사 및 지연 리포트")
    parser.add_argument("log_file", help="로그 파일 경로")
    parser.add_argument("--mode", choices=["final", "incremental"], help="리포트 방식 (기본: final)")
    parser.add_argument("--line-numbers", action="store_true", help="진단 메시지에 라인 번호 표시")
    parser.add_argument("--warn-after", type=int, metavar="MINUTES", help="경고 임계값 (분, 기본: 5)")
    parser.add_argument("--error-after", type=int, metavar="MINUTES", help="에러 임계값 (분, 기본: 10)")
    parser.add_argument("--summary", action="store_true", help="처리 요약 출력")
    parser.add_argument("-v", "--verbose", action="store_true", help="디버그 로그 출력")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """환경변수 설정 위에 CLI 옵션 덮어쓰기."""
    overrides = {}
    if args.mode:
        overrides["report_mode"] = args.mode
    if args.line_numbers:
        overrides["show_line_numbers"] = True
    if args.warn_after is not None:
        overrides["warning_threshold_minutes"] = args.warn_after
    if args.error_after is not None:
        overrides["error_threshold_minutes"] = args.error_after
    if args.verbose:
        overrides["log_level"] = "DEBUG"

    base = get_settings()
    if not overrides:
        return base
    return Settings.model_validate({**base.model_dump(), **overrides})


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(message)s", stream=sys.stdout, force=True)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        parser.error(f"invalid settings: {e.errors()[0]['msg']}")

    configure_logging(settings.log_level)

    processor = LogProcessor(settings)
    try:
        result = processor.process_file(args.log_file)
    except OSError as e:
        logger.error(f"Error opening file: {e}")
        return 1

    if args.summary:
        logger.info(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
