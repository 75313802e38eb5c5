"""pytest 설정 및 fixtures."""
import logging

import pytest

from joblog.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """환경변수/.env 영향 제거 및 설정 캐시 초기화."""
    # .env 가 없는 디렉토리에서 실행
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"JOBLOG_{name.upper()}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """CLI 테스트의 basicConfig(force=True) 이후 루트 로거 원복."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings():
    """기본 설정 (final 모드, 5분/10분)."""
    return Settings()


@pytest.fixture
def incremental_settings():
    return Settings(report_mode="incremental")


@pytest.fixture
def write_log(tmp_path):
    """테스트용 로그 파일 생성."""
    def _write(lines, name="jobs.log"):
        path = tmp_path / name
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
        return str(path)
    return _write
