import codecs
from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="JOBLOG_", env_file=".env", extra="ignore")

    # 지연 임계값 (분, 초과 시 경고/에러)
    warning_threshold_minutes: int = 5
    error_threshold_minutes: int = 10

    # 리포트 방식: final(파일 끝에서 일괄) / incremental(완료 즉시)
    report_mode: Literal["final", "incremental"] = "final"

    # 로그 라인 형식
    delimiter: str = ","
    timestamp_format: str = "%H:%M:%S"
    # utf-8-sig: BOM 이 있으면 제거, 없으면 utf-8 과 동일
    encoding: str = "utf-8-sig"

    # 진단 메시지 옵션
    show_line_numbers: bool = False
    warn_on_duplicate: bool = True

    log_level: str = "INFO"

    @field_validator("delimiter")
    @classmethod
    def check_delimiter(cls, v: str) -> str:
        if not v:
            raise ValueError("delimiter must not be empty")
        return v

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v}")
        return v

    @model_validator(mode="after")
    def check_thresholds(self):
        if self.warning_threshold_minutes < 0:
            raise ValueError("warning threshold must not be negative")
        if self.warning_threshold_minutes >= self.error_threshold_minutes:
            raise ValueError("warning threshold must be below error threshold")
        return self

    @property
    def warning_threshold(self) -> timedelta:
        return timedelta(minutes=self.warning_threshold_minutes)

    @property
    def error_threshold(self) -> timedelta:
        return timedelta(minutes=self.error_threshold_minutes)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
