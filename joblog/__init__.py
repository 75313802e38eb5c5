"""작업 로그 START/END 대사 도구."""

__version__ = "0.1.0"
