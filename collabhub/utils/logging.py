"""로깅 설정 모듈.

Logging configuration module.
Configures the standard library root logger once at application startup.
Modules obtain their own logger with logging.getLogger(__name__).
"""

import logging
import sys

from collabhub.config import settings

_LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
    """루트 로거를 설정합니다 — 레벨은 settings.LOG_LEVEL.

    Configure the root logger from settings.LOG_LEVEL, writing to stdout.
    SQLAlchemy engine logging stays controlled by the engine's echo flag.
    """
    level: int = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format=_LOG_FORMAT,
        stream=sys.stdout,
        level=level,
    )
