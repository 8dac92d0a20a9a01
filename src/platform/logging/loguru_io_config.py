"""
loguru sinks and stdlib interception

Every record carries three extras:
- service_context: which process wrote it (see service_context.py)
- call_target: the @Logger.io decorated function
- chain_start_time: start of the outermost decorated call, shared by nested calls
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant import path
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', str(path.LOG_DIR))

SENSITIVE_KEYWORDS = frozenset({'password', 'database_url', 'image_content', 'content'})

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# '127.0.0.1 - "POST /api/bookings HTTP/1.1" - 201 - 8ms'
_ACCESS_LOG_STATUS = re.compile(r'HTTP/[\d.]+"\s+-\s+(\d{3})\b')

# Lowest status code first match wins
_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))

# Records below INFO (inclusive) from these loggers are dropped
_QUIET_LOGGERS = ('sqlalchemy.engine', 'sqlalchemy.pool', 'asyncio')


def access_log_level(message: str) -> str | None:
    """Level for an ASGI access log line, by response status; None for other messages."""
    match = _ACCESS_LOG_STATUS.search(message)
    if not match:
        return None

    status_code = int(match.group(1))
    for threshold, level in _STATUS_LEVELS:
        if status_code >= threshold:
            return level
    return 'INFO'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    """Route stdlib logging (uvicorn/granian, SQLAlchemy, alembic) into loguru."""

    def __init__(self, bound_logger: 'LoguruLogger') -> None:
        super().__init__()
        self._bound_logger = bound_logger

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.INFO and record.name.startswith(_QUIET_LOGGERS):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Attribute the record to the caller, not to the logging module
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._bound_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{LOG_DIR}/{prefix}{datetime.now(timezone.utc):%Y-%m-%d_%H}.log'


def build_logger() -> 'LoguruLogger':
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    loguru_logger.remove()
    bound_logger = loguru_logger.bind(**_default_extra())
    bound_logger.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    # Rotating file sink for local debugging; deployed containers only ship stdout
    if settings.DEBUG:
        bound_logger.add(
            _log_file_path(),
            format=io_log_format,
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler(bound_logger)], level=0, force=True)
    return bound_logger


custom_logger = build_logger()
