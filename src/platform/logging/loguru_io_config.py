"""
Loguru setup for the hotel service

Sinks:
- stdout, always (DEBUG level when settings.DEBUG, INFO otherwise)
- hourly rotated files under LOG_DIR (or TEST_LOG_DIR), DEBUG mode only

Standard `logging` records (uvicorn/granian, SQLAlchemy, httpx) are routed
into the same sinks so every line carries the service context.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

# Keys whose values never reach a log line
SENSITIVE_KEYWORDS = {
    'password',
    'ELASTIC_PASSWORD',
    'DATABASE_URL',
}
DEPTH_LINE = '│'

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _bind_service_logger() -> 'LoguruLogger':
    return loguru_logger.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru, keeping the original caller"""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


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


def _configure_sinks(level: str) -> None:
    loguru_logger.remove()
    loguru_logger.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    if not settings.DEBUG:
        return

    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    log_filename = f'{prefix}{datetime.now(timezone.utc).strftime("%Y-%m-%d_%H")}.log'
    loguru_logger.add(
        f'{LOG_DIR}/{log_filename}',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=level,
    )


custom_logger = _bind_service_logger()
_configure_sinks('DEBUG' if settings.DEBUG else 'INFO')
logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
