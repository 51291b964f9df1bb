"""
Loguru sink setup for the console session.

- stderr sink at CONSOLE_LOG_LEVEL, so log lines never land on the stdout prompts
- optional daily file sink in LOG_DIR (TEST_LOG_DIR under pytest)
- stdlib logging routed into loguru
"""

from contextvars import ContextVar
from datetime import date
from enum import StrEnum
import inspect
import logging
import os
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any, Dict

from loguru import logger as loguru_logger

from cinesphere.platform.config.core_setting import settings
from cinesphere.platform.logging.service_context import get_service_context


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger


# Longest rendering of an argument / return value before truncation
MAX_CONTENT_LENGTH = 300

# Nesting of @Logger.io calls in the current context, used to indent log lines
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SESSION = 'session'
    CALL_TARGET = 'call_target'
    CALL_DEPTH = 'call_depth'


def default_extra() -> Dict[str, Any]:
    return {
        ExtraField.SESSION: get_service_context(),
        ExtraField.CALL_TARGET: '-',
        ExtraField.CALL_DEPTH: 0,
    }


LOG_FORMAT = ' | '.join(
    (
        '<g>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        f'<c>{{extra[{ExtraField.SESSION}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{name}}:{{line}}</> -> <y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
    )
)


class InterceptHandler(logging.Handler):
    """Re-emit stdlib log records through loguru, keeping the original call site."""

    def emit(self, record: logging.LogRecord) -> None:
        level: str | int
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        loguru_logger.bind(**default_extra()).opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def log_file_path() -> Path:
    test_log_dir = os.environ.get('TEST_LOG_DIR')
    log_dir = Path(test_log_dir) if test_log_dir else Path(settings.LOG_DIR)
    prefix = 'test_' if test_log_dir else ''
    return log_dir / f'{prefix}cinesphere_{date.today():%Y-%m-%d}.log'


def configure_logging() -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(**default_extra())

    bound.add(sys.stderr, format=LOG_FORMAT, level=settings.CONSOLE_LOG_LEVEL)

    if settings.LOG_TO_FILE:
        bound.add(
            str(log_file_path()),
            format=LOG_FORMAT,
            rotation='1 day',
            retention='7 days',
            compression='gz',
            level='DEBUG' if settings.DEBUG else settings.LOG_LEVEL,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return bound


custom_logger = configure_logging()
