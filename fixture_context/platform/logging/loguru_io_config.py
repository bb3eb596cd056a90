"""
Loguru sinks for fixture loading

Every record carries the process context, the running scenario and, for
functions wrapped by @Logger.io, the call target and the start time of the
outermost wrapped call. Standard logging (SQLAlchemy, pytest-bdd) is routed
through the same sinks.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING, Any, Iterator

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger, Record

from fixture_context.platform.config.core_setting import settings
from fixture_context.platform.constant.path import LOG_DIR
from fixture_context.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'secret',
    'token',
    'database_url',
}

DEPTH_LINE = '│'

# Loggers that only add noise at DEBUG: step pattern matching and connection pool chatter
_QUIET_DEBUG_LOGGERS = ('pytest_bdd', 'parse', 'sqlalchemy.pool')

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)
scenario_var: ContextVar[str] = ContextVar('scenario_var', default='-')


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    SCENARIO = 'scenario'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


@contextmanager
def scenario_scope(name: str) -> Iterator[None]:
    """Tag every record logged inside the block with the scenario name"""
    token = scenario_var.set(name)
    try:
        yield
    finally:
        scenario_var.reset(token)


def _patch_record(record: 'Record') -> None:
    extra = record['extra']
    extra[ExtraField.SCENARIO] = scenario_var.get()
    extra.setdefault(ExtraField.SERVICE_CONTEXT, get_service_context())
    extra.setdefault(ExtraField.CHAIN_START_TIME, '')
    extra.setdefault(ExtraField.CALL_TARGET, '')


class InterceptHandler(logging.Handler):
    """Forward standard logging records to loguru, keeping the original caller"""

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_QUIET_DEBUG_LOGGERS):
            return

        level: str | int
        try:
            level = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        loguru_logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        f'<m>{{extra[{ExtraField.SCENARIO}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    # conftest.py points TEST_LOG_DIR at the test tree
    log_dir = os.environ.get('TEST_LOG_DIR', str(LOG_DIR))
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{log_dir}/{prefix}{datetime.now().strftime("%Y-%m-%d_%H")}.log'


def _configure() -> 'LoguruLogger':
    level = 'DEBUG' if settings.DEBUG else 'INFO'
    sinks: list[dict[str, Any]] = [{'sink': sys.stderr, 'format': io_log_format, 'level': level}]
    if settings.DEBUG:
        sinks.append(
            {
                'sink': _log_file_path(),
                'format': io_log_format,
                'level': level,
                'rotation': '1 hour',
                'retention': '7 days',
                'compression': 'gz',
            }
        )
    loguru_logger.configure(handlers=sinks, patcher=_patch_record)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return loguru_logger


custom_logger = _configure()
