"""구조화 로깅 설정 모듈.

Structured logging configuration using structlog.
Both applications call ``configure_logging`` once at import time and use
``structlog.get_logger(__name__)`` everywhere else.
"""

import logging
import sys

import structlog
from structlog.typing import Processor


def configure_logging(level: str = "info", json_logs: bool = True) -> None:
    """structlog 및 표준 logging을 설정합니다.

    Configure structlog on top of the standard library logging module.

    Args:
        level: 로그 레벨 이름 (Log level name, e.g. "info")
        json_logs: True면 JSON, False면 콘솔 렌더링 (JSON output or console rendering)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
