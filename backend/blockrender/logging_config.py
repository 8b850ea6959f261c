"""Logging setup: stdlib logging routed through structlog."""

import logging
import sys
from typing import Optional

import structlog

from blockrender.config import LOG_JSON, LOG_LEVEL

_PRE_CHAIN = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _resolve_level(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    return logging._nameToLevel.get(value.upper(), logging.INFO)


def configure_logging(
    level: Optional[str] = None,
    json: Optional[bool] = None,
    force: bool = False,
) -> None:
    resolved_json = LOG_JSON if json is None else json

    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_PRE_CHAIN)
    )

    if force:
        root_logger.handlers.clear()

    root_logger.setLevel(_resolve_level(level or LOG_LEVEL))
    root_logger.addHandler(handler)
