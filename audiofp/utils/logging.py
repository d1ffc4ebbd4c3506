"""Logging setup shared by the audiofp CLI and calculators."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

__all__ = ["configure_logging", "get_logger"]


def _numeric_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    if isinstance(value, int):
        return value
    return logging.INFO


def configure_logging(
    level: str = "INFO",
    *,
    json_logs: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Configure structlog on top of stdlib logging.

    Logs go to ``stream`` (stderr by default) so command output on stdout stays
    machine readable.
    """

    numeric_level = _numeric_level(level)
    output_stream = stream if stream is not None else sys.stderr

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
    ]
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(numeric_level)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str, **bound: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger for ``name`` with ``bound`` context attached."""

    logger = structlog.stdlib.get_logger(name)
    if bound:
        logger = logger.bind(**bound)
    return logger
