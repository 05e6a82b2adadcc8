"""
structlog setup for applications that turn on dispatch tracing.

The library never configures logging on import. Call configure_structlog()
from your entry point, usually with ChainingSettings().log_level.
"""

from __future__ import annotations

import logging

import structlog


def configure_structlog(log_level: str = "INFO") -> None:
    """
    Configure structlog for human-readable console output.

    Unknown level names fall back to INFO.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
