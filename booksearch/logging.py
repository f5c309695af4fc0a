"""JSON logging for the search components and the console driver."""

from __future__ import annotations

import logging

import structlog

LOGGER_NAME = "booksearch"


def configure_logging(level: int = logging.INFO) -> None:
    """Render structlog events as JSON lines on stdout.

    ``level`` is a stdlib level number; settings expose it as
    ``BookSearchSettings.logging_level``.
    """

    logging.basicConfig(level=level, format="%(message)s", handlers=[logging.StreamHandler()])
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger(LOGGER_NAME)

__all__ = ["LOGGER_NAME", "configure_logging", "logger"]
