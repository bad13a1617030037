"""Structured JSON logging configuration using structlog."""

import logging
import sys

import structlog


def configure_logging(component: str, level: str = "INFO") -> structlog.BoundLogger:
    """Configure structlog with JSON output and return a bound logger for the component.

    Logs go to stderr; stdout carries the console report.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(component=component)
