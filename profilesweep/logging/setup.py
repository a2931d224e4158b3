"""Structlog configuration for profilesweep."""

import logging
import sys

import structlog

from profilesweep.config import SweeperConfig, LogFormat


def configure_logging(config: SweeperConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Logs go to stderr so they never interleave with the tables and
    prompts written to stdout.

    Args:
        config: SweeperConfig instance, uses defaults if None
    """
    if config is None:
        config = SweeperConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        # Module-level loggers are created at import time, before this runs;
        # they must pick up the current configuration on every call.
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
