"""
Structured logging configuration for helixpath.

Uses structlog (https://www.structlog.org/) to provide structured, context-rich
logging. Supports both JSON output (log aggregation) and colored console
output (interactive use). All output goes to stderr so stdout stays free for
the generated program.

Usage::

    from helixpath.core.logging import configure_logging, get_logger

    configure_logging(json_output=False)  # Call once at startup
    logger = get_logger(__name__)
    logger.info("toolpath_planned", z_rough_passes=3, waypoints=27)
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure structured logging for the entire application.

    Call this once at application startup (the CLI does it in its group
    callback).

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output JSON lines.
                     If False, output colored console-friendly lines.
        log_file: Optional path to write logs to a file in addition to stderr.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger for the given module name.

    Args:
        name: Module name, typically ``__name__``.

    Returns:
        A bound structlog logger instance.
    """
    return structlog.get_logger(name)


def bind_run_context(**values: object) -> None:
    """
    Bind key/value pairs to every log event emitted during the current run.

    The CLI binds the config file paths here so planner events can be traced
    back to the inputs that produced them.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)
