"""
Core module - Shared exceptions, logging and configuration loading.
"""

from helixpath.core.exceptions import (
    HelixPathError,
    ConfigurationError,
    UnknownShapeError,
    MissingShapeError,
    RangeViolation,
    PlanningError,
    ConfigurationRangeError,
    InternalInvariantError,
    PostProcessorError,
)
from helixpath.core.logging import bind_run_context, configure_logging, get_logger

__all__ = [
    # Exceptions
    "HelixPathError",
    "ConfigurationError",
    "UnknownShapeError",
    "MissingShapeError",
    "RangeViolation",
    "PlanningError",
    "ConfigurationRangeError",
    "InternalInvariantError",
    "PostProcessorError",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_run_context",
]
