"""
Custom exceptions for helixpath.

All helixpath exceptions inherit from HelixPathError for easy catching.
"""

from enum import Enum
from typing import Any


class HelixPathError(Exception):
    """Base exception for all helixpath errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(HelixPathError):
    """Raised when a configuration file is unreadable or invalid."""

    pass


class UnknownShapeError(ConfigurationError):
    """Raised when the shape config names a shape the planner cannot cut."""

    pass


class MissingShapeError(ConfigurationError):
    """Raised when the shape config selects a shape but omits its dimensions."""

    pass


class RangeViolation(Enum):
    """Input range checks that gate toolpath planning."""

    TOOL_WIDER_THAN_CHANNEL = "target_cut_width"
    CUT_THROUGH_CENTERLINE = "target_cut_depth"
    PITCH_EXCEEDS_LENGTH = "number_of_turns"
    FINISH_DEEPER_THAN_PASS = "last_pass_cutting_depth"

    @property
    def parameter(self) -> str:
        """Name of the parameter that violated its constraint."""
        return self.value


class PlanningError(HelixPathError):
    """Raised when toolpath planning fails."""

    pass


class ConfigurationRangeError(PlanningError):
    """Raised when shape or cutting parameters fall outside a valid range."""

    def __init__(
        self,
        violation: RangeViolation,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message or f"Parameter out of range: {violation.parameter}",
            details,
        )
        self.violation = violation

    @property
    def parameter(self) -> str:
        return self.violation.parameter


class InternalInvariantError(PlanningError):
    """Raised when pass arithmetic reaches a state the clamping rules exclude."""

    pass


class PostProcessorError(HelixPathError):
    """Raised when a waypoint sequence cannot be rendered."""

    pass
