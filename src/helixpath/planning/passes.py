"""
Range checks and rough/finish pass planning.

Rough passes spread the depth left after reserving the finishing allowance
evenly over the fewest passes that respect the per-pass depth limit. Width
is roughed out in symmetric pairs around the centerline, so the Y pass count
is always even.
"""

import math
from dataclasses import dataclass
from typing import Optional

from helixpath.core.exceptions import (
    ConfigurationRangeError,
    InternalInvariantError,
    RangeViolation,
)
from helixpath.planning.models import CuttingParameters, Shape


def check_ranges(shape: Shape, parameters: CuttingParameters) -> Optional[RangeViolation]:
    """
    Run the planning range checks in order.

    Returns:
        The first violated check, or None when the inputs can be planned
    """
    if shape.target_cut_width < parameters.instrument_diameter:
        return RangeViolation.TOOL_WIDER_THAN_CHANNEL
    if shape.target_cut_depth * 2 > shape.stock_diameter:
        return RangeViolation.CUT_THROUGH_CENTERLINE
    if shape.number_of_turns * shape.target_cut_width > shape.length:
        return RangeViolation.PITCH_EXCEEDS_LENGTH
    if parameters.last_pass_cutting_depth > parameters.max_cut_depth:
        return RangeViolation.FINISH_DEEPER_THAN_PASS
    return None


_VIOLATION_MESSAGES = {
    RangeViolation.TOOL_WIDER_THAN_CHANNEL: "Tool is wider than the target channel",
    RangeViolation.CUT_THROUGH_CENTERLINE: "Target depth cuts through the stock centerline",
    RangeViolation.PITCH_EXCEEDS_LENGTH: "Helix pitch does not fit the channel length",
    RangeViolation.FINISH_DEEPER_THAN_PASS: "Finishing depth exceeds the per-pass depth limit",
}


def validate_ranges(shape: Shape, parameters: CuttingParameters) -> None:
    """
    Raise if the inputs fail a range check.

    Raises:
        ConfigurationRangeError: Naming the first violated check
    """
    violation = check_ranges(shape, parameters)
    if violation is None:
        return
    raise ConfigurationRangeError(
        violation,
        _VIOLATION_MESSAGES[violation],
        details={
            "parameter": violation.parameter,
            "target_cut_width": shape.target_cut_width,
            "target_cut_depth": shape.target_cut_depth,
            "stock_diameter": shape.stock_diameter,
            "number_of_turns": shape.number_of_turns,
            "length": shape.length,
            "instrument_diameter": parameters.instrument_diameter,
            "max_cut_depth": parameters.max_cut_depth,
            "last_pass_cutting_depth": parameters.last_pass_cutting_depth,
        },
    )


def _pass_count(distance: float, max_step: float, axis: str) -> int:
    """Fewest passes of at most max_step covering distance, zero if nothing to cut."""
    if distance <= 0:
        return 0
    if max_step <= 0 or not math.isfinite(distance) or not math.isfinite(max_step):
        raise InternalInvariantError(
            f"Cannot split {axis} distance into passes",
            details={"distance": distance, "max_step": max_step},
        )
    passes = math.ceil(distance / max_step)
    if passes < 0:
        raise InternalInvariantError(
            f"Negative {axis} pass count",
            details={"distance": distance, "max_step": max_step, "passes": passes},
        )
    return passes


@dataclass(frozen=True)
class PassPlan:
    """
    Pass counts and step sizes for one helical channel.

    Attributes:
        z_rough_passes: Number of rough depth passes
        z_rough_step: Depth removed by each rough pass (mm)
        y_rough_passes: Number of Y-stepped rough traversals per depth, even
        y_rough_step: Distance between Y-stepped traversals (mm)
        a_target: Rotary angle at the far end of the channel (degrees)
        finishing_y_offset: Tool center offset from centerline to each finished wall (mm)
        finishing_depth: Depth reserved for the finishing pass (mm)
    """

    z_rough_passes: int
    z_rough_step: float
    y_rough_passes: int
    y_rough_step: float
    a_target: float
    finishing_y_offset: float
    finishing_depth: float

    @property
    def y_step_pairs(self) -> int:
        """Number of symmetric Y offset pairs per rough depth."""
        return self.y_rough_passes // 2

    @property
    def needs_finishing_walls(self) -> bool:
        """True when the tool is narrower than the channel."""
        return self.finishing_y_offset > 0

    @property
    def rough_depth(self) -> float:
        """Total depth removed by rough passes (mm)."""
        return self.z_rough_step * self.z_rough_passes


def plan_passes(shape: Shape, parameters: CuttingParameters) -> PassPlan:
    """
    Derive rough pass counts and step sizes.

    Inputs are expected to have passed validate_ranges.

    Raises:
        InternalInvariantError: If a pass count comes out negative or non-finite
    """
    usable_depth = shape.target_cut_depth - parameters.last_pass_cutting_depth
    z_passes = _pass_count(usable_depth, parameters.max_cut_depth, "Z")
    z_step = usable_depth / z_passes if z_passes else 0.0

    usable_width = (
        shape.target_cut_width
        - parameters.last_pass_cutting_depth * 2
        - parameters.instrument_diameter
    )
    usable_width = max(usable_width, 0.0)
    y_passes = _pass_count(usable_width, parameters.max_cut_depth, "Y")
    if y_passes % 2 != 0:
        y_passes += 1
    y_step = usable_width / y_passes if y_passes else 0.0

    return PassPlan(
        z_rough_passes=z_passes,
        z_rough_step=z_step,
        y_rough_passes=y_passes,
        y_rough_step=y_step,
        a_target=360 * shape.number_of_turns,
        finishing_y_offset=(shape.target_cut_width - parameters.instrument_diameter) / 2,
        finishing_depth=parameters.last_pass_cutting_depth,
    )
