"""
Value types consumed and produced by the helical toolpath planner.

Shape and CuttingParameters are plain input records with no behavior; the
planner reads them and returns Waypoint values in execution order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Shape:
    """
    Target helical channel and the stock it is cut into.

    Attributes:
        length: Channel length along the X axis (mm)
        stock_diameter: Diameter of the cylindrical stock (mm)
        number_of_turns: Helix turns over the length, may be fractional
        target_cut_depth: Radial depth below the stock surface (mm)
        target_cut_width: Channel width measured along the length (mm)
    """

    length: float
    stock_diameter: float
    number_of_turns: float
    target_cut_depth: float
    target_cut_width: float


@dataclass(frozen=True)
class CuttingParameters:
    """
    Machine and tool settings for cutting a shape.

    Attributes:
        cut_feed_rate: Nominal cutting feed rate (mm/min)
        fast_feed_rate: Rapid feed rate for linear axes (mm/min)
        fast_feed_rate_z: Rapid feed rate for Z approach/retract (mm/min)
        max_cut_depth: Max material removed by one rough pass (mm)
        instrument_diameter: Tool diameter (mm)
        initial_z_offset: Tool tip to stock surface standoff (mm)
        enable_xy_offset_compensation: Apply the X/Y offsets on approach
        initial_y_offset: Tool edge to stock edge (mm)
        initial_x_offset: Tool edge to cut start point (mm)
        last_pass_cutting_depth: Depth reserved for the finishing pass (mm)
    """

    cut_feed_rate: float
    fast_feed_rate: float
    fast_feed_rate_z: float
    max_cut_depth: float
    instrument_diameter: float
    initial_z_offset: float = 0.0
    enable_xy_offset_compensation: bool = False
    initial_y_offset: float = 0.0
    initial_x_offset: float = 0.0
    last_pass_cutting_depth: float = 0.0


class WaypointKind(Enum):
    """Role of a waypoint within the cutting sequence."""

    APPROACH = "approach"  # Rapid move onto the stock surface datum
    Z_STEP = "z_step"  # Rough pass plunge
    Y_STEP = "y_step"  # Sideways step between rough traversals
    TRAVERSAL = "traversal"  # Full-length X move with A rotation
    FINISH_STEP = "finish_step"  # Move onto a finishing wall or depth
    RETRACT = "retract"  # Rapid move off the work


@dataclass(frozen=True)
class Waypoint:
    """
    A single commanded tool position.

    An axis left as None is not commanded: the machine holds its current
    value. A None feed rate means no feed word is issued.
    """

    x: Optional[float] = None
    y: Optional[float] = None
    z: Optional[float] = None
    a: Optional[float] = None
    feed_rate: Optional[float] = None
    rapid: bool = False
    kind: WaypointKind = WaypointKind.TRAVERSAL

    def axes(self) -> dict[str, float]:
        """Commanded axes in X, Y, Z, A order, absent axes omitted."""
        values = {"x": self.x, "y": self.y, "z": self.z, "a": self.a}
        return {axis: value for axis, value in values.items() if value is not None}
