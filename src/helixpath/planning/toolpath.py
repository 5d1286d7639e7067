"""
Toolpath container returned by the helical planner.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from helixpath.core.exceptions import PlanningError
from helixpath.planning.models import Waypoint, WaypointKind
from helixpath.planning.passes import PassPlan


@dataclass(frozen=True)
class HelicalToolpath:
    """
    Ordered waypoints for one helical channel, with the plan behind them.

    Attributes:
        waypoints: Waypoints in execution order
        plan: Pass counts and step sizes used to build the waypoints
        metadata: Additional toolpath metadata
    """

    waypoints: Tuple[Waypoint, ...]
    plan: PassPlan
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self):
        return iter(self.waypoints)

    def traversals(self) -> List[Waypoint]:
        """Get all full-length traversal waypoints."""
        return [wp for wp in self.waypoints if wp.kind == WaypointKind.TRAVERSAL]

    def rapid_moves(self) -> List[Waypoint]:
        """Get all rapid (non-cutting) waypoints."""
        return [wp for wp in self.waypoints if wp.rapid]

    def get_waypoints_by_kind(self, kind: WaypointKind) -> List[Waypoint]:
        """Get all waypoints of a specific kind."""
        return [wp for wp in self.waypoints if wp.kind == kind]

    def final_depth(self) -> float:
        """
        Deepest Z commanded by the toolpath.

        Raises:
            ValueError: If no waypoint commands Z
        """
        depths = [wp.z for wp in self.waypoints if wp.z is not None]
        if not depths:
            raise ValueError("Toolpath commands no Z moves")
        return min(depths)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict with absent axes omitted."""
        points = []
        for wp in self.waypoints:
            entry: Dict[str, Any] = {"kind": wp.kind.value, "rapid": wp.rapid}
            entry.update(wp.axes())
            if wp.feed_rate is not None:
                entry["feedRate"] = wp.feed_rate
            points.append(entry)
        return {
            "plan": {
                "zRoughPasses": self.plan.z_rough_passes,
                "zRoughStep": self.plan.z_rough_step,
                "yRoughPasses": self.plan.y_rough_passes,
                "yRoughStep": self.plan.y_rough_step,
                "aTarget": self.plan.a_target,
                "finishingYOffset": self.plan.finishing_y_offset,
                "finishingDepth": self.plan.finishing_depth,
            },
            "waypoints": points,
            "metadata": dict(self.metadata),
        }


@dataclass
class PlanResult:
    """Result of a planning call that reports failure as a value."""

    success: bool
    toolpath: Optional[HelicalToolpath] = None
    error: Optional[PlanningError] = None
