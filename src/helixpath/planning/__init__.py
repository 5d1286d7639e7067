"""
Planning module - Helical channel pass planning and waypoint sequencing.
"""

from helixpath.planning.feed_rate import compensated_feed_rate, feed_rate_scale
from helixpath.planning.models import CuttingParameters, Shape, Waypoint, WaypointKind
from helixpath.planning.passes import PassPlan, check_ranges, plan_passes, validate_ranges
from helixpath.planning.planner import plan_toolpath, try_plan_toolpath
from helixpath.planning.toolpath import HelicalToolpath, PlanResult

__all__ = [
    # Inputs and outputs
    "Shape",
    "CuttingParameters",
    "Waypoint",
    "WaypointKind",
    "HelicalToolpath",
    "PlanResult",
    # Feed rate
    "feed_rate_scale",
    "compensated_feed_rate",
    # Passes
    "PassPlan",
    "check_ranges",
    "validate_ranges",
    "plan_passes",
    # Planner
    "plan_toolpath",
    "try_plan_toolpath",
]
