"""
Helical channel toolpath planning for a 3 linear + 1 rotary axis machine.

With the stock on a rotary A axis the helix becomes a straight line in
(X, A) space, so each pass is a single linear move. The planner only has
to decide how many passes to make and in which order to visit them.

Rough passes go depth-first: at each Z level the tool runs the centerline,
then steps out symmetrically in Y pairs. Every traversal runs from the end
where the previous one stopped (zig-zag), so the tool never has to be
lifted and repositioned between passes. The finishing pass then drops the
reserved allowance and cleans each channel wall once.

Usage::

    toolpath = plan_toolpath(shape, parameters)
    for waypoint in toolpath:
        ...
"""

from dataclasses import dataclass, field
from typing import List

from helixpath.core.exceptions import PlanningError
from helixpath.core.logging import get_logger
from helixpath.planning.feed_rate import compensated_feed_rate
from helixpath.planning.models import CuttingParameters, Shape, Waypoint, WaypointKind
from helixpath.planning.passes import PassPlan, plan_passes, validate_ranges
from helixpath.planning.toolpath import HelicalToolpath, PlanResult

logger = get_logger(__name__)


@dataclass
class _SequencerState:
    """Tool position and traversal parity threaded through the planning phases."""

    start_x: float
    center_y: float
    x: float
    y: float
    z: float
    feed_rate: float
    traversals: int = 0
    waypoints: List[Waypoint] = field(default_factory=list)

    @property
    def at_zero_end(self) -> bool:
        """True when the next traversal heads for the far (length) end."""
        return self.traversals % 2 == 0

    def emit(self, waypoint: Waypoint) -> None:
        if waypoint.x is not None:
            self.x = waypoint.x
        if waypoint.y is not None:
            self.y = waypoint.y
        if waypoint.z is not None:
            self.z = waypoint.z
        self.waypoints.append(waypoint)


def _traverse(state: _SequencerState, shape: Shape, plan: PassPlan) -> None:
    if state.at_zero_end:
        x, a = shape.length, plan.a_target
    else:
        x, a = state.start_x, 0.0
    state.emit(Waypoint(x=x, a=a, feed_rate=state.feed_rate, kind=WaypointKind.TRAVERSAL))
    state.traversals += 1


def _approach(shape: Shape, parameters: CuttingParameters) -> _SequencerState:
    if parameters.enable_xy_offset_compensation:
        x = -parameters.initial_x_offset - parameters.instrument_diameter / 2
        y = (
            -parameters.initial_y_offset
            - parameters.instrument_diameter / 2
            - shape.stock_diameter / 2
        )
    else:
        x = y = 0.0

    state = _SequencerState(
        start_x=x,
        center_y=y,
        x=x,
        y=y,
        z=-parameters.initial_z_offset,
        feed_rate=compensated_feed_rate(shape, parameters, shape.stock_diameter),
    )
    state.emit(
        Waypoint(
            x=x,
            y=y,
            z=state.z,
            a=0.0,
            feed_rate=parameters.fast_feed_rate_z,
            rapid=True,
            kind=WaypointKind.APPROACH,
        )
    )
    return state


def _rough(
    state: _SequencerState, shape: Shape, parameters: CuttingParameters, plan: PassPlan
) -> None:
    for z_index in range(plan.z_rough_passes):
        cut_diameter = shape.stock_diameter - plan.z_rough_step * (z_index + 1)
        state.feed_rate = compensated_feed_rate(shape, parameters, cut_diameter)
        state.emit(
            Waypoint(
                z=state.z - plan.z_rough_step,
                feed_rate=parameters.cut_feed_rate,
                kind=WaypointKind.Z_STEP,
            )
        )
        # Centerline first, or the last Y offset when stepping is disabled
        _traverse(state, shape, plan)

        for pair in range(1, plan.y_step_pairs + 1):
            offset = plan.y_rough_step * pair
            for _ in range(2):
                if state.at_zero_end:
                    y = state.center_y - offset
                else:
                    y = state.center_y + offset
                state.emit(
                    Waypoint(y=y, feed_rate=parameters.cut_feed_rate, kind=WaypointKind.Y_STEP)
                )
                _traverse(state, shape, plan)


def _finishing_wall_y(state: _SequencerState, plan: PassPlan) -> float:
    if state.at_zero_end:
        return state.center_y - plan.finishing_y_offset
    return state.center_y + plan.finishing_y_offset


def _finish(state: _SequencerState, shape: Shape, plan: PassPlan) -> None:
    z = state.z - plan.finishing_depth
    if plan.needs_finishing_walls:
        state.emit(
            Waypoint(
                y=_finishing_wall_y(state, plan),
                z=z,
                feed_rate=state.feed_rate,
                kind=WaypointKind.FINISH_STEP,
            )
        )
        _traverse(state, shape, plan)
        state.emit(
            Waypoint(
                y=_finishing_wall_y(state, plan),
                feed_rate=state.feed_rate,
                kind=WaypointKind.FINISH_STEP,
            )
        )
        _traverse(state, shape, plan)
    else:
        state.emit(Waypoint(z=z, feed_rate=state.feed_rate, kind=WaypointKind.FINISH_STEP))
        _traverse(state, shape, plan)


def _retract(state: _SequencerState, parameters: CuttingParameters) -> None:
    state.emit(
        Waypoint(
            z=0.0,
            feed_rate=parameters.fast_feed_rate_z,
            rapid=True,
            kind=WaypointKind.RETRACT,
        )
    )
    state.emit(
        Waypoint(
            x=0.0,
            y=0.0,
            a=0.0,
            feed_rate=parameters.fast_feed_rate,
            rapid=True,
            kind=WaypointKind.RETRACT,
        )
    )


def plan_toolpath(shape: Shape, parameters: CuttingParameters) -> HelicalToolpath:
    """
    Plan rough and finishing passes for a helical channel.

    Args:
        shape: Target channel and stock dimensions
        parameters: Tool, feed rate and offset settings

    Returns:
        HelicalToolpath with waypoints in execution order

    Raises:
        ConfigurationRangeError: If the inputs fail a range check
        InternalInvariantError: If pass arithmetic produces an invalid count
    """
    validate_ranges(shape, parameters)
    plan = plan_passes(shape, parameters)
    logger.debug(
        "pass_plan",
        z_rough_passes=plan.z_rough_passes,
        z_rough_step=plan.z_rough_step,
        y_rough_passes=plan.y_rough_passes,
        y_rough_step=plan.y_rough_step,
        a_target=plan.a_target,
        finishing_y_offset=plan.finishing_y_offset,
    )

    state = _approach(shape, parameters)
    _rough(state, shape, parameters, plan)
    _finish(state, shape, plan)
    _retract(state, parameters)

    logger.info(
        "toolpath_planned",
        z_rough_passes=plan.z_rough_passes,
        y_rough_passes=plan.y_rough_passes,
        traversals=state.traversals,
        waypoints=len(state.waypoints),
    )
    return HelicalToolpath(
        waypoints=tuple(state.waypoints),
        plan=plan,
        metadata={
            "operation": "helical_channel",
            "traversals": state.traversals,
            "final_feed_rate": state.feed_rate,
        },
    )


def try_plan_toolpath(shape: Shape, parameters: CuttingParameters) -> PlanResult:
    """
    Plan a toolpath, reporting failure as a value instead of raising.

    Returns:
        PlanResult with the toolpath on success, or the planning error
    """
    try:
        toolpath = plan_toolpath(shape, parameters)
    except PlanningError as e:
        logger.warning("toolpath_rejected", error=str(e))
        return PlanResult(success=False, error=e)
    return PlanResult(success=True, toolpath=toolpath)
