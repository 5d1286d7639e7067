"""
G-code post processor for 3 linear + 1 rotary axis mills.

Rapid waypoints become G0, cutting waypoints G1. Only commanded axes are
written, so an omitted word leaves that axis where it is. The program runs
in a separate work offset (G55 by default) which is zeroed at the start
with G10 L20, so the tool position at program start becomes X0 Y0 Z0 A0.
"""

from typing import List, Optional

from helixpath.planning.models import Waypoint
from .base import PostProcessorBase, PostProcessorConfig

_AXIS_WORDS = (("x", "X"), ("y", "Y"), ("z", "Z"), ("a", "A"))


class GCodePostProcessor(PostProcessorBase):
    """RS-274 style G-code post processor."""

    def __init__(self, config: Optional[PostProcessorConfig] = None):
        super().__init__(config or PostProcessorConfig())

    def comment(self, text: str) -> str:
        return f"{self.config.comment_prefix}{text}{self.config.comment_suffix}"

    def header(self) -> List[str]:
        lines = [self.config.work_offset]
        if self.config.zero_work_offset:
            lines.append("G10 L20 P0 X0 Y0 Z0 A0")
        return lines

    def footer(self) -> List[str]:
        return [self.config.restore_work_offset]

    def _words(self, wp: Waypoint) -> List[str]:
        axes = wp.axes()
        words = [
            f"{letter}{self.format_number(axes[axis])}"
            for axis, letter in _AXIS_WORDS
            if axis in axes
        ]
        if wp.feed_rate is not None:
            words.append(f"F{self.format_number(wp.feed_rate)}")
        return words

    def _move(self, code: str, wp: Waypoint) -> List[str]:
        return [" ".join([code, *self._words(wp)])]

    def rapid_move(self, wp: Waypoint) -> List[str]:
        return self._move("G0", wp)

    def linear_move(self, wp: Waypoint) -> List[str]:
        return self._move("G1", wp)
