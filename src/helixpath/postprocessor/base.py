"""
PostProcessorBase - Abstract base class for waypoint post processors.

Turns a planned waypoint sequence into a machine program. Subclasses supply
the dialect: header/footer, rapid and linear move syntax, and comments.

Optional event hooks let users inject custom lines at program start/end and
around the rough and finishing phases. Hook strings may contain template
variables:
  {x}, {y}, {z}, {a} - commanded axis values (empty if not commanded)
  {feedRate}         - feed rate of the waypoint (empty if none)
  {kind}             - waypoint kind: 'approach', 'traversal', ...
  {index}            - waypoint index in the sequence (0-based)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterable, List, Optional

from helixpath.core.exceptions import PostProcessorError
from helixpath.planning.models import Waypoint, WaypointKind


@dataclass
class EventHooks:
    """
    Customizable code snippets injected at event points.
    Each string may contain template variables like {x}, {z}, {feedRate}.
    """
    program_start: str = ""
    program_end: str = ""
    rough_start: str = ""      # before the first rough plunge
    finish_start: str = ""     # before the first finishing move
    retract: str = ""          # before the retract moves

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'EventHooks':
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in d.items() if k in valid_fields})


@dataclass
class PostProcessorConfig:
    """Configuration for a post processor instance."""
    format_name: str = "gcode"
    file_extension: str = ".nc"
    line_ending: str = "\n"              # '\n' or '\r\n'

    # Number formatting
    decimals: int = 4

    # Work coordinate system
    work_offset: str = "G55"             # selected for the program body
    restore_work_offset: str = "G54"     # reselected after the program
    zero_work_offset: bool = True        # zero X/Y/Z/A of work_offset at start

    # Comments at phase changes
    include_comments: bool = False
    comment_prefix: str = "("
    comment_suffix: str = ")"

    # Event hooks
    hooks: EventHooks = field(default_factory=EventHooks)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'PostProcessorConfig':
        d = dict(d)
        hooks_data = d.pop('hooks', {})
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config = cls(**{k: v for k, v in d.items() if k in valid_fields})
        if hooks_data:
            config.hooks = EventHooks.from_dict(hooks_data)
        return config


_PHASE_HOOKS = {
    WaypointKind.Z_STEP: "rough_start",
    WaypointKind.FINISH_STEP: "finish_start",
    WaypointKind.RETRACT: "retract",
}

_PHASE_LABELS = {
    WaypointKind.Z_STEP: "rough pass",
    WaypointKind.FINISH_STEP: "finishing pass",
    WaypointKind.RETRACT: "retract",
}


class PostProcessorBase(ABC):
    """
    Abstract base class for post processors.

    Subclasses implement format-specific methods:
    - header() / footer()
    - linear_move() / rapid_move()
    - comment()
    """

    def __init__(self, config: Optional[PostProcessorConfig] = None):
        self.config = config or PostProcessorConfig()
        self._lines: List[str] = []

    @property
    def format_name(self) -> str:
        return self.config.format_name

    @property
    def file_extension(self) -> str:
        return self.config.file_extension

    # ── Abstract methods (must be implemented by subclasses) ───────────

    @abstractmethod
    def header(self) -> List[str]:
        """Generate program header lines."""
        ...

    @abstractmethod
    def footer(self) -> List[str]:
        """Generate program footer lines."""
        ...

    @abstractmethod
    def linear_move(self, wp: Waypoint) -> List[str]:
        """Generate a linear (cutting) move command."""
        ...

    @abstractmethod
    def rapid_move(self, wp: Waypoint) -> List[str]:
        """Generate a rapid (positioning) move command."""
        ...

    @abstractmethod
    def comment(self, text: str) -> str:
        """Format a comment line."""
        ...

    # ── Optional overrides ────────────────────────────────────────────

    def phase_change_code(self, kind: WaypointKind, rough_pass: int = 0) -> List[str]:
        """Code injected at each rough plunge and when finishing or retract begins."""
        if not self.config.include_comments:
            return []
        label = _PHASE_LABELS[kind]
        if kind == WaypointKind.Z_STEP:
            label = f"{label} {rough_pass}"
        return [self.comment(label)]

    # ── Number formatting ─────────────────────────────────────────────

    def format_number(self, value: float) -> str:
        """Fixed decimals with trailing zeros trimmed; -0 prints as 0."""
        text = f"{value:.{self.config.decimals}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return text

    # ── Hook expansion ────────────────────────────────────────────────

    def _template_vars(self, wp: Waypoint, index: int) -> Dict[str, str]:
        def fmt(value: Optional[float]) -> str:
            return "" if value is None else self.format_number(value)

        return {
            'x': fmt(wp.x),
            'y': fmt(wp.y),
            'z': fmt(wp.z),
            'a': fmt(wp.a),
            'feedRate': fmt(wp.feed_rate),
            'kind': wp.kind.value,
            'index': str(index),
        }

    def _expand_hook(
        self, hook_template: str, wp: Optional[Waypoint] = None, index: int = 0
    ) -> List[str]:
        """Expand template variables in a hook string."""
        if not hook_template.strip():
            return []
        template_vars = self._template_vars(wp, index) if wp else {}
        try:
            expanded = hook_template.format(**template_vars)
        except (KeyError, IndexError):
            expanded = hook_template  # Leave unresolved variables as-is
        return [line for line in expanded.split('\n') if line.strip()]

    # ── Main generation pipeline ──────────────────────────────────────

    def generate_lines(self, waypoints: Iterable[Waypoint]) -> List[str]:
        """
        Generate the program as a list of lines.

        Parameters:
            waypoints: Waypoints in execution order (a HelicalToolpath works too).

        Raises:
            PostProcessorError: If a waypoint commands no axis at all.
        """
        self._lines = []
        self._lines.extend(self.header())
        self._lines.extend(self._expand_hook(self.config.hooks.program_start))

        previous_kind: Optional[WaypointKind] = None
        rough_pass = 0
        for index, wp in enumerate(waypoints):
            if not wp.axes():
                raise PostProcessorError(
                    "Waypoint commands no axis",
                    details={"index": index, "kind": wp.kind.value},
                )

            hook_name = _PHASE_HOOKS.get(wp.kind)
            if wp.kind == WaypointKind.Z_STEP:
                rough_pass += 1
                self._lines.extend(self.phase_change_code(wp.kind, rough_pass))
            elif hook_name and wp.kind != previous_kind:
                self._lines.extend(self.phase_change_code(wp.kind))

            if hook_name and wp.kind != previous_kind:
                self._lines.extend(
                    self._expand_hook(getattr(self.config.hooks, hook_name), wp, index)
                )

            if wp.rapid:
                self._lines.extend(self.rapid_move(wp))
            else:
                self._lines.extend(self.linear_move(wp))

            # Y steps and traversals stay inside the current rough/finish phase
            if hook_name:
                previous_kind = wp.kind

        self._lines.extend(self._expand_hook(self.config.hooks.program_end))
        self._lines.extend(self.footer())
        return self._lines

    def generate(self, waypoints: Iterable[Waypoint]) -> str:
        """
        Generate the complete post-processed program.

        Returns:
            Complete program as a string, terminated by a line ending.
        """
        lines = self.generate_lines(waypoints)
        return self.config.line_ending.join(lines) + self.config.line_ending
