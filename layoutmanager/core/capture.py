"""
Capturing a layout from a styled figure.

Which properties are read depends on the profile string passed to save:
"Basic" (default), "Full" and "Line", combinable as in "Full,Line".
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config.defaults import (
    AXIS_PROPERTIES,
    FIGURE_BASIC_PROPERTIES,
    FIGURE_FULL_PROPERTIES,
    LINE_BASIC_PROPERTIES,
    LINE_FULL_PROPERTIES,
)
from ..errors import PreconditionError, PropertyError
from ..targets.base import AXES, LINES, PropertyNode
from .layout import Layout
from .tree import set_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaptureProfile:
    """Which optional property subsets a save reads."""
    full: bool = False
    line: bool = False

    @classmethod
    def from_string(cls, params: Optional[str]) -> "CaptureProfile":
        """Parse profile tokens by case-insensitive substring match."""
        text = (params or "basic").lower()
        return cls(full="full" in text, line="line" in text)

    def figure_properties(self) -> List[str]:
        props = list(FIGURE_BASIC_PROPERTIES)
        if self.full:
            props += FIGURE_FULL_PROPERTIES
        return props

    def line_properties(self) -> List[str]:
        props = list(LINE_BASIC_PROPERTIES)
        if self.full:
            props += LINE_FULL_PROPERTIES
        return props


def read_properties(node: PropertyNode, paths: List[str]) -> Dict[str, Any]:
    """
    Read paths from node into a nested group.

    Properties the node does not support are left out.
    """
    group: Dict[str, Any] = {}
    for path in paths:
        try:
            value = node.get(path)
        except PropertyError as e:
            logger.debug(f"Not capturing {path}: {e}")
            continue
        set_path(group, path, _to_json_value(value))
    return group


def _to_json_value(value: Any) -> Any:
    # numpy scalars/arrays and tuples from the target become plain JSON types
    if hasattr(value, "tolist"):
        return value.tolist()
    if isinstance(value, tuple):
        return [_to_json_value(v) for v in value]
    return value


def require_axes(target: PropertyNode) -> PropertyNode:
    """
    Current axes of target.

    Raises:
        PreconditionError: If the figure has no axes
    """
    axes = target.current_child(AXES)
    if axes is None:
        raise PreconditionError("Figure has no axis")
    return axes


def capture_layout(name: str, target: PropertyNode, profile: CaptureProfile) -> Layout:
    """
    Build a layout from the current state of target.

    The axis group comes from the current axes and the line group from the
    first line in it.

    Args:
        name: Layout name
        target: Figure node
        profile: Property subsets to read

    Returns:
        Captured layout

    Raises:
        PreconditionError: If target has no axes
    """
    axes = require_axes(target)

    layout = Layout(name=name)
    layout.figure = read_properties(target, profile.figure_properties())
    layout.axis = read_properties(axes, AXIS_PROPERTIES)

    if profile.line:
        lines = axes.children(LINES)
        if lines:
            layout.line = read_properties(lines[0], profile.line_properties())
        else:
            logger.info(f"Layout {name}: no line to capture line properties from")

    return layout
