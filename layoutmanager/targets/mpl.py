"""
matplotlib adapters for the PropertyNode interface.

Property names follow the layout file vocabulary (Color, FontSize,
XAxis.LineWidth, XGrid, ...). Each node holds a table mapping a property
path to a (getter, setter) pair; anything outside the table raises
PropertyError.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple

import matplotlib.colors as mcolors
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.ticker import AutoMinorLocator, NullLocator

from ..errors import PropertyError
from .base import AXES, LINES, PropertyNode


Getter = Callable[[], Any]
Setter = Callable[[Any], None]

_ON = "on"
_OFF = "off"

# 2D axes spines standing in for the x and y axis lines
_SPINES = {"x": "bottom", "y": "left"}


def _on_off(flag: bool) -> str:
    return _ON if flag else _OFF


def _parse_on_off(value: Any) -> bool:
    if isinstance(value, str) and value.lower() in (_ON, _OFF):
        return value.lower() == _ON
    if isinstance(value, bool):
        return value
    raise ValueError(f"expected 'on' or 'off', got {value!r}")


def _rgb(color: Any) -> Any:
    """RGB list for a matplotlib color; 'none'/'auto' are passed through."""
    if isinstance(color, str) and color.lower() in ("none", "auto"):
        return color.lower()
    return [float(c) for c in mcolors.to_rgb(color)]


class _TableNode(PropertyNode):
    """PropertyNode backed by a path -> (getter, setter) table."""

    def _properties(self) -> Dict[str, Tuple[Getter, Setter]]:
        raise NotImplementedError

    def _lookup(self, path: str) -> Tuple[Getter, Setter]:
        entry = self._properties().get(path)
        if entry is None:
            raise PropertyError(path)
        return entry

    def get(self, path: str) -> Any:
        getter, _ = self._lookup(path)
        try:
            return getter()
        except (AttributeError, TypeError, ValueError, IndexError) as e:
            raise PropertyError(path, str(e)) from e

    def set(self, path: str, value: Any) -> None:
        _, setter = self._lookup(path)
        try:
            setter(value)
        except (AttributeError, TypeError, ValueError, IndexError) as e:
            raise PropertyError(path, str(e)) from e

    def supported_properties(self) -> List[str]:
        """Property paths this node can read and write."""
        return list(self._properties().keys())


class FigureNode(_TableNode):
    """
    Figure-level properties.

    Window chrome (ToolBar, WindowState, Position) is only available when the
    figure lives in a Qt window, i.e. pyplot with a PySide6 backend.
    """

    def __init__(self, figure: Figure):
        self.figure = figure

    def _properties(self) -> Dict[str, Tuple[Getter, Setter]]:
        props: Dict[str, Tuple[Getter, Setter]] = {
            "Color": (self._get_color, self.figure.set_facecolor),
        }
        if self._qt_window() is not None:
            props["ToolBar"] = (self._get_toolbar, self._set_toolbar)
            props["WindowState"] = (self._get_window_state, self._set_window_state)
            props["Position"] = (self._get_position, self._set_position)
        return props

    def children(self, kind: str) -> List[PropertyNode]:
        if kind == AXES:
            return [AxesNode(ax) for ax in self.figure.axes]
        return []

    def current_child(self, kind: str) -> Optional[PropertyNode]:
        if kind == AXES and self.figure.axes:
            # gca() only creates axes when there are none
            return AxesNode(self.figure.gca())
        return super().current_child(kind)

    def _get_color(self) -> List[float]:
        return _rgb(self.figure.get_facecolor())

    # --- Qt window chrome ---

    def _qt_window(self):
        manager = getattr(self.figure.canvas, "manager", None)
        window = getattr(manager, "window", None)
        if window is None:
            return None
        try:
            from PySide6.QtWidgets import QWidget
        except ImportError:
            return None
        return window if isinstance(window, QWidget) else None

    def _toolbar(self):
        toolbar = getattr(self.figure.canvas.manager, "toolbar", None)
        if toolbar is None:
            raise AttributeError("figure window has no toolbar")
        return toolbar

    def _get_toolbar(self) -> str:
        return "figure" if self._toolbar().isVisible() else "none"

    def _set_toolbar(self, value: Any) -> None:
        if value not in ("figure", "auto", "none"):
            raise ValueError(f"invalid toolbar mode {value!r}")
        self._toolbar().setVisible(value != "none")

    def _get_window_state(self) -> str:
        from PySide6.QtCore import Qt

        state = self._qt_window().windowState()
        if state & Qt.WindowState.WindowFullScreen:
            return "fullscreen"
        if state & Qt.WindowState.WindowMaximized:
            return "maximized"
        if state & Qt.WindowState.WindowMinimized:
            return "minimized"
        return "normal"

    def _set_window_state(self, value: Any) -> None:
        window = self._qt_window()
        actions = {
            "normal": window.showNormal,
            "maximized": window.showMaximized,
            "minimized": window.showMinimized,
            "fullscreen": window.showFullScreen,
        }
        if value not in actions:
            raise ValueError(f"invalid window state {value!r}")
        actions[value]()

    def _screen_geometry(self):
        screen = self._qt_window().screen()
        if screen is None:
            raise AttributeError("figure window is not on a screen")
        return screen.availableGeometry()

    def _get_position(self) -> List[float]:
        """Window geometry as [x, y, width, height] normalized to the screen."""
        screen = self._screen_geometry()
        geom = self._qt_window().geometry()
        return [
            (geom.x() - screen.x()) / screen.width(),
            (geom.y() - screen.y()) / screen.height(),
            geom.width() / screen.width(),
            geom.height() / screen.height(),
        ]

    def _set_position(self, value: Any) -> None:
        x, y, w, h = (float(v) for v in value)
        screen = self._screen_geometry()
        self._qt_window().setGeometry(
            screen.x() + round(x * screen.width()),
            screen.y() + round(y * screen.height()),
            round(w * screen.width()),
            round(h * screen.height()),
        )


class AxesNode(_TableNode):
    """Axes-level properties: font size, axis line widths and grids."""

    def __init__(self, axes: Axes):
        self.axes = axes

    @property
    def is_3d(self) -> bool:
        return hasattr(self.axes, "zaxis")

    def _axis_names(self) -> List[str]:
        return ["x", "y", "z"] if self.is_3d else ["x", "y"]

    def _properties(self) -> Dict[str, Tuple[Getter, Setter]]:
        props: Dict[str, Tuple[Getter, Setter]] = {
            "FontSize": (self._get_font_size, self._set_font_size),
        }
        for name in self._axis_names():
            upper = name.upper()
            props[f"{upper}Axis.LineWidth"] = (
                lambda n=name: self._get_axis_line_width(n),
                lambda v, n=name: self._set_axis_line_width(n, v),
            )
            props[f"{upper}Grid"] = (
                lambda n=name: self._get_grid(n, "major"),
                lambda v, n=name: self._set_grid(n, "major", v),
            )
            props[f"{upper}MinorGrid"] = (
                lambda n=name: self._get_grid(n, "minor"),
                lambda v, n=name: self._set_grid(n, "minor", v),
            )
        return props

    def children(self, kind: str) -> List[PropertyNode]:
        if kind == LINES:
            return [LineNode(line) for line in self.axes.get_lines()]
        return []

    def _axis(self, name: str):
        return getattr(self.axes, f"{name}axis")

    def _get_font_size(self) -> float:
        return self.axes.xaxis.label.get_fontsize()

    def _set_font_size(self, value: Any) -> None:
        size = float(value)
        for name in self._axis_names():
            self._axis(name).label.set_fontsize(size)
        self.axes.tick_params(labelsize=size)
        self.axes.title.set_fontsize(size)

    def _get_axis_line_width(self, name: str) -> float:
        if self.is_3d:
            return self._axis(name).line.get_linewidth()
        return self.axes.spines[_SPINES[name]].get_linewidth()

    def _set_axis_line_width(self, name: str, value: Any) -> None:
        width = float(value)
        if self.is_3d:
            self._axis(name).line.set_linewidth(width)
        else:
            self.axes.spines[_SPINES[name]].set_linewidth(width)
            self.axes.tick_params(axis=name, width=width)

    def _get_grid(self, name: str, which: str) -> str:
        axis = self._axis(name)
        ticks = axis.get_major_ticks() if which == "major" else axis.get_minor_ticks()
        return _on_off(any(tick.gridline.get_visible() for tick in ticks))

    def _set_grid(self, name: str, which: str, value: Any) -> None:
        visible = _parse_on_off(value)
        axis = self._axis(name)
        if visible and which == "minor" and isinstance(axis.get_minor_locator(), NullLocator):
            # Minor gridlines need minor ticks to hang on
            axis.set_minor_locator(AutoMinorLocator())
        axis.grid(visible, which=which)


class LineNode(_TableNode):
    """Line properties: width, style and markers."""

    def __init__(self, line: Line2D):
        self.line = line

    def _properties(self) -> Dict[str, Tuple[Getter, Setter]]:
        line = self.line
        return {
            "LineWidth": (line.get_linewidth, lambda v: line.set_linewidth(float(v))),
            "LineStyle": (line.get_linestyle, line.set_linestyle),
            "Marker": (line.get_marker, line.set_marker),
            "MarkerSize": (line.get_markersize, lambda v: line.set_markersize(float(v))),
            "MarkerFaceColor": (
                lambda: _rgb(line.get_markerfacecolor()), line.set_markerfacecolor
            ),
            "MarkerEdgeColor": (
                lambda: _rgb(line.get_markeredgecolor()), line.set_markeredgecolor
            ),
        }


def wrap_figure(target: Any) -> PropertyNode:
    """
    Return target as a PropertyNode.

    Accepts an existing PropertyNode or a matplotlib Figure.

    Raises:
        TypeError: For any other object
    """
    if isinstance(target, PropertyNode):
        return target
    if isinstance(target, Figure):
        return FigureNode(target)
    raise TypeError(f"Cannot style object of type {type(target).__name__}")
