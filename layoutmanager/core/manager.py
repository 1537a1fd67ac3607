"""
Public layout operations.

LayoutManager ties the store, resolver, capture and merge engine together.
Every operation takes the target figure explicitly.
"""

import logging
from typing import Any, Dict, List, Optional

from matplotlib.figure import Figure

from ..config.defaults import AXIS_GROUP, FIGURE_GROUP, LINE_GROUP
from ..targets.base import AXES, LINES, PropertyNode
from ..targets.mpl import wrap_figure
from .capture import CaptureProfile, capture_layout, require_axes
from .demo import build_demo_figure
from .layout import Layout
from .merge import FailureCallback, MergeReport, apply_properties
from .resolver import get_default_layout, resolve
from .store import LayoutStore, upsert

logger = logging.getLogger(__name__)


class LayoutManager:
    """
    Save layouts from figures and apply stored layouts to figures.

    Targets may be matplotlib Figures or any PropertyNode.
    """

    def __init__(self, store: Optional[LayoutStore] = None):
        self.store = store if store is not None else LayoutStore()

    def save(self, name: str, target: Any, params: Optional[str] = "Basic") -> Layout:
        """
        Save the layout of target under name.

        An existing layout with the same name (ignoring case) is replaced
        in place.

        Args:
            name: Layout name
            target: Figure to read the layout from
            params: Profile tokens: "Basic", "Full", "Line" or a combination

        Returns:
            The captured layout (also when writing the file failed)

        Raises:
            PreconditionError: If the figure has no axes
        """
        node = wrap_figure(target)
        layout = capture_layout(name, node, CaptureProfile.from_string(params))

        layouts = upsert(self.store.load(), layout)
        if not self.store.save(layouts):
            logger.error(f"Layout {name} could not be stored")
        return layout

    def apply_layout(
        self,
        name: Optional[str],
        target: Any,
        on_failure: Optional[FailureCallback] = None,
    ) -> MergeReport:
        """
        Apply the layout called name to target.

        The figure group goes to the figure, the axis group to every axes
        and the line group to every line of every axes. Unknown or empty
        names fall back to the default layout.

        Raises:
            PreconditionError: If the figure has no axes
        """
        node = wrap_figure(target)
        require_axes(node)

        layout = resolve(name, self.store.load())
        return self.apply_tree(layout, node, on_failure)

    @staticmethod
    def apply_tree(
        layout: Dict[str, Any],
        node: PropertyNode,
        on_failure: Optional[FailureCallback] = None,
    ) -> MergeReport:
        """Apply an already resolved layout tree to a figure node."""
        report = MergeReport()

        if FIGURE_GROUP in layout:
            report.extend(apply_properties(layout[FIGURE_GROUP], node, on_failure))

        for axes in node.children(AXES):
            if AXIS_GROUP in layout:
                report.extend(apply_properties(layout[AXIS_GROUP], axes, on_failure))

            if LINE_GROUP in layout:
                for line in axes.children(LINES):
                    report.extend(apply_properties(layout[LINE_GROUP], line, on_failure))

        logger.debug(
            f"Applied layout: {report.write_count} written, "
            f"{len(report.unchanged)} unchanged, {len(report.failed)} failed"
        )
        return report

    def load_layouts(self) -> List[Layout]:
        """All stored layouts."""
        return self.store.load()

    def list_layout_names(self) -> List[str]:
        return [layout.name for layout in self.store.load()]

    def format_layout_list(self) -> str:
        """Stored layout names as a printable list."""
        lines = ["List of stored layouts:"]
        lines += [f"\t{name}" for name in self.list_layout_names()]
        return "\n".join(lines)

    @staticmethod
    def get_default_layout() -> Dict[str, Any]:
        return get_default_layout()

    def demo_layout(self, name: Optional[str] = None, figure: Optional[Figure] = None) -> Figure:
        """
        Draw a demo plot and apply the layout called name to it.

        Returns:
            The demo figure
        """
        figure = build_demo_figure(name, figure)
        self.apply_layout(name, figure)
        return figure
