"""
layoutmanager - save the styling of a matplotlib figure and re-apply it.

Example:
    import layoutmanager

    layoutmanager.save("Demo", fig1, "Line")
    layoutmanager.apply_layout("Demo", fig2)
"""

from typing import Any, Dict, List, Optional

from matplotlib.figure import Figure

from .core import Layout, LayoutManager, LayoutStore, MergeReport
from .errors import LayoutManagerError, PreconditionError, PropertyError

__version__ = "1.0.0"


def save(name: str, target: Any, params: Optional[str] = "Basic") -> Layout:
    """Save the layout of target under name (see LayoutManager.save)."""
    return LayoutManager().save(name, target, params)


def apply_layout(name: Optional[str], target: Any) -> MergeReport:
    """Apply the stored layout called name to target."""
    return LayoutManager().apply_layout(name, target)


def load_layouts() -> List[Layout]:
    return LayoutManager().load_layouts()


def list_layout_names() -> List[str]:
    return LayoutManager().list_layout_names()


def get_default_layout() -> Dict[str, Any]:
    return LayoutManager.get_default_layout()


def demo_layout(name: Optional[str] = None, figure: Optional[Figure] = None) -> Figure:
    """Draw a demo plot styled with the layout called name."""
    return LayoutManager().demo_layout(name, figure)


__all__ = [
    "Layout",
    "LayoutManager",
    "LayoutStore",
    "MergeReport",
    "LayoutManagerError",
    "PreconditionError",
    "PropertyError",
    "save",
    "apply_layout",
    "load_layouts",
    "list_layout_names",
    "get_default_layout",
    "demo_layout",
]
