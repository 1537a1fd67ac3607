"""
Layout persistence and application.

This module provides the logic for:
- Reading and writing stored layouts
- Resolving a layout name against the built-in default
- Capturing a layout from a figure and applying one to a figure
"""

from .layout import Layout
from .store import LayoutStore
from .merge import MergeReport, apply_properties, values_equal
from .resolver import get_default_layout, resolve
from .capture import CaptureProfile, capture_layout
from .manager import LayoutManager

__all__ = [
    "Layout",
    "LayoutStore",
    "MergeReport",
    "apply_properties",
    "values_equal",
    "get_default_layout",
    "resolve",
    "CaptureProfile",
    "capture_layout",
    "LayoutManager",
]
