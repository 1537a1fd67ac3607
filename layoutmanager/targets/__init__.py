"""
Target adapters exposing plot objects to the layout engine.
"""

from .base import AXES, LINES, PropertyNode
from .mpl import AxesNode, FigureNode, LineNode, wrap_figure

__all__ = ["AXES", "LINES", "PropertyNode", "FigureNode", "AxesNode", "LineNode", "wrap_figure"]
