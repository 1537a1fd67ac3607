"""
Demo plot for trying out layouts.
"""

from typing import Optional

import numpy as np
from matplotlib.figure import Figure


def build_demo_figure(name: Optional[str] = None, figure: Optional[Figure] = None) -> Figure:
    """
    Plot a sine wave titled after the layout name.

    Args:
        name: Layout name for the title ("Default" if empty)
        figure: Figure to draw into (cleared first); a new one if None

    Returns:
        The figure
    """
    if figure is None:
        figure = Figure()
    else:
        figure.clear()

    ax = figure.add_subplot()
    x = np.linspace(0, 2 * np.pi, 1000)
    ax.plot(x, np.sin(x))
    ax.set_xlim(x[0], x[-1])
    ax.set_title(f"Layout: {name or 'Default'}")
    return figure
