"""
Preview window for stored layouts.

Shows the demo plot in a matplotlib canvas and restyles it with the layout
picked from the combo box.
"""

import logging
from typing import Optional

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QComboBox, QPushButton,
)

from ..core import LayoutManager

logger = logging.getLogger(__name__)

DEFAULT_ENTRY = "Default"


class PreviewWindow(QMainWindow):
    """
    Window previewing a layout on the demo plot.

    Layout:
    - Top bar: layout selector + Reload button
    - Body: matplotlib canvas
    """

    def __init__(self, manager: Optional[LayoutManager] = None,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.manager = manager if manager is not None else LayoutManager()
        self.figure = Figure()
        self._init_ui()
        self.reload_layouts()

    def _init_ui(self):
        self.setWindowTitle("Layout Preview")
        self.resize(800, 600)

        central = QWidget()
        layout = QVBoxLayout(central)

        top_bar = QHBoxLayout()
        top_bar.addWidget(QLabel("Layout:"))

        self._layout_combo = QComboBox()
        self._layout_combo.currentTextChanged.connect(self._on_layout_selected)
        top_bar.addWidget(self._layout_combo, stretch=1)

        self._reload_button = QPushButton("Reload")
        self._reload_button.clicked.connect(self.reload_layouts)
        top_bar.addWidget(self._reload_button)
        layout.addLayout(top_bar)

        self.canvas = FigureCanvasQTAgg(self.figure)
        layout.addWidget(self.canvas, stretch=1)

        self.setCentralWidget(central)

    def reload_layouts(self):
        """Refill the selector from the layout file, keeping the selection."""
        current = self._layout_combo.currentText()
        names = self.manager.list_layout_names()

        self._layout_combo.blockSignals(True)
        self._layout_combo.clear()
        self._layout_combo.addItem(DEFAULT_ENTRY)
        self._layout_combo.addItems(names)
        index = self._layout_combo.findText(current)
        self._layout_combo.setCurrentIndex(max(index, 0))
        self._layout_combo.blockSignals(False)

        self.show_layout(self._layout_combo.currentText())

    def show_layout(self, entry: str):
        """Redraw the demo plot with the given selector entry."""
        name = None if entry == DEFAULT_ENTRY else entry
        self.manager.demo_layout(name, self.figure)
        self.canvas.draw_idle()
        logger.info(f"Previewing layout: {entry}")

    def selected_layout(self) -> str:
        return self._layout_combo.currentText()

    def _on_layout_selected(self, entry: str):
        if entry:
            self.show_layout(entry)
