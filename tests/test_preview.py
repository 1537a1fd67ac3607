"""Tests for the layout preview window."""

import pytest

from layoutmanager.core.layout import Layout
from layoutmanager.core.manager import LayoutManager

# Guard: skip Qt-dependent tests if PySide6 is not importable
try:
    from PySide6.QtWidgets import QApplication
    _HAS_QT = True
except ImportError:
    _HAS_QT = False

needs_qt = pytest.mark.skipif(not _HAS_QT, reason="PySide6 not available")


@pytest.fixture
def manager(store):
    store.save([
        Layout(name="Big", axis={"FontSize": 24}),
        Layout(name="Thin", line={"LineWidth": 0.5}),
    ])
    return LayoutManager(store)


class TestPreviewWindow:

    @needs_qt
    def test_lists_default_and_stored_layouts(self, qtbot, manager):
        from layoutmanager.ui import PreviewWindow
        window = PreviewWindow(manager)
        qtbot.addWidget(window)

        combo = window._layout_combo
        assert [combo.itemText(i) for i in range(combo.count())] == ["Default", "Big", "Thin"]
        assert window.selected_layout() == "Default"
        assert window.figure.axes[0].get_title() == "Layout: Default"

    @needs_qt
    def test_selecting_layout_restyles_plot(self, qtbot, manager):
        from layoutmanager.ui import PreviewWindow
        window = PreviewWindow(manager)
        qtbot.addWidget(window)

        window._layout_combo.setCurrentText("Thin")

        ax = window.figure.axes[0]
        assert ax.get_title() == "Layout: Thin"
        assert ax.get_lines()[0].get_linewidth() == 0.5

    @needs_qt
    def test_reload_picks_up_new_layouts(self, qtbot, manager):
        from layoutmanager.ui import PreviewWindow
        window = PreviewWindow(manager)
        qtbot.addWidget(window)
        window._layout_combo.setCurrentText("Big")

        manager.store.save(manager.load_layouts() + [Layout(name="New")])
        window.reload_layouts()

        combo = window._layout_combo
        assert combo.findText("New") >= 0
        assert window.selected_layout() == "Big"
        assert window.figure.axes[0].xaxis.label.get_fontsize() == 24
