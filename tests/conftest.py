"""Shared fixtures for layoutmanager tests.

Every test runs with the per-user config directory and the working
directory redirected into tmp_path, so no real layout file is touched.
"""

import os

import matplotlib
import pytest

matplotlib.use("Agg")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from helpers import make_figure_node  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the global config dir and cwd at temporary directories."""
    config_dir = tmp_path / "config"
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setenv("LAYOUTMANAGER_CONFIG_DIR", str(config_dir))
    monkeypatch.chdir(work_dir)
    return config_dir


@pytest.fixture
def layout_file(tmp_path):
    return tmp_path / "layouts" / "layoutManager.json"


@pytest.fixture
def store(layout_file):
    from layoutmanager.core.store import LayoutStore
    return LayoutStore(layout_file)


@pytest.fixture
def figure_node():
    return make_figure_node(n_axes=2, n_lines=2)
