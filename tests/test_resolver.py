"""Tests for layout resolution and the default layout."""

import logging

import pytest

from layoutmanager.config.defaults import DEFAULT_LAYOUT
from layoutmanager.core.layout import Layout
from layoutmanager.core.resolver import get_default_layout, resolve


@pytest.fixture
def collection():
    return [
        Layout(name="Demo", figure={"Color": [0, 0, 0]}, axis={"FontSize": 18}),
        Layout(name="Other", line={"LineWidth": 5}),
    ]


class TestDefaultLayout:

    def test_contents(self):
        layout = get_default_layout()
        assert layout["figure"]["Color"] == [1, 1, 1]
        assert layout["axis"]["FontSize"] == 20
        for axis in "XYZ":
            assert layout["axis"][f"{axis}Axis"]["LineWidth"] == 2
            assert layout["axis"][f"{axis}Grid"] == "on"
            assert layout["axis"][f"{axis}MinorGrid"] == "on"
        assert layout["line"] == {"LineWidth": 2}

    def test_returns_copy(self):
        layout = get_default_layout()
        layout["figure"]["Color"][0] = 0
        assert DEFAULT_LAYOUT["figure"]["Color"] == [1, 1, 1]


class TestResolve:

    @pytest.mark.parametrize("name", ["demo", "DEMO", "Demo"])
    def test_case_insensitive(self, collection, name):
        assert resolve(name, collection) == {
            "figure": {"Color": [0, 0, 0]},
            "axis": {"FontSize": 18},
        }

    def test_only_present_groups(self, collection):
        assert resolve("other", collection) == {"line": {"LineWidth": 5}}

    @pytest.mark.parametrize("name", [None, ""])
    def test_no_name_returns_default_silently(self, collection, name, caplog):
        with caplog.at_level(logging.WARNING):
            assert resolve(name, collection) == get_default_layout()
        assert caplog.records == []

    def test_unknown_name_warns_and_returns_default(self, collection, caplog):
        with caplog.at_level(logging.WARNING):
            assert resolve("NoSuchName", collection) == get_default_layout()
        assert any("NoSuchName" in r.getMessage() for r in caplog.records)
        assert caplog.records[0].levelno == logging.WARNING

    def test_empty_collection(self):
        assert resolve("Demo", []) == get_default_layout()

    def test_first_match_wins(self):
        collection = [Layout(name="dup", axis={"FontSize": 1}),
                      Layout(name="DUP", axis={"FontSize": 2})]
        assert resolve("Dup", collection) == {"axis": {"FontSize": 1}}

    def test_result_is_a_copy(self, collection):
        tree = resolve("Demo", collection)
        tree["axis"]["FontSize"] = 99
        assert collection[0].axis == {"FontSize": 18}
