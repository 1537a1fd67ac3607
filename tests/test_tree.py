"""Tests for nested property tree helpers."""

from layoutmanager.core.tree import (
    copy_tree,
    get_path,
    is_group,
    is_group_at,
    iter_leaves,
    join_path,
    keys_at,
    set_path,
)


TREE = {
    "FontSize": 20,
    "XAxis": {"LineWidth": 2, "Color": [0, 0, 0]},
    "XGrid": "on",
}


class TestTreeRead:

    def test_keys_at_root(self):
        assert keys_at(TREE) == ["FontSize", "XAxis", "XGrid"]

    def test_keys_at_nested(self):
        assert keys_at(TREE, "XAxis") == ["LineWidth", "Color"]

    def test_keys_at_leaf_or_missing(self):
        assert keys_at(TREE, "FontSize") == []
        assert keys_at(TREE, "YAxis") == []

    def test_get_path(self):
        assert get_path(TREE, "XAxis.LineWidth") == 2
        assert get_path(TREE, "XAxis.Color") == [0, 0, 0]
        assert get_path(TREE, "") is TREE

    def test_get_path_missing_returns_default(self):
        assert get_path(TREE, "YAxis.LineWidth") is None
        assert get_path(TREE, "FontSize.Value", default=-1) == -1

    def test_is_group(self):
        assert is_group({})
        assert not is_group([1, 2, 3])
        assert is_group_at(TREE, "XAxis")
        assert not is_group_at(TREE, "XGrid")
        assert not is_group_at(TREE, "Nope")

    def test_iter_leaves_depth_first(self):
        assert list(iter_leaves(TREE)) == [
            ("FontSize", 20),
            ("XAxis.LineWidth", 2),
            ("XAxis.Color", [0, 0, 0]),
            ("XGrid", "on"),
        ]

    def test_join_path(self):
        assert join_path("", "Color") == "Color"
        assert join_path("XAxis", "LineWidth") == "XAxis.LineWidth"


class TestTreeWrite:

    def test_set_path_creates_groups(self):
        tree = {}
        set_path(tree, "XAxis.LineWidth", 3)
        set_path(tree, "FontSize", 12)
        assert tree == {"XAxis": {"LineWidth": 3}, "FontSize": 12}

    def test_set_path_replaces_leaf_with_group(self):
        tree = {"XAxis": 1}
        set_path(tree, "XAxis.LineWidth", 3)
        assert tree == {"XAxis": {"LineWidth": 3}}

    def test_copy_tree_is_deep(self):
        copied = copy_tree(TREE)
        copied["XAxis"]["Color"][0] = 1
        assert TREE["XAxis"]["Color"] == [0, 0, 0]
