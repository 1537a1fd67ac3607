"""Test doubles for layoutmanager tests."""

from layoutmanager.errors import PropertyError
from layoutmanager.targets.base import AXES, LINES, PropertyNode


class RecordingNode(PropertyNode):
    """In-memory target that records every write.

    Properties are kept flat by dotted path. ``supported`` limits the
    paths the node accepts (None accepts everything); reading a supported
    path that was never set raises PropertyError like an unreadable
    property would.
    """

    def __init__(self, props=None, supported=None, axes=None, lines=None):
        self.props = dict(props or {})
        self.supported = set(supported) if supported is not None else None
        self.writes = []
        self._children = {AXES: list(axes or []), LINES: list(lines or [])}

    def _check(self, path):
        if self.supported is not None and path not in self.supported:
            raise PropertyError(path)

    def get(self, path):
        self._check(path)
        if path not in self.props:
            raise PropertyError(path, "not set")
        return self.props[path]

    def set(self, path, value):
        self._check(path)
        self.props[path] = value
        self.writes.append((path, value))

    def children(self, kind):
        return list(self._children.get(kind, []))


def make_figure_node(n_axes=1, n_lines=1):
    """Figure -> axes -> lines tree of RecordingNodes."""
    axes = [
        RecordingNode(lines=[RecordingNode() for _ in range(n_lines)])
        for _ in range(n_axes)
    ]
    return RecordingNode(axes=axes)


def all_writes(figure):
    """Writes recorded on a figure node and all its descendants."""
    writes = list(figure.writes)
    for axes in figure.children(AXES):
        writes += axes.writes
        for line in axes.children(LINES):
            writes += line.writes
    return writes
