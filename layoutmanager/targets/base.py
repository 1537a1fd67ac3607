"""
Capability interface for styled objects.

The core only talks to targets through PropertyNode: get/set by dotted
property path, plus enumeration of child nodes by kind.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

# Child kinds
AXES = "axes"
LINES = "lines"


class PropertyNode(ABC):
    """A node of the target object graph (figure, axes or line)."""

    @abstractmethod
    def get(self, path: str) -> Any:
        """
        Read the value at a dotted property path.

        Raises:
            PropertyError: If the path is not supported by this node
        """

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        """
        Write a value at a dotted property path.

        Raises:
            PropertyError: If the path is unsupported or the value rejected
        """

    def children(self, kind: str) -> List["PropertyNode"]:
        """Child nodes of the given kind (AXES or LINES)."""
        return []

    def current_child(self, kind: str) -> Optional["PropertyNode"]:
        """The child a save reads from; the first one unless overridden."""
        nodes = self.children(kind)
        return nodes[0] if nodes else None
