"""
Layout record and its JSON document form.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config.defaults import AXIS_GROUP, FIGURE_GROUP, LINE_GROUP, NAME_KEY
from .tree import copy_tree, is_group

PropertyGroup = Dict[str, Any]


@dataclass
class Layout:
    """
    A named bundle of styling properties.

    Each group is None when the layout does not specify it. Unknown
    top-level keys read from a file are kept in extra and written back.
    """
    name: str
    figure: Optional[PropertyGroup] = None
    axis: Optional[PropertyGroup] = None
    line: Optional[PropertyGroup] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def groups(self) -> Dict[str, PropertyGroup]:
        """Deep copy of the groups present, keyed figure/axis/line."""
        tree = {}
        for key in (FIGURE_GROUP, AXIS_GROUP, LINE_GROUP):
            group = getattr(self, key)
            if group is not None:
                tree[key] = copy_tree(group)
        return tree

    def matches(self, name: Optional[str]) -> bool:
        """Case-insensitive name comparison."""
        return bool(name) and self.name.lower() == name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """JSON object for this layout, Name first."""
        data: Dict[str, Any] = {NAME_KEY: self.name}
        data.update(self.groups())
        for key, value in self.extra.items():
            data.setdefault(key, copy_tree(value) if is_group(value) else value)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Layout":
        """
        Build a layout from a JSON object.

        Raises:
            ValueError: If data has no string Name or a group is not an object
        """
        if not isinstance(data, dict) or not isinstance(data.get(NAME_KEY), str):
            raise ValueError("layout entry needs a string 'Name'")

        groups = {}
        for key in (FIGURE_GROUP, AXIS_GROUP, LINE_GROUP):
            group = data.get(key)
            if group is not None and not is_group(group):
                raise ValueError(f"layout group '{key}' must be an object")
            groups[key] = copy_tree(group) if group is not None else None

        extra = {
            key: value for key, value in data.items()
            if key not in (NAME_KEY, FIGURE_GROUP, AXIS_GROUP, LINE_GROUP)
        }
        return cls(name=data[NAME_KEY], extra=copy_tree(extra), **groups)
