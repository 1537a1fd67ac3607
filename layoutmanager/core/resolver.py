"""
Resolution of a layout name to a property tree.
"""

import logging
from typing import Any, Dict, List, Optional

from ..config.defaults import DEFAULT_LAYOUT
from .layout import Layout
from .store import find_index
from .tree import copy_tree

logger = logging.getLogger(__name__)


def get_default_layout() -> Dict[str, Any]:
    """Copy of the built-in layout used when no stored layout applies."""
    return copy_tree(DEFAULT_LAYOUT)


def resolve(name: Optional[str], collection: List[Layout]) -> Dict[str, Any]:
    """
    Find the layout called name (ignoring case) in collection.

    An empty name silently yields the default layout; an unknown name logs
    a warning and yields the default layout too.

    Returns:
        Tree with the groups of the layout (figure/axis/line), copied
    """
    if not name:
        return get_default_layout()

    index = find_index(collection, name)
    if index is None:
        logger.warning(f"Layout {name} not found, using default")
        return get_default_layout()

    return collection[index].groups()
