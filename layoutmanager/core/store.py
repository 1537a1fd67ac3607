"""
Persistence of layouts as a JSON document.

The file holds a list of layout objects. A file containing a single
object is accepted as well. Reading never raises: a missing or broken file
means "no stored layouts".
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from ..config.paths import get_settings_file
from .layout import Layout

logger = logging.getLogger(__name__)


def find_index(collection: List[Layout], name: Optional[str]) -> Optional[int]:
    """
    Index of the first layout whose name matches, ignoring case.

    Args:
        collection: Layouts in stored order
        name: Name to look for

    Returns:
        Index or None when name is empty or not found
    """
    if not name:
        return None

    for index, layout in enumerate(collection):
        if layout.matches(name):
            return index
    return None


def upsert(collection: List[Layout], layout: Layout) -> List[Layout]:
    """
    Replace the layout with the same name in place, or append it.

    Returns:
        New list; collection itself is not modified
    """
    result = list(collection)
    index = find_index(result, layout.name)
    if index is None:
        result.append(layout)
    else:
        result[index] = layout
    return result


def parse_layouts(data: Any) -> List[Layout]:
    """Normalize a decoded document (object or list) into layouts."""
    if data is None:
        return []
    entries = data if isinstance(data, list) else [data]

    layouts = []
    for entry in entries:
        try:
            layouts.append(Layout.from_dict(entry))
        except ValueError as e:
            logger.warning(f"Ignoring invalid layout entry: {e}")
    return layouts


def dumps_layouts(collection: List[Layout]) -> str:
    """Serialize layouts to the on-disk text form."""
    return json.dumps([layout.to_dict() for layout in collection], indent=2)


class LayoutStore:
    """
    Reads and writes the layout file.

    Without an explicit path the file is looked up on every call, so a
    layoutManager.json created in the working directory takes over from
    the per-user file immediately.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else get_settings_file()

    def load(self) -> List[Layout]:
        """
        Load all layouts from file.

        Returns:
            Stored layouts, or an empty list if the file is missing or invalid
        """
        path = self.path
        if not path.is_file():
            logger.debug(f"No layout file at {path}")
            return []

        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read layouts from {path}: {e}")
            return []

        if not text.strip():
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse layouts in {path}: {e}")
            return []

        layouts = parse_layouts(data)
        logger.debug(f"Loaded {len(layouts)} layout(s) from {path}")
        return layouts

    def save(self, collection: List[Layout]) -> bool:
        """
        Write all layouts to file, replacing its content.

        Creates parent directories if needed.

        Returns:
            True on success; False if serializing or writing failed
        """
        path = self.path
        try:
            text = dumps_layouts(collection)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize layouts: {e}")
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Failed to save layouts to {path}: {e}")
            return False

        logger.info(f"Saved {len(collection)} layout(s) to {path}")
        return True
