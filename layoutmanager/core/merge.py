"""
Property merge engine.

Copies the leaves of a property tree onto a target node, writing only the
values that differ from what the target currently holds. Every write on a
figure or axes may trigger a redraw, so unchanged leaves are skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from ..errors import PropertyError
from ..targets.base import PropertyNode
from .tree import is_group, join_path

logger = logging.getLogger(__name__)

FailureCallback = Callable[[str, Exception], None]


@dataclass
class MergeReport:
    """Outcome of one or more apply_properties calls."""
    written: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)  # (path, reason)

    @property
    def write_count(self) -> int:
        return len(self.written)

    def extend(self, other: "MergeReport") -> None:
        """Add the entries of another report to this one."""
        self.written.extend(other.written)
        self.unchanged.extend(other.unchanged)
        self.failed.extend(other.failed)


def values_equal(current: Any, new: Any) -> bool:
    """
    Compare a target value with a layout value.

    Vectors are accepted in either orientation: a value equal to the
    transpose of the other, or a row/column vector with the same entries,
    counts as unchanged.
    """
    if isinstance(current, str) or isinstance(new, str):
        return isinstance(current, str) and isinstance(new, str) and current == new

    try:
        a = np.asarray(current)
        b = np.asarray(new)
    except (TypeError, ValueError):
        return _plain_equal(current, new)

    if a.dtype == object or b.dtype == object:
        return _plain_equal(current, new)

    if np.array_equal(a, b) or np.array_equal(a.T, b):
        return True

    # Row vs. column vs. flat vector
    if a.size == b.size and _is_vector(a) and _is_vector(b):
        return np.array_equal(a.ravel(), b.ravel())

    return False


def _plain_equal(current: Any, new: Any) -> bool:
    # Anything but a plain bool (e.g. an elementwise array) counts as different
    try:
        result = current == new
    except (TypeError, ValueError):
        return False
    return result if isinstance(result, bool) else False


def _is_vector(arr: np.ndarray) -> bool:
    return arr.ndim == 1 or (arr.ndim == 2 and 1 in arr.shape)


def apply_properties(
    source: Dict[str, Any],
    target: PropertyNode,
    on_failure: Optional[FailureCallback] = None,
    prefix: str = "",
) -> MergeReport:
    """
    Apply the leaves of source onto target, skipping unchanged values.

    Failures on single properties never abort the merge: they are recorded
    in the report, passed to on_failure and logged at DEBUG level.

    Args:
        source: Property tree (not modified)
        target: Node exposing get/set by dotted path
        on_failure: Optional callback(path, exception) for failed writes
        prefix: Path of source within the target (used when recursing)

    Returns:
        MergeReport listing written, unchanged and failed paths
    """
    report = MergeReport()

    for key, value in source.items():
        path = join_path(prefix, key)

        if is_group(value):
            report.extend(apply_properties(value, target, on_failure, path))
            continue

        changed = True
        try:
            current = target.get(path)
        except PropertyError:
            # Unreadable on this target: assume it differs and try the write
            pass
        else:
            try:
                changed = not values_equal(current, value)
            except (TypeError, ValueError) as e:
                logger.debug(f"Cannot compare {path}, writing it: {e}")

        if not changed:
            report.unchanged.append(path)
            continue

        try:
            target.set(path, value)
        except PropertyError as e:
            logger.debug(f"Skipped property {path}: {e}")
            report.failed.append((path, str(e)))
            if on_failure is not None:
                on_failure(path, e)
            continue

        report.written.append(path)

    return report
