"""
Exceptions raised by layoutmanager.
"""


class LayoutManagerError(Exception):
    """Base class for all layoutmanager errors."""
    pass


class PreconditionError(LayoutManagerError):
    """Raised when a target cannot be saved from or styled (e.g. no axes)."""
    pass


class PropertyError(LayoutManagerError):
    """
    Raised by target adapters when a property path cannot be read or written.

    The merge engine and the capture step treat this as a per-property
    failure and carry on with the remaining properties.
    """

    def __init__(self, path: str, message: str = "unsupported property"):
        super().__init__(f"{path}: {message}")
        self.path = path
