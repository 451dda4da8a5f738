"""
Yard name lookup used to resolve a trailer's display location.

Stands in for a location service; the static directory is configured from
``settings.yard_names``.
"""

from typing import Dict, Optional

from config import settings

UNKNOWN_YARD = "Unknown Yard"


class YardDirectory:
    """Resolves an assigned-yard reference to a human-readable name.

    The base implementation knows no yards.
    """

    def resolve_name(self, yard_id: str) -> str:
        return UNKNOWN_YARD


class StaticYardDirectory(YardDirectory):
    """Yard directory backed by a fixed mapping."""

    def __init__(self, names: Dict[str, str], fallback: str = UNKNOWN_YARD):
        self.names = dict(names)
        self.fallback = fallback

    def resolve_name(self, yard_id: str) -> str:
        return self.names.get(yard_id, self.fallback)


_directory: Optional[YardDirectory] = None


def get_yard_directory() -> YardDirectory:
    """Return the shared directory built from settings."""
    global _directory
    if _directory is None:
        _directory = StaticYardDirectory(settings.yard_names)
    return _directory
