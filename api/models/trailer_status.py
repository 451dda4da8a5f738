import re
from enum import Enum
from typing import Optional


class TrailerStatus(str, Enum):
    """Operational state of a trailer."""

    AVAILABLE = "available"
    ASSIGNED = "assigned"
    MAINTENANCE = "maintenance"
    OUT_OF_SERVICE = "out-of-service"

    @property
    def display_name(self) -> str:
        if self is TrailerStatus.OUT_OF_SERVICE:
            return "Out of Service"
        return self.value.capitalize()

    @property
    def can_be_assigned(self) -> bool:
        return self is TrailerStatus.AVAILABLE

    @property
    def requires_maintenance_attention(self) -> bool:
        return self in (TrailerStatus.MAINTENANCE, TrailerStatus.OUT_OF_SERVICE)

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["TrailerStatus"]:
        """Return the matching status, or None when the value is not recognised.

        Whitespace and underscores both collapse to hyphens, so
        "Out of Service", "out_of_service" and "out-of-service" all match.
        """
        if value is None:
            return None
        normalized = re.sub(r"[\s_]+", "-", value.strip().lower())
        try:
            return cls(normalized)
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: Optional[str]) -> "TrailerStatus":
        """Lenient parse: unrecognised input falls back to available."""
        return cls.lookup(value) or cls.AVAILABLE
