from enum import Enum
from typing import Optional


class OwnershipType(str, Enum):
    """How the fleet holds a trailer."""

    OWNED = "owned"
    LEASED = "leased"
    RENTED = "rented"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def requires_lease_end_date(self) -> bool:
        return self is OwnershipType.LEASED

    @property
    def requires_lease_document(self) -> bool:
        return self is OwnershipType.LEASED

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["OwnershipType"]:
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: Optional[str]) -> "OwnershipType":
        """Lenient parse: unrecognised input falls back to owned."""
        return cls.lookup(value) or cls.OWNED
