import re
from dataclasses import dataclass

from models.errors import InvalidVinError

VIN_LENGTH = 17

_ALPHANUMERIC = re.compile(r"^[A-Z0-9]+$")
_FORBIDDEN = re.compile(r"[IOQ]")


@dataclass(frozen=True)
class VIN:
    """Vehicle Identification Number value object.

    Holds a trimmed, uppercased 17 character string. Two VINs are equal when
    their normalized values are equal.

    Build from user input with ``create``. ``from_database`` skips validation
    and must only be used for values read back from storage.
    """

    value: str

    @classmethod
    def create(cls, raw: str) -> "VIN":
        """Validate and normalize a VIN.

        Raises:
            InvalidVinError: If the value is empty, not 17 letters and digits,
                or contains I, O or Q.
        """
        if raw is None or not raw.strip():
            raise InvalidVinError("VIN cannot be empty")

        cleaned = raw.strip().upper()

        if len(cleaned) != VIN_LENGTH or not _ALPHANUMERIC.match(cleaned):
            raise InvalidVinError("VIN must be 17 characters long and contain only letters and numbers")

        # I, O and Q are too easily confused with 1 and 0
        if _FORBIDDEN.search(cleaned):
            raise InvalidVinError("VIN cannot contain I, O, or Q characters")

        return cls(cleaned)

    @classmethod
    def from_database(cls, raw: str) -> "VIN":
        return cls(raw)

    def formatted(self) -> str:
        """Group the VIN as 3-4-4-4-2 for display, e.g. ``1HG CM82 633A 1234 56``."""
        if len(self.value) != VIN_LENGTH:
            return self.value
        v = self.value
        return f"{v[:3]} {v[3:7]} {v[7:11]} {v[11:15]} {v[15:]}"

    def __str__(self) -> str:
        return self.value
