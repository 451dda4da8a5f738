import re
from enum import Enum
from typing import Optional


class TrailerType(str, Enum):
    """Trailer category by intended use and cargo."""

    DRY_VAN = "dry_van"
    REEFER = "reefer"
    FLATBED = "flatbed"
    TANKER = "tanker"
    LOWBOY = "lowboy"
    STEP_DECK = "step_deck"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def lookup(cls, value: Optional[str]) -> Optional["TrailerType"]:
        """Return the matching type, or None when the value is not recognised."""
        if value is None:
            return None
        normalized = re.sub(r"\s+", "_", value.strip().lower())
        return _ALIASES.get(normalized)

    @classmethod
    def parse(cls, value: Optional[str]) -> "TrailerType":
        """Lenient parse: unrecognised input falls back to dry van."""
        return cls.lookup(value) or cls.DRY_VAN


_DISPLAY_NAMES = {
    TrailerType.DRY_VAN: "Dry Van",
    TrailerType.REEFER: "Reefer",
    TrailerType.FLATBED: "Flatbed",
    TrailerType.TANKER: "Tanker",
    TrailerType.LOWBOY: "Lowboy",
    TrailerType.STEP_DECK: "Step Deck",
    TrailerType.OTHER: "Other",
}

_ALIASES = {member.value: member for member in TrailerType}
_ALIASES.update({
    "dry-van": TrailerType.DRY_VAN,
    "step-deck": TrailerType.STEP_DECK,
})
