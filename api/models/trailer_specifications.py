"""
Trailer physical specifications value object.

Length is in feet, width and height in inches, capacity in pounds.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Union

from models.errors import SpecificationOutOfRangeError

Number = Union[int, float]

# field -> (exclusive lower bound, inclusive upper bound, message)
_BOUNDS = (
    ("length", 0, 100, "Trailer length must be between 1 and 100 feet"),
    ("width", 0, 200, "Trailer width must be between 1 and 200 inches"),
    ("height", 0, 300, "Trailer height must be between 1 and 300 inches"),
    ("capacity", 0, 200000, "Trailer capacity must be between 1 and 200,000 pounds"),
)
AXLE_COUNT_RANGE = (1, 10)

DEFAULT_LENGTH = 53
DEFAULT_WIDTH = 102
DEFAULT_HEIGHT = 162
DEFAULT_CAPACITY = 45000
DEFAULT_AXLE_COUNT = 2


def _format_number(value: Number, grouped: bool = False) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{value:,}" if grouped else str(value)


@dataclass(frozen=True)
class TrailerSpecifications:
    length: Optional[Number] = None
    width: Optional[Number] = None
    height: Optional[Number] = None
    capacity: Optional[Number] = None
    axle_count: Optional[int] = None

    @classmethod
    def create(
        cls,
        length: Optional[Number] = None,
        width: Optional[Number] = None,
        height: Optional[Number] = None,
        capacity: Optional[Number] = None,
        axle_count: Optional[int] = None,
    ) -> "TrailerSpecifications":
        """Build specifications, checking every supplied field against its bounds.

        Fields are checked in declaration order and the first violation is
        raised.

        Raises:
            SpecificationOutOfRangeError: If a supplied field is out of range.
        """
        values = {"length": length, "width": width, "height": height, "capacity": capacity}
        for field, lower, upper, message in _BOUNDS:
            value = values[field]
            if value is not None and (value <= lower or value > upper):
                raise SpecificationOutOfRangeError(field, lower, upper, message)

        minimum, maximum = AXLE_COUNT_RANGE
        if axle_count is not None and (axle_count < minimum or axle_count > maximum):
            raise SpecificationOutOfRangeError(
                "axle_count", minimum, maximum, "Trailer must have between 1 and 10 axles"
            )

        return cls(length, width, height, capacity, axle_count)

    @classmethod
    def create_with_defaults(
        cls,
        length: Optional[Number] = None,
        width: Optional[Number] = None,
        height: Optional[Number] = None,
        capacity: Optional[Number] = None,
        axle_count: Optional[int] = None,
    ) -> "TrailerSpecifications":
        """Fill missing fields with standard trailer values. Never validates."""
        return cls(
            length=DEFAULT_LENGTH if length is None else length,
            width=DEFAULT_WIDTH if width is None else width,
            height=DEFAULT_HEIGHT if height is None else height,
            capacity=DEFAULT_CAPACITY if capacity is None else capacity,
            axle_count=DEFAULT_AXLE_COUNT if axle_count is None else axle_count,
        )

    @property
    def is_complete(self) -> bool:
        return all(value is not None for value in asdict(self).values())

    def length_capacity_display(self) -> str:
        """Format as ``53 ft / 45,000 lbs``, using N/A for a missing part."""
        length = f"{_format_number(self.length)} ft" if self.length else "N/A"
        capacity = f"{_format_number(self.capacity, grouped=True)} lbs" if self.capacity else "N/A"
        return f"{length} / {capacity}"

    def dimensions_display(self) -> str:
        parts = []
        if self.length:
            parts.append(f"{_format_number(self.length)}' L")
        if self.width:
            parts.append(f'{_format_number(self.width)}" W')
        if self.height:
            parts.append(f'{_format_number(self.height)}" H')
        return " x ".join(parts) if parts else "N/A"

    def to_dict(self) -> Dict[str, Optional[Number]]:
        return asdict(self)
