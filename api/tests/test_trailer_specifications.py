"""
Unit tests for the TrailerSpecifications value object.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.errors import SpecificationOutOfRangeError
from models.trailer_specifications import TrailerSpecifications


class TestCreate:
    """Bound-checked construction."""

    def test_in_bounds_values_are_kept(self):
        specs = TrailerSpecifications.create(48, 102, 110, 42000, 3)
        assert specs.to_dict() == {
            "length": 48,
            "width": 102,
            "height": 110,
            "capacity": 42000,
            "axle_count": 3,
        }

    def test_upper_bounds_are_inclusive(self):
        specs = TrailerSpecifications.create(100, 200, 300, 200000, 10)
        assert specs.is_complete

    def test_absent_fields_stay_absent(self):
        specs = TrailerSpecifications.create(length=53)
        assert specs.width is None
        assert specs.axle_count is None
        assert not specs.is_complete

    @pytest.mark.parametrize("field,value,minimum,maximum", [
        ("length", 0, 0, 100),
        ("length", 100.5, 0, 100),
        ("width", -1, 0, 200),
        ("width", 201, 0, 200),
        ("height", 0, 0, 300),
        ("height", 301, 0, 300),
        ("capacity", 0, 0, 200000),
        ("capacity", 200001, 0, 200000),
        ("axle_count", 0, 1, 10),
        ("axle_count", 11, 1, 10),
    ])
    def test_out_of_range_identifies_field(self, field, value, minimum, maximum):
        with pytest.raises(SpecificationOutOfRangeError) as exc_info:
            TrailerSpecifications.create(**{field: value})

        error = exc_info.value
        assert error.field == field
        assert error.minimum == minimum
        assert error.maximum == maximum

    def test_first_violation_wins(self):
        with pytest.raises(SpecificationOutOfRangeError) as exc_info:
            TrailerSpecifications.create(length=500, width=500, axle_count=50)
        assert exc_info.value.field == "length"

        with pytest.raises(SpecificationOutOfRangeError) as exc_info:
            TrailerSpecifications.create(height=0, capacity=-5)
        assert exc_info.value.field == "height"


class TestCreateWithDefaults:
    """Default filling for incomplete input."""

    def test_no_arguments_gives_standard_trailer(self):
        specs = TrailerSpecifications.create_with_defaults()
        assert specs.to_dict() == {
            "length": 53,
            "width": 102,
            "height": 162,
            "capacity": 45000,
            "axle_count": 2,
        }
        assert specs.is_complete

    def test_supplied_values_are_kept(self):
        specs = TrailerSpecifications.create_with_defaults(length=48, axle_count=3)
        assert specs.length == 48
        assert specs.axle_count == 3
        assert specs.width == 102

    def test_does_not_bound_check(self):
        specs = TrailerSpecifications.create_with_defaults(length=500)
        assert specs.length == 500


class TestDisplay:
    """Display helpers are pure functions of state."""

    def test_length_capacity_display(self):
        specs = TrailerSpecifications.create_with_defaults()
        assert specs.length_capacity_display() == "53 ft / 45,000 lbs"

    def test_length_capacity_display_with_float_values(self):
        specs = TrailerSpecifications.create(length=53.0, capacity=42000.0)
        assert specs.length_capacity_display() == "53 ft / 42,000 lbs"

        specs = TrailerSpecifications.create(length=48.5, capacity=1250.5)
        assert specs.length_capacity_display() == "48.5 ft / 1,250.5 lbs"

    def test_length_capacity_display_missing_parts(self):
        assert TrailerSpecifications.create().length_capacity_display() == "N/A / N/A"
        assert TrailerSpecifications.create(length=40).length_capacity_display() == "40 ft / N/A"
        assert TrailerSpecifications.create(capacity=9000).length_capacity_display() == "N/A / 9,000 lbs"

    def test_dimensions_display(self):
        specs = TrailerSpecifications.create_with_defaults()
        assert specs.dimensions_display() == "53' L x 102\" W x 162\" H"
        assert TrailerSpecifications.create().dimensions_display() == "N/A"

    def test_display_is_idempotent(self):
        specs = TrailerSpecifications.create_with_defaults(capacity=61234)
        assert specs.length_capacity_display() == specs.length_capacity_display()
        assert specs.dimensions_display() == specs.dimensions_display()
