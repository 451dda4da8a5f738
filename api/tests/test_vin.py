"""
Unit tests for the VIN value object.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models.errors import InvalidVinError, TrailerValidationError
from models.vin import VIN


class TestVinCreate:
    """Validation and normalization of user-supplied VINs."""

    @pytest.mark.parametrize("raw", [
        "1HGCM82633A123456",
        "2T1BURHE0JC012345",
        "11111111111111111",
        "ABCDEFGHJKLMNPRST",
    ])
    def test_accepts_valid_vins(self, raw):
        assert VIN.create(raw).value == raw

    def test_trims_and_uppercases(self):
        vin = VIN.create("  1hgcm82633a123456 ")
        assert vin.value == "1HGCM82633A123456"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_rejects_empty(self, raw):
        with pytest.raises(InvalidVinError, match="cannot be empty"):
            VIN.create(raw)

    @pytest.mark.parametrize("raw", [
        "1HGCM82633A12345",     # 16
        "1HGCM82633A1234567",   # 18
        "ABC",
    ])
    def test_rejects_wrong_length(self, raw):
        with pytest.raises(InvalidVinError, match="17 characters"):
            VIN.create(raw)

    @pytest.mark.parametrize("raw", [
        "1HGCM82633A12345-",
        "1HGCM 82633A12345",
        "1HGCM82633A1234É6",
    ])
    def test_rejects_non_alphanumeric(self, raw):
        with pytest.raises(InvalidVinError):
            VIN.create(raw)

    @pytest.mark.parametrize("raw", [
        "1HGCM82633I123456",
        "1HGCM82633O123456",
        "1HGCM82633Q123456",
        "1hgcm82633q123456",
    ])
    def test_rejects_i_o_q(self, raw):
        with pytest.raises(InvalidVinError, match="I, O, or Q"):
            VIN.create(raw)

    def test_error_identifies_field(self):
        with pytest.raises(TrailerValidationError) as exc_info:
            VIN.create("bad")
        assert exc_info.value.field == "vin"


class TestVinBehaviour:
    """Formatting, equality and trusted reconstruction."""

    def test_formatted_groups_3_4_4_4_2(self):
        assert VIN.create("1HGCM82633A123456").formatted() == "1HG CM82 633A 1234 56"

    def test_formatted_leaves_other_lengths_alone(self):
        assert VIN.from_database("SHORTVIN").formatted() == "SHORTVIN"

    def test_from_database_skips_validation(self):
        vin = VIN.from_database("legacy-vin-with-ioq")
        assert vin.value == "legacy-vin-with-ioq"

    def test_value_equality(self):
        assert VIN.create("1hgcm82633a123456") == VIN.create("1HGCM82633A123456")
        assert VIN.create("1HGCM82633A123456") != VIN.create("2T1BURHE0JC012345")

    def test_str_is_value(self):
        assert str(VIN.create("1HGCM82633A123456")) == "1HGCM82633A123456"

    def test_is_immutable(self):
        vin = VIN.create("1HGCM82633A123456")
        with pytest.raises(AttributeError):
            vin.value = "2T1BURHE0JC012345"
