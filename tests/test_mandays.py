"""Tests for manday conversion."""
import pytest
from business_logic.mandays import MandayCalculator, to_mandays, format_mandays


class TestMandayCalculator:
    """Test minutes to manday conversion."""

    def test_full_day(self):
        """8:00 is exactly one manday."""
        assert MandayCalculator().to_mandays(480) == 1.0

    def test_partial_day(self):
        """Values are returned unrounded."""
        assert MandayCalculator().to_mandays(150) == 0.3125
        assert MandayCalculator().to_mandays(10) == (10 / 60) / 8

    def test_zero(self):
        assert MandayCalculator().to_mandays(0) == 0.0

    def test_matches_formula(self):
        """Conversion is (minutes / 60) / 8 with no rounding."""
        for minutes in [1, 7, 59, 61, 333, 479, 481, 6000, 123457]:
            assert MandayCalculator().to_mandays(minutes) == (minutes / 60) / 8

    def test_custom_hours_per_day(self):
        """The workday length is a constructor argument."""
        calculator = MandayCalculator(hours_per_day=6)
        assert calculator.hours_per_day == 6
        assert calculator.to_mandays(360) == 1.0

    def test_invalid_hours_per_day(self):
        with pytest.raises(ValueError):
            MandayCalculator(hours_per_day=0)

    def test_module_function_uses_default(self):
        """to_mandays uses the 8-hour workday."""
        assert to_mandays(960) == 2.0
        assert to_mandays(6000) == 12.5


class TestFormatMandays:
    """Test display rounding of manday values."""

    def test_rounds_half_up(self):
        """0.3125 rounds up at three places, unlike round-half-even."""
        assert format_mandays(0.3125, 3) == "0.313"
        assert format_mandays(0.3125, 2) == "0.31"

    def test_fixed_places(self):
        """Trailing zeros are kept."""
        assert format_mandays(1.0, 3) == "1.000"
        assert format_mandays(0.0, 3) == "0.000"
        assert format_mandays(0.5, 2) == "0.50"

    def test_small_values(self):
        """0:10 is 0.0208... mandays."""
        assert format_mandays(to_mandays(10), 3) == "0.021"
        assert format_mandays(to_mandays(10), 2) == "0.02"

    def test_large_values(self):
        assert format_mandays(to_mandays(6000), 3) == "12.500"
