"""Tests for duration parsing and formatting utilities."""

import pytest
from models import DurationFormatError, DurationRangeError, LedgerError
from utils.time_utils import parse_duration, format_duration, minutes_to_hours


class TestParseDuration:
    """Test H:MM parsing."""

    def test_parse_single_digit_hours(self):
        """H:MM should be converted to minutes."""
        assert parse_duration("2:30") == 150
        assert parse_duration("0:10") == 10
        assert parse_duration("8:00") == 480

    def test_parse_two_digit_hours(self):
        """HH:MM should be converted to minutes."""
        assert parse_duration("12:45") == 765
        assert parse_duration("02:30") == 150

    def test_parse_large_hours(self):
        """Hours have no upper bound."""
        assert parse_duration("100:00") == 6000
        assert parse_duration("1000:59") == 60059

    def test_parse_zero(self):
        """0:00 is a valid zero duration."""
        assert parse_duration("0:00") == 0

    def test_parse_max_minutes(self):
        """59 is the largest minutes value."""
        assert parse_duration("1:59") == 119

    def test_parse_minutes_out_of_range(self):
        """Minutes of 60 or more are a range error."""
        with pytest.raises(DurationRangeError):
            parse_duration("2:75")
        with pytest.raises(DurationRangeError):
            parse_duration("0:60")

    @pytest.mark.parametrize("text", [
        "abc",
        "",
        ":30",
        "2:",
        "230",
        "2:5",
        "2:300",
        "2h30",
        "-1:00",
        "1.5:00",
        " 2:30",
        "2:30 ",
        "2:30\n",
        "2:3a",
        "a:30",
        "1:00:00",
    ])
    def test_parse_invalid_format(self, text):
        """Anything not digits, colon, two digits is a format error."""
        with pytest.raises(DurationFormatError):
            parse_duration(text)

    def test_parse_rejects_non_ascii_digits(self):
        """Unicode digits are not accepted."""
        with pytest.raises(DurationFormatError):
            parse_duration("２:30")

    def test_errors_are_distinguishable(self):
        """Format and range errors are separate kinds sharing a base."""
        assert not issubclass(DurationFormatError, DurationRangeError)
        assert not issubclass(DurationRangeError, DurationFormatError)
        assert issubclass(DurationFormatError, LedgerError)
        assert issubclass(DurationRangeError, LedgerError)


class TestFormatDuration:
    """Test H:MM formatting."""

    def test_format_zero(self):
        assert format_duration(0) == "0:00"

    def test_format_pads_minutes(self):
        """Minutes are always two digits."""
        assert format_duration(5) == "0:05"
        assert format_duration(65) == "1:05"

    def test_format_hours_without_padding(self):
        """Hours are not zero-padded and not bounded."""
        assert format_duration(150) == "2:30"
        assert format_duration(765) == "12:45"
        assert format_duration(6000) == "100:00"


class TestMinutesToHours:
    """Test decimal hours conversion."""

    def test_minutes_to_hours(self):
        assert minutes_to_hours(150) == 2.5
        assert minutes_to_hours(0) == 0
        assert minutes_to_hours(45) == 0.75


class TestRoundTrip:
    """Test that parsing and formatting are consistent."""

    def test_round_trip_minutes(self):
        """Formatting then parsing gives back the same minute count."""
        for text in ["0:00", "0:59", "2:30", "02:30", "12:45", "100:00"]:
            minutes = parse_duration(text)
            assert parse_duration(format_duration(minutes)) == minutes
