"""Duration parsing and formatting utilities for the manday tracker."""

import re

from models import DurationFormatError, DurationRangeError

# One or more digits, a colon, exactly two digits. ASCII only.
DURATION_PATTERN = re.compile(r'([0-9]+):([0-9]{2})')


def parse_duration(time_str: str) -> int:
    """
    Parse an H:MM or HH:MM duration string into minutes.

    The hours part has no upper bound ("100:00" is fine). The minutes part
    must be exactly two digits and below 60.

    Args:
        time_str: Duration string to parse

    Returns:
        Total number of minutes

    Raises:
        DurationFormatError: If the string is not digits, a colon and two digits
        DurationRangeError: If the minutes part is 60 or more
    """
    match = DURATION_PATTERN.fullmatch(time_str)
    if not match:
        raise DurationFormatError(
            f'Invalid time format "{time_str}". Use H:MM or HH:MM'
        )

    hours = int(match.group(1))
    minutes = int(match.group(2))
    if minutes >= 60:
        raise DurationRangeError(
            f'Invalid time "{time_str}". Minutes must be between 0-59'
        )

    return hours * 60 + minutes


def format_duration(total_minutes: int) -> str:
    """
    Format minutes as H:MM.

    Hours are printed without padding and without an upper bound, minutes
    are always two digits: 0 -> "0:00", 150 -> "2:30", 6000 -> "100:00".
    """
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}:{minutes:02d}"


def minutes_to_hours(total_minutes: int) -> float:
    """Convert minutes to decimal hours."""
    return total_minutes / 60
