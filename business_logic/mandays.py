"""Manday conversion for accumulated task time.

A manday is a fixed number of work-hours (8 by default). The calculator
always returns the unrounded value; rounding only happens when a value is
rendered for display.

Functions:
    to_mandays: Convert minutes to mandays with the default workday length
    format_mandays: Render a manday value at a fixed number of decimal places
"""
from decimal import Decimal, ROUND_HALF_UP

from config import HOURS_PER_DAY


def to_mandays(total_minutes: int) -> float:
    """Convert minutes to mandays using the default workday length.

    Module-level convenience function. See MandayCalculator.to_mandays.
    """
    return _default_calculator.to_mandays(total_minutes)


def format_mandays(mandays: float, places: int) -> str:
    """
    Render a manday value rounded half-up to a fixed number of places.

    Rounding works on the exact binary value of the float, so 0.3125
    becomes "0.313" at three places rather than the banker's "0.312".

    Args:
        mandays: Unrounded manday value
        places: Number of decimal places (3 and 2 are used for reports)

    Returns:
        The value as a string with exactly `places` decimals
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(mandays).quantize(quantum, rounding=ROUND_HALF_UP))


class MandayCalculator:
    """Converts minutes into manday units for a given workday length."""

    def __init__(self, hours_per_day: int = HOURS_PER_DAY):
        if hours_per_day <= 0:
            raise ValueError(f"hours_per_day must be positive, got {hours_per_day}")
        self.hours_per_day = hours_per_day

    def to_mandays(self, total_minutes: int) -> float:
        """
        Convert minutes to mandays.

        Args:
            total_minutes: Non-negative number of minutes

        Returns:
            (total_minutes / 60) / hours_per_day, unrounded

        Example:
            >>> MandayCalculator().to_mandays(480)
            1.0
            >>> MandayCalculator().to_mandays(150)
            0.3125
        """
        total_hours = total_minutes / 60
        return total_hours / self.hours_per_day


_default_calculator = MandayCalculator()
