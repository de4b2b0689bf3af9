"""Utility modules for the manday tracker.

This package provides utility functions for duration parsing and formatting.

Modules:
    time_utils: H:MM duration parsing and formatting utilities
"""
from utils.time_utils import parse_duration, format_duration, minutes_to_hours

__all__ = ["parse_duration", "format_duration", "minutes_to_hours"]
