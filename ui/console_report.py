"""Plain-text report lines for the md command.

Every function returns a list of lines; the caller decides where to print
them. Manday figures are shown at 3 and 2 decimal places, rounded half-up.
"""
from pathlib import Path
from typing import List

from business_logic.mandays import MandayCalculator, format_mandays
from models import LedgerSummary, SwitchResult
from utils.time_utils import format_duration, minutes_to_hours


def _mandays_line(calculator: MandayCalculator, minutes: int, label: str = "Mandays") -> str:
    mandays = calculator.to_mandays(minutes)
    return f"  {label}: {format_mandays(mandays, 3)} MD ({format_mandays(mandays, 2)} MD)"


def added_report(calculator: MandayCalculator, task_name: str, duration_input: str, total_minutes: int) -> List[str]:
    """Lines shown after adding time to a task."""
    return [
        f'✓ Added {duration_input} to task "{task_name}"',
        f"  Total time: {format_duration(total_minutes)}",
        _mandays_line(calculator, total_minutes),
    ]


def summary_report(calculator: MandayCalculator, summary: LedgerSummary) -> List[str]:
    """
    Lines for the task overview.

    Tasks are listed in insertion order with the active one marked.
    A TOTAL block follows when more than one task exists.
    """
    if summary.is_empty:
        return ["No tasks recorded yet."]

    lines = ["", "=== TASK OVERVIEW ===", ""]
    for entry in summary:
        marker = " <- ACTIVE" if entry.is_active else ""
        lines.append(f"{entry.name}{marker}")
        lines.append(f"  Time: {format_duration(entry.minutes)}")
        lines.append(_mandays_line(calculator, entry.minutes))
        lines.append("")

    total = summary.total_minutes
    if total is not None:
        lines.append("--- TOTAL ---")
        lines.append(f"  Time: {format_duration(total)}")
        lines.append(_mandays_line(calculator, total))

    return lines


def switched_report(calculator: MandayCalculator, result: SwitchResult) -> List[str]:
    """Lines shown after switching the active task."""
    if not result.existed:
        return [
            f'✓ Switched to new task "{result.task_name}"',
            "  No time recorded yet",
        ]

    mandays = calculator.to_mandays(result.minutes)
    return [
        f'✓ Switched to task "{result.task_name}"',
        f"  Current time: {format_duration(result.minutes)}",
        f"  Mandays: {format_mandays(mandays, 3)} MD",
    ]


def deleted_report(calculator: MandayCalculator, task_name: str, minutes: int) -> List[str]:
    mandays = calculator.to_mandays(minutes)
    return [
        f'✓ Task "{task_name}" has been deleted',
        f"  Deleted time: {format_duration(minutes)} ({format_mandays(mandays, 2)} MD)",
    ]


def reset_report(task_name=None) -> List[str]:
    if task_name is None:
        return ["✓ All tasks have been reset"]
    return [f'✓ Task "{task_name}" has been reset to 0:00']


def not_found_report(task_name: str) -> List[str]:
    return [f'Task "{task_name}" does not exist']


def calculation_report(calculator: MandayCalculator, total_minutes: int) -> List[str]:
    """Lines for a one-off conversion that is not recorded anywhere."""
    return [
        f"  Time: {format_duration(total_minutes)}",
        f"  Hours: {minutes_to_hours(total_minutes):.2f} hours",
        _mandays_line(calculator, total_minutes),
    ]


def help_text(hours_per_day: int, data_file: Path) -> str:
    """Full help text for `md help`."""
    return f"""
MANDAY TRACKER - Help
=====================

Usage:
  md <time>             Add time to the active task
  md                    Show summary of all tasks
  md add <time> [--task <name>]
                        Add time to a specific task (default: active task)
  md switch <name>      Switch to a different task
  md delete <name>      Delete a task from the list (aliases: del, rm)
  md reset              Reset all tasks to zero
  md reset <name>       Reset a specific task to 0:00
  md calc <time>        Convert time to mandays without saving (aliases: c, calculate)
  md ui                 Open the interactive task overview
  md help               Show this help message

Options:
  --data-file <path>    Use a different data file
  -v, --verbose         Show debug logging on stderr

Examples:
  md 2:15               Add 2 hours 15 minutes to the active task
  md 0:30               Add 30 minutes
  md                    Show summary
  md switch PROJ-123    Switch to task PROJ-123
  md switch dev         Switch to task dev
  md delete PROJ-123    Delete task PROJ-123 from the list
  md reset              Clear all tasks and start fresh
  md reset PROJ-123     Reset task PROJ-123 to 0:00 (keeps it in the list)
  md c 4:00             Show 4:00 in hours and mandays

Notes:
  - Time format is H:MM or HH:MM
  - Task names may start with "-"; with add, write --task=<name>
  - 1 manday = {hours_per_day} hours
  - Data is stored in: {data_file}
  - Difference between delete and reset:
      delete  removes the task entirely
      reset   only zeroes out the time (task remains in list)
"""
