"""Ledger widget for displaying and navigating tracked tasks."""
from typing import Optional

from textual.widgets import Static

from business_logic.ledger import TaskLedger
from business_logic.mandays import MandayCalculator, format_mandays
from utils.time_utils import format_duration


class LedgerWidget(Static):
    """Widget to display the task overview."""

    def __init__(self, task_ledger: TaskLedger, calculator: Optional[MandayCalculator] = None):
        super().__init__()
        self.task_ledger = task_ledger
        self.calculator = calculator or MandayCalculator()
        self.selected_index = 0

    def format_task_line(self, name: str, minutes: int, is_active: bool, is_selected: bool) -> str:
        """
        Format one task row.

        Returns Rich-formatted string like:
        - Selected:  [#ff006e on #2d2d44]> PROJ-1  2:30  0.313 MD[/...]
        - Active:    name followed by a purple ● marker
        """
        # Escape brackets so task names are not interpreted as markup
        safe_name = name.replace("[", "\\[")
        marker = ">" if is_selected else " "
        active_marker = " [#8b5cf6]●[/#8b5cf6]" if is_active else ""
        mandays = format_mandays(self.calculator.to_mandays(minutes), 3)
        line = f"{marker} {safe_name}{active_marker}  [#0abdc6]{format_duration(minutes)}[/#0abdc6]  [dim]{mandays} MD[/dim]"

        if is_selected:
            return f"[#ff006e on #2d2d44]{line}[/#ff006e on #2d2d44]"
        return line

    def render(self) -> str:
        """Render the task overview."""
        summary = self.task_ledger.summarize()
        if summary.is_empty:
            active = self.task_ledger.active_task.replace("[", "\\[")
            return f"[dim]No tasks recorded yet. Active task: {active}. Press 'a' to add time.[/dim]"

        lines = []
        for i, entry in enumerate(summary):
            lines.append(self.format_task_line(entry.name, entry.minutes, entry.is_active, i == self.selected_index))

        if self.task_ledger.active_task not in self.task_ledger:
            active = self.task_ledger.active_task.replace("[", "\\[")
            lines.append(f"  [#8b5cf6]●[/#8b5cf6] [dim]{active} (no time recorded yet)[/dim]")

        total = summary.total_minutes
        if total is not None:
            mandays = self.calculator.to_mandays(total)
            lines.append("")
            lines.append(
                f"  [bold]TOTAL[/bold]  {format_duration(total)}  "
                f"{format_mandays(mandays, 3)} MD ({format_mandays(mandays, 2)} MD)"
            )

        return "\n".join(lines)

    def move_selection(self, delta: int) -> None:
        """Move the selection up or down, clamped to the task list."""
        count = len(self.task_ledger.task_names())
        if count == 0:
            self.selected_index = 0
            return
        self.selected_index = max(0, min(count - 1, self.selected_index + delta))
        self.refresh()

    def clamp_selection(self) -> None:
        """Keep the selection inside the list after tasks were removed."""
        count = len(self.task_ledger.task_names())
        self.selected_index = max(0, min(self.selected_index, count - 1))

    def get_selected_task(self) -> Optional[str]:
        """Get the name of the currently selected task."""
        names = self.task_ledger.task_names()
        if 0 <= self.selected_index < len(names):
            return names[self.selected_index]
        return None
