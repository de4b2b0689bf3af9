"""Custom UI widgets for the manday tracker."""
from textual.widgets import Static


class CenteredFooter(Static):
    """Custom footer with centered content."""

    def __init__(self):
        super().__init__()
        self.update("[dim]Press[/dim] [bold]H[/bold] [dim]for Help  •  [/dim][bold]Q[/bold] [dim]to Quit[/dim]")

    DEFAULT_CSS = """
    CenteredFooter {
        background: transparent;
        color: #0abdc6;
        dock: bottom;
        height: 1;
        text-align: center;
    }
    """


class StatusLine(Static):
    """One-line header showing the active task and the workday length."""

    DEFAULT_CSS = """
    StatusLine {
        height: 3;
        content-align: center middle;
        background: #0abdc6;
        color: #ffffff;
        text-style: bold;
    }
    """

    def show_active(self, active_task: str, hours_per_day: int) -> None:
        """Update the displayed active task."""
        active = active_task.replace("[", "\\[")
        self.update(f"Active: {active}   •   1 MD = {hours_per_day}h")
