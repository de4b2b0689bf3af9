"""Help screen widget showing keyboard shortcuts."""
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.containers import VerticalScroll
from textual.binding import Binding
from textual import events


class HelpScreen(Screen):
    """Modal screen showing keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
    ]

    CSS = """
    HelpScreen {
        align: center middle;
        background: rgba(26, 26, 46, 0.9);
    }

    #help_container {
        width: 70;
        height: auto;
        max-height: 90%;
        background: #2d2d44;
        border: thick #0abdc6;
        padding: 1 2;
    }

    #help_title {
        text-align: center;
        text-style: bold;
        color: #0abdc6;
        margin-bottom: 1;
    }

    #help_content {
        height: auto;
        overflow-y: auto;
        color: #e2e8f0;
    }
    """

    def __init__(self, hours_per_day: int = 8):
        super().__init__()
        self.hours_per_day = hours_per_day

    def compose(self) -> ComposeResult:
        """Compose the help screen."""
        with VerticalScroll(id="help_container"):
            yield Static("Keyboard Shortcuts", id="help_title")
            yield Static(self.get_help_text(), id="help_content")

    def get_help_text(self) -> str:
        """Get formatted help text."""
        return f"""[bold]Navigation[/bold]
↑/↓ or j/k    Move selection up/down

[bold]Time[/bold]
a             Add time to the active task (H:MM, e.g. 2:15)
t             Add time to the selected task (also makes it active)

[bold]Tasks[/bold]
s             Switch to the selected task
n             Switch to a task by name (new names get no entry
              until time is added)
d             Delete selected task
              • If it was active, the first remaining task
                becomes active (or "default")
r             Reset selected task to 0:00 (keeps it in the list)
R             Reset ALL tasks and go back to "default"

[bold]Notes[/bold]
1 manday = {self.hours_per_day} hours
● marks the active task

[bold]General[/bold]
h             Show this help
q             Quit

[dim]Press Esc to close this help[/dim]"""

    def on_key(self, event: events.Key) -> None:
        """Handle key events - block all except Esc and arrow keys."""
        # Allow Esc (handled by binding) and arrow keys (for scrolling)
        if event.key not in ("escape", "up", "down"):
            event.prevent_default()
            event.stop()

    def action_dismiss(self) -> None:
        """Close the help screen."""
        self.dismiss()
