"""Interactive TUI for the manday tracker."""
import sys
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Header, Input

from business_logic.ledger import TaskLedger
from business_logic.mandays import MandayCalculator, format_mandays
from cli import EXIT_OK, EXIT_STORAGE
from config import Config, config
from ledger_store import LedgerStore
from models import DurationFormatError, DurationRangeError, StorageError, TaskNotFoundError
from ui.help_screen import HelpScreen
from ui.ledger_widget import LedgerWidget
from ui.widgets import CenteredFooter, StatusLine
from utils.time_utils import format_duration


class LedgerApp(App):
    """A terminal overview of tracked task time."""

    TITLE = "Manday Tracker"

    CSS = """
    Screen {
        background: #1a1a2e;
    }

    Header {
        background: #2d2d44;
        color: #0abdc6;
    }

    #ledger {
        height: 1fr;
        padding: 1 2;
        overflow-y: auto;
        background: #1a1a2e;
    }

    LedgerWidget {
        height: auto;
        color: #e2e8f0;
    }

    #input_container {
        height: auto;
        padding: 1;
        background: #1a1a2e;
    }

    Input {
        margin: 0 1;
        background: #2d2d44;
        color: #ffffff;
        border: tall #8b5cf6;
    }

    Input:focus {
        border: tall #0abdc6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False),
        Binding("h", "show_help", "Help", show=False),
        Binding("j", "move_down", "Down", show=False),
        Binding("k", "move_up", "Up", show=False),
        Binding("down", "move_down", "Down", show=False),
        Binding("up", "move_up", "Up", show=False),
        Binding("a", "add_time", "Add Time", show=False),
        Binding("t", "add_time_selected", "Add To Selected", show=False),
        Binding("s", "switch_selected", "Switch", show=False),
        Binding("n", "switch_named", "Switch To", show=False),
        Binding("d", "delete_task", "Delete", show=False),
        Binding("r", "reset_task", "Reset", show=False),
        Binding("R", "reset_all", "Reset All", show=False),
    ]

    def __init__(
        self,
        store: Optional[LedgerStore] = None,
        calculator: Optional[MandayCalculator] = None,
        settings: Optional[Config] = None,
    ):
        super().__init__()
        self.settings = settings or config
        self.store = store or LedgerStore(self.settings.data_file)
        self.calculator = calculator or MandayCalculator(self.settings.hours_per_day)
        self.task_ledger = TaskLedger(self.store.load(), default_task=self.settings.default_task)

        # Input state
        self.adding_time = False
        self.switching_task = False
        self.time_task_name: Optional[str] = None  # None means the active task

    def compose(self) -> ComposeResult:
        """Compose the UI."""
        yield Header()
        yield StatusLine(id="status_line")
        yield Container(
            LedgerWidget(self.task_ledger, self.calculator),
            id="ledger"
        )
        yield Container(id="input_container")
        yield CenteredFooter()

    def on_mount(self) -> None:
        """Set up the app after mounting."""
        self.update_status_line()

    def update_status_line(self) -> None:
        self.query_one(StatusLine).show_active(self.task_ledger.active_task, self.calculator.hours_per_day)

    def refresh_ledger(self) -> None:
        """Refresh the ledger widget and status line."""
        ledger_widget = self.query_one(LedgerWidget)
        ledger_widget.clamp_selection()
        ledger_widget.refresh(layout=True)
        self.update_status_line()

    def save_and_refresh(self) -> None:
        """Save the ledger and refresh the display.

        A failed save keeps the change in memory and warns that it may be lost.
        """
        try:
            self.store.save(self.task_ledger.ledger)
        except StorageError as e:
            self.notify(f"{e}. The change may be lost.", severity="error")
        self.refresh_ledger()

    def action_move_down(self) -> None:
        """Move selection down."""
        self.query_one(LedgerWidget).move_selection(1)

    def action_move_up(self) -> None:
        """Move selection up."""
        self.query_one(LedgerWidget).move_selection(-1)

    def action_show_help(self) -> None:
        """Show the help screen."""
        self.push_screen(HelpScreen(self.calculator.hours_per_day))

    def _show_input(self, placeholder: str) -> None:
        container = self.query_one("#input_container")
        input_widget = Input(placeholder=placeholder)
        container.mount(input_widget)
        input_widget.focus()

    def action_add_time(self) -> None:
        """Show input to add time to the active task."""
        if self.adding_time or self.switching_task:
            return
        self.adding_time = True
        self.time_task_name = None
        self._show_input(f"Add time to {self.task_ledger.active_task} (H:MM, e.g. 2:15)")

    def action_add_time_selected(self) -> None:
        """Show input to add time to the selected task."""
        if self.adding_time or self.switching_task:
            return
        task_name = self.query_one(LedgerWidget).get_selected_task()
        if task_name is None:
            return
        self.adding_time = True
        self.time_task_name = task_name
        self._show_input(f"Add time to {task_name} (H:MM, e.g. 2:15)")

    def action_switch_named(self) -> None:
        """Show input to switch to a task by name."""
        if self.adding_time or self.switching_task:
            return
        self.switching_task = True
        self._show_input("Switch to task...")

    def action_switch_selected(self) -> None:
        """Make the selected task active."""
        task_name = self.query_one(LedgerWidget).get_selected_task()
        if task_name is None:
            return
        self._switch_to(task_name)

    def _switch_to(self, task_name: str) -> None:
        result = self.task_ledger.switch_to(task_name)
        self.save_and_refresh()
        if result.existed:
            self.notify(f'Switched to "{task_name}" ({format_duration(result.minutes)})')
        else:
            self.notify(f'Switched to new task "{task_name}", no time recorded yet')

    def action_delete_task(self) -> None:
        """Delete the selected task."""
        task_name = self.query_one(LedgerWidget).get_selected_task()
        if task_name is None:
            return
        try:
            minutes = self.task_ledger.delete_task(task_name)
        except TaskNotFoundError as e:
            self.notify(str(e), severity="warning")
            return
        self.save_and_refresh()
        mandays = format_mandays(self.calculator.to_mandays(minutes), 2)
        self.notify(f'Deleted "{task_name}" ({format_duration(minutes)}, {mandays} MD)')

    def action_reset_task(self) -> None:
        """Reset the selected task to 0:00."""
        task_name = self.query_one(LedgerWidget).get_selected_task()
        if task_name is None:
            return
        try:
            self.task_ledger.reset_task(task_name)
        except TaskNotFoundError as e:
            self.notify(str(e), severity="warning")
            return
        self.save_and_refresh()
        self.notify(f'Reset "{task_name}" to 0:00')

    def action_reset_all(self) -> None:
        """Clear every task."""
        self.task_ledger.reset_task()
        self.save_and_refresh()
        self.notify("All tasks have been reset")

    def _handle_add_time_input(self, value: str) -> None:
        """Handle input for adding time."""
        if value:
            try:
                if self.time_task_name is None:
                    task_name, total = self.task_ledger.add_to_active(value)
                else:
                    task_name = self.time_task_name
                    total = self.task_ledger.accumulate(task_name, value)
            except (DurationFormatError, DurationRangeError) as e:
                self.notify(str(e), severity="error")
            else:
                self.save_and_refresh()
                mandays = format_mandays(self.calculator.to_mandays(total), 3)
                self.notify(f'Added {value} to "{task_name}" (total {format_duration(total)}, {mandays} MD)')
        self.adding_time = False
        self.time_task_name = None

    def _handle_switch_input(self, value: str) -> None:
        """Handle input for switching task by name."""
        if value:
            self._switch_to(value)
        self.switching_task = False

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission by dispatching to appropriate handler."""
        value = event.value.strip()

        if self.adding_time:
            self._handle_add_time_input(value)
        elif self.switching_task:
            self._handle_switch_input(value)

        # Remove input widget
        event.input.remove()

    def _clear_input_state(self) -> None:
        """Clear all input mode state flags."""
        self.adding_time = False
        self.switching_task = False
        self.time_task_name = None

    def on_key(self, event: events.Key) -> None:
        """Handle special keys."""
        # Check if we're in an input widget - if so, don't intercept
        focused = self.focused
        if isinstance(focused, Input):
            if event.key == "escape":
                focused.remove()
                self._clear_input_state()
                event.prevent_default()
            return


def main() -> int:
    """Run the application."""
    try:
        app = LedgerApp()
    except StorageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_STORAGE
    app.run()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
