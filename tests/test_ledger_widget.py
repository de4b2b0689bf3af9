"""Tests for LedgerWidget."""
import pytest
from models import Ledger
from business_logic.ledger import TaskLedger
from business_logic.mandays import MandayCalculator
from ui.ledger_widget import LedgerWidget


@pytest.fixture
def three_tasks():
    """Ledger with three tasks, the middle one active."""
    return TaskLedger(Ledger(tasks={"alpha": 60, "beta": 150, "gamma": 0}, active_task="beta"))


class TestLedgerWidget:
    """Test suite for LedgerWidget."""

    def test_init(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        assert widget.task_ledger is three_tasks
        assert widget.selected_index == 0
        assert widget.calculator.hours_per_day == 8

    def test_render_empty(self, empty_ledger):
        """Empty ledger shows a hint and the active task."""
        output = LedgerWidget(empty_ledger).render()
        assert "No tasks recorded yet" in output
        assert "default" in output

    def test_render_lists_tasks_in_order(self, three_tasks):
        output = LedgerWidget(three_tasks).render()
        assert output.index("alpha") < output.index("beta") < output.index("gamma")

    def test_render_times_and_mandays(self, three_tasks):
        output = LedgerWidget(three_tasks).render()
        assert "2:30" in output
        assert "0.313 MD" in output
        assert "0:00" in output

    def test_render_total(self, three_tasks):
        """Total line appears with more than one task."""
        output = LedgerWidget(three_tasks).render()
        assert "TOTAL" in output
        assert "3:30" in output

    def test_render_no_total_single_task(self):
        task_ledger = TaskLedger(Ledger(tasks={"only": 60}, active_task="only"))
        assert "TOTAL" not in LedgerWidget(task_ledger).render()

    def test_render_marks_selected(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        first_line = widget.render().splitlines()[0]
        assert first_line.startswith("[#ff006e on #2d2d44]>")
        assert "alpha" in first_line

    def test_render_dangling_active(self, three_tasks):
        """An active task without time is listed separately."""
        three_tasks.switch_to("new-task")
        output = LedgerWidget(three_tasks).render()
        assert "new-task (no time recorded yet)" in output

    def test_render_escapes_markup(self):
        task_ledger = TaskLedger(Ledger(tasks={"[bold]x": 10}, active_task="[bold]x"))
        assert "\\[bold]x" in LedgerWidget(task_ledger).render()

    def test_format_task_line_active(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        line = widget.format_task_line("beta", 150, is_active=True, is_selected=False)
        assert "●" in line
        assert line.startswith("  beta")

    def test_custom_calculator(self, three_tasks):
        widget = LedgerWidget(three_tasks, MandayCalculator(hours_per_day=5))
        assert "0.500 MD" in widget.render()  # 2:30 of a 5h day

    def test_move_selection_down(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        widget.move_selection(1)
        assert widget.selected_index == 1
        assert widget.get_selected_task() == "beta"

    def test_move_selection_up(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        widget.selected_index = 2
        widget.move_selection(-1)
        assert widget.selected_index == 1

    def test_move_selection_clamped(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        widget.move_selection(-1)
        assert widget.selected_index == 0
        widget.move_selection(10)
        assert widget.selected_index == 2

    def test_move_selection_empty(self, empty_ledger):
        widget = LedgerWidget(empty_ledger)
        widget.move_selection(1)
        assert widget.selected_index == 0
        assert widget.get_selected_task() is None

    def test_clamp_after_delete(self, three_tasks):
        widget = LedgerWidget(three_tasks)
        widget.selected_index = 2
        three_tasks.delete_task("gamma")
        widget.clamp_selection()
        assert widget.selected_index == 1
        assert widget.get_selected_task() == "beta"
