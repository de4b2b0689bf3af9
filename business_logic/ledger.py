"""Task ledger operations.

The ledger accumulates whole minutes per named task and tracks which task
is active. It never touches the file system; loading and saving are the
caller's job (see ledger_store.LedgerStore).
"""
import logging
from typing import List, Optional, Tuple

from config import DEFAULT_TASK
from models import InvalidTaskNameError, Ledger, LedgerSummary, SwitchResult, TaskNotFoundError
from utils.time_utils import parse_duration

logger = logging.getLogger(__name__)


def _check_task_name(task_name: str) -> None:
    if not task_name:
        raise InvalidTaskNameError("Task name must not be empty")


class TaskLedger:
    """
    Mutating and read operations over a Ledger.

    Features:
    - Accumulate H:MM durations onto a task, creating it on first use
    - Switch the active task without creating an entry
    - Delete a task, re-targeting the active task if needed
    - Reset one task to zero or clear everything
    - Restartable summary in insertion order
    """

    def __init__(self, ledger: Optional[Ledger] = None, default_task: str = DEFAULT_TASK):
        """
        Initialize TaskLedger.

        Args:
            ledger: State to operate on. If None, starts from an empty ledger.
            default_task: Sentinel name used when no active task is determinable
        """
        self.default_task = default_task
        if ledger is None:
            ledger = Ledger(active_task=default_task)
        self.ledger = ledger

    @property
    def active_task(self) -> str:
        """Name of the task that receives bare durations."""
        return self.ledger.active_task

    def __contains__(self, task_name: str) -> bool:
        return task_name in self.ledger.tasks

    def get_minutes(self, task_name: str) -> Optional[int]:
        """Return the accumulated minutes for a task, or None if it has no entry."""
        return self.ledger.tasks.get(task_name)

    def task_names(self) -> List[str]:
        """Return task names in insertion order."""
        return list(self.ledger.tasks)

    def accumulate(self, task_name: str, duration_input: str) -> int:
        """
        Add a duration to a task and make it the active task.

        A task that has no entry yet is appended with 0 minutes first.
        Parse errors propagate before anything is changed.

        Args:
            task_name: Task to add time to
            duration_input: Duration in H:MM or HH:MM format

        Returns:
            The task's new total in minutes

        Raises:
            InvalidTaskNameError: If task_name is empty
            DurationFormatError: If duration_input is not H:MM shaped
            DurationRangeError: If the minutes part is 60 or more
        """
        _check_task_name(task_name)
        minutes_to_add = parse_duration(duration_input)

        tasks = self.ledger.tasks
        if task_name not in tasks:
            tasks[task_name] = 0
            logger.debug("Created task %r", task_name)

        tasks[task_name] += minutes_to_add
        self.ledger.active_task = task_name

        logger.debug("Added %d min to %r (total %d)", minutes_to_add, task_name, tasks[task_name])
        return tasks[task_name]

    def add_to_active(self, duration_input: str) -> Tuple[str, int]:
        """
        Add a duration to the active task.

        Returns:
            Tuple of (task_name, new_total_minutes)
        """
        task_name = self.ledger.active_task
        return task_name, self.accumulate(task_name, duration_input)

    def switch_to(self, task_name: str) -> SwitchResult:
        """
        Make a task active. Never creates an entry.

        Args:
            task_name: Task to switch to, existing or not

        Returns:
            SwitchResult telling whether the task already had an entry and,
            if so, its current minutes

        Raises:
            InvalidTaskNameError: If task_name is empty
        """
        _check_task_name(task_name)
        self.ledger.active_task = task_name
        logger.debug("Switched active task to %r", task_name)

        if task_name in self.ledger.tasks:
            return SwitchResult(task_name=task_name, existed=True, minutes=self.ledger.tasks[task_name])
        return SwitchResult(task_name=task_name, existed=False)

    def delete_task(self, task_name: str) -> int:
        """
        Remove a task entirely.

        If the removed task was active, the first remaining task becomes
        active, or the default task when none remain.

        Returns:
            The minutes the task had before removal

        Raises:
            TaskNotFoundError: If the task has no entry
        """
        tasks = self.ledger.tasks
        if task_name not in tasks:
            raise TaskNotFoundError(task_name)

        minutes = tasks.pop(task_name)

        if self.ledger.active_task == task_name:
            self.ledger.active_task = next(iter(tasks), self.default_task)
            logger.debug("Active task %r deleted, now %r", task_name, self.ledger.active_task)

        logger.debug("Deleted task %r (%d min)", task_name, minutes)
        return minutes

    def reset_task(self, task_name: Optional[str] = None) -> Optional[int]:
        """
        Zero one task, or clear every task.

        With a name, the entry keeps its position and the active task is
        unchanged. Without a name, all entries are removed and the active
        task goes back to the default.

        Args:
            task_name: Task to reset, or None to reset everything

        Returns:
            Minutes that were cleared from the named task, or None when
            everything was reset

        Raises:
            TaskNotFoundError: If a name is given and it has no entry
        """
        if task_name is None:
            self.ledger.tasks.clear()
            self.ledger.active_task = self.default_task
            logger.debug("Reset all tasks")
            return None

        tasks = self.ledger.tasks
        if task_name not in tasks:
            raise TaskNotFoundError(task_name)

        cleared = tasks[task_name]
        tasks[task_name] = 0
        logger.debug("Reset task %r (was %d min)", task_name, cleared)
        return cleared

    def summarize(self) -> LedgerSummary:
        """Return a restartable overview of all tasks in insertion order."""
        return LedgerSummary(self.ledger)
