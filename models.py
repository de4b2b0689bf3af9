"""Data models and error types for the manday ledger."""
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from config import DEFAULT_TASK


class LedgerError(Exception):
    """Base class for all ledger errors."""


class DurationFormatError(LedgerError, ValueError):
    """Raised when a duration does not have the H:MM shape."""


class DurationRangeError(LedgerError, ValueError):
    """Raised when the minutes part of a duration is 60 or more."""


class InvalidTaskNameError(LedgerError, ValueError):
    """Raised when a task name is empty."""


class TaskNotFoundError(LedgerError, LookupError):
    """Raised when a named task was expected to exist and does not.

    This is an informational condition: callers report it and carry on.
    """

    def __init__(self, task_name: str):
        super().__init__(f'Task "{task_name}" does not exist')
        self.task_name = task_name


class StorageError(LedgerError, IOError):
    """Raised when the ledger file cannot be read or written."""


@dataclass
class Ledger:
    """Task name to accumulated minutes, plus the active task.

    The tasks dict keeps insertion order, which drives summary order and
    which task becomes active after the active one is deleted.

    The active task does not have to be a key of ``tasks``: switching to a
    task that has no time yet is a valid state.
    """
    tasks: Dict[str, int] = field(default_factory=dict)
    active_task: str = DEFAULT_TASK

    def to_dict(self) -> dict:
        """Convert to the persisted JSON shape."""
        return {
            'tasks': dict(self.tasks),
            'activeTask': self.active_task,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Ledger':
        """Create from the persisted JSON shape. Missing keys fall back to defaults."""
        return cls(
            tasks=dict(data.get('tasks', {})),
            active_task=data.get('activeTask', DEFAULT_TASK),
        )


@dataclass(frozen=True)
class SummaryEntry:
    """One row of the task overview."""
    name: str
    minutes: int
    is_active: bool


@dataclass(frozen=True)
class SwitchResult:
    """Outcome of switching the active task.

    minutes is None when the task had no entry yet.
    """
    task_name: str
    existed: bool
    minutes: Optional[int] = None


class LedgerSummary:
    """Restartable view over a ledger's tasks in insertion order.

    Each iteration reads the ledger as it is at that moment, so a summary
    taken before a mutation reflects the mutation when iterated afterwards.
    """

    def __init__(self, ledger: Ledger):
        self._ledger = ledger

    def __iter__(self) -> Iterator[SummaryEntry]:
        active = self._ledger.active_task
        for name, minutes in self._ledger.tasks.items():
            yield SummaryEntry(name=name, minutes=minutes, is_active=name == active)

    def __len__(self) -> int:
        return len(self._ledger.tasks)

    @property
    def is_empty(self) -> bool:
        """True when no tasks are recorded."""
        return not self._ledger.tasks

    @property
    def total_minutes(self) -> Optional[int]:
        """Grand total across all tasks, or None unless more than one task exists."""
        if len(self._ledger.tasks) <= 1:
            return None
        return sum(self._ledger.tasks.values())
