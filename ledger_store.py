"""Read and write the ledger from/to its JSON file."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from config import DEFAULT_TASK, config
from models import Ledger, StorageError

logger = logging.getLogger(__name__)


class LedgerStore:
    """Load and save a Ledger as JSON.

    The file holds {"tasks": {name: minutes, ...}, "activeTask": name}.
    Task order in the file is the ledger's insertion order.
    """

    def __init__(self, data_file: Optional[Union[str, Path]] = None):
        """
        Initialize LedgerStore.

        Args:
            data_file: Optional path of the JSON file. If None, uses config.data_file.
        """
        if data_file is None:
            self.data_file = config.data_file
        else:
            self.data_file = Path(data_file).expanduser()

    def load(self) -> Ledger:
        """Load the ledger from disk.

        Returns:
            The stored Ledger, or an empty one (active task "default") if
            the file doesn't exist.

        Raises:
            StorageError: If the file can't be read, isn't valid JSON, or
                doesn't have the expected shape
        """
        if not self.data_file.exists():
            logger.debug("No ledger file at %s, starting empty", self.data_file)
            return Ledger()

        try:
            content = self.data_file.read_text(encoding='utf-8')
        except (IOError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read ledger from {self.data_file}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(f"Ledger file {self.data_file} is corrupted: {e}") from e

        self._validate(data)
        ledger = Ledger.from_dict(data)
        logger.debug("Loaded %d task(s) from %s", len(ledger.tasks), self.data_file)
        return ledger

    def save(self, ledger: Ledger):
        """Save the ledger to disk.

        Creates the parent directory if needed; overwrites an existing file.

        Raises:
            StorageError: If the file cannot be written (permissions, disk full, etc.)
        """
        content = json.dumps(ledger.to_dict(), indent=2, ensure_ascii=False)

        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            self.data_file.write_text(content + "\n", encoding='utf-8')
        except (IOError, PermissionError) as e:
            raise StorageError(f"Failed to save ledger to {self.data_file}: {e}") from e

        logger.debug("Saved %d task(s) to %s", len(ledger.tasks), self.data_file)

    def _validate(self, data) -> None:
        """Check the decoded JSON has the ledger shape."""
        if not isinstance(data, dict):
            raise StorageError(f"Ledger file {self.data_file} must contain a JSON object")

        tasks = data.get('tasks', {})
        if not isinstance(tasks, dict):
            raise StorageError(f"Ledger file {self.data_file} contains invalid task data")

        for name, minutes in tasks.items():
            # bool is an int subclass; true/false are not minute counts
            if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 0:
                raise StorageError(
                    f'Ledger file {self.data_file} has invalid minutes for task "{name}": {minutes!r}'
                )

        active_task = data.get('activeTask', DEFAULT_TASK)
        if not isinstance(active_task, str) or not active_task:
            raise StorageError(f"Ledger file {self.data_file} has an invalid active task")
