"""Pytest configuration and shared fixtures."""
import pytest
from models import Ledger
from business_logic.ledger import TaskLedger
from ledger_store import LedgerStore


@pytest.fixture
def empty_ledger():
    """Fixture providing a TaskLedger with no tasks and the default active task."""
    return TaskLedger()


@pytest.fixture
def sample_ledger():
    """Fixture providing a TaskLedger with A:120, B:180 and B active."""
    return TaskLedger(Ledger(tasks={"A": 120, "B": 180}, active_task="B"))


@pytest.fixture
def data_file(tmp_path):
    """Fixture providing a path for a ledger file that doesn't exist yet."""
    return tmp_path / "mandays.json"


@pytest.fixture
def store(data_file):
    """Fixture providing a LedgerStore on a temporary file."""
    return LedgerStore(data_file=data_file)
