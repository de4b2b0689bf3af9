"""Tests for the TUI entry point."""
import app
from cli import EXIT_STORAGE
from config import Config


class TestMain:
    """Test running the app directly."""

    def test_corrupted_data_file(self, monkeypatch, data_file, capsys):
        """A broken data file is reported instead of raising."""
        data_file.write_text("{broken")
        monkeypatch.setattr(app, "config", Config(data_file=data_file))

        assert app.main() == EXIT_STORAGE
        assert "corrupted" in capsys.readouterr().err
        assert data_file.read_text() == "{broken"

    def test_loads_existing_ledger(self, data_file):
        data_file.write_text('{"tasks": {"A": 30}, "activeTask": "A"}')
        ledger_app = app.LedgerApp(settings=Config(data_file=data_file))
        assert ledger_app.task_ledger.active_task == "A"
        assert ledger_app.task_ledger.get_minutes("A") == 30
