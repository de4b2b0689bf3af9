"""Logging configuration for the manday tracker."""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

_LEVEL_ALIASES = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

# Marks handlers installed here so a second call only replaces its own.
_HANDLER_TAG = "_mandays_handler"


def resolve_level(level: Optional[Union[str, int]]) -> int:
    """Turn a level name or number into a logging level, WARNING if unknown."""
    if level is None:
        return logging.WARNING
    if isinstance(level, int):
        return level
    return _LEVEL_ALIASES.get(level.strip().upper(), logging.WARNING)


def setup_logging(
    console_level: Optional[Union[str, int]] = None,
    log_file: Optional[Union[str, Path]] = None,
    file_level: Union[str, int] = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler on stderr, WARNING by default so it stays out of reports
    - File handler (optional) with full debug output

    Call this once, early, before the first ledger operation.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(resolve_level(console_level))
    console.setFormatter(fmt)
    setattr(console, _HANDLER_TAG, True)
    root.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setLevel(resolve_level(file_level))
        file_handler.setFormatter(fmt)
        setattr(file_handler, _HANDLER_TAG, True)
        root.addHandler(file_handler)
