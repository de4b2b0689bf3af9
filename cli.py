"""Command-line entry point for the manday tracker (`md`)."""
import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from business_logic.ledger import TaskLedger
from business_logic.mandays import MandayCalculator
from config import Config
from ledger_store import LedgerStore
from logging_setup import setup_logging
from models import (
    DurationFormatError,
    DurationRangeError,
    InvalidTaskNameError,
    Ledger,
    StorageError,
    TaskNotFoundError,
)
from ui import console_report
from utils.time_utils import parse_duration

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STORAGE = 2

COMMANDS = {
    "add", "switch", "delete", "del", "rm", "reset",
    "calc", "c", "calculate", "ui", "help",
}
HELP_FLAGS = {"-h", "--help"}
# Commands whose positional is a task name, which may start with "-"
NAME_COMMANDS = {"switch", "delete", "del", "rm", "reset"}

# Loose shape used only to route `md 2:30` to the add command; the strict
# H:MM check happens in parse_duration so `md 2:75` gets a range error.
_DURATION_LIKE = re.compile(r'^\d+:\d+$')


class UsageError(Exception):
    """Raised for malformed command lines."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="md", description="Track task time in mandays.", add_help=False)
    parser.add_argument('--data-file', type=Path, default=None, help='Ledger JSON file to use')
    parser.add_argument('-v', '--verbose', action='store_true', help='Show debug logging on stderr')
    parser.set_defaults(handler=_cmd_summary)
    subparsers = parser.add_subparsers(dest="command")

    add_parser = subparsers.add_parser("add", add_help=False)
    add_parser.add_argument("duration")
    add_parser.add_argument("--task", default=None)
    add_parser.set_defaults(handler=_cmd_add)

    switch_parser = subparsers.add_parser("switch", add_help=False)
    switch_parser.add_argument("name")
    switch_parser.set_defaults(handler=_cmd_switch)

    delete_parser = subparsers.add_parser("delete", aliases=["del", "rm"], add_help=False)
    delete_parser.add_argument("name")
    delete_parser.set_defaults(handler=_cmd_delete)

    reset_parser = subparsers.add_parser("reset", add_help=False)
    reset_parser.add_argument("name", nargs="?", default=None)
    reset_parser.set_defaults(handler=_cmd_reset)

    calc_parser = subparsers.add_parser("calc", aliases=["c", "calculate"], add_help=False)
    calc_parser.add_argument("duration")
    calc_parser.set_defaults(handler=_cmd_calc)

    ui_parser = subparsers.add_parser("ui", add_help=False)
    ui_parser.set_defaults(handler=_cmd_ui)

    help_parser = subparsers.add_parser("help", add_help=False)
    help_parser.set_defaults(handler=_cmd_help)

    return parser


def route_argv(argv: List[str]) -> List[str]:
    """
    Rewrite the command word so argparse can dispatch it.

    - `md 2:30` becomes `md add 2:30`
    - `md -h` / `md --help` become `md help`
    - `md switch -wip` becomes `md switch -- -wip`
    - anything else in command position must be a known command

    Raises:
        UsageError: If the command word is unknown
    """
    routed = list(argv)
    i = 0
    while i < len(routed):
        token = routed[i]
        if token == '--data-file':
            i += 2
            continue
        if token.startswith('--data-file=') or token in ('-v', '--verbose'):
            i += 1
            continue
        if token in HELP_FLAGS:
            routed[i] = "help"
        elif _DURATION_LIKE.match(token):
            routed.insert(i, "add")
        elif token not in COMMANDS:
            raise UsageError(f'Unknown command "{token}"')
        elif token in NAME_COMMANDS and i + 1 < len(routed):
            name = routed[i + 1]
            if name.startswith('-') and name != '--':
                routed.insert(i + 1, '--')
        break
    return routed


def _print_lines(lines: List[str]) -> None:
    print("\n".join(lines))


def _load(store: LedgerStore, settings: Config) -> TaskLedger:
    return TaskLedger(store.load(), default_task=settings.default_task)


def _persist(store: LedgerStore, ledger: Ledger) -> None:
    try:
        store.save(ledger)
    except StorageError:
        print("Warning: the change was applied but could not be saved and may be lost", file=sys.stderr)
        raise


def _cmd_summary(args, store, calculator, settings) -> int:
    ledger = _load(store, settings)
    _print_lines(console_report.summary_report(calculator, ledger.summarize()))
    return EXIT_OK


def _cmd_add(args, store, calculator, settings) -> int:
    ledger = _load(store, settings)
    if args.task is None:
        task_name, total = ledger.add_to_active(args.duration)
    else:
        task_name, total = args.task, ledger.accumulate(args.task, args.duration)
    _persist(store, ledger.ledger)
    _print_lines(console_report.added_report(calculator, task_name, args.duration, total))
    return EXIT_OK


def _cmd_switch(args, store, calculator, settings) -> int:
    ledger = _load(store, settings)
    result = ledger.switch_to(args.name)
    _persist(store, ledger.ledger)
    _print_lines(console_report.switched_report(calculator, result))
    return EXIT_OK


def _cmd_delete(args, store, calculator, settings) -> int:
    ledger = _load(store, settings)
    try:
        minutes = ledger.delete_task(args.name)
    except TaskNotFoundError as e:
        _print_lines(console_report.not_found_report(e.task_name))
        return EXIT_OK
    _persist(store, ledger.ledger)
    _print_lines(console_report.deleted_report(calculator, args.name, minutes))
    return EXIT_OK


def _cmd_reset(args, store, calculator, settings) -> int:
    ledger = _load(store, settings)
    try:
        ledger.reset_task(args.name)
    except TaskNotFoundError as e:
        _print_lines(console_report.not_found_report(e.task_name))
        return EXIT_OK
    _persist(store, ledger.ledger)
    _print_lines(console_report.reset_report(args.name))
    return EXIT_OK


def _cmd_calc(args, store, calculator, settings) -> int:
    minutes = parse_duration(args.duration)
    _print_lines(console_report.calculation_report(calculator, minutes))
    return EXIT_OK


def _cmd_ui(args, store, calculator, settings) -> int:
    from app import LedgerApp

    LedgerApp(store=store, calculator=calculator, settings=settings).run()
    return EXIT_OK


def _cmd_help(args, store, calculator, settings) -> int:
    print(console_report.help_text(settings.hours_per_day, store.data_file))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Run one md command and return the process exit code."""
    argv = sys.argv[1:] if argv is None else list(argv)
    settings = Config.load()

    try:
        args = build_parser().parse_args(route_argv(argv))
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print('Run "md help" for usage information')
        return EXIT_USAGE

    if args.data_file is not None:
        settings.data_file = args.data_file.expanduser()

    if args.handler is _cmd_ui:
        # Console output would draw over the TUI
        console_level = logging.CRITICAL
    else:
        console_level = "DEBUG" if args.verbose else settings.log_level
    setup_logging(console_level=console_level, log_file=settings.log_file)

    store = LedgerStore(settings.data_file)
    calculator = MandayCalculator(settings.hours_per_day)
    logger.debug("Running %s with data file %s", args.command or "summary", store.data_file)

    try:
        return args.handler(args, store, calculator, settings)
    except (DurationFormatError, DurationRangeError, InvalidTaskNameError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except StorageError as e:
        logger.debug("Storage failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_STORAGE


if __name__ == "__main__":
    sys.exit(main())
