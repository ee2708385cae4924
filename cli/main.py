#!/usr/bin/env python3
"""
Desk Toolkit CLI

Thin command-line host around the log store and the process controller.

Log commands (all honor --log-path):

1) create-log
   - Create the log file (appending the log extension if missing)

2) read-log
   - Print every line of the log

3) write-log MESSAGE
   - Append one line to the log

4) delete-log
   - Remove the log file

Process commands:

5) start NAME
   - Launch NAME (must end in the executable extension) and record the
     outcome in the log

6) end NAME
   - Terminate every running instance of NAME and record each outcome

Exit status is 1 when a request was refused (invalid log, non-executable
target, nothing running), 0 otherwise.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from configs.settings import settings
from core.process.process_controller import ProcessController
from core.time.timer import Timer
from exceptions.exceptions import ValidationCondition
from runtime.models.outcome_models import TaskStatus
from runtime.store.log_store import LogStore


class DiagnosticPrinter:
    """Diagnostic handler that prints each condition to stderr and counts them."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, condition: ValidationCondition) -> None:
        self.count += 1
        message = str(condition).replace("\n\n", " ")
        print(f"[Toolkit] ⚠ {condition.title}: {message}", file=sys.stderr)


# ---------------------------------------------------------------------------
# Log commands
# ---------------------------------------------------------------------------


def cmd_create_log(store: LogStore) -> int:
    path = store.create()
    if path is None:
        return 1
    print(f"[Toolkit] ✓ Log ready → {path}")
    return 0


def cmd_read_log(store: LogStore) -> int:
    lines = store.read()
    if lines is None:
        return 1
    for line in lines:
        print(line)
    return 0


def cmd_write_log(store: LogStore, message: str) -> int:
    if not store.write(message):
        return 1
    print(f"[Toolkit] ✓ Appended to {store.path}")
    return 0


def cmd_delete_log(store: LogStore) -> int:
    path = store.path
    store.delete()
    print(f"[Toolkit] ✓ Deleted {path}")
    return 0


# ---------------------------------------------------------------------------
# Process commands
# ---------------------------------------------------------------------------


def cmd_process(controller: ProcessController, action: str) -> int:
    """
    Run start_task / end_task on the controller and report how long the
    request took, measured with Timer.
    """
    verb = "Starting" if action == "start" else "Ending"
    print(f"[Toolkit] {verb} {controller.task}...")

    timer = Timer()
    timer.start()
    if action == "start":
        status = controller.start_task()
    else:
        status = controller.end_task()
    elapsed = timer.stop(0)

    if status is not TaskStatus.RECORDED:
        print(f"[Toolkit] ✗ {status.value} ({elapsed})")
        return 1

    print(f"[Toolkit] ✓ Outcome recorded in {controller.log_store.path} ({elapsed})")
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Desk Toolkit CLI")
    parser.add_argument(
        "--log-path",
        default=str(settings.log_path),
        help=(
            "Path of the outcome log "
            "(default: DESK_TOOLKIT_LOG_PATH or 'logs/process_log.txt')"
        ),
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("create-log", help="Create the log file")
    subparsers.add_parser("read-log", help="Print every line of the log")

    p_write = subparsers.add_parser("write-log", help="Append a line to the log")
    p_write.add_argument("message", help="Text to append")

    subparsers.add_parser("delete-log", help="Delete the log file")

    p_start = subparsers.add_parser(
        "start", help="Launch a process and record the outcome"
    )
    p_start.add_argument(
        "name",
        help=f"Executable to launch (must end in {settings.executable_extension})",
    )

    p_end = subparsers.add_parser(
        "end", help="Terminate every running instance of a process"
    )
    p_end.add_argument(
        "name",
        help=f"Executable name, e.g. editor{settings.executable_extension}",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    diagnostics = DiagnosticPrinter()
    store = LogStore(args.log_path, on_diagnostic=diagnostics)
    command: str = args.command

    if command == "create-log":
        return cmd_create_log(store)
    elif command == "read-log":
        return cmd_read_log(store)
    elif command == "write-log":
        return cmd_write_log(store, args.message)
    elif command == "delete-log":
        return cmd_delete_log(store)
    elif command in ("start", "end"):
        controller = ProcessController(args.name, store, on_diagnostic=diagnostics)
        return cmd_process(controller, command)
    else:
        parser.error(f"Unknown command: {command}")


if __name__ == "__main__":
    sys.exit(main())
