"""
core.process.process_host

Operating-system seam used by the ProcessController.

The controller only needs four things from the host: start a program,
list running processes by name, kill one of them, and name a handle for
the log. `ProcessHost` spells that out as a Protocol so tests (or another
platform layer) can supply their own backend; `PsutilProcessHost` is the
real implementation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Protocol

import psutil

from exceptions.exceptions import ProcessHostError


logger = logging.getLogger(__name__)


def strip_extension(name: str, extension: str) -> str:
    """Drop a trailing `extension` (case-insensitive) from a process name."""
    if extension and name.lower().endswith(extension.lower()):
        return name[: -len(extension)]
    return name


class ProcessHost(Protocol):
    """
    Abstract host interface for process control.

    Implementations must raise ProcessHostError (and nothing else) when the
    OS refuses to start or kill a process.
    """

    def start_process(self, path: str) -> Any:
        """Start the program at `path` and return a handle for it."""
        ...

    def list_processes_by_name(self, bare_name: str) -> List[Any]:
        """Return handles for every running process called `bare_name`."""
        ...

    def kill(self, handle: Any) -> None:
        ...

    def display_name(self, handle: Any) -> str:
        """Human-readable name for a handle, without the executable suffix."""
        ...


class PsutilProcessHost:
    """ProcessHost backed by psutil.

    Parameters
    ----------
    extension:
        Executable extension ignored when comparing process names
        (e.g. "notepad.exe" on Windows matches "notepad").
    """

    def __init__(self, extension: str = ".exe") -> None:
        self.extension = extension

    def start_process(self, path: str) -> psutil.Popen:
        try:
            proc = psutil.Popen([path])
        except (OSError, ValueError, TypeError, psutil.Error) as e:
            raise ProcessHostError(str(e) or f"Unable to start {path}") from e

        logger.debug("[PROCESS] Started %s (pid=%s)", path, proc.pid)
        return proc

    def list_processes_by_name(self, bare_name: str) -> List[psutil.Process]:
        wanted = bare_name.casefold()
        matches: List[psutil.Process] = []

        for proc in psutil.process_iter(["name"]):
            name: Optional[str] = proc.info.get("name")
            if not name:
                # Zombie or access-denied entry; nothing to compare against.
                continue
            if strip_extension(name, self.extension).casefold() == wanted:
                matches.append(proc)

        logger.debug(
            "[PROCESS] %d running process(es) match %r", len(matches), bare_name
        )
        return matches

    def kill(self, handle: psutil.Process) -> None:
        try:
            handle.kill()
        except psutil.NoSuchProcess as e:
            raise ProcessHostError(f"Process {e.pid} no longer exists.") from e
        except psutil.AccessDenied as e:
            raise ProcessHostError(f"Access denied to process {e.pid}.") from e
        except (OSError, psutil.Error) as e:
            raise ProcessHostError(str(e)) from e

    def display_name(self, handle: psutil.Process) -> str:
        try:
            name = handle.name()
        except psutil.Error:
            # Already gone: fall back to what we asked the OS to run.
            args = getattr(handle, "args", None)
            if args:
                name = Path(args[0]).name
            else:
                name = f"pid {handle.pid}"
        return strip_extension(name, self.extension)
