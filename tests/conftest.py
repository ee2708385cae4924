import pytest
from pathlib import Path
from typing import List

from exceptions.exceptions import ProcessHostError, ValidationCondition
from runtime.store.log_store import LogStore


class DiagnosticRecorder:
    """Collects every condition handed to a diagnostic handler."""

    def __init__(self):
        self.conditions: List[ValidationCondition] = []

    def __call__(self, condition: ValidationCondition) -> None:
        self.conditions.append(condition)

    def types(self):
        return [type(c) for c in self.conditions]


class FakeHandle:
    def __init__(self, name: str, pid: int, fail_kill: bool = False):
        self.name = name
        self.pid = pid
        self.fail_kill = fail_kill
        self.killed = False


class FakeProcessHost:
    """
    In-memory ProcessHost. `running` lists the handles that
    list_processes_by_name() will report; `calls` records every host call
    in order.
    """

    def __init__(self, running=None, start_error=None):
        self.running: List[FakeHandle] = list(running or [])
        self.start_error = start_error
        self.started: List[str] = []
        self.calls: List[tuple] = []

    def start_process(self, path):
        self.calls.append(("start", path))
        if self.start_error:
            raise ProcessHostError(self.start_error)
        self.started.append(path)
        name = Path(path.replace("\\", "/")).stem
        return FakeHandle(name, pid=1000 + len(self.started))

    def list_processes_by_name(self, bare_name):
        self.calls.append(("list", bare_name))
        return [h for h in self.running if h.name.lower() == bare_name.lower()]

    def kill(self, handle):
        self.calls.append(("kill", handle.pid))
        if handle.fail_kill:
            raise ProcessHostError(f"Access is denied (pid {handle.pid})")
        handle.killed = True

    def display_name(self, handle):
        return handle.name


@pytest.fixture
def diagnostics() -> DiagnosticRecorder:
    return DiagnosticRecorder()


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """An isolated, empty directory for log files."""
    directory = tmp_path / "logs"
    directory.mkdir()
    return directory


@pytest.fixture
def store(log_dir: Path, diagnostics: DiagnosticRecorder) -> LogStore:
    """A LogStore pointing at a not-yet-created 'audit' log."""
    return LogStore(log_dir / "audit", extension=".txt", on_diagnostic=diagnostics)


@pytest.fixture
def make_host():
    """Factory for FakeProcessHost; pass (name, pid, fail_kill) tuples as running processes."""

    def _make(running=(), start_error=None) -> FakeProcessHost:
        handles = [FakeHandle(*spec) for spec in running]
        return FakeProcessHost(running=handles, start_error=start_error)

    return _make
