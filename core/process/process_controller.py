"""ProcessController implementation.

Responsible for:
- holding one process target name and one LogStore
- starting the target through a ProcessHost
- terminating every running instance of the target
- writing one OutcomeRecord per attempted action

Behavior:
- both operations first make sure a log exists (`log_store.create()`),
  even when the request is then refused
- the target must end in the executable extension, otherwise the call is
  aborted with a NotExecutable diagnostic and nothing is logged
- failures reported by the host are written to the log as FAILURE records
  and never re-raised; only LogStorageError escapes
"""

import logging
from typing import Callable, Optional

from configs.settings import settings
from core.process.process_host import ProcessHost, PsutilProcessHost, strip_extension
from core.time.now import Now
from exceptions.exceptions import (
    NotExecutable,
    ProcessHostError,
    ProcessNotActive,
    ValidationCondition,
)
from runtime.models.outcome_models import OutcomeRecord, OutcomeResult, TaskStatus
from runtime.store.log_store import LogStore, log_diagnostic


logger = logging.getLogger(__name__)

COMPONENT = "ProcessController"


def default_clock() -> str:
    """Timestamp for outcome records, in the configured Now format."""
    return Now().date_time(
        settings.timestamp_date_format,
        settings.timestamp_time_format,
        settings.timestamp_order,
    )


class ProcessController:
    """Start/stop one named OS process and record every outcome.

    Parameters
    ----------
    task:
        Process target, e.g. "C:/Tools/editor.exe" or "editor.exe".
    log_store:
        Store receiving one line per outcome. Owned by this controller for
        its whole lifetime.
    host:
        ProcessHost used to talk to the OS. Defaults to PsutilProcessHost.
    extension:
        Recognized executable extension (case-insensitive). Defaults to
        `settings.executable_extension`.
    clock:
        Zero-argument callable returning the timestamp string for records.
    on_diagnostic:
        Callable receiving each ValidationCondition (non-executable target,
        nothing to terminate).
    """

    def __init__(
        self,
        task: str,
        log_store: LogStore,
        *,
        host: Optional[ProcessHost] = None,
        extension: Optional[str] = None,
        clock: Optional[Callable[[], str]] = None,
        on_diagnostic: Optional[Callable[[ValidationCondition], None]] = None,
    ):
        if not task or not task.strip():
            raise ValueError("Process name cannot be None or empty.")

        self.task = task
        self.log_store = log_store
        self.extension = extension or settings.executable_extension
        self.host = host or PsutilProcessHost(self.extension)
        self._clock = clock or default_clock
        self._on_diagnostic = on_diagnostic or log_diagnostic

    @property
    def bare_name(self) -> str:
        """Target without directory or executable extension ("editor")."""
        name = self.task.replace("\\", "/").rsplit("/", 1)[-1]
        return strip_extension(name, self.extension)

    def is_executable(self) -> bool:
        return self.task.lower().endswith(self.extension.lower())

    def _preflight(self) -> bool:
        """Ensure a log exists, then check the target is launchable."""
        self.log_store.create()

        if self.is_executable():
            return True

        self._on_diagnostic(NotExecutable(self.task, self.extension))
        return False

    def _record(self, verb: str, result: OutcomeResult, detail: str) -> None:
        record = OutcomeRecord(
            component=COMPONENT,
            verb=verb,
            subject=self.task,
            result=result,
            detail=detail,
            timestamp=self._clock(),
        )
        self.log_store.write(record.to_line())

    def start_task(self) -> TaskStatus:
        """Launch the target and log the outcome."""
        if not self._preflight():
            logger.info("[PROCESS] Start of %s aborted", self.task)
            return TaskStatus.ABORTED

        try:
            handle = self.host.start_process(self.task)
        except ProcessHostError as e:
            logger.warning("[PROCESS] Failed to start %s: %s", self.task, e)
            self._record("start", OutcomeResult.FAILURE, f"Error: {e}")
            return TaskStatus.RECORDED

        name = self.host.display_name(handle)
        logger.info("[PROCESS] Started %s", name)
        self._record(
            "start",
            OutcomeResult.SUCCESS,
            f"{name} has been activated successfully.",
        )
        return TaskStatus.RECORDED

    def end_task(self) -> TaskStatus:
        """Terminate every running instance of the target.

        Instances are processed in enumeration order; a failed kill is
        logged and the remaining instances are still attempted.
        """
        if not self._preflight():
            logger.info("[PROCESS] End of %s aborted", self.task)
            return TaskStatus.ABORTED

        handles = self.host.list_processes_by_name(self.bare_name)
        if not handles:
            self._on_diagnostic(ProcessNotActive(self.bare_name))
            return TaskStatus.NOT_ACTIVE

        for handle in handles:
            name = self.host.display_name(handle)
            try:
                self.host.kill(handle)
            except ProcessHostError as e:
                logger.warning("[PROCESS] Failed to terminate %s: %s", name, e)
                self._record("end", OutcomeResult.FAILURE, f"Error: {e}")
                continue

            logger.info("[PROCESS] Terminated %s", name)
            self._record(
                "end",
                OutcomeResult.SUCCESS,
                f"{name} has been terminated successfully.",
            )

        return TaskStatus.RECORDED
