"""
LogStore: append-only text log for Desk Toolkit outcome records.

A LogStore owns exactly one file path. Every read and write goes through
the validity gate (`is_valid`): the path must carry the recognized log
extension AND exist on disk. When the gate fails the operation is skipped
and the condition is reported to the diagnostic handler instead of being
raised; only genuine I/O failures propagate, as LogStorageError.

The file is opened and closed inside each call. Nothing is cached, so
every read reflects what is on disk right now.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from configs.settings import settings
from exceptions.exceptions import (
    InvalidLogExtension,
    LogFileEmpty,
    LogFileNotFound,
    LogPathNotSet,
    LogStorageError,
    ValidationCondition,
)


logger = logging.getLogger(__name__)

DiagnosticHandler = Callable[[ValidationCondition], None]


def log_diagnostic(condition: ValidationCondition) -> None:
    """Default diagnostic handler: emit the condition as a warning."""
    logger.warning("[%s] %s", condition.title, str(condition).replace("\n\n", " "))


class LogStore:
    """Single-file, append-only log with existence + extension gating.

    Parameters
    ----------
    path:
        Path of the log file. It does not need to exist yet, nor carry the
        extension; `create()` normalizes both.
    extension:
        Recognized log extension, compared case-insensitively.
        Defaults to `settings.log_extension`.
    on_diagnostic:
        Callable receiving each ValidationCondition. Defaults to
        `log_diagnostic`.
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        extension: Optional[str] = None,
        on_diagnostic: Optional[DiagnosticHandler] = None,
    ) -> None:
        if path is None or not str(path).strip():
            raise ValueError("File path cannot be None or empty.")

        self._path: Optional[Path] = Path(path)
        self._extension = extension or settings.log_extension
        self._on_diagnostic = on_diagnostic or log_diagnostic

    @property
    def path(self) -> Optional[Path]:
        """Current log path, or None once `delete()` has cleared it."""
        return self._path

    def _report(self, condition: ValidationCondition) -> None:
        self._on_diagnostic(condition)

    def _has_extension(self, path: Path) -> bool:
        return str(path).lower().endswith(self._extension.lower())

    def is_valid(self) -> bool:
        """Validity gate: recognized extension AND the file exists.

        Reports the first failing condition to the diagnostic handler.
        """
        if self._path is None:
            self._report(LogPathNotSet())
            return False

        if not self._has_extension(self._path):
            self._report(InvalidLogExtension(self._path, self._extension))
            return False

        if not self._path.is_file():
            self._report(LogFileNotFound(self._path))
            return False

        return True

    def create(self) -> Optional[Path]:
        """Materialize the log file and return its path.

        - An existing file at the held path is returned unchanged.
        - Otherwise the extension is appended if absent. A file already at
          the normalized path is adopted as-is (never truncated); if there
          is none, parent directories and an empty file are created.

        The normalized path becomes the store's path from then on.
        """
        if self._path is None:
            self._report(LogPathNotSet())
            return None

        if self._path.is_file():
            return self._path

        if self._has_extension(self._path):
            created = self._path
        else:
            created = self._path.with_name(self._path.name + self._extension)

        if created.exists() and not created.is_file():
            raise LogStorageError(
                "create", created, "path exists and is not a regular file"
            )

        try:
            created.parent.mkdir(parents=True, exist_ok=True)
            created.touch(exist_ok=True)
        except OSError as e:
            raise LogStorageError("create", created, str(e)) from e

        if created != self._path:
            logger.debug("[LOG] Normalized log path %s -> %s", self._path, created)
        self._path = created
        logger.info("[LOG] Log file ready at %s", created)
        return self._path

    def read(self) -> Optional[List[str]]:
        """Return every line of the log in file order.

        Returns None when the gate fails or when the file is empty.
        """
        if not self.is_valid():
            return None

        try:
            with self._path.open("r", encoding="utf-8") as f:
                # Line breaks are \n, \r\n or \r only; other separators stay in the line.
                lines = [line.rstrip("\n") for line in f]
        except (OSError, UnicodeDecodeError) as e:
            raise LogStorageError("read from", self._path, str(e)) from e

        if not lines:
            self._report(LogFileEmpty(self._path))
            return None

        return lines

    def write(self, message: str) -> bool:
        """Append `message` and a newline to the log.

        Returns False (and writes nothing) when the gate fails.
        """
        if not self.is_valid():
            return False

        try:
            with self._path.open("a", encoding="utf-8") as f:
                f.write(f"{message}\n")
        except OSError as e:
            raise LogStorageError("write to", self._path, str(e)) from e

        return True

    def delete(self) -> None:
        """Remove the log file (if present) and clear the held path."""
        if self._path is None:
            return

        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise LogStorageError("delete", self._path, str(e)) from e

        logger.info("[LOG] Deleted log file %s", self._path)
        self._path = None
