"""
Custom exceptions for Desk Toolkit stores and controllers.

Two families live here:

  - ValidationCondition and its subclasses describe a request that was
    refused (missing log, wrong extension, non-executable target, ...).
    They are *reported* to a diagnostic handler, never raised, because
    every one of them is recoverable by the user.
  - ProcessHostError and LogStorageError are real failures. The first is
    caught by the process controller and written to the log; the second
    propagates, since a log that cannot be written cannot record anything.

Placing them at the project root (exceptions/) avoids circular imports
between runtime/store and core/process.
"""


class ValidationCondition(Exception):
    """
    Base class for user-diagnosable conditions.

    `title` is a short heading suitable for a dialog or a log prefix.
    """

    title = "Validation"


class LogPathNotSet(ValidationCondition):
    """Raised when a LogStore is used after its path was cleared by delete()."""

    title = "Log Error"

    def __init__(self):
        super().__init__(
            "No log file is selected.\n\nCreate a log file then try again."
        )


class InvalidLogExtension(ValidationCondition):
    """
    Reported when the log path does not end in the recognized extension.
    """

    title = "Log Error"

    def __init__(self, path, extension):
        self.path = path
        self.extension = extension
        msg = (
            f"File {path} does not have a valid file extension of {extension}"
            f"\n\nSelect a file with a valid extension."
        )
        super().__init__(msg)


class LogFileNotFound(ValidationCondition):
    """Reported when the log path is well-formed but missing on disk."""

    title = "Log Error"

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"File {path} does not exist.\n\nCreate the file then try again."
        )


class LogFileEmpty(ValidationCondition):
    title = "Log Error"

    def __init__(self, path):
        self.path = path
        super().__init__(f"File {path} is empty.\n\nWrite to file then try again.")


class NotExecutable(ValidationCondition):
    """
    Reported when a process target does not carry the executable extension.

    Example:
        'C:/Windows/notepad.exe'  ← accepted
        'notepad'                 ← reported with this condition
    """

    title = "Process Error"

    def __init__(self, name, extension):
        self.name = name
        self.extension = extension
        super().__init__(
            f"{name} is not an executable (expected a name ending in {extension})."
        )


class ProcessNotActive(ValidationCondition):
    title = "Process Error"

    def __init__(self, name):
        self.name = name
        super().__init__(f"{name} is not active.")


class ProcessHostError(Exception):
    """
    Raised by a ProcessHost when the operating system refuses to start or
    kill a process. The message is what ends up in the outcome record.
    """


class LogStorageError(OSError):
    """
    Raised when the log file itself cannot be created, read, written or
    deleted. The original OSError is chained as __cause__.
    """

    def __init__(self, action, path, details=None):
        self.action = action
        self.path = path
        self.details = details
        msg = f"Failed to {action} log file {path}"
        if details:
            msg += f": {details}"
        super().__init__(msg)
