"""
Outcome-related models for the Desk Toolkit runtime.

These describe:
- OutcomeResult enum (SUCCESS, FAILURE)
- OutcomeRecord, one attempted action flattened into one log line
- TaskStatus enum, what a controller call ended up doing
"""

from enum import Enum
from pydantic import BaseModel


class OutcomeResult(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


class TaskStatus(str, Enum):
    ABORTED = "ABORTED"        # validation refused the action
    NOT_ACTIVE = "NOT_ACTIVE"  # nothing running to terminate
    RECORDED = "RECORDED"      # action attempted, outcome(s) handed to the log


class OutcomeRecord(BaseModel):
    component: str     # e.g. "ProcessController"
    verb: str          # "start" or "end"
    subject: str       # process target as given by the caller
    result: OutcomeResult
    detail: str
    timestamp: str

    def to_line(self) -> str:
        """Flatten the record into the single line appended to the log."""
        detail = " ".join(self.detail.split())
        return (
            f"{self.timestamp} [{self.component}] {self.verb} {self.subject}: "
            f"{self.result.value} - {detail}"
        )
