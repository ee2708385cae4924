from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()


def _normalize_extension(value: str) -> str:
    value = value.strip()
    if value and not value.startswith("."):
        value = "." + value
    return value


class Settings:
    """
    Central configuration for Desk Toolkit.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Log file
        self._log_path = Path(
            os.getenv("DESK_TOOLKIT_LOG_PATH", "logs/process_log.txt")
        )
        self._log_extension = _normalize_extension(
            os.getenv("DESK_TOOLKIT_LOG_EXTENSION", ".txt")
        )
        self._log_level = os.getenv("DESK_TOOLKIT_LOG_LEVEL", "INFO").upper()

        # Process targets
        self._executable_extension = _normalize_extension(
            os.getenv("DESK_TOOLKIT_EXECUTABLE_EXTENSION", ".exe")
        )

        # Outcome timestamps, using the Now format ids
        self._timestamp_date_format = os.getenv(
            "DESK_TOOLKIT_TIMESTAMP_DATE_FORMAT", "-1"
        )
        self._timestamp_time_format = os.getenv(
            "DESK_TOOLKIT_TIMESTAMP_TIME_FORMAT", "0"
        )
        self._timestamp_order = os.getenv("DESK_TOOLKIT_TIMESTAMP_ORDER", "0")

    @staticmethod
    def _as_int(name: str, raw: str) -> int:
        try:
            return int(raw)
        except ValueError:
            raise RuntimeError(
                f"{name} must be an integer format id, got {raw!r}."
            ) from None

    # ------------------------------------------------------------------
    # Log settings
    # ------------------------------------------------------------------

    @property
    def log_path(self) -> Path:
        return self._log_path

    @property
    def log_extension(self) -> str:
        return self._log_extension

    @property
    def log_level(self) -> str:
        return self._log_level

    # ------------------------------------------------------------------
    # Process settings
    # ------------------------------------------------------------------

    @property
    def executable_extension(self) -> str:
        return self._executable_extension

    # ------------------------------------------------------------------
    # Timestamps
    # ------------------------------------------------------------------

    @property
    def timestamp_date_format(self) -> int:
        return self._as_int(
            "DESK_TOOLKIT_TIMESTAMP_DATE_FORMAT", self._timestamp_date_format
        )

    @property
    def timestamp_time_format(self) -> int:
        return self._as_int(
            "DESK_TOOLKIT_TIMESTAMP_TIME_FORMAT", self._timestamp_time_format
        )

    @property
    def timestamp_order(self) -> int:
        return self._as_int("DESK_TOOLKIT_TIMESTAMP_ORDER", self._timestamp_order)


settings = Settings()
