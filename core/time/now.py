"""
core.time.now

Current date/time rendered as compact strings, selected by small integer
format ids. Negative ids are the underscore-separated variants of their
positive counterpart; unknown ids fall back to the default (1).

Used by:
  - core/process/process_controller.py (outcome timestamps)
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional


DATE_FORMATS = {
    0: "%d/%m/%Y",
    1: "%Y%m%d",
    -1: "%Y_%m_%d",
    2: "%m%d%Y",
    -2: "%m_%d_%Y",
    3: "%d%m%Y",
    -3: "%d_%m_%Y",
}

TIME_FORMATS = {
    0: "%H:%M:%S",
    1: "%H%M%S",
    -1: "%H_%M_%S",
}

# order id -> how the date (d) and time (t) parts are joined
ORDERS = {
    0: "{d} {t}",
    1: "{d}{t}",
    -1: "{d}_{t}",
    2: "{t}{d}",
    -2: "{t}_{d}",
}

DEFAULT_FORMAT = 1


class Now:
    """Formatter for the current local date and time.

    Parameters
    ----------
    clock:
        Zero-argument callable returning a datetime. Defaults to
        `datetime.now`; tests pass a fixed clock.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now

    def date(self, fmt: int = DEFAULT_FORMAT, *, current: Optional[datetime] = None) -> str:
        current = current or self._clock()
        return current.strftime(DATE_FORMATS.get(fmt, DATE_FORMATS[DEFAULT_FORMAT]))

    def time(self, fmt: int = DEFAULT_FORMAT, *, current: Optional[datetime] = None) -> str:
        current = current or self._clock()
        return current.strftime(TIME_FORMATS.get(fmt, TIME_FORMATS[DEFAULT_FORMAT]))

    def date_time(
        self,
        date_fmt: int = DEFAULT_FORMAT,
        time_fmt: int = DEFAULT_FORMAT,
        order: int = DEFAULT_FORMAT,
    ) -> str:
        """Date and time joined according to `order`.

        Both parts come from a single clock reading so they never straddle
        a second boundary.
        """
        current = self._clock()
        template = ORDERS.get(order, ORDERS[DEFAULT_FORMAT])
        return template.format(
            d=self.date(date_fmt, current=current),
            t=self.time(time_fmt, current=current),
        )
