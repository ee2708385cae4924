import pytest
from datetime import datetime, timedelta

from core.time.now import Now
from core.time.timer import Timer, format_elapsed


FIXED = datetime(2026, 3, 4, 5, 6, 7)


@pytest.fixture
def now() -> Now:
    return Now(clock=lambda: FIXED)


@pytest.mark.parametrize(
    "fmt, expected",
    [
        (0, "04/03/2026"),
        (1, "20260304"),
        (-1, "2026_03_04"),
        (2, "03042026"),
        (-2, "03_04_2026"),
        (3, "04032026"),
        (-3, "04_03_2026"),
        (99, "20260304"),
    ],
)
def test_date_formats(now: Now, fmt, expected):
    assert now.date(fmt) == expected


@pytest.mark.parametrize(
    "fmt, expected",
    [(0, "05:06:07"), (1, "050607"), (-1, "05_06_07"), (7, "050607")],
)
def test_time_formats(now: Now, fmt, expected):
    assert now.time(fmt) == expected


@pytest.mark.parametrize(
    "order, expected",
    [
        (0, "2026_03_04 05:06:07"),
        (1, "2026_03_0405:06:07"),
        (-1, "2026_03_04_05:06:07"),
        (2, "05:06:072026_03_04"),
        (-2, "05:06:07_2026_03_04"),
        (5, "2026_03_0405:06:07"),
    ],
)
def test_date_time_orders(now: Now, order, expected):
    assert now.date_time(-1, 0, order) == expected


def test_date_time_reads_clock_once():
    readings = iter([FIXED, FIXED + timedelta(seconds=1)])
    now = Now(clock=lambda: next(readings))

    assert now.date_time() == "20260304050607"


class FakeCounter:
    def __init__(self):
        self.value = 0.0

    def __call__(self):
        return self.value


def test_timer_measures_elapsed():
    counter = FakeCounter()
    timer = Timer(counter=counter)

    timer.start()
    counter.value = 3725.4
    assert timer.is_running
    assert timer.stop(0) == "01:02:05"
    assert not timer.is_running


def test_timer_accumulates_until_reset():
    counter = FakeCounter()
    timer = Timer(counter=counter)

    timer.start()
    counter.value = 10
    timer.stop()
    counter.value = 100
    timer.start()
    counter.value = 105

    assert timer.stop(-1) == "00_00_15"

    timer.reset()
    assert timer.elapsed == timedelta(0)


def test_stop_without_start_is_zero():
    assert Timer(counter=FakeCounter()).stop() == "000000"


def test_format_elapsed_wraps_hours():
    assert format_elapsed(timedelta(hours=25, seconds=1), 0) == "01:00:01"
