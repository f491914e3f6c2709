from unittest import mock

import pytest

from pinhole_tracer.timer import TimeUnit, Timer, log_context


def _timer_with_ticks(unit, start_ns, end_ns):
    with mock.patch("time.monotonic_ns", side_effect=[start_ns, end_ns]):
        timer = Timer(unit)
        timer.stop_clock()
    return timer


def test_seconds_are_truncated():
    timer = _timer_with_ticks(TimeUnit.SECONDS, 0, 2_500_000_000)
    assert timer.time_difference == 2.0


def test_milliseconds_from_same_span():
    timer = _timer_with_ticks(TimeUnit.MILLISECONDS, 0, 2_500_000_000)
    assert timer.time_difference == 2500.0


def test_finer_unit_never_reports_less():
    start, end = 1_000, 180_000_000_123
    coarse = _timer_with_ticks(TimeUnit.MINUTES, start, end).time_difference
    fine = _timer_with_ticks(TimeUnit.SECONDS, start, end).time_difference
    assert fine >= coarse * 60


def test_unstopped_timer_raises_until_stopped():
    with mock.patch("time.monotonic_ns", side_effect=[0, 3_000_000_000]):
        timer = Timer(TimeUnit.SECONDS)
        with pytest.raises(RuntimeError):
            timer.time_difference
        timer.stop_clock()
    assert timer.time_difference == 3.0


def test_context_manager_stops_clock():
    with Timer(TimeUnit.NANOSECONDS) as timer:
        pass
    assert timer.time_difference >= 0.0


def test_log_context_float_format(capsys):
    log_context("Ray Simulations", "s", 12.0)
    assert capsys.readouterr().out == "System - Ray Simulations - duration: 12s\n"


def test_log_context_int_format(capsys):
    log_context("Writing BMP File", "ms", 7)
    assert capsys.readouterr().out == "System - Writing BMP File - duration: 7ms\n"