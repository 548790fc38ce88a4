import time

from philo.clock import current_time, sleep_ms


def test_current_time_matches_wall_clock():
    before = time.time() * 1000
    now = current_time()
    after = time.time() * 1000
    assert before - 1 <= now <= after + 1


def test_current_time_is_integer_and_non_decreasing():
    first = current_time()
    second = current_time()
    assert isinstance(first, int)
    assert second >= first


def test_sleep_ms_waits_at_least_requested():
    start = current_time()
    sleep_ms(30)
    assert current_time() - start >= 30


def test_sleep_ms_does_not_overshoot_wildly():
    start_ms = current_time()
    started = time.monotonic()
    result = sleep_ms(20)
    elapsed = time.monotonic() - started
    assert result is None
    assert current_time() - start_ms >= 20
    assert elapsed < 1.0


def test_sleep_ms_zero_returns_promptly():
    start = time.monotonic()
    result = sleep_ms(0)
    assert result is None
    assert time.monotonic() - start < 0.1