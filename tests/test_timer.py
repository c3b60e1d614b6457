from xbusparse.timer import SimpleTimer


def _clock(*ticks):
    values = iter(ticks)
    return lambda: next(values)


def test_duration_starts_at_zero():
    assert SimpleTimer(_clock()).duration == 0


def test_elapsed_measures_from_begin():
    timer = SimpleTimer(_clock(100, 350))
    timer.begin()
    assert timer.elapsed() == 250
    assert timer.duration == 250


def test_duration_keeps_last_measurement():
    timer = SimpleTimer(_clock(10, 40, 90))
    timer.begin()
    first = timer.elapsed()
    assert timer.duration == first
    second = timer.elapsed()
    assert second > first
    assert timer.duration == second


def test_elapsed_wraps_like_32_bit_counter():
    timer = SimpleTimer(_clock(2**32 - 10, 2**32 + 5))
    timer.begin()
    assert timer.elapsed() == 15


def test_default_clock_is_monotonic():
    timer = SimpleTimer()
    timer.begin()
    assert timer.elapsed() >= 0
    assert timer.duration < 2**32