import pytest

from readiness import backoff_delays, wait_until_ready
from setup_errors import ReadinessTimeoutError


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def time(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


def test_backoff_grows_and_caps():
    delays = backoff_delays(1, 10, 2)
    assert [next(delays) for _ in range(6)] == [1, 2, 4, 8, 10, 10]


def test_ready_after_a_few_attempts():
    clock = FakeClock()
    results = iter([(False, 'refused'), (False, 'refused'), (True, 'ok')])

    attempts = wait_until_ready('database', lambda: next(results), timeout=60,
                                sleep=clock.sleep, clock=clock.time)

    assert attempts == 3
    assert clock.sleeps == [1, 2]


def test_ready_immediately_does_not_sleep():
    clock = FakeClock()
    assert wait_until_ready('app', lambda: (True, ''), sleep=clock.sleep, clock=clock.time) == 1
    assert clock.sleeps == []


def test_timeout_raises_with_probe_name():
    clock = FakeClock()

    with pytest.raises(ReadinessTimeoutError) as excinfo:
        wait_until_ready('database (mysql)', lambda: (False, 'down'), timeout=20,
                         initial_delay=1, max_delay=8, factor=2,
                         sleep=clock.sleep, clock=clock.time)

    assert excinfo.value.probe_name == 'database (mysql)'
    assert excinfo.value.exit_code == 124
    assert max(clock.sleeps) <= 8
    assert sum(clock.sleeps) == pytest.approx(20)


def test_shared_deadline_limits_later_wait():
    clock = FakeClock()
    deadline = clock.time() + 10
    clock.now = 7

    with pytest.raises(ReadinessTimeoutError) as excinfo:
        wait_until_ready('application', lambda: (False, 'refused'), timeout=10, deadline=deadline,
                         initial_delay=1, max_delay=8, factor=2,
                         sleep=clock.sleep, clock=clock.time)

    assert excinfo.value.timeout == 10
    assert sum(clock.sleeps) == pytest.approx(3)
