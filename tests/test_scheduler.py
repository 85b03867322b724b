import pytest

import config
from scheduler import SimulatedClock, TickScheduler


@pytest.fixture
def scheduler(clock):
    return TickScheduler(interval=config.TICK_INTERVAL, clock=clock)


def test_simulated_clock_advances():
    clock = SimulatedClock(now=1.0)
    assert clock() == 1.0
    assert clock.advance(2.5) == 3.5
    assert clock() == 3.5


def test_ticks_every_interval(scheduler, clock):
    fired = []
    scheduler.mount(fired.append)

    clock.now = 2.9
    assert scheduler.poll() is False
    clock.now = 3.0
    assert scheduler.poll() is True
    clock.advance(3.0)
    assert scheduler.poll() is True

    assert fired == [pytest.approx(3.0), pytest.approx(6.0)]
    assert scheduler.tick_count == 2


def test_no_catch_up_on_missed_ticks(scheduler, clock):
    fired = []
    scheduler.mount(fired.append)

    assert scheduler.poll(now=10.0) is True
    assert scheduler.poll(now=11.0) is False
    assert scheduler.poll(now=12.0) is True
    assert len(fired) == 2


def test_teardown_stops_ticks(scheduler, clock):
    fired = []
    scheduler.mount(fired.append)
    scheduler.teardown()

    assert scheduler.poll(now=30.0) is False
    assert fired == []
    assert scheduler.time_until_next() is None


def test_teardown_twice_is_safe(scheduler):
    scheduler.teardown()
    scheduler.mount(lambda now: None)
    scheduler.teardown()
    scheduler.teardown()
    assert not scheduler.is_mounted


def test_remount_replaces_timer(scheduler, clock):
    first, second = [], []
    scheduler.mount(first.append)
    clock.advance(1.0)
    scheduler.mount(second.append)

    clock.advance(3.0)
    assert scheduler.poll() is True
    assert first == []
    assert second == [pytest.approx(4.0)]


def test_time_until_next(scheduler, clock):
    scheduler.mount(lambda now: None)
    assert scheduler.time_until_next() == pytest.approx(3.0)
    clock.advance(1.0)
    assert scheduler.time_until_next() == pytest.approx(2.0)


def test_callback_may_tear_down(scheduler, clock):
    scheduler.mount(lambda now: scheduler.teardown())
    assert scheduler.poll(now=3.0) is True
    assert scheduler.poll(now=6.0) is False
