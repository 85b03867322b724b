import pytest

import config
from entities import ToastType
from notifications import ToastManager


@pytest.fixture
def toasts(clock):
    return ToastManager(clock=clock, verbose=False)


def test_enqueue_defaults_to_info(toasts):
    toast = toasts.enqueue('Route optimized')
    assert toast.toast_type == ToastType.INFO
    assert toasts.active() == [toast]


def test_toast_expires_after_duration(toasts, clock):
    toast = toasts.enqueue('Mission M-001 completed!', ToastType.SUCCESS)

    clock.now = 4.999
    assert toasts.active() == [toast]

    clock.now = 5.001
    assert toasts.active() == []


def test_expire_returns_removed_toasts(toasts, clock):
    first = toasts.enqueue('first')
    clock.advance(2.0)
    second = toasts.enqueue('second')

    assert toasts.expire(now=config.TOAST_DURATION) == [first]
    assert toasts.active() == [second]
    assert toasts.expire(now=100.0) == [second]
    assert len(toasts) == 0


def test_active_set_is_oldest_first(toasts, clock):
    messages = ['a', 'b', 'c']
    for message in messages:
        toasts.enqueue(message)
        clock.advance(0.5)
    assert [t.message for t in toasts.active()] == messages


def test_ids_unique_within_same_millisecond(toasts):
    created = [toasts.enqueue(f'toast {i}') for i in range(5)]
    ids = [t.toast_id for t in created]
    assert len(set(ids)) == 5


def test_dismiss_is_idempotent(toasts):
    toast = toasts.enqueue('closing')
    assert toasts.dismiss(toast.toast_id) is True
    assert toasts.dismiss(toast.toast_id) is False
    assert toasts.dismiss(987654) is False
    assert toasts.active() == []


def test_dismiss_then_deadline_is_harmless(toasts, clock):
    dismissed = toasts.enqueue('dismissed')
    kept = toasts.enqueue('kept')
    toasts.dismiss(dismissed.toast_id)

    clock.advance(config.TOAST_DURATION + 1)
    assert toasts.expire() == [kept]
    assert toasts.pending_deadlines() == 0


def test_dismiss_after_expiry_is_noop(toasts, clock):
    toast = toasts.enqueue('late close')
    clock.advance(config.TOAST_DURATION)
    assert toasts.active() == []
    assert toasts.dismiss(toast.toast_id) is False


def test_dismiss_oldest(toasts, clock):
    assert toasts.dismiss_oldest() is None
    first = toasts.enqueue('first')
    clock.advance(0.1)
    second = toasts.enqueue('second')
    assert toasts.dismiss_oldest() == first
    assert toasts.active() == [second]


def test_independent_deadlines(toasts, clock):
    toasts.enqueue('early')
    clock.advance(3.0)
    late = toasts.enqueue('late')

    clock.advance(2.5)
    assert toasts.active() == [late]
    clock.advance(2.5)
    assert toasts.active() == []


def test_custom_duration(clock):
    manager = ToastManager(clock=clock, duration=1.0, verbose=False)
    toast = manager.enqueue('short')
    assert toast.expires_at == 1.0
    clock.advance(1.0)
    assert manager.active() == []


def test_enqueue_with_explicit_time(toasts, clock):
    toast = toasts.enqueue('stamped', ToastType.SUCCESS, now=6.0)
    assert toast.created_at == 6.0
    assert toast.expires_at == 6.0 + config.TOAST_DURATION
    assert toasts.expire(now=10.999) == []
    assert toasts.expire(now=11.0) == [toast]
