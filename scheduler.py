"""Fixed-period tick scheduling for the dashboard."""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import config


@dataclass
class SimulatedClock:
    """
    Manually advanced clock for running faster than real time.

    Callable like ``time.monotonic`` so it can be shared by the scheduler and
    the toast manager.
    """
    now: float = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        """Move the clock forward by dt seconds and return the new time."""
        self.now += dt
        return self.now


@dataclass
class TickScheduler:
    """
    Calls a callback every ``interval`` seconds while mounted.

    The scheduler is polled by its host (animation frame or headless loop).
    When a poll arrives late it fires once and realigns to the next period
    boundary; missed ticks are not replayed. Only one callback is held at a
    time, so mounting again replaces the previous timer instead of adding one.
    """
    interval: float = config.TICK_INTERVAL
    clock: Callable[[], float] = time.monotonic
    name: str = "Scheduler"

    _callback: Optional[Callable[[float], None]] = field(default=None, repr=False)
    _next_due: Optional[float] = None
    tick_count: int = 0

    @property
    def is_mounted(self) -> bool:
        return self._callback is not None

    def mount(self, callback: Callable[[float], None]) -> None:
        """Start ticking. The first tick fires one interval from now."""
        if self.is_mounted:
            print(f"[{self.name}] Replacing existing timer")
        self._callback = callback
        self._next_due = self.clock() + self.interval
        print(f"[{self.name}] Mounted, tick every {self.interval:.1f}s")

    def teardown(self) -> None:
        """Stop ticking. Safe to call more than once."""
        if not self.is_mounted:
            return
        self._callback = None
        self._next_due = None
        print(f"[{self.name}] Torn down after {self.tick_count} ticks")

    def poll(self, now: Optional[float] = None) -> bool:
        """
        Fire the callback if a tick is due.

        Returns:
            True if the callback ran
        """
        if not self.is_mounted:
            return False
        if now is None:
            now = self.clock()
        if now < self._next_due:
            return False

        # Skip over any periods that were missed entirely
        while self._next_due <= now:
            self._next_due += self.interval

        self.tick_count += 1
        self._callback(now)
        return True

    def time_until_next(self, now: Optional[float] = None) -> Optional[float]:
        """Seconds until the next tick, or None when not mounted."""
        if not self.is_mounted:
            return None
        if now is None:
            now = self.clock()
        return max(0.0, self._next_due - now)
