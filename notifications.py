"""Toast notification queue with timed expiry.

The manager exclusively owns the set of visible toasts. Other components may
only enqueue. Every toast gets an independent removal deadline
(``config.TOAST_DURATION`` after creation); deadlines live in a min-heap of
(expires_at, toast_id) pairs that is drained whenever the host polls or the
active set is read, so a toast is never reported past its deadline no matter
how coarse the polling is.
"""

import heapq
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import config
from entities import Toast, ToastType, create_time_id


@dataclass
class ToastManager:
    """
    Owns the active toast set.

    Toasts are kept in insertion order (oldest first). Dismissal is
    idempotent: dismissing an unknown, expired, or already dismissed toast
    is a no-op, so a user closing a toast that is about to expire is safe.
    """
    clock: Callable[[], float] = time.monotonic
    duration: float = config.TOAST_DURATION
    verbose: bool = True

    _toasts: Dict[int, Toast] = field(default_factory=dict)
    _deadlines: List[Tuple[float, int]] = field(default_factory=list)
    _last_id: Optional[int] = None

    def enqueue(self, message: str, toast_type: ToastType = ToastType.INFO,
                now: Optional[float] = None) -> Toast:
        """
        Show a new toast and schedule its removal.

        Args:
            message: Text to display
            toast_type: SUCCESS, WARNING, or INFO
            now: Creation time (defaults to the clock)

        Returns:
            The new Toast
        """
        if now is None:
            now = self.clock()
        toast_id = create_time_id(now, self._last_id)
        self._last_id = toast_id

        toast = Toast(
            toast_id=toast_id,
            message=message,
            toast_type=toast_type,
            created_at=now,
            expires_at=now + self.duration,
        )
        self._toasts[toast_id] = toast
        heapq.heappush(self._deadlines, (toast.expires_at, toast_id))

        if self.verbose:
            print(f"[Toast] {toast_type.value.upper()}: {message}")
        return toast

    def dismiss(self, toast_id: int) -> bool:
        """
        Remove a toast immediately.

        Returns:
            True if a visible toast was removed, False if it was already gone
        """
        toast = self._toasts.pop(toast_id, None)
        if toast is None:
            return False
        # Its heap entry is left behind and discarded when it comes due
        if self.verbose:
            print(f"[Toast] Dismissed {toast_id}")
        return True

    def dismiss_oldest(self) -> Optional[Toast]:
        """Dismiss the oldest visible toast, if any."""
        toasts = self.active()
        if not toasts:
            return None
        self.dismiss(toasts[0].toast_id)
        return toasts[0]

    def expire(self, now: Optional[float] = None) -> List[Toast]:
        """
        Remove every toast whose deadline has passed.

        Returns:
            The toasts removed by this call
        """
        if now is None:
            now = self.clock()

        expired = []
        while self._deadlines and self._deadlines[0][0] <= now:
            _, toast_id = heapq.heappop(self._deadlines)
            toast = self._toasts.pop(toast_id, None)
            if toast is not None:
                expired.append(toast)

        if self.verbose:
            for toast in expired:
                print(f"[Toast] Expired {toast.toast_id}")
        return expired

    def active(self, now: Optional[float] = None) -> List[Toast]:
        """Get visible toasts, oldest first, after dropping expired ones."""
        self.expire(now)
        return list(self._toasts.values())

    def get(self, toast_id: int) -> Optional[Toast]:
        return self._toasts.get(toast_id)

    def pending_deadlines(self) -> int:
        """Number of scheduled removals not yet processed (includes dismissed)."""
        return len(self._deadlines)

    def __len__(self) -> int:
        return len(self._toasts)
