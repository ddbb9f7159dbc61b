"""
Cancellable delayed callbacks for the match engine.

The clock ticker and the goal reveal both need "run this later unless I
change my mind" semantics. Two implementations share one interface:
``ThreadingScheduler`` for real time and ``ManualScheduler`` for virtual
time, which lets tests step through a goal sequence millisecond by
millisecond without sleeping.

Every scheduler owns a re-entrant lock. Callbacks run while holding it,
and callers that mutate shared state take the same lock, so a callback
can never interleave with a command.
"""
import heapq
import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Handle for a pending callback."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled and not self.fired

    def _run(self) -> None:
        if not self.active:
            return
        self.fired = True
        self.callback()


class Scheduler(ABC):
    """Abstract source of delayed callbacks."""

    def __init__(self, lock: Optional[threading.RLock] = None):
        self.lock = lock if lock is not None else threading.RLock()

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Schedule ``callback`` to run after ``delay`` seconds.

        Returns:
            Handle that can cancel the call before it runs
        """
        pass


class _ThreadedCall(ScheduledCall):
    def __init__(self, due: float, callback: Callable[[], None]):
        super().__init__(due, callback)
        self.timer: Optional[threading.Timer] = None

    def cancel(self) -> None:
        super().cancel()
        if self.timer is not None:
            self.timer.cancel()


class ThreadingScheduler(Scheduler):
    """Real-time scheduler backed by daemon ``threading.Timer`` threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = _ThreadedCall(time.monotonic() + delay, callback)

        def fire() -> None:
            with self.lock:
                # cancel() may have won the race while we waited for the lock
                try:
                    call._run()
                except Exception:
                    logger.exception("Scheduled callback failed")

        call.timer = threading.Timer(max(0.0, delay), fire)
        call.timer.daemon = True
        call.timer.start()
        return call


class ManualScheduler(Scheduler):
    """
    Virtual clock for deterministic tests and replays.

    Time only moves when ``advance`` is called. Calls due at the same
    instant run in the order they were scheduled.
    """

    def __init__(self, lock: Optional[threading.RLock] = None):
        super().__init__(lock)
        self.now = 0.0
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(self.now + max(0.0, delay), callback)
        heapq.heappush(self._queue, (call.due, next(self._counter), call))
        return call

    def advance(self, seconds: float) -> None:
        """Move virtual time forward, firing every call that falls due."""
        target = self.now + seconds
        with self.lock:
            while self._queue and self._queue[0][0] <= target:
                due, _, call = heapq.heappop(self._queue)
                if not call.active:
                    continue
                self.now = due
                call._run()
            self.now = target

    def pending_count(self) -> int:
        """Number of calls still waiting to run."""
        return sum(1 for _, _, call in self._queue if call.active)
