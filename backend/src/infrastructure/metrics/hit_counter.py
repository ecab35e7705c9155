# src/infrastructure/metrics/hit_counter.py
import threading


class HitCounter:
    """
    In-memory hit counter shared by every request of one app instance.
    Each operation takes the lock on its own; callers never hold it across calls.
    Sync handlers run in the threadpool, so an asyncio.Lock is not enough here.
    """

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def load(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> int:
        with self._lock:
            previous, self._value = self._value, 0
            return previous
