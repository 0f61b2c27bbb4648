"""
core/concurrency.py

Per-key mutual exclusion.

Used to make read-modify-write sequences atomic per entity id and the
registration check-then-insert atomic per username. Locks are process local;
entries are reference counted and dropped once no thread holds or waits on
them, so the table does not grow with the key space.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, List


class KeyedLock:
    """
    按 key 加锁

    Example:
        >>> locks = KeyedLock()
        >>> with locks.hold(("hotel", 1)):
        ...     pass
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, List] = {}  # key -> [lock, users]

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = [threading.Lock(), 0]
                self._locks[key] = entry
            entry[1] += 1

        lock = entry[0]
        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
