"""Process-unique enemy id allocation.

Enemy ids appear in protocol messages, so they must never repeat within a
process, no matter how many maps are parsed or from how many threads.
"""

import threading


class EnemyIdAllocator:
    """Monotonic id counter with atomic increment-and-fetch."""

    __slots__ = ("_next", "_lock")

    def __init__(self, start: int = 1) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def allocate(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """Return the id the next allocate() call will hand out."""
        with self._lock:
            return self._next


_DEFAULT_ALLOCATOR = EnemyIdAllocator()


def default_id_allocator() -> EnemyIdAllocator:
    """Return the allocator shared by every parse_map call that passes none."""
    return _DEFAULT_ALLOCATOR
