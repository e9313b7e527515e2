"""A wait group that limits how many workers run at once."""

from __future__ import annotations

import threading

_UNBOUNDED = 2**31 - 1


class WaitGroupPool:
    """Counts running workers and blocks new ones while the pool is full."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            size = _UNBOUNDED
        self._slots = threading.BoundedSemaphore(size)
        self._condition = threading.Condition()
        self._count = 0

    def add(self) -> None:
        """Take a slot, waiting if none is free, and count one more worker."""
        self._slots.acquire()
        with self._condition:
            self._count += 1

    def done(self) -> None:
        """Free a slot and count one worker less."""
        with self._condition:
            if self._count <= 0:
                raise ValueError("negative wait group counter")
            self._count -= 1
            if self._count == 0:
                self._condition.notify_all()
        self._slots.release()

    def wait(self) -> None:
        """Block until every counted worker is done."""
        with self._condition:
            self._condition.wait_for(lambda: self._count == 0)