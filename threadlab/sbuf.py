"""A bounded, thread-safe FIFO buffer for producer/consumer programs."""

from __future__ import annotations

import threading
from typing import Any


class SharedBuffer:
    """A bounded FIFO shared between threads.

    ``insert`` blocks while every slot is taken and ``remove`` blocks while
    the buffer is empty. Access to the slots is serialised by a mutex, and two
    counting semaphores track free slots and available items.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("a shared buffer needs at least one slot")
        self.n = n
        self._buf: list[Any] = [None] * n
        self._front = 0  # _buf[(_front + 1) % n] is the first item
        self._rear = 0   # _buf[_rear % n] is the last item
        self._count = 0
        self._mutex = threading.Lock()
        self._slots = threading.Semaphore(n)
        self._items = threading.Semaphore(0)

    def insert(self, item: Any) -> None:
        """Append ``item`` at the rear, waiting for a free slot if needed."""
        self._slots.acquire()
        with self._mutex:
            self._rear = (self._rear + 1) % self.n
            self._buf[self._rear] = item
            self._count += 1
        self._items.release()

    def remove(self) -> Any:
        """Remove and return the item at the front, waiting for one if needed."""
        self._items.acquire()
        with self._mutex:
            self._front = (self._front + 1) % self.n
            item = self._buf[self._front]
            self._buf[self._front] = None
            self._count -= 1
        self._slots.release()
        return item

    def __len__(self) -> int:
        with self._mutex:
            return self._count