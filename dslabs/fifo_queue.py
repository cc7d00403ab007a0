"""A FIFO queue built on :class:`dslabs.linked_list.LinkedList`."""

from __future__ import annotations

from typing import Any

from dslabs.linked_list import LinkedList


class Queue:
    """First-in, first-out container with O(1) insertion and removal."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def insert(self, data: Any) -> None:
        """Add ``data`` at the back of the queue."""
        self._list.insert(data)

    def get(self) -> Any:
        """Return the front element without removing it."""
        front = self._list.last()
        if front is None:
            raise IndexError("get from empty queue")
        return front.data

    def remove(self) -> Any:
        """Remove and return the front element."""
        front = self._list.last()
        if front is None:
            raise IndexError("remove from empty queue")
        self._list.erase(front)
        return front.data

    def is_empty(self) -> bool:
        return len(self._list) == 0

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"Queue({list(reversed(list(self._list)))!r})"