"""A LIFO stack built on :class:`dslabs.vector.Vector`."""

from __future__ import annotations

from typing import Any

from dslabs.vector import Vector


class Stack:
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._vector = Vector()

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        size = len(self._vector)
        self._vector.resize(size + 1)
        self._vector[size] = data

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise IndexError("peek from empty stack")
        return self._vector[len(self._vector) - 1]

    def pop(self) -> Any:
        """Remove and return the top element."""
        top = self.peek()
        self._vector.resize(len(self._vector) - 1)
        return top

    def is_empty(self) -> bool:
        return len(self._vector) == 0

    def __len__(self) -> int:
        return len(self._vector)

    def __repr__(self) -> str:
        return f"Stack({list(self._vector)!r})"