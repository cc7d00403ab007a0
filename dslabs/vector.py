"""A growable array with explicit capacity management."""

from __future__ import annotations

from typing import Any, Iterator

_INITIAL_CAPACITY = 10


class Vector:
    """Dynamic array whose size is changed explicitly with :meth:`resize`.

    Storage is reserved ahead of time: growing within the current capacity
    is free, and growing beyond it doubles the requested size.
    Newly exposed slots hold ``None``.
    """

    def __init__(self) -> None:
        self._data: list[Any] = [None] * _INITIAL_CAPACITY
        self._size = 0

    def _normalize(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError(f"vector index out of range: {index}")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._data[self._normalize(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._normalize(index)] = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for position in range(self._size):
            yield self._data[position]

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"

    def resize(self, size: int) -> None:
        """Change the number of elements, keeping existing ones in place."""
        if size < 0:
            raise ValueError("vector size cannot be negative")
        if size <= len(self._data):
            if size < self._size:
                # Drop references to elements that fell off the end.
                self._data[size:self._size] = [None] * (self._size - size)
            self._size = size
            return
        new_capacity = size * 2
        self._data = self._data[: self._size] + [None] * (new_capacity - self._size)
        self._size = size

    def capacity(self) -> int:
        """Number of slots reserved before the next reallocation."""
        return len(self._data)