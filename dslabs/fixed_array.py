"""A fixed-size array."""

from __future__ import annotations

from typing import Any, Iterator


class FixedArray:
    """Array whose length is set at creation and never changes."""

    def __init__(self, size: int, fill: Any = None) -> None:
        if size < 0:
            raise ValueError("array size cannot be negative")
        self._data: list[Any] = [fill] * size

    def _normalize(self, index: int) -> int:
        size = len(self._data)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"array index out of range: {index}")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._data[self._normalize(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[self._normalize(index)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"FixedArray({self._data!r})"