"""Small array and lookup exercises."""

from __future__ import annotations

from typing import Iterable, Sequence

NOT_FOUND = "Not found"


def total(values: Iterable[int]) -> int:
    """Sum of ``values``."""
    return sum(values)


def zero_last(values: Sequence[int]) -> list[int]:
    """Return a copy of ``values`` with the last element set to 0."""
    if not values:
        raise IndexError("cannot zero the last element of an empty sequence")
    return [*values[:-1], 0]


def reverse_input(values: Iterable[int]) -> list[int]:
    """Collect ``values`` by inserting each at the front, giving reverse order."""
    collected: list[int] = []
    for value in values:
        collected.insert(0, value)
    return collected


def lookup_definitions(
    pairs: Iterable[tuple[str, str]], queries: Iterable[str]
) -> list[str]:
    """Answer each query with the first matching definition, or 'Not found'."""
    definitions: dict[str, str] = {}
    for word, definition in pairs:
        definitions.setdefault(word, definition)
    return [definitions.get(query, NOT_FOUND) for query in queries]


def below_threshold(values: Iterable[int], threshold: int) -> list[int]:
    """Elements smaller than ``threshold``, in their original order."""
    return [value for value in values if value < threshold]