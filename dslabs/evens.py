"""Fill an array with random numbers and collect the positions of the even ones."""

from __future__ import annotations

import random
import sys
from typing import Optional, Sequence

from dslabs.fixed_array import FixedArray

_MAX_VALUE = 50


def fill_random(array: FixedArray, rng: Optional[random.Random] = None) -> int:
    """Fill ``array`` with random integers in 0..50; return how many are even."""
    source = random if rng is None else rng
    evens = 0
    for index in range(len(array)):
        value = source.randint(0, _MAX_VALUE)
        array[index] = value
        if value % 2 == 0:
            evens += 1
    return evens


def even_indices(array: FixedArray) -> FixedArray:
    """Return an array holding the positions of the even elements of ``array``."""
    positions = [index for index, value in enumerate(array) if value % 2 == 0]
    result = FixedArray(len(positions))
    for slot, position in enumerate(positions):
        result[slot] = position
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a length, fill an array randomly and print the even positions."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = args[0] if args else input("Enter the array length: ")
    try:
        array = FixedArray(int(text))
    except ValueError as exc:
        print(f"invalid array length: {exc}", file=sys.stderr)
        return 2
    fill_random(array)
    print("".join(f"{position} , " for position in even_indices(array)))
    return 0


if __name__ == "__main__":
    sys.exit(main())