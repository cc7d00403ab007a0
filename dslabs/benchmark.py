"""Insertion timing of the tree-backed associative array against a dict."""

from __future__ import annotations

import sys
import time
from typing import NamedTuple, Optional, Sequence

from dslabs.associative_array import AssociativeArray

HEADER = "\tLength  | Associative array | Map"
DEFAULT_STEP = 50000
DEFAULT_MAXIMUM = 1000000


class Comparison(NamedTuple):
    """Insertion times in whole milliseconds for ``length`` keys."""

    length: int
    tree_ms: int
    dict_ms: int


def compare(length: int) -> Comparison:
    """Time inserting ``length`` string keys into each container."""
    if length < 0:
        raise ValueError("length cannot be negative")
    keys = [str(number) for number in range(length)]

    array = AssociativeArray("0", "0")
    started = time.perf_counter()
    for key in keys:
        array.add(key, key)
    tree_ms = int((time.perf_counter() - started) * 1000)

    mapping: dict[str, str] = {}
    started = time.perf_counter()
    for key in keys:
        mapping[key] = key
    dict_ms = int((time.perf_counter() - started) * 1000)

    return Comparison(length, tree_ms, dict_ms)


def format_row(result: Comparison) -> str:
    return f"\t{result.length}  | {result.tree_ms}\t   | {result.dict_ms}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a timing table; optional arguments are the step and the maximum length."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        step = int(args[0]) if args else DEFAULT_STEP
        maximum = int(args[1]) if len(args) > 1 else DEFAULT_MAXIMUM
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if step <= 0:
        print("error: step must be positive", file=sys.stderr)
        return 2
    print(HEADER)
    for length in range(step, maximum + 1, step):
        print(format_row(compare(length)))
    return 0


if __name__ == "__main__":
    sys.exit(main())