"""All-pairs shortest paths (Floyd–Warshall) over a weighted graph."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence, TextIO

from dslabs.graph import Graph

Matrix = list[list[Optional[int]]]


def floyd(matrix: Sequence[Sequence[Optional[int]]]) -> Matrix:
    """Return the shortest-path matrix; ``None`` marks a missing path."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    result = [list(row) for row in matrix]
    for via in range(size):
        via_row = result[via]
        for source, source_row in enumerate(result):
            to_via = source_row[via]
            if to_via is None:
                continue
            for target, from_via in enumerate(via_row):
                if source == target or from_via is None:
                    continue
                candidate = to_via + from_via
                current = source_row[target]
                if current is None or candidate < current:
                    source_row[target] = candidate
    return result


def weight_matrix(graph: Graph) -> Matrix:
    """Direct edge weights of ``graph``: 0 on the diagonal, ``None`` without an edge."""
    vertices = [graph.get_vertex(index) for index in range(len(graph))]
    return [
        [
            0
            if source is target
            else (graph.get_edge_weight(source, target) if graph.check_edge(source, target) else None)
            for target in vertices
        ]
        for source in vertices
    ]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a graph from standard input and print its shortest-path matrix.

    Command-line arguments are not used.
    """
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        return int(next(tokens))

    try:
        count = ask("Number of vertices: ")
        graph = Graph(count, 1)
        for index in range(count):
            graph.set_vertex_data(index, ask(f"[{index}] = "))
        for index in range(count):
            print()
            print(f"Vertex: {graph.get_vertex_data(index)} (index {index})")
            edge_count = ask("Number of edges: ")
            for number in range(1, edge_count + 1):
                target = ask(f"Edge {number}: index of the target vertex: ")
                weight = ask("Edge weight: ")
                graph.add_edge(graph.get_vertex(index), graph.get_vertex(target), weight)
    except StopIteration:
        print("\nerror: unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, IndexError) as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1

    print()
    print("Shortest path matrix:")
    for row in floyd(weight_matrix(graph)):
        print(" ".join("-1" if value is None else str(value) for value in row))
    return 0


if __name__ == "__main__":
    sys.exit(main())