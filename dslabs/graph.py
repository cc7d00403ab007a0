"""A directed weighted graph with adjacency lists."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from dslabs.linked_list import LinkedList


class Edge:
    """An outgoing edge pointing at ``to_vertex`` with a ``weight``."""

    __slots__ = ("to_vertex", "weight")

    def __init__(self, to_vertex: Optional[Vertex] = None, weight: Any = None) -> None:
        self.to_vertex = to_vertex
        self.weight = weight

    def __repr__(self) -> str:
        target = None if self.to_vertex is None else self.to_vertex.data
        return f"Edge(to={target!r}, weight={self.weight!r})"


class Vertex:
    """A graph vertex carrying ``data`` and a list of outgoing edges."""

    __slots__ = ("data", "edges")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.edges: LinkedList = LinkedList()

    def add_edge(self, to_vertex: Vertex) -> Edge:
        """Add an edge to ``to_vertex`` and return it."""
        edge = Edge(to_vertex)
        self.edges.insert(edge)
        return edge

    def get_edge(self, to_vertex: Vertex) -> Optional[Edge]:
        """Return the edge to ``to_vertex``, or ``None``."""
        for edge in self.edges:
            if edge.to_vertex is to_vertex:
                return edge
        return None

    def remove_edge(self, to_vertex: Vertex) -> None:
        """Remove the edge to ``to_vertex`` if there is one."""
        for item in self.edges.items():
            if item.data.to_vertex is to_vertex:
                self.edges.erase(item)
                return

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


class Graph:
    """Directed graph whose vertices are addressed by position."""

    def __init__(self, vertex_count: int, data: Any) -> None:
        self._vertices: list[Vertex] = [Vertex(data) for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._vertices)

    def check_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        return from_vertex.get_edge(to_vertex) is not None

    def add_vertex(self, data: Any) -> Vertex:
        vertex = Vertex(data)
        self._vertices.append(vertex)
        return vertex

    def get_vertex(self, index: int) -> Vertex:
        return self._vertices[index]

    def remove_vertex(self, index: int) -> None:
        """Remove the vertex at ``index`` along with every edge into it."""
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex index out of range: {index}")
        target = self._vertices[index]
        for vertex in self._vertices:
            vertex.remove_edge(target)
        del self._vertices[index]

    def set_vertex_data(self, index: int, data: Any) -> None:
        if not 0 <= index < len(self._vertices):
            raise IndexError(f"vertex index out of range: {index}")
        self._vertices[index].data = data

    def get_vertex_data(self, index: int) -> Any:
        return self._vertices[index].data

    def add_edge(self, from_vertex: Vertex, to_vertex: Vertex, weight: Any) -> Edge:
        """Create the edge if needed and set its weight."""
        edge = from_vertex.get_edge(to_vertex)
        if edge is None:
            edge = from_vertex.add_edge(to_vertex)
        edge.weight = weight
        return edge

    def get_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> Optional[Edge]:
        return from_vertex.get_edge(to_vertex)

    def get_edge_weight(self, from_vertex: Vertex, to_vertex: Vertex) -> Any:
        edge = from_vertex.get_edge(to_vertex)
        if edge is None:
            raise KeyError("no edge between the given vertices")
        return edge.weight

    def remove_edge(self, from_vertex: Vertex, to_vertex: Vertex) -> None:
        from_vertex.remove_edge(to_vertex)

    def index_of(self, vertex: Vertex) -> int:
        """Return the position of ``vertex``; raise ValueError if absent."""
        for position, candidate in enumerate(self._vertices):
            if candidate is vertex:
                return position
        raise ValueError("vertex is not in the graph")

    def edges(self, vertex: Vertex) -> Iterator[Edge]:
        """Iterate over the outgoing edges of ``vertex``."""
        return iter(vertex.edges)

    def __repr__(self) -> str:
        return f"Graph({[v.data for v in self._vertices]!r})"