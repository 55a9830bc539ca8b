"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO


class EdgeNotFoundError(KeyError):
    """Raised when an edge that is asked for does not exist."""


@dataclass(frozen=True)
class Edge:
    """A weighted edge between two vertices."""

    source: int
    target: int
    weight: int = 1


@dataclass(frozen=True)
class Neighbor:
    """An adjacent vertex together with the weight of the connecting edge."""

    vertex: int
    weight: int


class NeighborList:
    """Ordered list of a vertex's neighbours without duplicates."""

    def __init__(self) -> None:
        self._neighbors: list[Neighbor] = []

    def add(self, vertex: int, weight: int) -> None:
        """Append a neighbour; an already present vertex is left unchanged."""
        if vertex in self:
            return
        self._neighbors.append(Neighbor(vertex, weight))

    def remove(self, vertex: int) -> bool:
        """Remove ``vertex``; return whether it was present."""
        for index, neighbor in enumerate(self._neighbors):
            if neighbor.vertex == vertex:
                del self._neighbors[index]
                return True
        return False

    def __contains__(self, vertex: object) -> bool:
        return any(n.vertex == vertex for n in self._neighbors)

    def weight(self, vertex: int) -> int:
        """Return the weight of the edge to ``vertex``."""
        for neighbor in self._neighbors:
            if neighbor.vertex == vertex:
                return neighbor.weight
        raise EdgeNotFoundError(f"No neighbour {vertex}.")

    def __iter__(self) -> Iterator[Neighbor]:
        return iter(list(self._neighbors))

    def __len__(self) -> int:
        return len(self._neighbors)

    def format(self) -> str:
        """Render the list as `` -> id (w=weight)`` items."""
        return "".join(f" -> {n.vertex} (w={n.weight})" for n in self._neighbors)


class Graph:
    """Undirected weighted graph with a fixed number of vertices."""

    def __init__(self, vertices: int) -> None:
        if vertices <= 0:
            raise ValueError("Number of vertices must be positive.")
        self._adjacency = [NeighborList() for _ in range(vertices)]

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    def _valid(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adjacency)

    def _check(self, *vertices: int) -> None:
        if not all(self._valid(v) for v in vertices):
            raise IndexError("Invalid vertex index.")

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Connect ``u`` and ``v``; an existing edge keeps its weight."""
        self._check(u, v)
        self._adjacency[u].add(v, weight)
        self._adjacency[v].add(u, weight)

    def remove_edge(self, u: int, v: int) -> None:
        """Disconnect ``u`` and ``v``."""
        self._check(u, v)
        removed_forward = self._adjacency[u].remove(v)
        removed_backward = self._adjacency[v].remove(u)
        if not (removed_forward and removed_backward):
            raise EdgeNotFoundError("Edge does not exist.")

    def has_edge(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are connected; invalid vertices give False."""
        if not (self._valid(u) and self._valid(v)):
            return False
        return v in self._adjacency[u]

    def edge_weight(self, u: int, v: int) -> int:
        """Return the weight of the edge between ``u`` and ``v``."""
        self._check(u, v)
        return self._adjacency[u].weight(v)

    def neighbors(self, vertex: int) -> NeighborList:
        """Return the neighbour list of ``vertex``."""
        self._check(vertex)
        return self._adjacency[vertex]

    def format(self) -> str:
        """Render every vertex with its edges, one vertex per line."""
        parts = []
        for vertex, neighbors in enumerate(self._adjacency):
            parts.append(f"Vertex {vertex}: ")
            if not neighbors:
                continue
            parts.extend(f"-> ({vertex}, {n.vertex}, {n.weight}) " for n in neighbors)
            parts.append("\n")
        return "".join(parts)

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write :meth:`format` to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        out.write(self.format())
        out.flush()