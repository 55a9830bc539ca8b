"""Traversal, shortest-path and minimum-spanning-tree algorithms.

Every algorithm takes a :class:`~wgraph.graph.Graph` and returns a new graph
with the same vertex count that holds only the edges of the resulting tree
(or forest).
"""

from __future__ import annotations

import sys
from typing import TextIO

from wgraph.containers import PriorityQueue, Queue, Stack
from wgraph.graph import Edge, Graph
from wgraph.unionfind import UnionFind

INF = 10**9

_INVALID_START = "Invalid Graph with 0 vertexes"


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.num_vertices:
        raise ValueError(_INVALID_START)


def _check_nonempty(graph: Graph) -> None:
    if graph.num_vertices == 0:
        raise ValueError(_INVALID_START)


def bfs(graph: Graph, start: int, log: TextIO | None = None) -> Graph:
    """Return the breadth-first search tree rooted at ``start``.

    Each visited vertex and each inspected neighbour is reported on ``log``
    (standard output by default).
    """
    _check_start(graph, start)
    out = sys.stdout if log is None else log

    tree = Graph(graph.num_vertices)
    visited = {start}
    queue = Queue()
    queue.enqueue(start)

    while not queue.is_empty():
        u = queue.dequeue()
        print(f"Visiting node: {u}", file=out)
        for neighbor in graph.neighbors(u):
            v, weight = neighbor.vertex, neighbor.weight
            print(f"  Checking neighbor: {v} with weight {weight}", file=out)
            if v not in visited:
                visited.add(v)
                queue.enqueue(v)
                tree.add_edge(u, v, weight)

    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree rooted at ``start``."""
    _check_start(graph, start)

    tree = Graph(graph.num_vertices)
    visited = {start}
    stack = Stack()
    stack.push(start)

    while not stack.is_empty():
        u = stack.pop()
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if v not in visited:
                visited.add(v)
                tree.add_edge(u, v, neighbor.weight)
                stack.push(v)

    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the shortest-path tree from ``start``."""
    _check_start(graph, start)
    n = graph.num_vertices

    dist = [INF] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n

    dist[start] = 0
    pq = PriorityQueue()
    pq.enqueue(start, 0)

    while not pq.is_empty():
        u = pq.dequeue()
        if visited[u]:
            continue
        visited[u] = True

        for neighbor in graph.neighbors(u):
            v, weight = neighbor.vertex, neighbor.weight
            candidate = dist[u] + weight
            if not visited[v] and candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                if v in pq:
                    pq.decrease_key(v, candidate)
                else:
                    pq.enqueue(v, candidate)

    return _tree_from_parents(graph, parent)


def prim(graph: Graph) -> Graph:
    """Return a minimum spanning tree grown from vertex 0 (Prim)."""
    _check_nonempty(graph)
    n = graph.num_vertices

    key = [INF] * n
    parent: list[int | None] = [None] * n
    in_mst = [False] * n

    key[0] = 0
    pq = PriorityQueue()
    pq.enqueue(0, 0)

    while not pq.is_empty():
        u = pq.dequeue()
        in_mst[u] = True

        for neighbor in graph.neighbors(u):
            v, weight = neighbor.vertex, neighbor.weight
            if not in_mst[v] and weight < key[v]:
                key[v] = weight
                parent[v] = u
                if v in pq:
                    pq.decrease_key(v, weight)
                else:
                    pq.enqueue(v, weight)

    return _tree_from_parents(graph, parent)


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest built from the lightest edges (Kruskal)."""
    _check_nonempty(graph)
    n = graph.num_vertices

    edges = [
        Edge(u, neighbor.vertex, neighbor.weight)
        for u in range(n)
        for neighbor in graph.neighbors(u)
        if u < neighbor.vertex
    ]
    edges.sort(key=lambda edge: edge.weight)

    sets = UnionFind(n)
    mst = Graph(n)
    added = 0
    for edge in edges:
        if added >= n - 1:
            break
        if not sets.connected(edge.source, edge.target):
            sets.unite(edge.source, edge.target)
            mst.add_edge(edge.source, edge.target, edge.weight)
            added += 1

    return mst


def _tree_from_parents(graph: Graph, parent: list[int | None]) -> Graph:
    tree = Graph(graph.num_vertices)
    for v, u in enumerate(parent):
        if u is not None:
            tree.add_edge(u, v, graph.edge_weight(u, v))
    return tree