# wgraph

Undirected weighted graphs on a fixed set of integer vertices `0 .. n-1`,
together with the classic traversal, shortest-path and spanning-tree
algorithms. Every algorithm returns its result as a new `Graph` with the same
number of vertices that holds only the edges of the resulting tree.

## Installation

```
pip install .
```

## Usage

```python
from wgraph.graph import Graph
from wgraph.algorithms import bfs, dfs, dijkstra, prim, kruskal

g = Graph(5)
g.add_edge(0, 1, 2)
g.add_edge(0, 4, 1)
g.add_edge(1, 2, 3)
g.add_edge(3, 4, 5)

g.has_edge(1, 0)       # True: edges are undirected
g.edge_weight(0, 1)    # 2
g.num_vertices         # 5

spt = dijkstra(g, 0)   # shortest-path tree rooted at 0
mst = kruskal(g)       # minimum spanning tree
print(mst.format())
```

### The graph (`wgraph.graph`)

- `Graph(vertices)` needs a positive vertex count; otherwise `ValueError`.
- `add_edge(u, v, weight=1)` connects both directions. Adding an edge that is
  already there has no effect and keeps the old weight.
- `remove_edge(u, v)` raises `EdgeNotFoundError` (a `KeyError`) when the edge
  does not exist.
- `has_edge(u, v)` returns `False` for vertices outside the graph instead of
  raising.
- `edge_weight(u, v)` returns the weight, raising `EdgeNotFoundError` for a
  missing edge.
- `neighbors(vertex)` returns the vertex's `NeighborList`: an iterable of
  `Neighbor(vertex, weight)` in insertion order, supporting `in`, `len`,
  `weight(vertex)` and `format()`.
- `format()` renders the adjacency lists as text; `print_graph(file=None)`
  writes that text to `file` or standard output.

A vertex outside the graph given to `add_edge`, `remove_edge`, `edge_weight`
or `neighbors` raises `IndexError`. `Edge(source, target, weight=1)` is a
small frozen record used by Kruskal's algorithm.

### Algorithms (`wgraph.algorithms`)

- `bfs(graph, start, log=None)`: breadth-first search tree from `start`. Each
  visited vertex and each inspected neighbour is reported on `log`, standard
  output by default.
- `dfs(graph, start)`: depth-first search tree from `start`.
- `dijkstra(graph, start)`: shortest-path tree from `start`.
- `prim(graph)`: minimum spanning tree grown from vertex 0.
- `kruskal(graph)`: minimum spanning forest built from the lightest edges.

A `start` outside the graph raises `ValueError`. Vertices that cannot be
reached from the start (or from vertex 0 for `prim`) are left without edges
in the result.

### Supporting structures

`wgraph.containers` provides `Queue`, `Stack` and a min-`PriorityQueue` with
`decrease_key` and membership tests. Taking from an empty one raises
`IndexError`. `wgraph.unionfind` provides a disjoint-set `UnionFind` with
path compression and union by rank.

## Demo

```
wgraph-demo
```

This builds a fixed five-vertex sample graph, removes an edge, and prints the
graph along with the trees each algorithm produces. Errors are reported on
standard error as `Error: ...`.

## Limitations

- Graphs are always undirected; there is no directed graph type.
- There is no reading or writing of graphs from files; graphs are built in
  code. The demo command takes no input and only runs its built-in sample.

## Tests

```
pip install .[test]
pytest
```