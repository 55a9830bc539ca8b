"""Command-line demonstration of the graph and its algorithms."""

from __future__ import annotations

import argparse
import sys

from wgraph.algorithms import bfs, dfs, dijkstra, kruskal, prim
from wgraph.graph import Graph


def _demo() -> None:
    g = Graph(5)
    g.add_edge(0, 1, 2)
    g.add_edge(0, 4, 1)
    g.add_edge(1, 2, 3)
    g.add_edge(1, 3, 4)
    g.add_edge(3, 4, 5)

    print("Initial Graph:")
    g.print_graph()

    print("\nRemoving edge 1-3...")
    g.remove_edge(1, 3)
    g.print_graph()

    print(f"\nEdge 0-1 exists? {'Yes' if g.has_edge(0, 1) else 'No'}")
    print(f"Weight of edge 0-1: {g.edge_weight(0, 1)}")

    print("\nBFS Tree from vertex 0:")
    bfs(g, 0).print_graph()

    print("\nDFS Tree from vertex 0:")
    dfs(g, 0).print_graph()

    print("\nDijkstra (SPT) from 0:")
    dijkstra(g, 0).print_graph()

    print("\nPrim (MST):")
    prim(g).print_graph()

    print("\nKruskal (MST):")
    kruskal(g).print_graph()


def main(argv: list[str] | None = None) -> int:
    """Build a sample graph, print it and the trees each algorithm produces."""
    parser = argparse.ArgumentParser(
        prog="wgraph",
        description="Demonstrate graph traversal, shortest paths and spanning trees.",
    )
    parser.parse_args(argv)

    try:
        _demo()
    except (ValueError, IndexError, KeyError) as ex:
        message = ex.args[0] if ex.args else ex
        print(f"Error: {message}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())