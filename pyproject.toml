[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wgraph"
version = "0.1.0"
description = "Undirected weighted graphs with BFS, DFS, Dijkstra, Prim and Kruskal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "prim",
    "kruskal",
    "minimum spanning tree",
    "union-find",
    "priority queue",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wgraph-demo = "wgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
