"""In-memory adjacency graph engine - public API."""
from .types import Graph, GraphOptions, Edge
from .graph import (
    create_graph, add_edge, add_directed_edge, remove_edge, has_edge,
    get_neighbors, get_edges, sort_edges, get_adjacency, get_graph_info
)
from .disjoint_set import DisjointSet
from .traversal import bfs_distances, dfs, is_connected
from .paths import dijkstra, floyd_warshall
from .spanning import kruskal, prim, reverse_delete
from .demo import seed_example_graph, build_example_graph, is_available, run_operation

__all__ = [
    'Graph', 'GraphOptions', 'Edge',
    'create_graph', 'add_edge', 'add_directed_edge', 'remove_edge', 'has_edge',
    'get_neighbors', 'get_edges', 'sort_edges', 'get_adjacency', 'get_graph_info',
    'DisjointSet',
    'bfs_distances', 'dfs', 'is_connected',
    'dijkstra', 'floyd_warshall',
    'kruskal', 'prim', 'reverse_delete',
    'seed_example_graph', 'build_example_graph', 'is_available', 'run_operation'
]
