"""Minimum spanning trees: Kruskal, Prim and Reverse-Delete.

All three require an undirected weighted graph and refuse anything else with
``requires_undirected_weighted``. On a disconnected graph Kruskal and Prim
return a partial tree (``spanning`` is False) instead of failing.
"""
import logging
from typing import List, Optional

from .types import (
    Graph, Edge, TreeResult, make_edge, error_result, REQUIRES_UNDIRECTED_WEIGHTED,
)
from .graph import get_edges, sort_edges, add_edge, remove_edge
from .traversal import is_connected
from .disjoint_set import DisjointSet

logger = logging.getLogger(__name__)


def _check_preconditions(graph: Graph, algorithm: str) -> Optional[TreeResult]:
    if graph.directed or not graph.weighted:
        logger.warning(
            f"{algorithm} refused: graph must be undirected and weighted "
            f"(directed={graph.directed}, weighted={graph.weighted})"
        )
        return error_result(REQUIRES_UNDIRECTED_WEIGHTED, edges=[], total_weight=0)
    return None


def _tree_result(graph: Graph, edges: List[Edge]) -> TreeResult:
    return {
        "success": True,
        "edges": edges,
        "total_weight": sum(edge["weight"] for edge in edges),
        "edge_count": len(edges),
        "spanning": len(edges) == max(graph.vertex_count - 1, 0),
    }


def kruskal(graph: Graph) -> TreeResult:
    """Accept edges lightest first unless they would close a cycle."""
    refused = _check_preconditions(graph, "Kruskal")
    if refused is not None:
        return refused

    components = DisjointSet(graph.vertex_count)
    tree: List[Edge] = []

    for edge in sort_edges(graph, ascending=True)["edges"]:
        if components.union(edge["from"], edge["to"]):
            tree.append(edge)
            logger.debug(f"Kruskal accepted {edge['from']} -- {edge['to']} ({edge['weight']})")

    return _tree_result(graph, tree)


def prim(graph: Graph) -> TreeResult:
    """Grow a tree from vertex 0, always attaching the cheapest outside vertex."""
    refused = _check_preconditions(graph, "Prim")
    if refused is not None:
        return refused

    n = graph.vertex_count
    key: List[Optional[float]] = [None] * n
    parent: List[Optional[int]] = [None] * n
    in_tree = [False] * n

    if n:
        key[0] = 0

    for _ in range(n):
        u = None
        for v in range(n):
            if not in_tree[v] and key[v] is not None and (u is None or key[v] < key[u]):
                u = v
        if u is None:
            break
        in_tree[u] = True

        for v, weight in graph.adj[u]:
            if not in_tree[v] and (key[v] is None or weight < key[v]):
                key[v] = weight
                parent[v] = u

    tree = [make_edge(parent[v], v, key[v]) for v in range(1, n) if parent[v] is not None]
    for edge in tree:
        logger.debug(f"Prim accepted {edge['from']} -- {edge['to']} ({edge['weight']})")
    return _tree_result(graph, tree)


def reverse_delete(graph: Graph) -> TreeResult:
    """Drop edges heaviest first whenever the graph stays connected without them.

    This mutates ``graph``: afterwards it holds only the tree edges. An edge
    whose removal leaves some vertex unreachable from vertex 0 is put back,
    so a graph that starts out disconnected keeps every edge.
    """
    refused = _check_preconditions(graph, "Reverse-Delete")
    if refused is not None:
        return refused

    removed: List[Edge] = []
    for edge in sort_edges(graph, ascending=False)["edges"]:
        remove_edge(graph, edge["from"], edge["to"])
        if is_connected(graph)["is_connected"]:
            removed.append(edge)
            logger.debug(f"Reverse-Delete dropped {edge['from']} -- {edge['to']} ({edge['weight']})")
        else:
            add_edge(graph, edge["from"], edge["to"], edge["weight"])

    result = _tree_result(graph, get_edges(graph)["edges"])
    result["removed"] = removed
    return result
