"""Weighted shortest paths: Dijkstra (single source) and Floyd-Warshall (all pairs)."""
import logging
from typing import Dict, List, Any, Optional
import heapq

from .types import Graph, is_vertex, error_result, INVALID_VERTEX, NEGATIVE_WEIGHT

logger = logging.getLogger(__name__)


def _has_negative_weight(graph: Graph) -> bool:
    return any(weight < 0 for row in graph.adj for _, weight in row)


def dijkstra(graph: Graph, source: int) -> Dict[str, Any]:
    """Minimum total weight from source to every vertex.

    Unreachable vertices get None. Negative edge weights are refused.
    """
    if not is_vertex(graph, source):
        logger.warning(f"Invalid input: Dijkstra source {source!r}")
        return error_result(INVALID_VERTEX, distances=[], parent={})

    if _has_negative_weight(graph):
        logger.warning("Dijkstra refused: graph has a negative edge weight")
        return error_result(NEGATIVE_WEIGHT, distances=[], parent={})

    dist: List[Optional[float]] = [None] * graph.vertex_count
    parent: Dict[int, int] = {}
    visited = [False] * graph.vertex_count

    dist[source] = 0
    heap = [(0, source)]

    while heap:
        d, node = heapq.heappop(heap)

        if visited[node]:
            continue
        visited[node] = True

        for neighbor, weight in graph.adj[node]:
            if not visited[neighbor]:
                new_dist = d + weight
                if dist[neighbor] is None or new_dist < dist[neighbor]:
                    dist[neighbor] = new_dist
                    parent[neighbor] = node
                    heapq.heappush(heap, (new_dist, neighbor))

    return {
        "success": True,
        "source": source,
        "distances": dist,
        "parent": parent,
        "unreachable": [v for v in range(graph.vertex_count) if dist[v] is None],
    }


def floyd_warshall(graph: Graph) -> Dict[str, Any]:
    """Dense matrix of minimum distances between every pair of vertices.

    matrix[i][j] is None when j is unreachable from i. Negative edges are
    accepted; the result is undefined if they form a negative cycle.
    """
    n = graph.vertex_count
    dist: List[List[Optional[float]]] = [[None] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0
        for j, weight in graph.adj[i]:
            dist[i][j] = weight

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            row_i = dist[i]
            for j in range(n):
                d_kj = row_k[j]
                if d_kj is None:
                    continue
                if row_i[j] is None or d_ik + d_kj < row_i[j]:
                    row_i[j] = d_ik + d_kj

    return {"success": True, "matrix": dist}
