"""Graph traversal algorithms: BFS distances, DFS and connectivity."""
import logging
from typing import Dict, List, Any, Optional
from collections import deque

from .types import Graph, is_vertex, error_result, INVALID_VERTEX

logger = logging.getLogger(__name__)


def bfs_distances(graph: Graph, source: int) -> Dict[str, Any]:
    """Hop-count shortest paths from source.

    Every edge counts as 1 whatever its weight. Unreachable vertices get a
    distance of None.
    """
    if not is_vertex(graph, source):
        logger.warning(f"Invalid input: BFS source {source!r}")
        return error_result(INVALID_VERTEX, distances=[], parent={}, order=[])

    distances: List[Optional[int]] = [None] * graph.vertex_count
    parent: Dict[int, int] = {}
    order = []

    distances[source] = 0
    queue = deque([source])

    while queue:
        node = queue.popleft()
        order.append(node)

        for neighbor, _ in graph.adj[node]:
            if distances[neighbor] is None:
                distances[neighbor] = distances[node] + 1
                parent[neighbor] = node
                queue.append(neighbor)

    return {
        "success": True,
        "source": source,
        "distances": distances,
        "parent": parent,
        "order": order,
    }


def dfs(graph: Graph, start: int) -> Dict[str, Any]:
    """Depth-first traversal following outgoing edges in neighbor order.

    Uses an explicit stack of neighbor iterators, so the visit order is the
    same as the recursive formulation without its depth limit.
    """
    if not is_vertex(graph, start):
        logger.warning(f"Invalid input: DFS start {start!r}")
        return error_result(INVALID_VERTEX, order=[], parent={})

    visited = [False] * graph.vertex_count
    order = [start]
    parent: Dict[int, int] = {}

    visited[start] = True
    stack = [(start, iter(graph.adj[start]))]

    while stack:
        node, neighbors = stack[-1]
        for neighbor, _ in neighbors:
            if not visited[neighbor]:
                visited[neighbor] = True
                parent[neighbor] = node
                order.append(neighbor)
                stack.append((neighbor, iter(graph.adj[neighbor])))
                break
        else:
            stack.pop()

    return {"success": True, "order": order, "parent": parent}


def is_connected(graph: Graph) -> Dict[str, Any]:
    """Check whether every vertex is reachable from vertex 0 along outgoing edges.

    A graph without vertices is considered connected.
    """
    if graph.vertex_count == 0:
        return {"is_connected": True, "unreached": []}

    reached = set(dfs(graph, 0)["order"])
    unreached = [v for v in range(graph.vertex_count) if v not in reached]
    return {"is_connected": not unreached, "unreached": unreached}
