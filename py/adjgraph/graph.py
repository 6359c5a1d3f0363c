"""Graph creation, edge mutation and edge queries."""
import logging
from typing import Dict, List, Any, Optional, Tuple

from .types import (
    Graph, GraphOptions, Neighbor, is_vertex, make_edge, error_result,
    INVALID_VERTEX, INVALID_WEIGHT, EDGE_ALREADY_EXISTS, EDGE_NOT_FOUND,
)
from .traversal import is_connected

logger = logging.getLogger(__name__)


def create_graph(vertex_count: int, options: Optional[GraphOptions] = None) -> Graph:
    """Create a graph with a fixed number of vertices and no edges."""
    if isinstance(vertex_count, bool) or not isinstance(vertex_count, int) or vertex_count < 0:
        raise ValueError(f"vertex_count must be a non-negative integer, got {vertex_count!r}")

    opts = options or {}
    graph = Graph(
        vertex_count=vertex_count,
        directed=bool(opts.get("directed", False)),
        weighted=bool(opts.get("weighted", False)),
    )
    logger.debug(
        f"Created graph with {vertex_count} vertices "
        f"(directed={graph.directed}, weighted={graph.weighted})"
    )
    return graph


def _valid_pair(graph: Graph, u: Any, v: Any) -> bool:
    """Both ids in range and distinct; logs the refusal otherwise."""
    if is_vertex(graph, u) and is_vertex(graph, v) and u != v:
        return True
    logger.warning(f"Invalid input: edge ({u!r}, {v!r}) on graph with {graph.vertex_count} vertices")
    return False


def _locate(row: List[Tuple[int, float]], v: int) -> Tuple[int, bool]:
    """Scan a sorted neighbor list; return the insertion index and whether v is there."""
    index = 0
    while index < len(row) and row[index][0] < v:
        index += 1
    return index, index < len(row) and row[index][0] == v


def _insert(graph: Graph, u: int, v: int, weight: float) -> bool:
    row = graph.adj[u]
    index, found = _locate(row, v)
    if found:
        return False
    row.insert(index, (v, weight))
    return True


def _delete(graph: Graph, u: int, v: int) -> bool:
    row = graph.adj[u]
    index, found = _locate(row, v)
    if not found:
        return False
    del row[index]
    return True


def _valid_weight(graph: Graph, weight: Any) -> bool:
    """Weights on a weighted graph must be int or float; unweighted graphs ignore them."""
    if not graph.weighted or weight is None:
        return True
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        logger.warning(f"Invalid input: weight {weight!r} is not a number")
        return False
    return True


def _weight_of(graph: Graph, u: int, v: int) -> Optional[float]:
    index, found = _locate(graph.adj[u], v)
    return graph.adj[u][index][1] if found else None


def _effective_weight(graph: Graph, weight: Optional[float]) -> float:
    if not graph.weighted or weight is None:
        return 1
    return weight


def add_edge(graph: Graph, u: int, v: int, weight: Optional[float] = None) -> Dict[str, Any]:
    """Add an edge, mirrored to v's list when the graph is undirected.

    Duplicate edges are refused, not overwritten. On an unweighted graph the
    stored weight is always 1.
    """
    if not _valid_pair(graph, u, v):
        return error_result(INVALID_VERTEX)
    if not _valid_weight(graph, weight):
        return error_result(INVALID_WEIGHT)

    edge_weight = _effective_weight(graph, weight)

    if not _insert(graph, u, v, edge_weight):
        return error_result(EDGE_ALREADY_EXISTS)

    if not graph.directed and not _insert(graph, v, u, edge_weight):
        logger.warning(f"Edge {v} -> {u} already present; keeping its weight {_weight_of(graph, v, u)}")
    graph.edge_count += 1

    logger.debug(f"Inserted edge {u} -> {v} (weight {edge_weight})")
    return {"success": True, "from": u, "to": v, "weight": edge_weight}


def add_directed_edge(graph: Graph, u: int, v: int, weight: Optional[float] = None) -> Dict[str, Any]:
    """Add a one-way edge u -> v, even on an undirected graph."""
    if not _valid_pair(graph, u, v):
        return error_result(INVALID_VERTEX)
    if not _valid_weight(graph, weight):
        return error_result(INVALID_WEIGHT)

    edge_weight = _effective_weight(graph, weight)

    if not _insert(graph, u, v, edge_weight):
        return error_result(EDGE_ALREADY_EXISTS)
    graph.edge_count += 1

    logger.debug(f"Inserted directed edge {u} -> {v} (weight {edge_weight})")
    return {"success": True, "from": u, "to": v, "weight": edge_weight}


def remove_edge(graph: Graph, u: int, v: int) -> Dict[str, Any]:
    """Remove an edge; on an undirected graph both directions go together."""
    if not _valid_pair(graph, u, v):
        return error_result(INVALID_VERTEX)

    row = graph.adj[u]
    index, found = _locate(row, v)
    if not found:
        return error_result(EDGE_NOT_FOUND)

    weight = row[index][1]
    del row[index]
    if not graph.directed:
        _delete(graph, v, u)
    graph.edge_count -= 1

    logger.debug(f"Removed edge {u} -> {v}")
    return {"success": True, "from": u, "to": v, "weight": weight}


def has_edge(graph: Graph, u: int, v: int) -> Dict[str, Any]:
    """Check if the edge u -> v exists."""
    if not _valid_pair(graph, u, v):
        return {"exists": False, "error": INVALID_VERTEX}

    for neighbor, weight in graph.adj[u]:
        if neighbor >= v:
            if neighbor == v:
                return {"exists": True, "weight": weight}
            break

    return {"exists": False}


def get_neighbors(graph: Graph, vertex: int) -> Dict[str, Any]:
    """Get the neighbors of a vertex in ascending id order."""
    if not is_vertex(graph, vertex):
        return {"neighbors": [], "count": 0, "error": INVALID_VERTEX}

    neighbors = [neighbor for neighbor, _ in graph.adj[vertex]]
    return {"neighbors": neighbors, "count": len(neighbors)}


def iter_edges(graph: Graph):
    """Yield (origin, destination, weight) for every logical edge.

    Undirected edges are stored twice; only the origin < destination copy is
    reported.
    """
    for origin, row in enumerate(graph.adj):
        for destination, weight in row:
            if graph.directed or origin < destination:
                yield origin, destination, weight


def get_edges(graph: Graph) -> Dict[str, Any]:
    """Get all logical edges, ordered by origin then destination."""
    edges = [make_edge(o, d, w) for o, d, w in iter_edges(graph)]
    return {"edges": edges, "count": len(edges)}


def sort_edges(graph: Graph, ascending: bool = True) -> Dict[str, Any]:
    """Get all logical edges ordered by weight.

    The sort is stable, so equal weights keep origin/destination order in
    both directions.
    """
    edges = [make_edge(o, d, w) for o, d, w in iter_edges(graph)]
    edges.sort(key=lambda edge: edge["weight"] if ascending else -edge["weight"])
    return {
        "edges": edges,
        "count": len(edges),
        "order": "ascending" if ascending else "descending",
    }


def get_adjacency(graph: Graph) -> Dict[str, Any]:
    """Snapshot of every vertex's neighbor list."""
    adjacency: List[List[Neighbor]] = [
        [{"vertex": neighbor, "weight": weight} for neighbor, weight in row]
        for row in graph.adj
    ]
    return {
        "directed": graph.directed,
        "weighted": graph.weighted,
        "adjacency": adjacency,
    }


def get_graph_info(graph: Graph) -> Dict[str, Any]:
    """Get information about a graph."""
    return {
        "directed": graph.directed,
        "weighted": graph.weighted,
        "vertex_count": graph.vertex_count,
        "edge_count": graph.edge_count,
        "is_connected": is_connected(graph)["is_connected"],
    }
