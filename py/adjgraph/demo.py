"""Example graph seeding and the menu of operations offered on it."""
import logging
from typing import Dict, Any, Callable, NamedTuple, Optional

from .types import Graph, error_result, OPERATION_NOT_AVAILABLE
from .graph import create_graph, add_edge, add_directed_edge, get_adjacency, sort_edges
from .traversal import bfs_distances
from .paths import dijkstra, floyd_warshall
from .spanning import kruskal, prim, reverse_delete

logger = logging.getLogger(__name__)

EXAMPLE_VERTEX_COUNT = 5

EXAMPLE_EDGES = [
    (0, 1, 5),
    (0, 2, 3),
    (1, 3, 7),
    (2, 3, 2),
    (3, 4, 1),
]


def seed_example_graph(graph: Graph) -> Graph:
    """Insert the example edges through the public insert operations."""
    insert = add_directed_edge if graph.directed else add_edge
    for u, v, weight in EXAMPLE_EDGES:
        insert(graph, u, v, weight)
    logger.debug(f"Seeded example graph with {graph.edge_count} edges")
    return graph


def build_example_graph(directed: bool = False, weighted: bool = False,
                        vertex_count: int = EXAMPLE_VERTEX_COUNT) -> Graph:
    """Create a graph and seed it with the example edges."""
    graph = create_graph(vertex_count, {"directed": directed, "weighted": weighted})
    return seed_example_graph(graph)


def _shortest_paths(graph: Graph, source: int = 0) -> Dict[str, Any]:
    result = dijkstra(graph, source)
    if result["success"]:
        result["matrix"] = floyd_warshall(graph)["matrix"]
    return result


class Operation(NamedTuple):
    """A menu entry and the kind of graph it can run on."""
    run: Callable[..., Dict[str, Any]]
    directed: Optional[bool] = None  # None: either
    weighted: Optional[bool] = None


OPERATIONS: Dict[str, Operation] = {
    "adjacency": Operation(get_adjacency),
    "bfs": Operation(lambda graph, source=0: bfs_distances(graph, source), weighted=False),
    "shortest_paths": Operation(_shortest_paths, weighted=True),
    "kruskal": Operation(kruskal, directed=False, weighted=True),
    "prim": Operation(prim, directed=False, weighted=True),
    "reverse_delete": Operation(reverse_delete, directed=False, weighted=True),
    "sort_edges": Operation(lambda graph, ascending=True: sort_edges(graph, ascending)),
}


def is_available(name: str, graph: Graph) -> bool:
    """Check whether a menu operation is offered for this kind of graph."""
    operation = OPERATIONS.get(name)
    if operation is None:
        return False
    if operation.directed is not None and operation.directed != graph.directed:
        return False
    if operation.weighted is not None and operation.weighted != graph.weighted:
        return False
    return True


def run_operation(name: str, graph: Graph, *args: Any) -> Dict[str, Any]:
    """Run a menu operation if it is available for the graph."""
    if not is_available(name, graph):
        logger.warning(
            f"Operation {name!r} not available "
            f"(directed={graph.directed}, weighted={graph.weighted})"
        )
        return error_result(OPERATION_NOT_AVAILABLE, operation=name)
    return OPERATIONS[name].run(graph, *args)
