"""Type definitions for the adjacency graph engine."""
from typing import Dict, List, Tuple, TypedDict, Any
from dataclasses import dataclass, field


# Error codes carried in the "error" key of refused operations
INVALID_VERTEX = "invalid_vertex"
EDGE_ALREADY_EXISTS = "edge_already_exists"
EDGE_NOT_FOUND = "edge_not_found"
INVALID_WEIGHT = "invalid_weight"
REQUIRES_UNDIRECTED_WEIGHTED = "requires_undirected_weighted"
NEGATIVE_WEIGHT = "negative_weight"
OPERATION_NOT_AVAILABLE = "operation_not_available"


class GraphOptions(TypedDict, total=False):
    """Options for creating a graph."""
    directed: bool
    weighted: bool


# 'from' is a keyword, so the functional form is needed
Edge = TypedDict("Edge", {"from": int, "to": int, "weight": float})


class Neighbor(TypedDict):
    """One entry of a vertex's adjacency sequence."""
    vertex: int
    weight: float


class TreeResult(TypedDict, total=False):
    """Result of a spanning tree construction."""
    success: bool
    error: str
    edges: List[Edge]
    total_weight: float
    edge_count: int
    spanning: bool
    removed: List[Edge]


@dataclass
class Graph:
    """Adjacency representation: one neighbor list per vertex, sorted by id."""
    vertex_count: int
    directed: bool = False
    weighted: bool = False
    edge_count: int = 0
    adj: List[List[Tuple[int, float]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.adj:
            self.adj = [[] for _ in range(self.vertex_count)]


def is_vertex(graph: Graph, vertex: Any) -> bool:
    """Check that vertex is an integer id inside [0, vertex_count)."""
    if isinstance(vertex, bool) or not isinstance(vertex, int):
        return False
    return 0 <= vertex < graph.vertex_count


def make_edge(origin: int, destination: int, weight: float) -> Edge:
    """Build an Edge dict."""
    return {"from": origin, "to": destination, "weight": weight}


def error_result(code: str, **extra: Any) -> Dict[str, Any]:
    """Build a refusal result."""
    result: Dict[str, Any] = {"success": False, "error": code}
    result.update(extra)
    return result

