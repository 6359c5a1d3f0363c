"""HTTP routes exposing a graph and its algorithms."""
from flask import Flask, request, jsonify
from typing import Any, Dict

from .types import (
    Graph, INVALID_VERTEX, INVALID_WEIGHT, EDGE_ALREADY_EXISTS, EDGE_NOT_FOUND,
    REQUIRES_UNDIRECTED_WEIGHTED, NEGATIVE_WEIGHT, OPERATION_NOT_AVAILABLE,
)
from .graph import (
    add_edge, add_directed_edge, remove_edge, has_edge,
    get_edges, sort_edges, get_adjacency, get_graph_info,
)
from .traversal import bfs_distances
from .paths import dijkstra, floyd_warshall
from .spanning import kruskal, prim, reverse_delete

STATUS_BY_ERROR = {
    INVALID_VERTEX: 400,
    INVALID_WEIGHT: 400,
    EDGE_NOT_FOUND: 404,
    EDGE_ALREADY_EXISTS: 409,
    REQUIRES_UNDIRECTED_WEIGHTED: 422,
    NEGATIVE_WEIGHT: 422,
    OPERATION_NOT_AVAILABLE: 422,
}

SPANNING_TREES = {
    'kruskal': kruskal,
    'prim': prim,
    'reverse_delete': reverse_delete,
}


def vertex_id(raw: str) -> Any:
    """Parse a vertex id from the URL; unparsable text is passed on and refused as invalid_vertex."""
    try:
        return int(raw)
    except ValueError:
        return raw


def respond(result: Dict[str, Any]):
    """Turn an operation result into a JSON response with a matching status."""
    error = result.get('error')
    if error is None:
        return jsonify(result)
    return jsonify(result), STATUS_BY_ERROR.get(error, 400)


def create_app(graph: Graph) -> Flask:
    """Create and configure Flask app.

    Args:
        graph: Graph instance served by the app

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)

    @app.route('/graph', methods=['GET'])
    def graph_info():
        """Get graph flags, counts and connectivity."""
        return jsonify(get_graph_info(graph))

    @app.route('/adjacency', methods=['GET'])
    def adjacency():
        """Get every vertex's neighbor list."""
        return jsonify(get_adjacency(graph))

    @app.route('/edges', methods=['GET'])
    def list_edges():
        """List edges, optionally sorted by weight."""
        order = request.args.get('order')
        if order is None:
            return jsonify(get_edges(graph))
        if order not in ('asc', 'desc'):
            return jsonify({'error': 'order must be asc or desc'}), 400
        return jsonify(sort_edges(graph, ascending=(order == 'asc')))

    @app.route('/edges/<u>/<v>', methods=['GET'])
    def get_edge(u: str, v: str):
        """Check whether an edge exists."""
        u, v = vertex_id(u), vertex_id(v)
        result = has_edge(graph, u, v)
        if result.get('error'):
            return respond(result)
        if not result['exists']:
            return jsonify(result), 404
        return jsonify(result)

    @app.route('/edges/<u>/<v>', methods=['PUT'])
    def put_edge(u: str, v: str):
        """Insert an edge with optional weight; "directed" forces a one-way edge."""
        u, v = vertex_id(u), vertex_id(v)
        data = request.get_json(silent=True) or {}
        weight = data.get('weight')
        if data.get('directed'):
            result = add_directed_edge(graph, u, v, weight)
        else:
            result = add_edge(graph, u, v, weight)
        if result['success']:
            return jsonify(result), 201
        return respond(result)

    @app.route('/edges/<u>/<v>', methods=['DELETE'])
    def delete_edge(u: str, v: str):
        """Remove an edge."""
        u, v = vertex_id(u), vertex_id(v)
        return respond(remove_edge(graph, u, v))

    @app.route('/bfs/<source>', methods=['GET'])
    def bfs(source: str):
        """Hop-count distances from source."""
        source = vertex_id(source)
        return respond(bfs_distances(graph, source))

    @app.route('/dijkstra/<source>', methods=['GET'])
    def shortest_paths(source: str):
        """Weighted distances from source."""
        source = vertex_id(source)
        return respond(dijkstra(graph, source))

    @app.route('/floyd', methods=['GET'])
    def all_pairs():
        """All-pairs distance matrix."""
        return respond(floyd_warshall(graph))

    @app.route('/mst/<algorithm>', methods=['POST'])
    def spanning_tree(algorithm: str):
        """Build a minimum spanning tree. reverse_delete rewrites the served graph."""
        build = SPANNING_TREES.get(algorithm)
        if build is None:
            return jsonify({'error': f'unknown algorithm: {algorithm}'}), 404
        return respond(build(graph))

    return app
