"""Graph HTTP server entry point."""
import argparse
import logging
import os

from adjgraph.cli import env_flag
from adjgraph.demo import build_example_graph, EXAMPLE_VERTEX_COUNT
from adjgraph.server import create_app
from adjgraph.types import Graph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Graph HTTP API Server')
    parser.add_argument('--port', type=int, help='HTTP server port')
    parser.add_argument('--vertices', type=int, help='Number of vertices')
    parser.add_argument('--directed', action='store_true', help='Build a directed graph')
    parser.add_argument('--weighted', action='store_true', help='Build a weighted graph')
    parser.add_argument('--log-level', type=str, help='Logging level')
    return parser


def graph_from_args(args: argparse.Namespace) -> Graph:
    """Build the served graph; an explicit --vertices 0 is honoured over the environment."""
    vertices = args.vertices if args.vertices is not None else int(os.environ.get('VERTICES', EXAMPLE_VERTEX_COUNT))
    return build_example_graph(
        directed=args.directed or env_flag('DIRECTED'),
        weighted=args.weighted or env_flag('WEIGHTED'),
        vertex_count=vertices,
    )


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Get configuration from args or environment
    port = args.port or int(os.environ.get('PORT', '8080'))
    level = args.log_level or os.environ.get('LOG_LEVEL', 'WARNING')
    logging.basicConfig(level=level.upper())

    graph = graph_from_args(args)

    # The graph is not safe for concurrent requests
    app = create_app(graph)
    app.run(host='0.0.0.0', port=port, debug=False, threaded=False)


if __name__ == '__main__':
    main()
