#!/usr/bin/env python3
"""CLI wrapper for the graph engine.

Builds the example graph from the flags (or the VERTICES, DIRECTED, WEIGHTED
environment variables), runs one command with JSON arguments read from stdin
and prints the JSON result.
"""
import sys
import os
import json
import argparse
import logging

import adjgraph
from adjgraph import demo

COMMANDS = {
    'info': lambda g, args: adjgraph.get_graph_info(g),
    'adjacency': lambda g, args: demo.run_operation('adjacency', g),
    'edges': lambda g, args: adjgraph.get_edges(g),
    'sort_edges': lambda g, args: demo.run_operation('sort_edges', g, *args[:1]),
    'neighbors': lambda g, args: adjgraph.get_neighbors(g, args[0]),
    'has_edge': lambda g, args: adjgraph.has_edge(g, args[0], args[1]),
    'add_edge': lambda g, args: adjgraph.add_edge(g, args[0], args[1], args[2] if len(args) > 2 else None),
    'remove_edge': lambda g, args: adjgraph.remove_edge(g, args[0], args[1]),
    'dfs': lambda g, args: adjgraph.dfs(g, args[0] if args else 0),
    'is_connected': lambda g, args: adjgraph.is_connected(g),
    'bfs': lambda g, args: demo.run_operation('bfs', g, *args[:1]),
    'shortest_paths': lambda g, args: demo.run_operation('shortest_paths', g, *args[:1]),
    'kruskal': lambda g, args: demo.run_operation('kruskal', g),
    'prim': lambda g, args: demo.run_operation('prim', g),
    'reverse_delete': lambda g, args: demo.run_operation('reverse_delete', g),
}

TRUE_VALUES = ("1", "true", "yes", "y", "s")


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in TRUE_VALUES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Run one operation on the example graph')
    parser.add_argument('command', nargs='?', help='Operation to run')
    parser.add_argument('--vertices', type=int, help='Number of vertices')
    parser.add_argument('--directed', action='store_true', help='Build a directed graph')
    parser.add_argument('--weighted', action='store_true', help='Build a weighted graph')
    parser.add_argument('--log-level', type=str, help='Logging level')
    return parser


def read_args():
    if sys.stdin is None or sys.stdin.isatty():
        return []
    data = sys.stdin.read().strip()
    if not data:
        return []
    args = json.loads(data)
    if not isinstance(args, list):
        raise ValueError("arguments must be a JSON list")
    return args


def main(argv=None):
    args = build_parser().parse_args(argv)

    # Flags first, then environment
    level = args.log_level or os.environ.get('LOG_LEVEL', 'WARNING')
    logging.basicConfig(level=level.upper(), stream=sys.stderr)

    if not args.command:
        print(json.dumps({"error": "No command provided"}))
        sys.exit(1)
    if args.command not in COMMANDS:
        print(json.dumps({"error": f"Unknown command: {args.command}"}))
        sys.exit(1)

    try:
        cmd_args = read_args()
    except ValueError as e:
        print(json.dumps({"error": f"Invalid arguments: {e}"}))
        sys.exit(1)

    try:
        vertices = args.vertices if args.vertices is not None else int(os.environ.get('VERTICES', demo.EXAMPLE_VERTEX_COUNT))
        graph = demo.build_example_graph(
            directed=args.directed or env_flag('DIRECTED'),
            weighted=args.weighted or env_flag('WEIGHTED'),
            vertex_count=vertices,
        )
    except ValueError as e:
        print(json.dumps({"error": f"Invalid vertex count: {e}"}))
        sys.exit(1)

    try:
        result = COMMANDS[args.command](graph, cmd_args)
    except IndexError:
        print(json.dumps({"error": f"Missing arguments for {args.command}"}))
        sys.exit(1)
    print(json.dumps(result))


if __name__ == "__main__":
    main()
