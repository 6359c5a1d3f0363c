"""
Pytest configuration for graph engine tests.

The library is exercised in-process through the ``lib`` fixture; the CLI is
driven through a subprocess bridge the same way an external caller would.
"""
import pytest
import subprocess
import json
import os
import sys

import adjgraph
from adjgraph.server import create_app

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
PY_DIR = os.path.join(BASE_DIR, "py")


class CLIBridge:
    """Run ``python -m adjgraph.cli`` with JSON arguments on stdin."""

    def __init__(self):
        self.py_dir = PY_DIR

    def call(self, cmd, *args, flags=(), env=None):
        run_env = dict(os.environ)
        run_env["PYTHONPATH"] = self.py_dir + os.pathsep + run_env.get("PYTHONPATH", "")
        run_env.update(env or {})
        return subprocess.run(
            [sys.executable, "-m", "adjgraph.cli", *flags, cmd],
            cwd=self.py_dir,
            input=json.dumps(list(args)),
            capture_output=True,
            text=True,
            env=run_env,
        )

    def __call__(self, cmd, *args, flags=(), env=None):
        result = self.call(cmd, *args, flags=flags, env=env)
        if result.returncode != 0:
            raise RuntimeError(result.stdout + result.stderr)
        return json.loads(result.stdout)


@pytest.fixture
def lib():
    """The public API of the graph engine."""
    return adjgraph


@pytest.fixture
def example_graph():
    """Factory for the 5-vertex example graph in any configuration."""
    def build(directed=False, weighted=True):
        return adjgraph.build_example_graph(directed=directed, weighted=weighted)
    return build


@pytest.fixture
def weighted_graph(example_graph):
    """Undirected weighted example graph."""
    return example_graph(directed=False, weighted=True)


@pytest.fixture
def cli():
    return CLIBridge()


@pytest.fixture
def client(weighted_graph):
    """Flask test client serving the undirected weighted example graph."""
    app = create_app(weighted_graph)
    app.config["TESTING"] = True
    return app.test_client()
