"""
CLI module for crate-depgraph.

The command-line interface that scans a crate tree and writes its graph.
"""

from cli.main import app

__all__ = ["app"]
