"""
Graph module for crate-depgraph.

This module turns a DependencyMap into an index-based Graph and
serializes that graph into the Graphviz DOT language.
"""

from depgraph.graph.builder import build_graph, find_dangling
from depgraph.graph.exporter import export_graph, render_image, to_dot

__all__ = [
    "build_graph",
    "find_dangling",
    "export_graph",
    "render_image",
    "to_dot",
]
