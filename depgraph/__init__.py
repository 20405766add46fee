"""
crate-depgraph Engine

Core engine for reading crate manifests, building the inter-crate
dependency graph and exporting it as a Graphviz DOT document.
"""

from depgraph.logging import configure_default_logging
from depgraph.models import DanglingReference, DependencyMap, Graph, ScanResult

__all__ = ["DanglingReference", "DependencyMap", "Graph", "ScanResult"]
__version__ = "0.1.0"

configure_default_logging()
