"""
Manifest module for crate-depgraph.

This module provides TOML-based reading of crate manifests and the
directory walk that turns a tree of crates into a DependencyMap.
"""

from depgraph.manifest.extractor import (
    extract_dependencies,
    load_manifest,
    parse_manifest,
)
from depgraph.manifest.collector import collect_projects

__all__ = [
    "extract_dependencies",
    "load_manifest",
    "parse_manifest",
    "collect_projects",
]
