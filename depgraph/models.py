"""
Core Data Models for crate-depgraph

This module defines the data structures that flow through the pipeline:
- DependencyMap: crate name -> dependency names, as read from manifests
- Graph: index-based node/edge structure produced by the builder
- DanglingReference: a dependency name with no matching crate
- ScanResult: aggregate outcome of one end-to-end run

Design Decisions:
    - Graph is a frozen dataclass holding tuples; it is built once and
      never mutated
    - Node identity is the position in the sorted ``nodes`` tuple
    - Duplicate edges are kept; the renderer draws them as parallel arrows
"""

from bisect import bisect_left
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence

import networkx as nx


DependencyMap = dict[str, list[str]]
"""Crate name -> ordered dependency names (may repeat, may dangle)."""


def search_sorted(nodes: Sequence[str], name: str) -> Optional[int]:
    """Binary-search ``name`` in the sorted ``nodes``; None if absent."""
    index = bisect_left(nodes, name)
    if index < len(nodes) and nodes[index] == name:
        return index
    return None


@dataclass(frozen=True)
class Graph:
    """
    Index-based directed dependency graph.

    Attributes:
        nodes: Unique crate names, sorted ascending
        edges: ``(source, target)`` index pairs meaning "source depends on
            target", in insertion order

    Invariants:
        - nodes is sorted and free of duplicates
        - every index in edges is in ``range(len(nodes))``
    """

    nodes: tuple[str, ...] = ()
    edges: tuple[tuple[int, int], ...] = ()

    def __post_init__(self) -> None:
        """Validate the index invariant."""
        count = len(self.nodes)
        for source, target in self.edges:
            if not (0 <= source < count and 0 <= target < count):
                raise ValueError(
                    f"edge ({source}, {target}) out of range for {count} node(s)"
                )

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return len(self.edges)

    def index_of(self, name: str) -> Optional[int]:
        """Return the node index for a crate name, or None if absent."""
        return search_sorted(self.nodes, name)

    def labelled_edges(self) -> Iterator[tuple[str, str]]:
        """Yield each edge as a ``(source_name, target_name)`` pair."""
        for source, target in self.edges:
            yield self.nodes[source], self.nodes[target]

    def to_networkx(self) -> nx.MultiDiGraph:
        """
        Convert to a NetworkX multigraph keyed by node index.

        Each node carries its crate name as the ``label`` attribute.
        A MultiDiGraph is used so duplicate edges survive the conversion.
        """
        graph = nx.MultiDiGraph()
        for index, name in enumerate(self.nodes):
            graph.add_node(index, label=name)
        graph.add_edges_from(self.edges)
        return graph


@dataclass(frozen=True)
class DanglingReference:
    """
    A dependency that names no crate in the graph.

    Attributes:
        project: Crate whose manifest declares the dependency
        dependency: The unmatched dependency name
    """

    project: str
    dependency: str


@dataclass
class ScanResult:
    """
    Result of one collect/build/export run.

    Attributes:
        dependencies: The collected DependencyMap
        graph: The graph built from it
        dangling: Dropped dependency references (only filled in strict mode)
        output_path: Where the DOT document was written
        image_path: Where the renderer was asked to write the image
        rendered: True if the external renderer succeeded
        scan_time_seconds: Wall-clock time for the whole run
    """

    dependencies: DependencyMap = field(default_factory=dict)
    graph: Graph = field(default_factory=Graph)
    dangling: list[DanglingReference] = field(default_factory=list)
    output_path: Optional[Path] = None
    image_path: Optional[Path] = None
    rendered: bool = False
    scan_time_seconds: float = 0.0

    @property
    def node_count(self) -> int:
        """Number of crates in the graph."""
        return self.graph.node_count

    @property
    def edge_count(self) -> int:
        """Number of dependency edges in the graph."""
        return self.graph.edge_count

    @property
    def dangling_count(self) -> int:
        """Number of dropped dependency references."""
        return len(self.dangling)
