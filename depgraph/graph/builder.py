"""
Graph Builder for crate-depgraph

This module converts a DependencyMap into a Graph of integer-indexed nodes
and directed edges.

Design Decisions:
    - Nodes are the map's keys sorted ascending; a node's index is its
      identity in the exported document
    - Name lookup is a binary search over the sorted node tuple
    - Dependencies naming no collected crate are dropped, not reported
    - No deduplication, self-loop suppression or cycle detection; the
      renderer copes with all three

Graph Properties:
    - Directed: edges point from a crate to a crate it depends on
    - May have cycles and self-loops
    - May have parallel edges when a dependency is listed twice
    - Edge order follows the map's insertion order, so equal maps built
      the same way give identical graphs
"""

import structlog

from depgraph.models import DanglingReference, DependencyMap, Graph, search_sorted

log = structlog.get_logger(__name__)


def build_graph(dependencies: DependencyMap) -> Graph:
    """
    Build a Graph from a crate-name -> dependency-names mapping.

    Args:
        dependencies: The collected DependencyMap

    Returns:
        A Graph whose nodes are the sorted keys of ``dependencies``

    Example:
        >>> graph = build_graph({"a": ["b"], "b": []})
        >>> graph.nodes, graph.edges
        (('a', 'b'), ((0, 1),))
    """
    nodes = tuple(sorted(dependencies))
    edges: list[tuple[int, int]] = []

    for project, deps in dependencies.items():
        source = search_sorted(nodes, project)
        if source is None:
            continue

        for dep in deps:
            target = search_sorted(nodes, dep)
            if target is None:
                log.debug("dropping dangling dependency", project=project, dependency=dep)
                continue
            edges.append((source, target))

    return Graph(nodes=nodes, edges=tuple(edges))


def find_dangling(dependencies: DependencyMap) -> list[DanglingReference]:
    """
    List the dependency references ``build_graph`` would drop.

    Args:
        dependencies: The collected DependencyMap

    Returns:
        One DanglingReference per unmatched dependency, in map order
    """
    return [
        DanglingReference(project=project, dependency=dep)
        for project, deps in dependencies.items()
        for dep in deps
        if dep not in dependencies
    ]
