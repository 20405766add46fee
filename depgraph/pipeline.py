"""
End-to-end run: collect crates, build the graph, export it, render it.
"""

import time
from pathlib import Path
from typing import Optional

import structlog

from depgraph.config import ScanConfig
from depgraph.graph import build_graph, export_graph, find_dangling, render_image
from depgraph.manifest import collect_projects
from depgraph.models import ScanResult

log = structlog.get_logger(__name__)


def run(
    root: Path | str,
    output: Path | str,
    config: Optional[ScanConfig] = None,
) -> ScanResult:
    """
    Scan ``root`` and write its dependency graph to ``output``.

    Any collection, parse or export error propagates and aborts the run.
    The renderer step never raises; its outcome is ``ScanResult.rendered``.

    Example:
        >>> result = run("./rust/compiler", "deps.dot")
        >>> print(f"{result.node_count} crates, {result.edge_count} edges")
    """
    if config is None:
        config = ScanConfig()

    start_time = time.time()
    result = ScanResult()

    result.dependencies = collect_projects(
        root,
        excluded=config.excluded,
        prefix=config.prefix,
        manifest_name=config.manifest_name,
    )
    result.graph = build_graph(result.dependencies)

    if config.strict:
        result.dangling = find_dangling(result.dependencies)
        for ref in result.dangling:
            log.warning(
                "dependency dropped from graph",
                project=ref.project,
                dependency=ref.dependency,
            )

    result.output_path = export_graph(
        result.graph,
        output,
        name=config.graph_name,
        edge_label=config.edge_label,
    )

    if config.render:
        result.image_path = Path(config.image_path)
        result.rendered = render_image(
            result.output_path, result.image_path, fmt=config.image_format
        )

    result.scan_time_seconds = time.time() - start_time
    return result
