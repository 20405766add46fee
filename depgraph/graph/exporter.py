"""
DOT Exporter for crate-depgraph

Serializes a Graph into the Graphviz DOT language and hands the written file
to the ``dot`` executable for rendering.

Output shape:
    digraph rustc_deps {
        N0 [label=rustc_ast]
        N1 [label=rustc_parse]
        N1 -> N0 [label="&sube;"]
    }

Node identifiers are ``N`` followed by the node index; the crate name only
appears as a label. Every edge carries the same label.
"""

import re
import warnings
from pathlib import Path

import graphviz
import structlog

from depgraph.config import EDGE_LABEL, GRAPH_NAME, IMAGE_FORMAT, IMAGE_PATH
from depgraph.errors import GraphSerializationError
from depgraph.models import Graph

log = structlog.get_logger(__name__)

NODE_PREFIX = "N"

_DOT_ID = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def node_id(index: int) -> str:
    """Return the DOT identifier of the node at ``index``."""
    identifier = f"{NODE_PREFIX}{index}"
    if index < 0 or not _DOT_ID.match(identifier):
        raise GraphSerializationError(f"invalid node identifier: {identifier!r}")
    return identifier


def to_dot(
    graph: Graph,
    name: str = GRAPH_NAME,
    edge_label: str = EDGE_LABEL,
) -> str:
    """
    Serialize a Graph into DOT source.

    Args:
        graph: Graph to serialize
        name: Identifier of the digraph
        edge_label: Label placed on every edge

    Returns:
        The DOT document as a string

    Raises:
        GraphSerializationError: If the graph name or a node identifier is
            not a valid DOT ID, a label cannot be quoted into valid DOT, or
            an edge points outside the node list
    """
    if not _DOT_ID.match(name):
        raise GraphSerializationError(f"invalid graph identifier: {name!r}")

    dot = graphviz.Digraph(name=name)

    with warnings.catch_warnings():
        warnings.simplefilter("error", graphviz.DotSyntaxWarning)
        try:
            for index, label in enumerate(graph.nodes):
                dot.node(node_id(index), label=label)
        except graphviz.DotSyntaxWarning as e:
            raise GraphSerializationError(f"invalid node label: {e}") from e

    count = graph.node_count
    for source, target in graph.edges:
        if not (0 <= source < count and 0 <= target < count):
            raise GraphSerializationError(
                f"edge ({source}, {target}) references a missing node"
            )
        dot.edge(node_id(source), node_id(target), label=edge_label)

    return dot.source


def export_graph(
    graph: Graph,
    destination: Path | str,
    name: str = GRAPH_NAME,
    edge_label: str = EDGE_LABEL,
) -> Path:
    """
    Write a Graph as a DOT file, replacing any existing file.

    The document is fully serialized before the destination is opened, so a
    serialization failure leaves an existing file untouched.

    Returns:
        The path written

    Raises:
        GraphSerializationError: See ``to_dot``
        OSError: If the destination cannot be written
    """
    destination = Path(destination)
    source = to_dot(graph, name=name, edge_label=edge_label)
    destination.write_text(source, encoding="utf-8")
    log.debug(
        "wrote graph",
        path=str(destination),
        nodes=graph.node_count,
        edges=graph.edge_count,
    )
    return destination


def render_image(
    dot_path: Path | str,
    image_path: Path | str = IMAGE_PATH,
    fmt: str = IMAGE_FORMAT,
) -> bool:
    """
    Render a DOT file to an image with the Graphviz ``dot`` executable.

    Rendering is best-effort: a missing executable, a failing render or an
    image path that would overwrite the DOT file is logged as a warning and
    reported through the return value only.

    Args:
        dot_path: DOT file written by ``export_graph``
        image_path: Where the rendered image goes
        fmt: Graphviz output format (``dot -T<fmt>``)

    Returns:
        True if the image was produced, False otherwise
    """
    if Path(image_path).resolve() == Path(dot_path).resolve():
        log.warning("image path is the graph file, image not rendered", path=str(dot_path))
        return False

    try:
        graphviz.render(
            "dot",
            format=fmt,
            filepath=str(dot_path),
            outfile=str(image_path),
            quiet=True,
        )
    except graphviz.ExecutableNotFound:
        log.warning("graphviz dot executable not found, image not rendered")
        return False
    except graphviz.CalledProcessError as e:
        log.warning("graphviz render failed", path=str(dot_path), returncode=e.returncode)
        return False

    log.debug("rendered image", path=str(image_path), format=fmt)
    return True
