"""
TOML Manifest Reader and Dependency Extractor

Turns one crate's ``Cargo.toml`` into the list of in-tree dependency names
it declares.

Design Decisions:
    - Parsing is delegated entirely to the ``toml`` library
    - Only the ``[dependencies]`` table is consulted; dev- and
      build-dependencies do not describe the crate's own layering
    - Filtering is by name prefix, which is how rustc's own crates are named
    - Declaration order is preserved; sorting happens in the graph builder
"""

from pathlib import Path
from typing import Any, Mapping, Optional

import structlog
import toml

from depgraph.config import DEFAULT_PREFIX
from depgraph.errors import ManifestParseError

log = structlog.get_logger(__name__)


def parse_manifest(text: str, source: Optional[Path] = None) -> dict[str, Any]:
    """
    Parse manifest text into a key/value table.

    Args:
        text: TOML document
        source: File the text was read from, used in the error message

    Returns:
        The parsed top-level table

    Raises:
        ManifestParseError: If the text is not valid TOML
    """
    try:
        return toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ManifestParseError(str(e), path=source) from e


def load_manifest(path: Path | str) -> dict[str, Any]:
    """
    Read and parse a manifest file.

    Raises:
        OSError: If the file cannot be read
        ManifestParseError: If the file is not valid TOML
    """
    path = Path(path)
    return parse_manifest(path.read_text(encoding="utf-8"), source=path)


def extract_dependencies(
    manifest: Mapping[str, Any],
    prefix: str = DEFAULT_PREFIX,
) -> list[str]:
    """
    Return the declared dependency names that start with ``prefix``.

    A missing ``dependencies`` entry, or one that is not a table, yields an
    empty list rather than an error.

    Args:
        manifest: Parsed manifest table
        prefix: Required leading text of a kept dependency name

    Returns:
        Matching dependency names, in declaration order

    Example:
        >>> extract_dependencies({"dependencies": {"rustc_span": {}, "tracing": "0.1"}})
        ['rustc_span']
    """
    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, Mapping):
        if dependencies is not None:
            log.debug("dependencies entry is not a table", kind=type(dependencies).__name__)
        return []

    return [str(name) for name in dependencies if str(name).startswith(prefix)]
