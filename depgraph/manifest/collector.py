"""
Project Collector

Walks one level of subdirectories below a root, reads each crate's manifest
and assembles the DependencyMap consumed by the graph builder.

Layout expected:
    root/
        rustc_ast/Cargo.toml
        rustc_parse/Cargo.toml
        ...

Failure policy is fail-fast: an unreadable directory or manifest aborts the
walk and no partial map is returned.
"""

from pathlib import Path
from typing import Iterable

import structlog

from depgraph.config import DEFAULT_EXCLUDED_CRATES, DEFAULT_PREFIX, MANIFEST_NAME
from depgraph.manifest.extractor import extract_dependencies, load_manifest
from depgraph.models import DependencyMap

log = structlog.get_logger(__name__)


def collect_projects(
    root: Path | str,
    excluded: Iterable[str] = DEFAULT_EXCLUDED_CRATES,
    prefix: str = DEFAULT_PREFIX,
    manifest_name: str = MANIFEST_NAME,
) -> DependencyMap:
    """
    Build a DependencyMap from the crates directly below ``root``.

    Subdirectories are visited in name order. A subdirectory is a crate if it
    directly contains ``manifest_name``; its directory name is the crate name.
    Excluded crates are skipped before their manifest is read.

    Args:
        root: Directory holding one subdirectory per crate
        excluded: Crate names to leave out of the map
        prefix: Dependency-name prefix passed to the extractor
        manifest_name: Manifest filename to look for

    Returns:
        Mapping of crate name to its filtered dependency names

    Raises:
        FileNotFoundError: If root does not exist
        NotADirectoryError: If root is not a directory
        OSError: If a directory or manifest cannot be read
        ManifestParseError: If a manifest is not valid TOML
    """
    root = Path(root)
    excluded = frozenset(excluded)

    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")

    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    result: DependencyMap = {}

    for subdir in sorted(root.iterdir()):
        if not subdir.is_dir():
            continue

        manifest = _find_manifest(subdir, manifest_name)
        if manifest is None:
            log.debug("no manifest, skipping", path=str(subdir))
            continue

        name = subdir.name
        if name in excluded:
            log.debug("excluded crate", project=name)
            continue

        dependencies = extract_dependencies(load_manifest(manifest), prefix=prefix)
        result[name] = dependencies
        log.debug("collected crate", project=name, dependencies=len(dependencies))

    return result


def _find_manifest(directory: Path, manifest_name: str) -> Path | None:
    """
    Return the manifest file directly inside ``directory``, if any.

    The directory is listed rather than probed so an unreadable crate
    directory raises instead of looking like one without a manifest.
    """
    for entry in directory.iterdir():
        if entry.name == manifest_name and entry.is_file():
            return entry
    return None
