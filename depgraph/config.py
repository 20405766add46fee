"""
Run configuration for crate-depgraph.

Defaults target a rustc ``compiler/`` checkout: only ``rustc*`` dependencies
are kept, and the meta/internal crates that nearly every other crate depends
on are excluded so the rendered graph stays readable.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

DEFAULT_PREFIX = "rustc"
MANIFEST_NAME = "Cargo.toml"
GRAPH_NAME = "rustc_deps"
EDGE_LABEL = "&sube;"
IMAGE_PATH = Path("rustc-inter-deps.svg")
IMAGE_FORMAT = "svg"

DEFAULT_EXCLUDED_CRATES: frozenset[str] = frozenset(
    {
        "rustc",
        "rustc_graphviz",
        "rustc_codegen_cranelift",
        "rustc_codegen_gcc",
        "rustc_error_messages",
        "rustc_baked_icu_data",
        "rustc_fs_util",
        "rustc_hir_pretty",
        "rustc_apfloat",
        "rustc_transmute",
        "rustc_parse_format",
        "rustc_smir",
        "rustc_llvm",
        "rustc_abi",
        "rustc_monomorphize",
        "rustc_log",
        "rustc_error_codes",
        "rustc_symbol_mangling",
        "rustc_errors",
        "rustc_attr",
        "rustc_metadata",
        "rustc_feature",
        "rustc_ast_pretty",
        "rustc_index",
        "rustc_arena",
        "rustc_driver",
        "rustc_target",
        "rustc_serialize",
        "rustc_codegen_ssa",
        "rustc_privacy",
        "rustc_codegen_llvm",
        "rustc_lint_defs",
        "rustc_data_structures",
        "rustc_span",
        "rustc_ty_utils",
        "rustc_mir_build",
        "rustc_type_ir",
        "rustc_plugin_impl",
        "rustc_session",
        "rustc_lint",
        "rustc_macros",
        "rustc_builtin_macros",
        "rustc_ast_passes",
        "rustc_mir_transform",
        "rustc_trait_selection",
    }
)


@dataclass(frozen=True)
class ScanConfig:
    """
    Settings for a single run.

    Attributes:
        prefix: Only dependency names starting with this are kept
        excluded: Crate names skipped by the collector
        manifest_name: Manifest file looked up in each crate directory
        graph_name: Identifier of the exported digraph
        edge_label: Label attached to every edge
        image_path: Output of the external renderer
        image_format: Graphviz output format passed to ``dot -T``
        render: Whether to invoke the renderer at all
        strict: Report dropped dependency references as warnings
    """

    prefix: str = DEFAULT_PREFIX
    excluded: frozenset[str] = DEFAULT_EXCLUDED_CRATES
    manifest_name: str = MANIFEST_NAME
    graph_name: str = GRAPH_NAME
    edge_label: str = EDGE_LABEL
    image_path: Path = IMAGE_PATH
    image_format: str = IMAGE_FORMAT
    render: bool = True
    strict: bool = False

    def with_excluded(
        self, extra: Iterable[str] = (), include_defaults: bool = True
    ) -> "ScanConfig":
        """Return a copy whose exclusion set is ``extra`` plus, optionally, the defaults."""
        excluded = frozenset(extra)
        if include_defaults:
            excluded |= DEFAULT_EXCLUDED_CRATES
        return dataclasses.replace(self, excluded=excluded)
