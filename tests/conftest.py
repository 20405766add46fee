"""Shared pytest fixtures for crate-depgraph tests."""

import logging
from pathlib import Path

import pytest
import structlog

from tests.fixtures import AST_MANIFEST, LEXER_MANIFEST, PARSE_MANIFEST, make_crate


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore stdlib and structlog logging state after each test."""
    structlog_config = structlog.get_config()
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    depgraph_logger = logging.getLogger("depgraph")
    depgraph_level = depgraph_logger.level
    graphviz_logger = logging.getLogger("graphviz")
    graphviz_level = graphviz_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    depgraph_logger.setLevel(depgraph_level)
    graphviz_logger.setLevel(graphviz_level)
    structlog.configure(**structlog_config)


@pytest.fixture
def crate_tree(tmp_path: Path) -> Path:
    """
    A small compiler-like tree.

    compiler/
        rustc_ast/Cargo.toml     -> rustc_lexer, rustc_span (not collected)
        rustc_lexer/Cargo.toml   -> (nothing in-tree)
        rustc_parse/Cargo.toml   -> rustc_ast, rustc_lexer
        README.md
        docs/                    (no manifest)
    """
    root = tmp_path / "compiler"
    make_crate(root, "rustc_ast", AST_MANIFEST)
    make_crate(root, "rustc_lexer", LEXER_MANIFEST)
    make_crate(root, "rustc_parse", PARSE_MANIFEST)
    (root / "README.md").write_text("not a crate\n", encoding="utf-8")
    (root / "docs").mkdir()
    (root / "docs" / "index.md").write_text("# docs\n", encoding="utf-8")
    return root
