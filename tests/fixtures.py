"""
Test fixtures for crate-depgraph.

Sample Cargo.toml documents and a helper that lays them out on disk as a
crate tree.
"""

from pathlib import Path

# rustc_parse depends on two in-tree crates and one crates.io crate
PARSE_MANIFEST = '''
[package]
name = "rustc_parse"
version = "0.0.0"
edition = "2021"

[dependencies]
bitflags = "2.4.1"
rustc_ast = { path = "../rustc_ast" }
rustc_lexer = { path = "../rustc_lexer" }
tracing = "0.1"
'''

AST_MANIFEST = '''
[package]
name = "rustc_ast"
version = "0.0.0"

[dependencies]
rustc_lexer = { path = "../rustc_lexer" }
rustc_span = { path = "../rustc_span" }
smallvec = { version = "1.8.1", features = ["union"] }
'''

LEXER_MANIFEST = '''
[package]
name = "rustc_lexer"
version = "0.0.0"

[dependencies]
unicode-xid = "0.2.0"
'''

NO_DEPENDENCIES_MANIFEST = '''
[package]
name = "rustc_fake"
version = "0.0.0"
'''

DEPENDENCIES_NOT_A_TABLE = '''
dependencies = "rustc_ast"
'''

# rustc_span is declared as a dev-dependency only; it must not be picked up
DEV_DEPENDENCY_MANIFEST = '''
[package]
name = "rustc_expand"

[dependencies.rustc_ast]
path = "../rustc_ast"

[dev-dependencies]
rustc_span = { path = "../rustc_span" }
'''

INVALID_MANIFEST = '''
[package
name = "broken"
'''


def make_crate(root: Path, name: str, manifest: str = LEXER_MANIFEST) -> Path:
    """Create ``root/name/Cargo.toml`` holding ``manifest``."""
    crate = root / name
    crate.mkdir(parents=True, exist_ok=True)
    (crate / "Cargo.toml").write_text(manifest, encoding="utf-8")
    return crate
