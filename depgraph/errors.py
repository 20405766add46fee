"""
Error types raised by the crate-depgraph engine.

Filesystem failures are not wrapped: they surface as the built-in
``OSError`` family (``FileNotFoundError``, ``NotADirectoryError``,
``PermissionError``) so callers can tell them apart from the tool's own
parse and serialization failures.
"""

from pathlib import Path
from typing import Optional


class DepGraphError(Exception):
    """Base class for all errors raised by the engine."""


class ParseError(DepGraphError):
    """Content could not be parsed as a structured document."""


class ManifestParseError(ParseError):
    """
    A crate manifest is not valid TOML.

    Attributes:
        path: The manifest that failed to parse, if it came from a file
    """

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class SerializationError(DepGraphError):
    """A graph could not be converted into its textual form."""


class GraphSerializationError(SerializationError):
    """An identifier or edge endpoint is not valid in the DOT language."""
