"""Extension → parser. Registered parsers all return ParsedContent."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

from ragngine.core.exceptions import UnsupportedFileTypeError

if TYPE_CHECKING:
    from ragngine.rag.parsers.base import BaseParser

_registry: Dict[str, "BaseParser"] = {}


def _key(extension: str) -> str:
    return extension.lower().strip().lstrip(".")


def register_parser(parser: "BaseParser") -> None:
    """Register the parser for every extension it supports."""
    for ext in parser.supported_extensions:
        _registry[_key(ext)] = parser


def find_parser(extension: str) -> Optional["BaseParser"]:
    """Parser for the extension (".pdf" or "pdf"), or None."""
    return _registry.get(_key(extension))


def get_parser(extension: str) -> "BaseParser":
    """Like find_parser() but raises UnsupportedFileTypeError."""
    key = _key(extension)
    if not key:
        raise UnsupportedFileTypeError("No file extension given.")
    parser = _registry.get(key)
    if parser is None:
        raise UnsupportedFileTypeError(
            f"Unsupported file type: .{key}. Registered: {sorted(_registry)}."
        )
    return parser


def list_supported_extensions() -> tuple[str, ...]:
    return tuple(sorted(_registry))
