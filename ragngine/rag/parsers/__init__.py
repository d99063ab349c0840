"""Parsers: PDF, TXT → ParsedContent."""
from ragngine.rag.parsers.base import BaseParser, PathOrBytes
from ragngine.rag.parsers.pdf import PdfParser
from ragngine.rag.parsers.registry import (
    find_parser,
    get_parser,
    list_supported_extensions,
    register_parser,
)
from ragngine.rag.parsers.txt import TxtParser

register_parser(TxtParser())
register_parser(PdfParser())

__all__ = [
    "BaseParser",
    "PathOrBytes",
    "TxtParser",
    "PdfParser",
    "register_parser",
    "find_parser",
    "get_parser",
    "list_supported_extensions",
]
