"""Parser interface: file path or bytes → ParsedContent."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ragngine.rag.types import ParsedContent

PathOrBytes = Union[str, Path, bytes]


class BaseParser(ABC):
    """One file type: extract → ParsedContent."""

    @property
    @abstractmethod
    def supported_extensions(self) -> tuple[str, ...]:
        """Supported extensions without the dot: 'pdf', 'txt'."""

    @property
    def source_type(self) -> str:
        exts = self.supported_extensions
        return exts[0] if exts else "unknown"

    @property
    def separators(self) -> list[str]:
        """Preferred split points for the recursive splitter."""
        return ["\n\n", "\n"]

    @abstractmethod
    def extract(self, source: PathOrBytes) -> ParsedContent:
        """Extract text from the source. Raises ExtractionError on failure."""
