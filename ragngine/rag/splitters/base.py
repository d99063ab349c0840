"""Splitter interface: text → list of Chunk."""
from __future__ import annotations

from abc import ABC, abstractmethod

from ragngine.core.exceptions import ConfigurationError
from ragngine.rag.types import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE, Chunk


class BaseSplitter(ABC):
    """Every splitter produces the same output: list[Chunk], each at most chunk_size characters."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        if not isinstance(chunk_size, int) or chunk_size < 1:
            raise ConfigurationError(f"chunk_size must be a positive integer, got {chunk_size!r}")
        if not isinstance(chunk_overlap, int) or chunk_overlap < 0:
            raise ConfigurationError(
                f"chunk_overlap must be a non-negative integer, got {chunk_overlap!r}"
            )
        if chunk_overlap >= chunk_size:
            raise ConfigurationError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Split text into pieces of at most chunk_size characters."""
        ...

    def split(self, text: str, metadata: dict | None = None) -> list[Chunk]:
        """Split text and wrap the pieces as Chunks carrying a copy of metadata."""
        if not text or not text.strip():
            return []
        return self._chunks_from_pieces(self.split_text(text), metadata)

    def _windows(self, text: str) -> list[str]:
        """Fixed windows of chunk_size; consecutive windows share chunk_overlap characters."""
        step = self.chunk_size - self.chunk_overlap
        pieces = []
        start = 0
        while True:
            end = min(start + self.chunk_size, len(text))
            pieces.append(text[start:end])
            if end >= len(text):
                break
            start += step
        return pieces

    @staticmethod
    def _chunks_from_pieces(pieces: list[str], metadata: dict | None) -> list[Chunk]:
        meta = dict(metadata or {})
        result: list[Chunk] = []
        for piece in pieces:
            if not piece.strip():
                continue
            result.append(
                Chunk(
                    content=piece,
                    chunk_index=len(result),
                    char_count=len(piece),
                    metadata=dict(meta),
                )
            )
        return result
