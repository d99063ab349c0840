"""Recursive splitter: prefer paragraph/line boundaries, fall back to fixed windows."""
from __future__ import annotations

from typing import Sequence

from ragngine.rag.types import DEFAULT_CHUNK_OVERLAP, DEFAULT_CHUNK_SIZE

from .base import BaseSplitter


class RecursiveCharacterSplitter(BaseSplitter):
    """Split on the first separator that occurs in the text, merge the pieces
    back up to chunk_size, and recurse into pieces that are still too long.

    Consecutive chunks repeat trailing pieces of the previous chunk up to
    chunk_overlap characters. Pieces with no separator left are cut into
    fixed windows, so no chunk ever exceeds chunk_size.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        separators: Sequence[str] | None = None,
    ) -> None:
        super().__init__(chunk_size, chunk_overlap)
        self.separators = [s for s in (separators or ["\n\n", "\n"]) if s]

    def split_text(self, text: str) -> list[str]:
        if not text:
            return []
        return [c for c in self._split(text, self.separators) if c.strip()]

    def _split(self, text: str, separators: list[str]) -> list[str]:
        if len(text) <= self.chunk_size:
            return [text]
        sep = ""
        rest: list[str] = []
        for i, candidate in enumerate(separators):
            if candidate in text:
                sep, rest = candidate, separators[i + 1:]
                break
        if not sep:
            return self._windows(text)

        out: list[str] = []
        fitting: list[str] = []
        for part in text.split(sep):
            if not part:
                continue
            if len(part) <= self.chunk_size:
                fitting.append(part)
                continue
            if fitting:
                out.extend(self._merge(fitting, sep))
                fitting = []
            out.extend(self._split(part, rest))
        if fitting:
            out.extend(self._merge(fitting, sep))
        return out

    def _merge(self, parts: list[str], sep: str) -> list[str]:
        """Greedily join parts (each <= chunk_size) into chunks, carrying an overlap tail."""
        chunks: list[str] = []
        current: list[str] = []
        total = 0
        for part in parts:
            joined = total + len(part) + (len(sep) if current else 0)
            if joined > self.chunk_size and current:
                chunks.append(sep.join(current))
                # Drop from the front until the tail fits the overlap and the next part fits
                while current and (
                    total > self.chunk_overlap
                    or total + len(part) + len(sep) > self.chunk_size
                ):
                    total -= len(current[0]) + (len(sep) if len(current) > 1 else 0)
                    current.pop(0)
            current.append(part)
            total += len(part) + (len(sep) if len(current) > 1 else 0)
        if current:
            chunks.append(sep.join(current))
        return chunks
