"""Character splitter: fixed character windows with overlap."""
from __future__ import annotations

from .base import BaseSplitter


class CharacterSplitter(BaseSplitter):
    """Split text into chunk_size windows; neighbours overlap by exactly chunk_overlap.

    A text no longer than chunk_size yields a single chunk.
    """

    def split_text(self, text: str) -> list[str]:
        if not text:
            return []
        return self._windows(text)
