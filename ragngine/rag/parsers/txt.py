"""TXT parser. UTF-8 first, then cp1252 / latin-1."""
from __future__ import annotations

from pathlib import Path

from ragngine.core.exceptions import ExtractionError
from ragngine.rag.parsers.base import BaseParser, PathOrBytes
from ragngine.rag.types import ParsedContent


class TxtParser(BaseParser):
    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return ("txt",)

    def extract(self, source: PathOrBytes) -> ParsedContent:
        if isinstance(source, bytes):
            raw = source
        else:
            path = Path(source)
            try:
                raw = path.read_bytes()
            except OSError as e:
                raise ExtractionError(f"Could not read text file: {path}", cause=e) from e
        return ParsedContent(text=self._decode(raw), source_type="txt", metadata={})

    def _decode(self, raw: bytes) -> str:
        for enc in ("utf-8", "utf-8-sig", "cp1252", "latin-1"):
            try:
                return raw.decode(enc)
            except UnicodeDecodeError:
                continue
        raise ExtractionError("Could not decode text file (tried utf-8, cp1252, latin-1).")
