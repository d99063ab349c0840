"""PDF text extraction (pypdf)."""
from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from ragngine.core.exceptions import ExtractionError
from ragngine.rag.parsers.base import BaseParser, PathOrBytes
from ragngine.rag.types import ParsedContent

logger = logging.getLogger(__name__)


class PdfParser(BaseParser):
    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return ("pdf",)

    @property
    def separators(self) -> list[str]:
        return ["\n\n"]

    def extract(self, source: PathOrBytes) -> ParsedContent:
        stream = BytesIO(source) if isinstance(source, bytes) else Path(source)
        try:
            reader = PdfReader(stream)
            pages = [page.extract_text() or "" for page in reader.pages]
        except (PyPdfError, OSError, ValueError) as e:
            raise ExtractionError(f"Error occurred while converting PDF to text: {e}", cause=e) from e
        text = "\n".join(p for p in pages if p)
        logger.debug("PdfParser: %d pages, %d chars", len(pages), len(text))
        return ParsedContent(text=text, source_type="pdf", metadata={"page_count": len(pages)})
