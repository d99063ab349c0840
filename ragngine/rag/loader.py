"""
Document loading: path or URL → ParsedContent → list of Chunk.

Supported types are whatever the parser registry knows (txt, pdf). Anything
else yields None so callers can skip the document.
"""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from ragngine.core.exceptions import ExtractionError, RagngineError
from ragngine.rag.parsers import find_parser
from ragngine.rag.parsers.base import BaseParser, PathOrBytes
from ragngine.rag.splitters import BaseSplitter, CharacterSplitter, RecursiveCharacterSplitter
from ragngine.rag.types import Chunk, DocumentSource, ParsedContent

logger = logging.getLogger(__name__)

_FETCH_TIMEOUT = 30.0


def is_url(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https")


def document_extension(location: str) -> str:
    """Lower-cased extension without the dot; URL query strings are ignored."""
    path = urlparse(location).path if is_url(location) else location
    return Path(path).suffix.lower().lstrip(".")


class DocumentLoader:
    """Parse (TXT, PDF) and split (character / recursive) in one place."""

    def __init__(self, *, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self._http = http_client

    async def load(self, location: str) -> Optional[ParsedContent]:
        """Read and parse a document. None when the type is unsupported."""
        parser = find_parser(document_extension(location))
        if parser is None:
            logger.warning("Unsupported document type, skipping: %s", location)
            return None
        source = await self._read(location)
        # pypdf is synchronous and CPU bound
        parsed = await asyncio.to_thread(parser.extract, source)
        parsed.metadata.setdefault("source", location)
        return parsed

    async def split(self, source: DocumentSource) -> Optional[list[Chunk]]:
        """Load source.document_url and split it with the source's chunking options."""
        parser = find_parser(document_extension(source.document_url))
        if parser is None:
            logger.warning("Unsupported document type, skipping: %s", source.document_url)
            return None
        splitter = build_splitter(source, parser)
        try:
            parsed = await self.load(source.document_url)
        except RagngineError:
            raise
        except Exception as exc:
            raise ExtractionError(
                f"Error occurred while splitting document: {exc}",
                details={"document_url": source.document_url},
                cause=exc,
            ) from exc
        if parsed is None:
            return None
        meta = {**parsed.metadata, **source.metadata, "source_type": parsed.source_type}
        chunks = splitter.split(parsed.text, metadata=meta)
        logger.info(
            "Split %s into %d chunks (size=%d overlap=%d method=%s)",
            source.document_url, len(chunks), source.chunk_size, source.chunk_overlap, source.method,
        )
        return chunks

    async def _read(self, location: str) -> PathOrBytes:
        if not is_url(location):
            return Path(location)
        try:
            if self._http is not None:
                response = await self._http.get(location, follow_redirects=True)
            else:
                async with httpx.AsyncClient(timeout=_FETCH_TIMEOUT) as client:
                    response = await client.get(location, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ExtractionError(
                f"Could not fetch document: {location}", details={"url": location}, cause=exc
            ) from exc
        return response.content


def build_splitter(source: DocumentSource, parser: BaseParser) -> BaseSplitter:
    if source.method == "recursive":
        return RecursiveCharacterSplitter(
            chunk_size=source.chunk_size,
            chunk_overlap=source.chunk_overlap,
            separators=parser.separators,
        )
    return CharacterSplitter(chunk_size=source.chunk_size, chunk_overlap=source.chunk_overlap)


async def split_document(
    source: DocumentSource,
    *,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Optional[list[Chunk]]:
    """Split a .txt or .pdf document into chunks; None for any other extension."""
    return await DocumentLoader(http_client=http_client).split(source)
