"""Common data structures for the RAG pipeline."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from ragngine.core.exceptions import ConfigurationError

RerankMethod = Literal["cosine", "dot"]
SplitMethod = Literal["character", "recursive"]

RERANK_METHODS = ("cosine", "dot")
DEFAULT_CHUNK_SIZE = 400
DEFAULT_CHUNK_OVERLAP = 50
DEFAULT_QUERY_TOP_K = 10


@dataclass
class Document:
    """A piece of text plus metadata, as stored in and returned by vector stores."""

    page_content: str
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ScoredDocument:
    """A document with its similarity score and its position in the input list."""

    document: Document
    score: float
    index: int


@dataclass
class ParsedContent:
    """Parser output: single text + metadata."""

    text: str
    source_type: str  # pdf, txt
    metadata: dict = field(default_factory=dict)


@dataclass
class Chunk:
    """Splitter output: one piece of text with its index."""

    content: str
    chunk_index: int
    char_count: int = 0
    metadata: dict = field(default_factory=dict)

    def to_document(self) -> Document:
        return Document(
            page_content=self.content,
            metadata={**self.metadata, "chunk_index": self.chunk_index},
        )


@dataclass
class DocumentSource:
    """Where to read a document from and how to chunk it."""

    document_url: str
    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    method: SplitMethod = "character"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.document_url or not str(self.document_url).strip():
            raise ConfigurationError("Please provide a document to generate chunks")
        if self.method not in ("character", "recursive"):
            raise ConfigurationError(f"Unknown split method {self.method!r}")


@dataclass
class RagQuery:
    """A user query plus reranking options."""

    query: str
    top_k: int = DEFAULT_QUERY_TOP_K
    rerank: RerankMethod = "cosine"

    def __post_init__(self) -> None:
        if not self.query or not self.query.strip():
            raise ConfigurationError("Query text required")
        if self.rerank not in RERANK_METHODS:
            raise ConfigurationError(
                f"Invalid similarity measure {self.rerank!r}; use one of {list(RERANK_METHODS)}"
            )


@dataclass
class IngestionResult:
    """Summary of an ingestion operation."""

    source: str
    source_type: str
    chunk_count: int
    ids: List[str] = field(default_factory=list)


@dataclass
class QueryResult:
    """Full result of a RAG query: reranked documents, context and answer."""

    query: str
    documents: List[Document] = field(default_factory=list)
    context: str = ""
    answer: Optional[str] = None
