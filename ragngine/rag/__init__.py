"""
RAG: parsing, chunking, embedding, similarity reranking and the engine.

Usage::

    from ragngine.rag import DocumentSource, split_document
    chunks = await split_document(DocumentSource("./docs/handbook.pdf"))
"""
from ragngine.rag.embedder import Embedder
from ragngine.rag.loader import DocumentLoader, split_document
from ragngine.rag.reranker import SIMILARITY_THRESHOLD, SimilarityReranker, rank_by_similarity
from ragngine.rag.similarity import compute_similarity, cosine_similarity, dot_product
from ragngine.rag.types import (
    Chunk,
    Document,
    DocumentSource,
    IngestionResult,
    ParsedContent,
    QueryResult,
    RagQuery,
    ScoredDocument,
)

__all__ = [
    "Chunk",
    "Document",
    "DocumentSource",
    "IngestionResult",
    "ParsedContent",
    "QueryResult",
    "RagQuery",
    "ScoredDocument",
    "Embedder",
    "DocumentLoader",
    "split_document",
    "SimilarityReranker",
    "rank_by_similarity",
    "SIMILARITY_THRESHOLD",
    "compute_similarity",
    "cosine_similarity",
    "dot_product",
]
