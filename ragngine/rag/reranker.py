"""Similarity reranker: score documents against the query embedding, filter, sort, truncate."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, List, Sequence, Tuple

from ragngine.rag.similarity import compute_similarity
from ragngine.rag.types import Document, RagQuery, ScoredDocument

if TYPE_CHECKING:
    from ragngine.rag.embedder import Embedder

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.3


def rank_by_similarity(
    query_vector: Sequence[float],
    document_vectors: Sequence[Sequence[float]],
    *,
    method: str = "cosine",
    top_k: int,
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[Tuple[int, float]]:
    """Return ``(index, score)`` for the best documents.

    Scores at or below ``threshold`` are dropped, the rest sorted by
    descending score and cut to ``top_k``. Equal scores keep input order.
    """
    if top_k <= 0:
        return []
    scored = [
        (i, compute_similarity(vec, query_vector, method))
        for i, vec in enumerate(document_vectors)
    ]
    kept = [(i, s) for i, s in scored if s > threshold]
    kept.sort(key=lambda item: (-item[1], item[0]))
    return kept[:top_k]


class SimilarityReranker:
    """Rerank retrieved documents by embedding similarity to the query."""

    def __init__(self, embedder: "Embedder", *, threshold: float = SIMILARITY_THRESHOLD) -> None:
        self._embedder = embedder
        self._threshold = threshold

    async def score(self, query: RagQuery, documents: List[Document]) -> List[ScoredDocument]:
        if not documents or query.top_k <= 0:
            return []
        doc_vectors, query_vector = await asyncio.gather(
            self._embedder.embed_texts([d.page_content for d in documents]),
            self._embedder.embed_query(query.query),
        )
        ranked = rank_by_similarity(
            query_vector,
            doc_vectors,
            method=query.rerank,
            top_k=query.top_k,
            threshold=self._threshold,
        )
        logger.debug(
            "SimilarityReranker: %d → %d documents (method=%s top_k=%d)",
            len(documents), len(ranked), query.rerank, query.top_k,
        )
        return [ScoredDocument(document=documents[i], score=s, index=i) for i, s in ranked]

    async def rerank(self, query: RagQuery, documents: List[Document]) -> List[Document]:
        scored = await self.score(query, documents)
        return [sd.document for sd in scored]
