"""In-process vector store: lists of vectors scored with cosine similarity."""
from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple

from ragngine.core.exceptions import ValidationError
from ragngine.rag.similarity import cosine_similarity
from ragngine.rag.types import Document
from ragngine.vectorstores.base import VectorStore

if TYPE_CHECKING:
    from ragngine.rag.embedder import Embedder


class InMemoryVectorStore(VectorStore):
    """Brute-force store for tests and local runs. Nothing is persisted."""

    def __init__(self, embedder: "Embedder") -> None:
        super().__init__(embedder)
        self._ids: List[str] = []
        self._documents: List[Document] = []
        self._vectors: List[List[float]] = []

    @property
    def provider(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._ids)

    async def add_vectors(
        self, documents: Sequence[Document], vectors: Sequence[Sequence[float]]
    ) -> List[str]:
        if len(documents) != len(vectors):
            raise ValidationError(
                f"Got {len(documents)} documents but {len(vectors)} vectors"
            )
        ids = [str(uuid.uuid4()) for _ in documents]
        self._ids.extend(ids)
        self._documents.extend(documents)
        self._vectors.extend(list(v) for v in vectors)
        return ids

    async def similarity_search_by_vector(
        self, vector: Sequence[float], k: int = 4
    ) -> List[Tuple[Document, float]]:
        if k <= 0:
            return []
        scored = [
            (i, cosine_similarity(stored, vector)) for i, stored in enumerate(self._vectors)
        ]
        scored.sort(key=lambda item: (-item[1], item[0]))
        return [(self._documents[i], score) for i, score in scored[:k]]

    async def clear(self) -> None:
        self._ids.clear()
        self._documents.clear()
        self._vectors.clear()


def memory_builder(config: Dict[str, Any], embedder: "Embedder") -> InMemoryVectorStore:
    return InMemoryVectorStore(embedder)
