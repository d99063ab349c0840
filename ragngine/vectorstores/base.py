"""Vector store interface: persist documents with their embeddings, query by similarity."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Sequence, Tuple

from ragngine.rag.types import Document

if TYPE_CHECKING:
    from ragngine.rag.embedder import Embedder


class VectorStore(ABC):
    """Stores embed documents through the injected Embedder."""

    def __init__(self, embedder: "Embedder") -> None:
        self._embedder = embedder

    @property
    def embedder(self) -> "Embedder":
        return self._embedder

    @property
    @abstractmethod
    def provider(self) -> str:
        ...

    async def initialize(self) -> None:
        """Connect and create storage if needed. Default: nothing to do."""

    @abstractmethod
    async def add_vectors(
        self, documents: Sequence[Document], vectors: Sequence[Sequence[float]]
    ) -> List[str]:
        """Store pre-computed vectors. Returns the new ids in input order."""
        ...

    async def add_documents(self, documents: Sequence[Document]) -> List[str]:
        if not documents:
            return []
        vectors = await self._embedder.embed_texts([d.page_content for d in documents])
        return await self.add_vectors(documents, vectors)

    @abstractmethod
    async def similarity_search_by_vector(
        self, vector: Sequence[float], k: int = 4
    ) -> List[Tuple[Document, float]]:
        """Nearest documents with their similarity (higher is closer)."""
        ...

    async def similarity_search(self, query: str, k: int = 4) -> List[Tuple[Document, float]]:
        vector = await self._embedder.embed_query(query)
        return await self.similarity_search_by_vector(vector, k)

    async def close(self) -> None:
        """Release connections. Default: nothing to do."""

    async def __aenter__(self) -> "VectorStore":
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
