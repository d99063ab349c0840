"""RagEngine: ingest documents, then retrieve → rerank → answer."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ragngine.core.exceptions import ConfigurationError
from ragngine.rag.loader import DocumentLoader
from ragngine.rag.prompts import CONTEXT_SEPARATOR, build_messages
from ragngine.rag.reranker import SimilarityReranker
from ragngine.rag.types import Document, DocumentSource, IngestionResult, QueryResult, RagQuery

if TYPE_CHECKING:
    from ragngine.clients.llm import LLMProvider
    from ragngine.vectorstores.base import VectorStore

logger = logging.getLogger(__name__)

DEFAULT_FETCH_K = 20


class RagEngine:
    """Retrieval-augmented generation over one vector store.

    Components are injected once. ``fetch_k`` is how many candidates the
    vector store returns before reranking cuts them to ``RagQuery.top_k``.
    The store's embedder is reused for reranking so both sides share one
    vector space.
    """

    def __init__(
        self,
        vector_store: "VectorStore",
        llm: Optional["LLMProvider"] = None,
        *,
        fetch_k: int = DEFAULT_FETCH_K,
        loader: Optional[DocumentLoader] = None,
        reranker: Optional[SimilarityReranker] = None,
    ) -> None:
        if fetch_k < 1:
            raise ConfigurationError(f"fetch_k must be >= 1, got {fetch_k!r}")
        self._store = vector_store
        self._llm = llm
        self._fetch_k = fetch_k
        self._loader = loader or DocumentLoader()
        self._reranker = reranker or SimilarityReranker(vector_store.embedder)

    @property
    def vector_store(self) -> "VectorStore":
        return self._store

    @property
    def fetch_k(self) -> int:
        return self._fetch_k

    async def ingest(self, source: DocumentSource) -> Optional[IngestionResult]:
        """Split a document, embed the chunks and store them. None for unsupported types."""
        chunks = await self._loader.split(source)
        if chunks is None:
            return None
        documents = [c.to_document() for c in chunks]
        ids = await self._store.add_documents(documents)
        source_type = chunks[0].metadata.get("source_type", "") if chunks else ""
        logger.info("Ingested %s: %d chunks", source.document_url, len(ids))
        return IngestionResult(
            source=source.document_url,
            source_type=source_type,
            chunk_count=len(ids),
            ids=ids,
        )

    async def retrieve(self, query: RagQuery) -> List[Document]:
        """Fetch candidates from the store and rerank them by similarity to the query."""
        fetch_k = max(self._fetch_k, query.top_k)
        hits = await self._store.similarity_search(query.query, k=fetch_k)
        candidates = [doc for doc, _ in hits]
        return await self._reranker.rerank(query, candidates)

    async def ask(self, query: RagQuery) -> QueryResult:
        """Retrieve, rerank and generate an answer grounded in the reranked documents."""
        if self._llm is None:
            raise ConfigurationError("An LLM is required to answer queries")
        documents = await self.retrieve(query)
        context = CONTEXT_SEPARATOR.join(d.page_content for d in documents)
        answer = await self._llm.chat(build_messages(query.query, context))
        logger.info(
            "Answered query='%s' documents=%d answer_chars=%d",
            query.query[:60], len(documents), len(answer),
        )
        return QueryResult(query=query.query, documents=documents, context=context, answer=answer)

    async def close(self) -> None:
        await self._store.close()

    async def __aenter__(self) -> "RagEngine":
        await self._store.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
