"""
Build a RagEngine from configuration objects through the provider registries.

Usage::

    settings = load_settings()
    engine = await build_engine(
        settings,
        EmbeddingConfig(model="text-embedding-3-small"),
        LLMConfig(model="gpt-4o-mini", temperature=0.2),
        store_provider="neon_pg",
        store_config={"table_name": "handbook"},
    )
    async with engine:
        result = await engine.ask(RagQuery("What is data mining?"))
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ragngine.clients.embedding import EmbeddingConfig, EmbeddingProvider
from ragngine.clients.embedding import default_registry as embedding_registry
from ragngine.clients.llm import LLMConfig, LLMProvider
from ragngine.clients.llm import default_registry as llm_registry
from ragngine.config import Settings
from ragngine.rag.embedder import Embedder
from ragngine.rag.engine import DEFAULT_FETCH_K, RagEngine
from ragngine.vectorstores import VectorStore
from ragngine.vectorstores import default_registry as store_registry

logger = logging.getLogger(__name__)


def build_embeddings(settings: Settings, config: EmbeddingConfig) -> EmbeddingProvider:
    return embedding_registry.build(config.resolve(settings))


def build_llm(settings: Settings, config: LLMConfig) -> LLMProvider:
    return llm_registry.build(config.resolve(settings))


def build_vector_store(
    settings: Settings,
    provider: str,
    embedder: Embedder,
    config: Optional[Dict[str, Any]] = None,
) -> VectorStore:
    data = dict(config or {})
    if provider == "neon_pg" and not data.get("url"):
        data["url"] = settings.database_url
    return store_registry.build(provider, embedder, data)


async def build_engine(
    settings: Settings,
    embedding_config: EmbeddingConfig,
    llm_config: Optional[LLMConfig] = None,
    *,
    store_provider: str = "neon_pg",
    store_config: Optional[Dict[str, Any]] = None,
    initialize: bool = True,
) -> RagEngine:
    """Build embeddings, vector store and (optionally) LLM, then wire a RagEngine."""
    embedder = Embedder(build_embeddings(settings, embedding_config))
    store = build_vector_store(settings, store_provider, embedder, store_config)
    llm = build_llm(settings, llm_config) if llm_config is not None else None
    fetch_k = (llm_config.top_k if llm_config and llm_config.top_k else None) or DEFAULT_FETCH_K
    if initialize:
        await store.initialize()
    logger.info(
        "RagEngine built embeddings=%s store=%s llm=%s fetch_k=%d",
        embedder.model_name, store.provider, llm.model_name if llm else None, fetch_k,
    )
    return RagEngine(store, llm, fetch_k=fetch_k)
