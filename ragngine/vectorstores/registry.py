"""
Vector store registry: map provider name → build store from (config dict, embedder).
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from ragngine.core.exceptions import ConfigurationError, UnsupportedProviderError
from ragngine.vectorstores.base import VectorStore

if TYPE_CHECKING:
    from ragngine.rag.embedder import Embedder

VectorStoreBuilder = Callable[[Dict[str, Any], "Embedder"], VectorStore]


class VectorStoreRegistry:
    """Maps provider id to a builder(config_dict, embedder) -> VectorStore."""

    def __init__(self) -> None:
        self._builders: Dict[str, VectorStoreBuilder] = {}

    def register(self, provider: str, builder: VectorStoreBuilder) -> None:
        self._builders[provider.lower().strip()] = builder

    def get(self, provider: str) -> VectorStoreBuilder | None:
        return self._builders.get(provider.lower().strip())

    def providers(self) -> List[str]:
        return sorted(self._builders)

    def build(
        self,
        provider: str,
        embedder: "Embedder",
        config: Optional[Dict[str, Any]] = None,
    ) -> VectorStore:
        """Build a store. Raises UnsupportedProviderError for unknown ids."""
        key = (provider or "").lower().strip()
        if not key:
            raise ConfigurationError("Vector store provider required")
        builder = self._builders.get(key)
        if builder is None:
            raise UnsupportedProviderError(
                f"Vector database provider {provider!r} not supported. Registered: {self.providers()}",
                details={"provider": key},
            )
        return builder(dict(config or {}), embedder)


default_registry = VectorStoreRegistry()

from ragngine.vectorstores.memory import memory_builder  # noqa: E402
from ragngine.vectorstores.pgvector import neon_pg_builder  # noqa: E402

default_registry.register("neon_pg", neon_pg_builder)
default_registry.register("memory", memory_builder)
