"""
Embedding provider registry: map provider name → build provider from config dict.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from ragngine.clients.embedding.base import EmbeddingProvider
from ragngine.clients.embedding.config import EmbeddingConfig
from ragngine.core.exceptions import ConfigurationError, UnsupportedProviderError

EmbeddingBuilder = Callable[[Dict[str, Any]], EmbeddingProvider]


class EmbeddingRegistry:
    """Maps provider id to a builder that takes a config dict and returns EmbeddingProvider."""

    def __init__(self) -> None:
        self._builders: Dict[str, EmbeddingBuilder] = {}

    def register(self, provider: str, builder: EmbeddingBuilder) -> None:
        """Register a builder for this provider. builder(config_dict) -> EmbeddingProvider."""
        self._builders[provider.lower().strip()] = builder

    def get(self, provider: str) -> EmbeddingBuilder | None:
        """Return the builder for this provider, or None."""
        return self._builders.get(provider.lower().strip())

    def providers(self) -> List[str]:
        return sorted(self._builders)

    def build(self, config: Union[EmbeddingConfig, Dict[str, Any]]) -> EmbeddingProvider:
        """Build a provider from config. Raises UnsupportedProviderError for unknown ids."""
        data = config.to_dict() if isinstance(config, EmbeddingConfig) else dict(config)
        provider = str(data.get("provider") or "").lower().strip()
        if not provider:
            raise ConfigurationError("Embedding model provider required")
        builder = self._builders.get(provider)
        if builder is None:
            raise UnsupportedProviderError(
                f"Embedding provider {provider!r} not supported. Registered: {self.providers()}",
                details={"provider": provider},
            )
        return builder(data)


default_registry = EmbeddingRegistry()

from ragngine.clients.embedding.providers.openai import openai_builder  # noqa: E402

default_registry.register("openai", openai_builder)
