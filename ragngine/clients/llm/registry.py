"""
LLM provider registry: map provider name -> build provider from config dict.

Register new providers here (or from a plugin module); dispatch code stays unchanged.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from ragngine.clients.llm.base import LLMProvider
from ragngine.clients.llm.config import LLMConfig
from ragngine.core.exceptions import ConfigurationError, UnsupportedProviderError

LLMBuilder = Callable[[Dict[str, Any]], LLMProvider]


class LLMRegistry:
    """Maps provider id to a builder that takes a config dict and returns LLMProvider."""

    def __init__(self) -> None:
        self._builders: Dict[str, LLMBuilder] = {}

    def register(self, provider: str, builder: LLMBuilder) -> None:
        """Register a builder for this provider. builder(config_dict) -> LLMProvider."""
        self._builders[provider.lower().strip()] = builder

    def get(self, provider: str) -> LLMBuilder | None:
        return self._builders.get(provider.lower().strip())

    def providers(self) -> List[str]:
        return sorted(self._builders)

    def build(self, config: Union[LLMConfig, Dict[str, Any]]) -> LLMProvider:
        """Build a provider for the config's provider id. Raises UnsupportedProviderError if unknown."""
        data = config.to_dict() if isinstance(config, LLMConfig) else dict(config)
        provider = str(data.get("provider") or "").lower().strip()
        if not provider:
            raise ConfigurationError("LLM model provider required")
        builder = self._builders.get(provider)
        if builder is None:
            raise UnsupportedProviderError(
                f"LLM provider {provider!r} not supported. Registered: {self.providers()}",
                details={"provider": provider},
            )
        return builder(data)


# Default registry with all built-in providers pre-registered.
default_registry = LLMRegistry()

from ragngine.clients.llm.providers.openai import openai_builder  # noqa: E402

default_registry.register("openai", openai_builder)
