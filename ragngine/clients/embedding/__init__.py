"""
Embedding clients: interface, config, registry.

Provider registration: default_registry.register(provider, builder).
"""
from ragngine.clients.embedding.base import EmbeddingProvider
from ragngine.clients.embedding.config import SUPPORTED_EMBEDDING_MODELS, EmbeddingConfig
from ragngine.clients.embedding.registry import EmbeddingRegistry, default_registry

__all__ = [
    "EmbeddingProvider",
    "EmbeddingConfig",
    "SUPPORTED_EMBEDDING_MODELS",
    "EmbeddingRegistry",
    "default_registry",
]
