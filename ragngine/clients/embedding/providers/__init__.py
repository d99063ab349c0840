"""Embedding provider implementations."""
from ragngine.clients.embedding.providers.openai import OpenAIEmbeddingProvider, openai_builder

__all__ = ["OpenAIEmbeddingProvider", "openai_builder"]
