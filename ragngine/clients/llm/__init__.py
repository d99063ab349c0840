"""
LLM clients: interface, config, registry.

Provider registration: default_registry.register(provider, builder).
"""
from ragngine.clients.llm.base import LLMMessage, LLMProvider
from ragngine.clients.llm.config import LLMConfig
from ragngine.clients.llm.registry import LLMRegistry, default_registry

__all__ = [
    "LLMProvider",
    "LLMMessage",
    "LLMConfig",
    "LLMRegistry",
    "default_registry",
]
