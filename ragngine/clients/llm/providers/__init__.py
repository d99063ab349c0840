"""LLM provider implementations."""
from ragngine.clients.llm.providers.openai import OpenAILLMProvider, openai_builder

__all__ = ["OpenAILLMProvider", "openai_builder"]
