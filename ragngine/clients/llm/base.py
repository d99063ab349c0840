from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Literal, TypedDict


class LLMMessage(TypedDict):
    role: Literal["system", "user", "assistant"]
    content: str


class LLMProvider(ABC):
    @property
    @abstractmethod
    def provider(self) -> str:
        ...

    @property
    @abstractmethod
    def model_name(self) -> str:
        ...

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        ...

    async def chat(self, messages: List[LLMMessage]) -> str:
        """Send a multi-turn conversation with an optional system message.

        Default implementation concatenates all messages into a single prompt
        and calls ``complete()``. Override in providers with a native chat API.
        """
        parts: List[str] = []
        for msg in messages:
            role = msg.get("role", "user")
            content = (msg.get("content") or "").strip()
            if not content:
                continue
            if role == "system":
                parts.insert(0, f"[System instructions]\n{content}\n")
            else:
                parts.append(f"{role}: {content}")
        return await self.complete("\n".join(parts))

    async def test_connection(self) -> bool:
        try:
            await self.complete("ping")
            return True
        except Exception:
            return False
