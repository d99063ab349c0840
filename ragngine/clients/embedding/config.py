"""Embedding client configuration."""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Optional

from ragngine.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ragngine.config import Settings

SUPPORTED_EMBEDDING_MODELS = ("text-embedding-3-small", "text-embedding-3-large")


@dataclass
class EmbeddingConfig:
    """Configuration for an embedding provider instance."""

    model: str = "text-embedding-3-small"
    provider: str = "openai"
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    # Optional
    timeout: float = 60.0
    max_retries: int = 3

    def __post_init__(self) -> None:
        if not self.provider or not self.model:
            raise ConfigurationError("Please provide embedding model and provider")
        self.provider = self.provider.lower().strip()

    def resolve(self, settings: "Settings") -> "EmbeddingConfig":
        """Fill api_key / base_url from settings when not set explicitly."""
        return replace(
            self,
            api_key=self.api_key or settings.api_key_for(self.provider),
            base_url=self.base_url or settings.base_url_for(self.provider),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting None values."""
        d = asdict(self)
        return {k: v for k, v in d.items() if v is not None}
