from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any, Dict, Optional

from ragngine.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from ragngine.config import Settings


@dataclass
class LLMConfig:
    """Configuration for an LLM provider instance."""

    # Required fields
    model: str
    provider: str = "openai"
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    # Sampling: None means "not sent", the provider default applies
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    top_p: Optional[float] = None
    # Number of retrieved candidates handed to reranking before generation
    top_k: Optional[int] = None

    timeout: float = 60.0
    max_retries: int = 3

    def __post_init__(self) -> None:
        if not self.provider:
            raise ConfigurationError("LLM model provider required")
        if not self.model:
            raise ConfigurationError("LLM model name required")
        self.provider = self.provider.lower().strip()
        if self.top_k is not None and self.top_k < 1:
            raise ConfigurationError(f"top_k must be >= 1, got {self.top_k!r}")

    def resolve(self, settings: "Settings") -> "LLMConfig":
        """Fill api_key / base_url from settings when not set explicitly."""
        return replace(
            self,
            api_key=self.api_key or settings.api_key_for(self.provider),
            base_url=self.base_url or settings.base_url_for(self.provider),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary, filtering out None values."""
        config_dict = asdict(self)
        return {k: v for k, v in config_dict.items() if v is not None}
