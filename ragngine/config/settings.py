"""
ragngine.config.settings: process-wide secrets and endpoints.

Env vars: OPENAI_API_KEY, OPENAI_BASE_URL, DATABASE_URL.

Read the environment once at start-up with load_settings() and pass the
resulting Settings by value; components never read os.environ themselves.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _clean(value: object) -> Optional[str]:
    if value is None:
        return None
    s = str(value).strip()
    return s or None


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    database_url: Optional[str] = None

    def __repr__(self) -> str:
        key = "***" if self.openai_api_key else None
        return (
            f"Settings(openai_api_key={key!r}, openai_base_url={self.openai_base_url!r}, "
            f"database_url={'***' if self.database_url else None!r})"
        )

    def api_key_for(self, provider: str) -> Optional[str]:
        """Fallback API key for a provider id, or None."""
        if provider == "openai":
            return self.openai_api_key
        return None

    def base_url_for(self, provider: str) -> Optional[str]:
        if provider == "openai":
            return self.openai_base_url
        return None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: object) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            openai_api_key=_clean(overrides.get("openai_api_key") or env.get("OPENAI_API_KEY")),
            openai_base_url=_clean(overrides.get("openai_base_url") or env.get("OPENAI_BASE_URL")),
            database_url=_clean(overrides.get("database_url") or env.get("DATABASE_URL")),
        )


def load_settings(**overrides: object) -> Settings:
    return Settings.from_env(**overrides)
