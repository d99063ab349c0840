"""
ragngine.config.pgvector: Neon / Postgres vector store config (dataclass + validators).

Env vars: DATABASE_URL, RAG_TABLE_NAME, RAG_CONNECT_ATTEMPTS, RAG_CONNECT_DELAY,
         RAG_POOL_MIN_SIZE, RAG_POOL_MAX_SIZE.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass

from ragngine.core.exceptions import ConfigurationError

DEFAULT_TABLE_NAME = "rag_embedding_table"

# Table names are interpolated into DDL, so only plain identifiers pass
_TABLE_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def _validate_url(url: str) -> str:
    url = (url or "").strip()
    if not url:
        raise ConfigurationError("Database connection string required")
    if not (url.startswith("postgresql://") or url.startswith("postgres://")):
        raise ConfigurationError(
            "Database connection string must start with postgresql:// or postgres://"
        )
    return url


def _validate_positive_int(value: int, name: str) -> int:
    if not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} must be an integer >= 1, got {value!r}")
    return value


@dataclass(frozen=True)
class PgVectorConfig:
    """
    Connection, table and connect-retry settings for PgVectorStore.

    All fields are validated on construction.
    """

    url: str
    """DSN (postgresql:// or postgres://), e.g. a Neon connection string."""

    table_name: str = DEFAULT_TABLE_NAME
    """Table holding text, metadata and embedding columns."""

    connect_attempts: int = 5
    """Total connection attempts before giving up."""

    connect_delay: float = 2.0
    """Flat delay in seconds between connection attempts."""

    pool_min_size: int = 1
    pool_max_size: int = 5

    def __post_init__(self) -> None:
        _validate_url(self.url)
        if not _TABLE_PATTERN.match(self.table_name or ""):
            raise ConfigurationError(
                f"table_name must be a plain SQL identifier, got {self.table_name!r}"
            )
        _validate_positive_int(self.connect_attempts, "connect_attempts")
        if not isinstance(self.connect_delay, (int, float)) or self.connect_delay < 0:
            raise ConfigurationError(
                f"connect_delay must be a non-negative number, got {self.connect_delay!r}"
            )
        _validate_positive_int(self.pool_min_size, "pool_min_size")
        _validate_positive_int(self.pool_max_size, "pool_max_size")
        if self.pool_max_size < self.pool_min_size:
            raise ConfigurationError("pool_max_size must be >= pool_min_size")

    @classmethod
    def from_env(cls, **overrides: object) -> PgVectorConfig:
        """
        Build config from environment variables. Keyword overrides take
        precedence over env.
        """

        def _get(attr: str, var: str, default: object) -> object:
            v = overrides.get(attr)
            if v is not None:
                return v
            return os.environ.get(var, default)

        return cls(
            url=str(_get("url", "DATABASE_URL", "")).strip(),
            table_name=str(_get("table_name", "RAG_TABLE_NAME", DEFAULT_TABLE_NAME)).strip(),
            connect_attempts=int(_get("connect_attempts", "RAG_CONNECT_ATTEMPTS", 5)),
            connect_delay=float(_get("connect_delay", "RAG_CONNECT_DELAY", 2.0)),
            pool_min_size=int(_get("pool_min_size", "RAG_POOL_MIN_SIZE", 1)),
            pool_max_size=int(_get("pool_max_size", "RAG_POOL_MAX_SIZE", 5)),
        )


def load_pgvector_config(**overrides: object) -> PgVectorConfig:
    """Load and validate the vector store config from env (with overrides)."""
    return PgVectorConfig.from_env(**overrides)
