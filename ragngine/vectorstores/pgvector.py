"""Neon / Postgres vector store (asyncpg + pgvector) with connect retry."""
from __future__ import annotations

import json
import logging
import uuid
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import asyncpg
from pgvector.asyncpg import register_vector

from ragngine.config import PgVectorConfig
from ragngine.core.exceptions import ConfigurationError, ValidationError, VectorstoreError
from ragngine.rag.types import Document
from ragngine.vectorstores.base import VectorStore
from ragngine.vectorstores.retry import connect_with_retry

if TYPE_CHECKING:
    from ragngine.rag.embedder import Embedder

logger = logging.getLogger(__name__)

_DB_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class PgVectorStore(VectorStore):
    """Documents in one Postgres table: id, text, metadata (jsonb), embedding (vector).

    ``initialize()`` opens the pool with up to ``connect_attempts`` tries and a
    flat ``connect_delay``; every other method raises VectorstoreError on failure.
    """

    def __init__(self, embedder: "Embedder", config: PgVectorConfig) -> None:
        super().__init__(embedder)
        if config is None:
            raise ConfigurationError("Database connection string required")
        self._config = config
        self._table = config.table_name
        self._pool: Optional[asyncpg.Pool] = None

    @property
    def provider(self) -> str:
        return "neon_pg"

    @property
    def table_name(self) -> str:
        return self._table

    async def initialize(self) -> None:
        if self._pool is not None:
            return
        try:
            pool = await connect_with_retry(
                self._open_pool,
                attempts=self._config.connect_attempts,
                delay=self._config.connect_delay,
                name="Neon Postgres",
            )
        except Exception as exc:
            raise VectorstoreError(
                f"Neon Postgres vector store initialization failed: {exc}",
                details={"table": self._table, "attempts": self._config.connect_attempts},
                cause=exc,
            ) from exc
        # The pool is kept only once the table is usable
        try:
            await self._ensure_table(pool)
        except BaseException:
            try:
                await pool.close()
            except Exception as close_exc:
                logger.warning("Could not close pool after failed setup: %s", close_exc)
            raise
        self._pool = pool

    async def _open_pool(self) -> asyncpg.Pool:
        # The vector type must exist before the codec can be registered on pool connections
        conn = await asyncpg.connect(self._config.url)
        try:
            await conn.execute("CREATE EXTENSION IF NOT EXISTS vector")
        finally:
            await conn.close()
        return await asyncpg.create_pool(
            self._config.url,
            min_size=self._config.pool_min_size,
            max_size=self._config.pool_max_size,
            init=register_vector,
        )

    async def _ensure_table(self, pool: asyncpg.Pool) -> None:
        dim = self._embedder.dimension
        try:
            async with pool.acquire() as conn:
                await conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {self._table} (
                        id UUID PRIMARY KEY,
                        text TEXT NOT NULL,
                        metadata JSONB NOT NULL DEFAULT '{{}}',
                        embedding vector({dim})
                    )
                    """
                )
                # atttypmod of a vector column is its declared dimension
                stored_dim = await conn.fetchval(
                    "SELECT atttypmod FROM pg_attribute "
                    "WHERE attrelid = $1::regclass AND attname = 'embedding'",
                    self._table,
                )
        except _DB_ERRORS as exc:
            raise VectorstoreError(
                f"Failed to create table '{self._table}': {exc}", cause=exc
            ) from exc
        if stored_dim is not None and stored_dim > 0 and stored_dim != dim:
            raise VectorstoreError(
                f"Table '{self._table}' stores {stored_dim}-d vectors but embedding model "
                f"'{self._embedder.model_name}' produces {dim}-d vectors",
                details={"table": self._table, "stored": stored_dim, "model_dimension": dim},
            )
        logger.info("PgVectorStore ready table=%s dimension=%d", self._table, dim)

    def _acquire(self):
        if self._pool is None:
            raise VectorstoreError("PgVectorStore used before initialize()")
        return self._pool.acquire()

    async def add_vectors(
        self, documents: Sequence[Document], vectors: Sequence[Sequence[float]]
    ) -> List[str]:
        if len(documents) != len(vectors):
            raise ValidationError(
                f"Got {len(documents)} documents but {len(vectors)} vectors"
            )
        if not documents:
            return []
        ids = [str(uuid.uuid4()) for _ in documents]
        rows = [
            (uuid.UUID(i), d.page_content, json.dumps(d.metadata, default=str), list(v))
            for i, d, v in zip(ids, documents, vectors)
        ]
        try:
            async with self._acquire() as conn:
                await conn.executemany(
                    f"INSERT INTO {self._table} (id, text, metadata, embedding) "
                    f"VALUES ($1, $2, $3::jsonb, $4)",
                    rows,
                )
        except _DB_ERRORS as exc:
            raise VectorstoreError(
                f"Failed to store {len(rows)} documents in '{self._table}': {exc}", cause=exc
            ) from exc
        logger.debug("add_vectors table=%s count=%d", self._table, len(rows))
        return ids

    async def similarity_search_by_vector(
        self, vector: Sequence[float], k: int = 4
    ) -> List[Tuple[Document, float]]:
        if k <= 0:
            return []
        try:
            async with self._acquire() as conn:
                records = await conn.fetch(
                    f"SELECT text, metadata, embedding <=> $1 AS distance "
                    f"FROM {self._table} ORDER BY distance LIMIT $2",
                    list(vector),
                    k,
                )
        except _DB_ERRORS as exc:
            raise VectorstoreError(
                f"Similarity search failed in '{self._table}': {exc}", cause=exc
            ) from exc
        return [
            (
                Document(page_content=r["text"], metadata=_load_metadata(r["metadata"])),
                1.0 - float(r["distance"]),
            )
            for r in records
        ]

    async def delete(self, ids: Sequence[str]) -> None:
        if not ids:
            return
        try:
            async with self._acquire() as conn:
                await conn.execute(
                    f"DELETE FROM {self._table} WHERE id = ANY($1::uuid[])",
                    [uuid.UUID(i) for i in ids],
                )
        except _DB_ERRORS as exc:
            raise VectorstoreError(
                f"Failed to delete from '{self._table}': {exc}", cause=exc
            ) from exc

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
            logger.debug("PgVectorStore: pool closed.")


def _load_metadata(raw: Any) -> Dict[str, Any]:
    if raw is None:
        return {}
    if isinstance(raw, str):
        return json.loads(raw)
    return dict(raw)


def neon_pg_builder(config: Dict[str, Any], embedder: "Embedder") -> PgVectorStore:
    if not config.get("url"):
        raise ConfigurationError("Database connection string required")
    fields = PgVectorConfig.__dataclass_fields__
    return PgVectorStore(
        embedder,
        PgVectorConfig(**{k: v for k, v in config.items() if k in fields and v is not None}),
    )
