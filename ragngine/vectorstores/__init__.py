"""
Vector stores: interface, retry-connect, registry, Neon/pgvector and in-memory backends.
"""
from ragngine.vectorstores.base import VectorStore
from ragngine.vectorstores.memory import InMemoryVectorStore
from ragngine.vectorstores.pgvector import PgVectorStore
from ragngine.vectorstores.registry import VectorStoreRegistry, default_registry
from ragngine.vectorstores.retry import connect_with_retry

__all__ = [
    "VectorStore",
    "InMemoryVectorStore",
    "PgVectorStore",
    "VectorStoreRegistry",
    "default_registry",
    "connect_with_retry",
]
