"""
ragngine config.

Load once from env: load_settings(), load_pgvector_config().
"""
from ragngine.config.pgvector import DEFAULT_TABLE_NAME, PgVectorConfig, load_pgvector_config
from ragngine.config.settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
    "PgVectorConfig",
    "load_pgvector_config",
    "DEFAULT_TABLE_NAME",
]
