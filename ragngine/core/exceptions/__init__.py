"""
ragngine exception system.

Usage:
    from ragngine.core.exceptions import ConfigurationError, exception_factory

    # Built-in types
    raise ConfigurationError("OpenAI API key required", details={"provider": "openai"})

    # Add new type on demand
    IndexingError = exception_factory("IndexingError", code="INDEXING_ERROR")
    raise IndexingError("Failed to build index", cause=original_error)
"""
from ragngine.core.exceptions.base import RagngineError, exception_factory
from ragngine.core.exceptions.errors import (
    ConfigurationError,
    ExternalServiceError,
    ExtractionError,
    UnsupportedFileTypeError,
    UnsupportedProviderError,
    ValidationError,
    VectorstoreError,
)

__all__ = [
    "RagngineError",
    "exception_factory",
    "ConfigurationError",
    "UnsupportedProviderError",
    "ValidationError",
    "ExternalServiceError",
    "UnsupportedFileTypeError",
    "ExtractionError",
    "VectorstoreError",
]
