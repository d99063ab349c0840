"""
Built-in exception types. Add new ones here or via exception_factory().
"""
from __future__ import annotations

from ragngine.core.exceptions.base import RagngineError


class ConfigurationError(RagngineError):
    """Invalid or missing configuration (API key, connection string, model...)."""

    default_code = "CONFIGURATION_ERROR"


class UnsupportedProviderError(ConfigurationError):
    """Provider or model id has no registered implementation."""

    default_code = "UNSUPPORTED_PROVIDER"


class ValidationError(RagngineError):
    """Input validation failed."""

    default_code = "VALIDATION_ERROR"


class ExternalServiceError(RagngineError):
    """External service (embedding API, LLM API) failed."""

    default_code = "EXTERNAL_SERVICE_ERROR"


class UnsupportedFileTypeError(RagngineError):
    """File type not supported or no parser registered."""

    default_code = "UNSUPPORTED_FILE_TYPE"


class ExtractionError(RagngineError):
    """Text extraction failed (read/fetch/parse error)."""

    default_code = "EXTRACTION_ERROR"


class VectorstoreError(RagngineError):
    """Vector database operation failed."""

    default_code = "VECTORSTORE_ERROR"
