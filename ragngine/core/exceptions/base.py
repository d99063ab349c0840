"""
Base exception types for ragngine.

Subclass RagngineError or use exception_factory() to add new exception types
on demand. Every exception carries a machine-readable code, optional details
and the underlying cause when it wraps a third-party failure.
"""
from __future__ import annotations

import traceback
from typing import Any, Optional, Type


class RagngineError(Exception):
    """
    Base exception for all ragngine errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable slug (defaults to class __name__).
        details: Optional dict for extra context (provider, path, attempts...).
        cause: Optional chained exception.
    """

    default_code: str = "ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else getattr(
            self.__class__, "default_code", self.__class__.__name__
        )
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r})"

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging."""
        out: dict[str, Any] = {
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            out["details"] = self.details
        if self.cause is not None:
            out["cause"] = str(self.cause)
            out["cause_traceback"] = traceback.format_exception(
                type(self.cause), self.cause, self.cause.__traceback__
            )
        return out


def exception_factory(
    name: str,
    *,
    code: Optional[str] = None,
    base: Type[RagngineError] = RagngineError,
) -> Type[RagngineError]:
    """
    Create a new exception class on demand.

    Example:
        IndexingError = exception_factory("IndexingError", base=VectorstoreError)
        raise IndexingError("Index build failed", details={"table": "docs"})
    """
    code = code or name.upper().replace(" ", "_")
    return type(name, (base,), {"default_code": code})
