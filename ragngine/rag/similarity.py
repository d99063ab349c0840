"""Vector similarity: cosine and dot product over equal-length vectors."""
from __future__ import annotations

import math
from typing import Sequence

from ragngine.core.exceptions import ConfigurationError, ValidationError


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValidationError(
            f"Vectors must have the same length, got {len(a)} and {len(b)}",
            details={"len_a": len(a), "len_b": len(b)},
        )


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    _check_lengths(a, b)
    return math.fsum(x * y for x, y in zip(a, b))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Normalised inner product in [-1, 1]; 0.0 when either vector has zero norm."""
    dot = dot_product(a, b)
    norm_a = math.sqrt(math.fsum(x * x for x in a))
    norm_b = math.sqrt(math.fsum(x * x for x in b))
    if norm_a < 1e-12 or norm_b < 1e-12:
        return 0.0
    return max(-1.0, min(1.0, dot / (norm_a * norm_b)))


_MEASURES = {
    "cosine": cosine_similarity,
    "dot": dot_product,
}


def compute_similarity(
    document_vector: Sequence[float],
    query_vector: Sequence[float],
    method: str = "cosine",
) -> float:
    """Score a document vector against a query vector with the named measure."""
    measure = _MEASURES.get(method)
    if measure is None:
        raise ConfigurationError(
            f"Invalid similarity measure {method!r}; use one of {sorted(_MEASURES)}"
        )
    return measure(document_vector, query_vector)
