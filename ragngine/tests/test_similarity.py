"""Tests for cosine / dot similarity and similarity ranking."""
import math

import pytest

from ragngine.core.exceptions import ConfigurationError, ValidationError
from ragngine.rag.reranker import SIMILARITY_THRESHOLD, rank_by_similarity
from ragngine.rag.similarity import compute_similarity, cosine_similarity, dot_product


class TestDotProduct:
    def test_basic(self):
        assert dot_product([1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0

    def test_commutative(self):
        a, b = [0.2, -0.7, 1.5], [1.1, 0.4, -0.3]
        assert dot_product(a, b) == dot_product(b, a)

    def test_length_mismatch_raises(self):
        with pytest.raises(ValidationError):
            dot_product([1.0, 2.0], [1.0])

    def test_empty_vectors(self):
        assert dot_product([], []) == 0.0


class TestCosineSimilarity:
    def test_identical_vectors_score_one(self):
        assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)

    def test_scale_invariant(self):
        assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)

    def test_orthogonal_vectors_score_zero(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_vectors_score_minus_one(self):
        assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)

    def test_symmetric(self):
        a, b = [0.2, -0.7, 1.5], [1.1, 0.4, -0.3]
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_zero_vector_scores_zero(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0

    def test_bounded(self):
        score = cosine_similarity([1e-3, 5.0, -2.0], [3.0, 1e8, 7.0])
        assert -1.0 <= score <= 1.0

    def test_length_mismatch_raises(self):
        with pytest.raises(ValidationError):
            cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0])


class TestComputeSimilarity:
    def test_default_is_cosine(self):
        assert compute_similarity([3.0, 4.0], [3.0, 4.0]) == pytest.approx(1.0)

    def test_dot(self):
        assert compute_similarity([3.0, 4.0], [3.0, 4.0], "dot") == 25.0

    def test_unknown_method_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid similarity measure"):
            compute_similarity([1.0], [1.0], "euclidean")


class TestRankBySimilarity:
    def test_threshold_is_strict(self):
        # dot scores: 0.3 (dropped), 0.31 (kept)
        ranked = rank_by_similarity([1.0], [[0.3], [0.31]], method="dot", top_k=10)
        assert ranked == [(1, pytest.approx(0.31))]
        assert SIMILARITY_THRESHOLD == 0.3

    def test_sorted_descending(self):
        ranked = rank_by_similarity(
            [1.0], [[0.5], [0.9], [0.7], [0.1]], method="dot", top_k=10
        )
        assert [i for i, _ in ranked] == [1, 2, 0]
        scores = [s for _, s in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_truncated_to_top_k(self):
        vectors = [[0.4 + i / 100] for i in range(20)]
        ranked = rank_by_similarity([1.0], vectors, method="dot", top_k=5)
        assert len(ranked) == 5
        assert [i for i, _ in ranked] == [19, 18, 17, 16, 15]

    def test_ties_keep_input_order(self):
        ranked = rank_by_similarity(
            [1.0, 0.0], [[2.0, 0.0], [1.0, 0.0], [3.0, 0.0]], top_k=3
        )
        assert [i for i, _ in ranked] == [0, 1, 2]
        assert all(math.isclose(s, 1.0) for _, s in ranked)

    def test_top_k_zero_returns_empty(self):
        assert rank_by_similarity([1.0], [[1.0]], top_k=0) == []

    def test_all_below_threshold_returns_empty(self):
        assert rank_by_similarity([1.0, 0.0], [[0.0, 1.0], [-1.0, 0.0]], top_k=5) == []

    def test_custom_threshold(self):
        ranked = rank_by_similarity([1.0], [[0.5], [0.9]], method="dot", top_k=5, threshold=0.6)
        assert [i for i, _ in ranked] == [1]
