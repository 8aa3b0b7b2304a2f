import math

import pytest

from news_rag_server.retrieval.ranker import (
    SENTINEL_SCORE,
    cosine_similarity,
    rank,
)
from conftest import make_documents, embed_all


# ---------------------------------------------------------------------------
# COSINE SIMILARITY
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("v", [[1.0, 2.0, 3.0], [0.5], [-3.0, 4.0], [1e-3, 7.0, -2.0]])
def test_self_similarity_is_one(v):
    assert cosine_similarity(v, v) == pytest.approx(1.0)


def test_similarity_is_symmetric():
    a = [0.3, -1.2, 4.0]
    b = [2.0, 0.1, -0.5]
    assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))


def test_similarity_ignores_magnitude():
    assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)


def test_orthogonal_and_opposite_vectors():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)


@pytest.mark.parametrize(
    "a,b",
    [
        (None, [1.0]),
        ([1.0], None),
        ([], [1.0]),
        ([1.0], []),
        ([1.0, 2.0], [1.0, 2.0, 3.0]),
        ([0.0, 0.0], [1.0, 2.0]),
    ],
)
def test_undefined_similarity_is_sentinel(a, b):
    assert cosine_similarity(a, b) == SENTINEL_SCORE


def test_sentinel_is_below_any_real_score():
    assert SENTINEL_SCORE < -1.0
    assert math.isinf(SENTINEL_SCORE)


# ---------------------------------------------------------------------------
# RANKING
# ---------------------------------------------------------------------------


def test_selects_top_k_in_corpus_order(five_documents):
    embedded = embed_all(
        five_documents,
        [[1, 0, 0], [0, 1, 0], [1, 0.1, 0], [0, 1, 1], [0, 0, 1]],
    )

    selected = rank([0, 1, 1], embedded, k=3)

    assert [r.position + 1 for r in selected] == [2, 4, 5]


def test_output_is_reordered_by_position_not_score():
    docs = make_documents(4)
    embedded = embed_all(docs, [[1, 0], [0, 1], [0.2, 1], [1, 0.1]])

    selected = rank([1, 0], embedded, k=2)

    # doc1 scores highest, then doc4 -- returned as [1, 4]
    assert [r.position for r in selected] == [0, 3]
    assert selected[0].score > selected[1].score


def test_ties_prefer_lower_position():
    docs = make_documents(4)
    embedded = embed_all(docs, [[0, 1], [1, 0], [1, 0], [1, 0]])

    selected = rank([1, 0], embedded, k=2)

    assert [r.position for r in selected] == [1, 2]


def test_absent_query_falls_back_to_corpus_order(five_documents):
    embedded = embed_all(five_documents, [[float(i), 1.0] for i in range(5)])

    selected = rank(None, embedded, k=3)

    assert [r.position for r in selected] == [0, 1, 2]
    assert all(r.is_sentinel for r in selected)


@pytest.mark.parametrize("n,k", [(0, 3), (1, 3), (2, 3), (3, 3), (5, 3), (5, 1), (5, 5)])
def test_output_size_and_strict_order(n, k):
    docs = make_documents(n)
    embedded = embed_all(docs, [[1.0, float(i)] for i in range(n)])

    selected = rank([0.0, 1.0], embedded, k=k)

    assert len(selected) == min(k, n)
    positions = [r.position for r in selected]
    assert all(a < b for a, b in zip(positions, positions[1:]))


def test_non_positive_k_selects_nothing(five_documents):
    embedded = embed_all(five_documents, [[1.0]] * 5)
    assert rank([1.0], embedded, k=0) == []


def test_failed_embedding_never_wins_on_similarity(five_documents):
    embedded = embed_all(
        five_documents,
        [[1, 0], [0.9, 0.1], [], [0.1, 0.9], [0, 1]],
    )

    # A query pointing anywhere still leaves 4 valid candidates for 3 slots.
    for query in ([1, 0], [0, 1], [-1, -1]):
        selected = rank(query, embedded, k=3)
        assert 3 not in [r.position + 1 for r in selected]


def test_failed_embedding_only_fills_remaining_slots(five_documents):
    embedded = embed_all(five_documents, [[], [], [], [], [1.0, 0.0]])

    selected = rank([1.0, 0.0], embedded, k=3)

    assert [r.position + 1 for r in selected] == [1, 2, 5]
    assert [r.is_sentinel for r in selected] == [True, True, False]


def test_mismatched_dimensions_are_not_selectable():
    docs = make_documents(3)
    embedded = embed_all(docs, [[1.0, 0.0, 0.0], [0.0, 1.0], [0.5, 0.5]])

    selected = rank([0.0, 1.0], embedded, k=2)

    assert [r.position for r in selected] == [1, 2]
