"""
Similarity Ranker

Scores cached articles against a query vector with cosine similarity and
selects the top-k. The selection is returned in corpus order so that citation
numbers match the corpus rather than the relevance ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ..corpus.models import Document, EmbeddedDocument


# Strictly below any real cosine value, so an article without a usable
# vector can only be selected when nothing else is left.
SENTINEL_SCORE = float("-inf")

DEFAULT_TOP_K = 3


@dataclass(frozen=True)
class RankedDocument:
    """An embedded article annotated with its score and 0-based position."""
    item: EmbeddedDocument
    score: float
    position: int

    @property
    def document(self) -> Document:
        return self.item.document

    @property
    def is_sentinel(self) -> bool:
        return self.score == SENTINEL_SCORE


def cosine_similarity(
    a: Optional[Sequence[float]],
    b: Optional[Sequence[float]],
) -> float:
    """
    Cosine of the angle between two vectors.

    Returns SENTINEL_SCORE when either vector is missing or empty, when their
    dimensions differ, or when either has zero magnitude.
    """
    if a is None or b is None or len(a) == 0 or len(b) == 0:
        return SENTINEL_SCORE
    if len(a) != len(b):
        return SENTINEL_SCORE

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    denom = np.linalg.norm(va) * np.linalg.norm(vb)
    if denom == 0.0 or not np.isfinite(denom):
        return SENTINEL_SCORE

    score = float(np.dot(va, vb) / denom)
    if not np.isfinite(score):
        return SENTINEL_SCORE
    return score


def rank(
    query_vector: Optional[Sequence[float]],
    documents: Sequence[EmbeddedDocument],
    k: int = DEFAULT_TOP_K,
) -> List[RankedDocument]:
    """
    Select the k most similar articles.

    Parameters
    ----------
    query_vector : Optional[Sequence[float]]
        Embedding of the question, or None if it could not be computed.

    documents : Sequence[EmbeddedDocument]
        Cached articles in corpus order.

    k : int
        Maximum number of articles to select.

    Returns
    -------
    List[RankedDocument]
        At most ``k`` articles, ascending by corpus position. With no query
        vector this is simply the first ``k`` articles.
    """
    if k <= 0:
        return []

    scored = [
        RankedDocument(
            item=item,
            score=cosine_similarity(query_vector, item.embedding),
            position=position,
        )
        for position, item in enumerate(documents)
    ]

    # sort() is stable: equal scores keep the lower corpus position first.
    scored.sort(key=lambda r: -r.score)
    selected = scored[:k]

    selected.sort(key=lambda r: r.position)
    return selected
