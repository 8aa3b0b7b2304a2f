"""
Retrieval Package

Similarity ranking over cached article embeddings and assembly of the
grounding context handed to the answer generator.
"""

from .ranker import RankedDocument, SENTINEL_SCORE, cosine_similarity, rank
from .context import assemble_context

__all__ = [
    "RankedDocument",
    "SENTINEL_SCORE",
    "cosine_similarity",
    "rank",
    "assemble_context",
]
