"""
Corpus Data Models

This module defines the canonical data model for a single news article in the
retrieval corpus, and its pairing with an embedding vector.

Each Document is created once when the corpus is loaded and never mutated.
"""

from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field, ConfigDict


class Document(BaseModel):
    """
    A single corpus entry.

    The identifier is the 1-based position of the article in the corpus
    source and doubles as its citation number in the generated context.
    """

    identifier: int = Field(
        ...,
        ge=1,
        description="1-based position of the article in the corpus source.",
    )

    title: str = Field(
        ...,
        min_length=1,
        description="Headline of the article.",
    )

    url: str = Field(
        ...,
        description="Canonical source URL of the article.",
    )

    full_text: str = Field(
        ...,
        description="Complete article body used for embedding and grounding.",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @property
    def position(self) -> int:
        """0-based corpus position."""
        return self.identifier - 1


class EmbeddedDocument(BaseModel):
    """
    A Document paired with its embedding vector.

    An empty ``embedding`` means the provider failed for this document. The
    document is kept in the cache but can never win on similarity.
    """

    document: Document
    embedding: List[float] = Field(default_factory=list)

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    @property
    def has_embedding(self) -> bool:
        return bool(self.embedding)
