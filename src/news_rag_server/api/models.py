"""
API Models for the News RAG Server

This module defines the Pydantic models used for request/response validation
across the chat, search and health endpoints. The message model itself lives
with the answering layer (``answering.messages``) and is re-exported here.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..answering.messages import ChatMessage, ContentPart

__all__ = [
    "ChatMessage",
    "ContentPart",
    "ChatRequest",
    "SearchRequest",
    "SourceResult",
    "HealthResponse",
]


# ---------------------------------------------------------------------
# Chat Models
# ---------------------------------------------------------------------

class ChatRequest(BaseModel):
    """
    Chat request payload. A missing, null or empty ``messages`` list is
    accepted and treated as an empty question.
    """
    messages: List[ChatMessage] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


# ---------------------------------------------------------------------
# Search Models
# ---------------------------------------------------------------------

class SearchRequest(BaseModel):
    """
    Retrieval preview request.
    """
    query: str = ""

    model_config = ConfigDict(extra="forbid")


class SourceResult(BaseModel):
    """
    One article selected as grounding context.

    ``score`` is None when the article was selected by the corpus-order
    fallback rather than by similarity.
    """
    identifier: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    url: str
    score: Optional[float] = None

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------
# Health Models
# ---------------------------------------------------------------------

class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    documents: int = Field(..., ge=0)
    embeddings_ready: bool
    failed_embeddings: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid")
