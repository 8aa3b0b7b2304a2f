from functools import lru_cache

from fastapi import HTTPException, Request, status

from ..llm.client import LLMClient
from ..embeddings.embedder import Embedder
from ..answering.handler import AnswerHandler


@lru_cache
def get_llm_client() -> LLMClient:
    return LLMClient()


@lru_cache
def get_embedder() -> Embedder:
    return Embedder()


def get_answer_handler(request: Request) -> AnswerHandler:
    # Wired once per application in the lifespan; see main.create_app().
    handler = getattr(request.app.state, "answer_handler", None)
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Corpus not loaded",
        )
    return handler
