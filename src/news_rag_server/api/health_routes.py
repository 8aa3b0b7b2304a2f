from typing import Annotated

from fastapi import APIRouter, Depends

from .models import HealthResponse
from .dependencies import get_answer_handler
from ..answering.handler import AnswerHandler

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(handler: Annotated[AnswerHandler, Depends(get_answer_handler)]):
    cache = handler.cache
    return HealthResponse(
        documents=len(cache.documents),
        embeddings_ready=cache.is_ready,
        failed_embeddings=cache.failed_count,
    )
