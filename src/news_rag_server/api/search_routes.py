"""
Search Routes

Exposes the retrieval step on its own: which articles would ground an answer
to a given question. The chat front-end uses this to show the sources panel
next to the answer.
"""

from fastapi import APIRouter, Depends, status
from typing import List, Annotated

from .models import SearchRequest, SourceResult
from .dependencies import get_answer_handler
from ..answering.handler import AnswerHandler

router = APIRouter(prefix="/api", tags=["search"])


@router.post(
    "/search",
    response_model=List[SourceResult],
    summary="Preview the articles selected for a question",
    status_code=status.HTTP_200_OK,
)
async def search(
    req: SearchRequest,
    handler: Annotated[AnswerHandler, Depends(get_answer_handler)],
) -> List[SourceResult]:
    """
    Run cache, embedding and ranking for ``req.query`` without generation.

    Returns
    -------
    List[SourceResult]
        Selected articles in corpus order.
    """
    selected = await handler.retrieve(req.query)

    return [
        SourceResult(
            identifier=r.document.identifier,
            title=r.document.title,
            url=r.document.url,
            score=None if r.is_sentinel else r.score,
        )
        for r in selected
    ]
