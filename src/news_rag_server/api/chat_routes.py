"""
Chat Routes: Grounded Question Answering

This module implements the conversational endpoint used by the news chat
front-end. For every request it:

1. Accepts the conversation so far (``messages``).
2. Retrieves the articles most relevant to the latest user question.
3. Asks the LLM to answer using only those articles.
4. Returns the generated text as ``text/plain``.

The answer may end with citation codes such as ``ARTIKEL 2 ARTIKEL 4``; the
client strips them before display.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from .models import ChatRequest
from .dependencies import get_answer_handler
from ..answering.handler import AnswerHandler

router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_class=PlainTextResponse,
    summary="Answer a question grounded in the news corpus",
    status_code=status.HTTP_200_OK,
)
async def chat(
    req: ChatRequest,
    handler: Annotated[AnswerHandler, Depends(get_answer_handler)],
) -> PlainTextResponse:
    """
    Grounded chat endpoint.

    Parameters
    ----------
    req : ChatRequest
        Contains:
        - messages: the conversation history, latest message last

    Returns
    -------
    PlainTextResponse
        The raw generated answer.

    A failing generator surfaces as ``LLMError``, which the application
    maps to a 502 (see ``core.errors.llm_error_handler``).
    """
    answer = await handler.handle(req.messages)
    return PlainTextResponse(answer)
