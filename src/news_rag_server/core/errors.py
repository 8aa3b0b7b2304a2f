"""
Error Responses

Maps failures that escape a route onto HTTP responses:

- ``LLMError``: the answer generator failed. Reported as 502 so the client
  can tell an upstream outage from a bug in this service.
- anything else: logged with its traceback and reported as a generic 500
  carrying no internal detail.

Both bodies share the shape ``{"error": <code>, "detail": <message>}``.
"""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..llm.client import LLMError

logger = logging.getLogger("rag.errors")


def _error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail},
    )


async def llm_error_handler(request: Request, exc: LLMError) -> JSONResponse:
    """
    Turn a generation failure into a 502.

    The message of an ``LLMError`` names only the failure class (e.g.
    ``ReadTimeout``), never provider payloads, so it is safe to return.
    """
    logger.error(
        "Answer generation failed for %s %s: %s",
        request.method,
        request.url.path,
        exc,
    )
    return _error_response(
        status.HTTP_502_BAD_GATEWAY,
        "answer_generation_failed",
        str(exc),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler: full traceback to the log, nothing to the client."""
    logger.exception(
        "Unhandled exception during %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "internal_server_error",
        "Internal server error",
    )
