"""
News RAG Server Application Entry Point

This module defines the FastAPI application instance, registers all routers,
configures global exception handling, and wires the process-wide retrieval
state (corpus, embedding cache, answer handler) in the application lifespan.

Design Goals
------------
- Deterministic startup
- Explicit ownership of the embedding cache (one per application)
- Centralized router registration
- Global exception safety net
- Test-friendly via create_app()
"""

from __future__ import annotations

import contextlib
import logging
from typing import AsyncIterator

from fastapi import FastAPI

from .config import settings
from .core.errors import llm_error_handler, unhandled_exception_handler
from .llm.client import LLMError
from .corpus.loader import load_corpus
from .embeddings.cache import EmbeddingCache
from .answering.handler import AnswerHandler
from .api.dependencies import get_embedder, get_llm_client

from .api import (
    chat_routes,
    search_routes,
    health_routes,
)


logger = logging.getLogger("rag.app")


# ---------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Load the corpus and wire the shared retrieval state.

    The embedding cache is created here but not built: the first request
    (or the optional warm-up task) triggers the one and only build.
    """
    logger.info("Starting news-rag-server")

    # Touch the secret to force validation now (not at first use)
    _ = settings.openai_api_key.get_secret_value()

    documents = load_corpus(settings.corpus_path)
    embedder = get_embedder()

    cache = EmbeddingCache(documents, embedder)
    app.state.answer_handler = AnswerHandler(
        cache=cache,
        embedder=embedder,
        llm=get_llm_client(),
        top_k=settings.top_k,
        temperature=settings.llm_temperature,
    )

    if settings.warm_embeddings_on_startup:
        logger.info("Scheduling embedding warm-up")
        cache.warm()

    try:
        yield
    finally:
        await cache.aclose()
        logger.info("Shutting down news-rag-server")


# ---------------------------------------------------------------------
# Application Factory (Test-Friendly)
# ---------------------------------------------------------------------

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns
    -------
    FastAPI
        Fully configured FastAPI application.
    """
    app = FastAPI(
        title="news-rag-server",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(LLMError, llm_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(health_routes.router)
    app.include_router(chat_routes.router)
    app.include_router(search_routes.router)

    return app


# ---------------------------------------------------------------------
# Default Application Instance (for Uvicorn/Gunicorn)
# ---------------------------------------------------------------------

app = create_app()
