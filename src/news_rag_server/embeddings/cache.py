"""
Corpus Embedding Cache

Owns the one-time computation of an embedding vector for every corpus article
and serves the result from memory for the rest of the process lifetime.

Key Properties
--------------
- Lazy: nothing is computed until the first caller asks
- Single-flight: concurrent first callers share one pending build
- Fan-out / fan-in: one embedding call per article, joined as a barrier
- Partial failure tolerant: a failed article gets an empty vector
- No invalidation: the corpus is static for the life of the process
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import List, Optional, Sequence, Tuple

from ..corpus.models import Document, EmbeddedDocument
from .embedder import Embedder

logger = logging.getLogger("rag.cache")


class EmbeddingCache:
    """
    Memoized embeddings for a fixed list of Documents.

    One instance is created per application (see ``main.lifespan``) and
    shared by reference with every request.
    """

    def __init__(self, documents: Sequence[Document], embedder: Embedder) -> None:
        self._documents: List[Document] = list(documents)
        self._embedder = embedder

        self._embedded: Optional[Tuple[EmbeddedDocument, ...]] = None
        self._pending: Optional[asyncio.Task] = None

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def documents(self) -> List[Document]:
        return list(self._documents)

    @property
    def is_ready(self) -> bool:
        return self._embedded is not None

    @property
    def failed_count(self) -> int:
        """Number of articles whose embedding failed (0 until built)."""
        if self._embedded is None:
            return 0
        return sum(1 for item in self._embedded if not item.has_embedding)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def ensure_embeddings(self) -> List[EmbeddedDocument]:
        """
        Return every article paired with its embedding, building on first use.

        Concurrent callers arriving while the build is in flight await the
        same pending task. The shared task is shielded so that a cancelled
        request cannot abort the build for everyone else. If the build raised,
        every waiter sees the error and the next call starts a fresh build.

        Each caller gets its own list; the cached sequence itself is immutable.
        """
        if self._embedded is None:
            await asyncio.shield(self._start_build())
        return list(self._embedded)

    def warm(self) -> asyncio.Task:
        """Schedule the build in the background without waiting for it."""
        return self._start_build()

    async def aclose(self) -> None:
        """Cancel a build that is still in flight (application shutdown)."""
        task = self._pending
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _start_build(self) -> asyncio.Task:
        # A finished task without a cached result was cancelled or failed.
        if self._pending is None or (self._pending.done() and self._embedded is None):
            self._pending = asyncio.ensure_future(self._build())
            self._pending.add_done_callback(self._log_build_failure)
        return self._pending

    @staticmethod
    def _log_build_failure(task: asyncio.Task) -> None:
        # Retrieves the exception even when nobody awaits the task (warm-up).
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Embedding cache build failed (%s): %s",
                type(exc).__name__,
                exc,
                exc_info=exc,
            )

    async def _build(self) -> Tuple[EmbeddedDocument, ...]:
        logger.info("Building embeddings for %d articles", len(self._documents))

        results = await asyncio.gather(
            *(self._embedder.embed(doc.full_text) for doc in self._documents),
            return_exceptions=True,
        )

        embedded: List[EmbeddedDocument] = []
        for doc, result in zip(self._documents, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Embedding failed for article %d (%s): %s",
                    doc.identifier,
                    type(result).__name__,
                    result,
                )
                vector: List[float] = []
            elif result is None or len(result) == 0:
                logger.warning("No embedding returned for article %d", doc.identifier)
                vector = []
            else:
                vector = list(result)

            embedded.append(EmbeddedDocument(document=doc, embedding=vector))

        self._embedded = tuple(embedded)
        logger.info(
            "Embedding cache ready: %d articles, %d failed",
            len(embedded),
            self.failed_count,
        )
        return self._embedded
