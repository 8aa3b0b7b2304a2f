"""
Embedding Client

This module implements the embedding client used for both corpus articles and
incoming questions. It talks to the OpenAI embeddings API (or any compatible
provider) and is responsible for:

- Transport and HTTP error isolation
- Strict response validation
- Reporting failure as an absent vector rather than an exception

The class is stateless and safe to reuse across requests.
"""

from __future__ import annotations

from typing import List, Optional
import logging
import httpx

from ..config import settings

logger = logging.getLogger("rag.embedder")


class EmbeddingError(RuntimeError):
    """Raised when embedding generation fails."""


class Embedder:
    """
    Asynchronous single-text embedding generator.

    This class performs no caching; corpus vectors are memoized by
    ``EmbeddingCache``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize an Embedder.

        Parameters
        ----------
        api_key : Optional[str]
            Optional override for the API key. Defaults to settings.openai_api_key.

        model : Optional[str]
            Optional override for embedding model. Defaults to settings.embedding_model.

        base_url : Optional[str]
            Embeddings endpoint URL. Defaults to settings.embedding_base_url.

        timeout : Optional[float]
            HTTP timeout for each request. Defaults to settings.request_timeout.

        transport : Optional[httpx.AsyncBaseTransport]
            Custom httpx transport, mainly for tests.
        """
        self.api_key = api_key or settings.openai_api_key.get_secret_value()
        self.model = model or settings.embedding_model
        self.base_url = base_url or settings.embedding_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def embed(self, text: str) -> Optional[List[float]]:
        """
        Generate the embedding for a single text.

        Parameters
        ----------
        text : str
            Input text. Blank input is never sent to the provider.

        Returns
        -------
        Optional[List[float]]
            The embedding vector, or None if the text is blank or the
            provider call failed.
        """
        if not text or not text.strip():
            return None

        try:
            return await self._request(text)
        except EmbeddingError as exc:
            logger.warning("Embedding unavailable (%d chars): %s", len(text), exc)
            return None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, text: str) -> List[float]:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload = {
            "model": self.model,
            "input": text,
        }

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self.base_url,
                    json=payload,
                    headers=headers,
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                logger.error(
                    "Embedding request failed (%s): error=%s",
                    type(exc).__name__,
                    str(exc),
                )
                raise EmbeddingError(
                    f"Embedding generation failed: {type(exc).__name__}"
                ) from exc

            try:
                data = response.json()
            except ValueError as exc:
                raise EmbeddingError("Embedding response is not valid JSON.") from exc

        return self._extract_embedding(data)

    @staticmethod
    def _extract_embedding(data: dict) -> List[float]:
        """
        Parse and validate embedding output format.

        OpenAI returns:
            { "data": [ {"embedding": [...]} ] }

        Raises
        ------
        EmbeddingError
            If the API returns unexpected structure.
        """
        if not isinstance(data, dict) or "data" not in data:
            raise EmbeddingError("Embedding response missing 'data' field.")

        records = data["data"]
        if not isinstance(records, list) or not records:
            raise EmbeddingError("'data' field must be a non-empty list.")

        record = records[0]
        if not isinstance(record, dict) or "embedding" not in record:
            raise EmbeddingError(f"Malformed embedding record: {record!r}")

        emb = record["embedding"]
        if not isinstance(emb, list) or not emb or not all(
            isinstance(x, (float, int)) for x in emb
        ):
            raise EmbeddingError("Invalid embedding vector: must be a non-empty float list.")

        return [float(x) for x in emb]
