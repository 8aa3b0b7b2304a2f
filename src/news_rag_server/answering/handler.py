"""
Answer Handler

Orchestrates one question from inbound conversation to generated answer:

1. Make sure the corpus embedding cache is built (or join the in-flight build).
2. Embed the latest user question.
3. Rank cached articles and keep the top-k, in corpus order.
4. Assemble the grounding context and the system prompt.
5. Ask the generator for an answer and return its text verbatim.

The trailing citation codes the model appends are left in place; removing
them is the presentation layer's job.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..embeddings.cache import EmbeddingCache
from ..embeddings.embedder import Embedder
from ..llm.client import LLMClient
from ..prompts import build_system_prompt
from ..retrieval.context import assemble_context
from ..retrieval.ranker import DEFAULT_TOP_K, RankedDocument, rank
from .conversation import extract_query_text, to_llm_history
from .messages import ChatMessage

logger = logging.getLogger("rag.handler")


class AnswerHandler:
    """
    Per-application orchestrator shared by every request.

    Holds references to the process-wide embedding cache and the provider
    clients; keeps no per-request state of its own.
    """

    def __init__(
        self,
        cache: EmbeddingCache,
        embedder: Embedder,
        llm: LLMClient,
        top_k: int = DEFAULT_TOP_K,
        temperature: float = 0.7,
    ) -> None:
        self.cache = cache
        self.embedder = embedder
        self.llm = llm
        self.top_k = top_k
        self.temperature = temperature

    async def retrieve(self, query_text: str) -> List[RankedDocument]:
        """
        Select the grounding articles for a question.

        A question that cannot be embedded (blank text or provider failure)
        falls back to the first top_k articles in corpus order.
        """
        documents = await self.cache.ensure_embeddings()

        query_vector = await self.embedder.embed(query_text)
        if query_vector is None:
            logger.info("No query embedding; falling back to corpus order")

        selected = rank(query_vector, documents, self.top_k)
        logger.debug(
            "Selected articles %s",
            [r.position + 1 for r in selected],
        )
        return selected

    async def handle(self, messages: Sequence[ChatMessage]) -> str:
        """
        Answer the latest user message of a conversation.

        Raises
        ------
        LLMError
            If the generator call fails; no partial answer is produced.
        """
        query_text = extract_query_text(messages)
        selected = await self.retrieve(query_text)

        context = assemble_context(selected)
        system_prompt = build_system_prompt(context)

        return await self.llm.generate(
            system_prompt,
            to_llm_history(messages),
            temperature=self.temperature,
        )
