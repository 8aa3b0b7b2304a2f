from typing import List, Dict, Any, Optional
import logging
import httpx
from ..config import settings

logger = logging.getLogger("rag.llm")


class LLMError(RuntimeError):
    """Raised when the chat-completion provider fails or answers malformed."""


class LLMClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.openai_api_key.get_secret_value()
        self.model = model or settings.llm_model
        self.base_url = base_url or settings.llm_base_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def generate(
        self,
        system_prompt: str,
        messages: List[Dict[str, Any]],
        temperature: float = 0.7,
    ) -> str:
        """
        Returns the assistant text from an OpenAI-compatible chat completion,
        verbatim. Raises LLMError on transport, HTTP or shape failures.
        """
        payload = {
            "model": self.model,
            "messages": [{"role": "system", "content": system_prompt}] + messages,
            "temperature": temperature,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                resp = await client.post(
                    self.base_url,
                    json=payload,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as exc:
            logger.error("Chat completion failed (%s): %s", type(exc).__name__, exc)
            raise LLMError(f"Answer generation failed: {type(exc).__name__}") from exc
        except ValueError as exc:
            raise LLMError("Chat completion response is not valid JSON.") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise LLMError("Chat completion response missing message content.") from exc

        if not isinstance(content, str):
            raise LLMError("Chat completion returned non-text content.")

        return content
