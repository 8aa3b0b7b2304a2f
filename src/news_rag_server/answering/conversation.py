"""
Conversation Normalization

Message content arrives either as plain text or as a list of parts. This
module is the single place where that shape is resolved into flat text, both
for extracting the question and for forwarding history to the generator.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .messages import ChatMessage

# Roles forwarded to the chat-completion provider.
FORWARDED_ROLES = ("system", "user", "assistant")


def part_text(part: Any) -> str:
    """Text carried by one content part, or "" for non-text parts."""
    if isinstance(part, str):
        return part
    if isinstance(part, dict):
        text = part.get("text")
    else:
        text = getattr(part, "text", None)
    return text if isinstance(text, str) else ""


def content_text(content: Any) -> str:
    """
    Flatten message content to a single string.

    Plain strings are returned as-is; part lists are joined with single
    spaces in their original order.
    """
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return " ".join(part_text(p) for p in content)
    return ""


def extract_query_text(messages: Sequence[ChatMessage]) -> str:
    """Return the text of the latest user message, or "" if there is none."""
    for message in reversed(messages):
        if message.role == "user":
            return content_text(message.content)
    return ""


def to_llm_history(messages: Sequence[ChatMessage]) -> List[Dict[str, str]]:
    """Convert inbound messages into plain role/content dicts for the LLM."""
    return [
        {"role": m.role, "content": content_text(m.content)}
        for m in messages
        if m.role in FORWARDED_ROLES
    ]
