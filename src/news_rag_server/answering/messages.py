"""
Conversation Messages

The message shape accepted from chat front-ends: ``content`` is either a plain
string or a list of parts, where a part is a bare string or an object that may
carry a ``text`` field. Unknown keys sent by such clients (ids, timestamps,
...) are ignored.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict


class ContentPart(BaseModel):
    """
    One element of a structured message content.

    Only string ``text`` values contribute to the question; anything else
    (images, files, tool payloads) contributes empty text.
    """
    type: Optional[str] = None
    text: Optional[Any] = None

    model_config = ConfigDict(extra="allow")


MessageContent = Union[str, List[Union[str, ContentPart, Any]]]


class ChatMessage(BaseModel):
    """
    Single message in a chat conversation.
    """
    role: Literal["system", "user", "assistant", "tool"]
    content: Optional[MessageContent] = ""

    model_config = ConfigDict(extra="ignore")
