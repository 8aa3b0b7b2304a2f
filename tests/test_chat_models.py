import pytest
from pydantic import ValidationError

from news_rag_server.api.models import ChatRequest, ChatMessage
from news_rag_server.answering.conversation import (
    content_text,
    extract_query_text,
    to_llm_history,
)


def test_chat_request_messages_default_empty():
    """Verify a body without messages is accepted."""
    req = ChatRequest()
    assert req.messages == []


def test_chat_request_null_messages_as_empty():
    """Verify an explicit null messages list is treated as no messages."""
    req = ChatRequest.model_validate({"messages": None})
    assert req.messages == []


def test_chat_request_ignores_client_metadata():
    """Verify extra keys sent by chat front-ends are ignored."""
    req = ChatRequest.model_validate({
        "id": "abc",
        "messages": [{"id": "m1", "role": "user", "content": "halo", "createdAt": "now"}],
    })
    assert req.messages[0].content == "halo"


def test_chat_message_role_invalid():
    """Verify unknown roles raise validation error."""
    with pytest.raises(ValidationError):
        ChatMessage(role="narrator", content="hello")


def test_plain_string_content():
    assert content_text("Apa itu kereta cepat?") == "Apa itu kereta cepat?"


def test_structured_parts_are_joined_with_single_spaces():
    content = [
        {"type": "text", "text": "Harga"},
        "beras",
        {"type": "image", "image": "data:..."},
        {"type": "text", "text": "turun?"},
    ]
    assert content_text(content) == "Harga beras  turun?"


def test_non_string_text_field_contributes_nothing():
    assert content_text([{"type": "text", "text": 42}, {"text": "ok"}]) == " ok"


def test_missing_content_is_empty():
    assert content_text(None) == ""
    assert content_text([]) == ""


def test_parsed_parts_normalize_like_raw_parts():
    msg = ChatMessage.model_validate({
        "role": "user",
        "content": [{"type": "text", "text": "cuaca"}, {"type": "text", "text": "Bandung"}],
    })
    assert content_text(msg.content) == "cuaca Bandung"


def test_query_is_latest_user_message():
    messages = [
        ChatMessage(role="user", content="pertama"),
        ChatMessage(role="assistant", content="jawaban"),
        ChatMessage(role="user", content="kedua"),
        ChatMessage(role="assistant", content="jawaban lagi"),
    ]
    assert extract_query_text(messages) == "kedua"


def test_query_without_user_message_is_empty():
    assert extract_query_text([]) == ""
    assert extract_query_text([ChatMessage(role="system", content="x")]) == ""


def test_history_is_flattened_and_tool_messages_dropped():
    messages = [
        ChatMessage(role="user", content=[{"type": "text", "text": "halo"}]),
        ChatMessage(role="tool", content="{}"),
        ChatMessage(role="assistant", content="hai"),
    ]
    assert to_llm_history(messages) == [
        {"role": "user", "content": "halo"},
        {"role": "assistant", "content": "hai"},
    ]
