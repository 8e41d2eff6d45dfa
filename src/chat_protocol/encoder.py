"""Encode typed messages into the wire shape expected by the service."""

from __future__ import annotations

import json
from typing import Any, Iterable, Union

from chat_protocol.tools import encode_tool_calls
from chat_protocol.types.message import (
    AssistantMessage,
    ContentPart,
    ImageUrl,
    Message,
    MessageContent,
    MultiContent,
    SystemMessage,
    Text,
    TextContent,
    ToolMessage,
    UserMessage,
)

__all__ = [
    "encode_message",
    "encode_messages",
    "encode_content",
    "dumps_message",
    "dumps_messages",
]


def _encode_part(part: ContentPart) -> dict[str, str]:
    if isinstance(part, Text):
        return {"type": Text.type, "text": part.text}
    if isinstance(part, ImageUrl):
        return {"type": ImageUrl.type, "image_url": part.url}
    raise TypeError(f"Unsupported content part: {type(part).__name__}")


def encode_content(content: MessageContent) -> Union[str, list[dict[str, str]]]:
    if isinstance(content, TextContent):
        return content.text
    if isinstance(content, MultiContent):
        return [_encode_part(part) for part in content.parts]
    raise TypeError(f"Unsupported message content: {type(content).__name__}")


def encode_message(message: Message) -> dict[str, Any]:
    """
    Convert a message into a JSON-ready dict.

    Assistant messages always carry ``tool_calls`` and ``prefix``, even when
    they hold their defaults (``None`` and ``False``).
    """
    if isinstance(message, (SystemMessage, UserMessage)):
        return {
            "role": message.role.value,
            "content": encode_content(message.content),
        }
    if isinstance(message, AssistantMessage):
        return {
            "role": message.role.value,
            "content": message.content,
            "tool_calls": encode_tool_calls(message.tool_calls),
            "prefix": message.prefix,
        }
    if isinstance(message, ToolMessage):
        return {
            "role": message.role.value,
            "content": encode_content(message.content),
            "tool_call_id": message.tool_call_id,
            "name": message.name,
        }
    raise TypeError(f"Unsupported message type: {type(message).__name__}")


def encode_messages(messages: Iterable[Message]) -> list[dict[str, Any]]:
    return [encode_message(message) for message in messages]


def dumps_message(message: Message, **kwargs: Any) -> str:
    """Encode a message as JSON text. ``kwargs`` are passed to `json.dumps`."""
    return json.dumps(encode_message(message), **kwargs)


def dumps_messages(messages: Iterable[Message], **kwargs: Any) -> str:
    return json.dumps(encode_messages(messages), **kwargs)
