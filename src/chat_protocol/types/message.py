"""Message, content and content-part variants of the chat protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Sequence, Union

from chat_protocol.types.tool import ToolCall

__all__ = [
    "MessageRole",
    "Text",
    "ImageUrl",
    "ContentPart",
    "TextContent",
    "MultiContent",
    "MessageContent",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "Message",
]


class MessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


# Content parts


@dataclass(frozen=True, slots=True)
class Text:
    """Text segment of a multi-part message."""

    type: ClassVar[str] = "text"

    text: str


@dataclass(frozen=True, slots=True)
class ImageUrl:
    """Image segment of a multi-part message.

    ``url`` is either a regular URL or a base64 data string; it is never
    inspected.
    """

    type: ClassVar[str] = "image_url"

    url: str


ContentPart = Union[Text, ImageUrl]


# Message content


@dataclass(frozen=True, slots=True)
class TextContent:
    text: str


@dataclass(frozen=True, slots=True)
class MultiContent:
    parts: tuple[ContentPart, ...]

    def __init__(self, parts: Sequence[ContentPart]) -> None:
        object.__setattr__(self, "parts", tuple(parts))


MessageContent = Union[TextContent, MultiContent]


# Messages


@dataclass(frozen=True, slots=True)
class SystemMessage:
    role: ClassVar[MessageRole] = MessageRole.SYSTEM

    content: MessageContent


@dataclass(frozen=True, slots=True)
class UserMessage:
    role: ClassVar[MessageRole] = MessageRole.USER

    content: MessageContent


@dataclass(frozen=True, slots=True)
class AssistantMessage:
    """
    A message produced by the model.

    Unlike the other roles the content is always plain text. ``prefix`` marks
    the message as a prefix the model must continue from.
    """

    role: ClassVar[MessageRole] = MessageRole.ASSISTANT

    content: str
    tool_calls: Optional[tuple[ToolCall, ...]] = None
    prefix: bool = False

    def __init__(
        self,
        content: str,
        tool_calls: Optional[Sequence[ToolCall]] = None,
        prefix: bool = False,
    ) -> None:
        object.__setattr__(self, "content", content)
        object.__setattr__(
            self, "tool_calls", tuple(tool_calls) if tool_calls is not None else None
        )
        object.__setattr__(self, "prefix", prefix)


@dataclass(frozen=True, slots=True)
class ToolMessage:
    """Result of a tool call, sent back to the model."""

    role: ClassVar[MessageRole] = MessageRole.TOOL

    content: MessageContent
    tool_call_id: str
    name: str


Message = Union[SystemMessage, UserMessage, AssistantMessage, ToolMessage]
