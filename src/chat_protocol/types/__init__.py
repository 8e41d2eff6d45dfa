from .message import (
    AssistantMessage,
    ContentPart,
    ImageUrl,
    Message,
    MessageContent,
    MessageRole,
    MultiContent,
    SystemMessage,
    Text,
    TextContent,
    ToolMessage,
    UserMessage,
)
from .tool import ToolCall

__all__ = [
    "MessageRole",
    "Message",
    "SystemMessage",
    "UserMessage",
    "AssistantMessage",
    "ToolMessage",
    "MessageContent",
    "TextContent",
    "MultiContent",
    "ContentPart",
    "Text",
    "ImageUrl",
    "ToolCall",
]
