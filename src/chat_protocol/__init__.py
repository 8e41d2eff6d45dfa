"""
chat-protocol - typed messages and JSON codec for chat-completion services.
"""

from .decoder import decode_message, decode_messages, loads_message, loads_messages
from .encoder import dumps_message, dumps_messages, encode_message, encode_messages
from .errors import DecodeError, DecodeErrorKind, DecodeResult, MessageDecodeError
from .tools import decode_tool_call, decode_tool_calls, encode_tool_call, encode_tool_calls
from .types import (
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
    ToolCall,
    ToolMessage,
    UserMessage,
)

__version__ = "0.1.0"

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
    "decode_message",
    "decode_messages",
    "loads_message",
    "loads_messages",
    "encode_message",
    "encode_messages",
    "dumps_message",
    "dumps_messages",
    "decode_tool_call",
    "decode_tool_calls",
    "encode_tool_call",
    "encode_tool_calls",
    "DecodeError",
    "DecodeErrorKind",
    "DecodeResult",
    "MessageDecodeError",
]
