"""
Decode untrusted JSON into typed messages.

The input is a parsed JSON value (``dict``/``list``/``str``/...) or, for the
``loads_*`` helpers, raw JSON text. Every entry point returns a
`DecodeResult`; malformed input never raises.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional, Union

from chat_protocol._fields import (
    DecodeFailure,
    expect_bool,
    expect_list,
    expect_object,
    expect_str,
    json_type_name,
    required,
    required_str,
    run,
)
from chat_protocol.errors import DecodeError, DecodeErrorKind, DecodeResult, Path
from chat_protocol.tools import read_tool_calls
from chat_protocol.types.message import (
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

__all__ = [
    "decode_message",
    "decode_messages",
    "loads_message",
    "loads_messages",
]

_ROLES = ", ".join(repr(role.value) for role in MessageRole)
_PART_TYPES = ", ".join(repr(cls.type) for cls in (Text, ImageUrl))

_log = logging.getLogger(__name__)


def _decode_content_part(value: Any, path: Path) -> ContentPart:
    obj = expect_object(value, path)
    tag = required_str(obj, "type", path)

    if tag == Text.type:
        return Text(required_str(obj, "text", path))
    if tag == ImageUrl.type:
        return ImageUrl(required_str(obj, "image_url", path))

    raise DecodeFailure(
        DecodeError(
            DecodeErrorKind.INVALID_DISCRIMINATOR,
            f"Unknown content part type {tag!r}",
            path + ("type",),
            expected=_PART_TYPES,
        )
    )


def _decode_text_content(value: Any, path: Path) -> MessageContent:
    return TextContent(expect_str(value, path))


def _decode_multi_content(value: Any, path: Path) -> MessageContent:
    items = expect_list(value, path)
    return MultiContent(
        [_decode_content_part(item, path + (i,)) for i, item in enumerate(items)]
    )


# Tried in order; the first one that succeeds wins.
_CONTENT_ALTERNATIVES: tuple[Callable[[Any, Path], MessageContent], ...] = (
    _decode_text_content,
    _decode_multi_content,
)


def _decode_content(value: Any, path: Path) -> MessageContent:
    causes: list[DecodeError] = []
    for alternative in _CONTENT_ALTERNATIVES:
        try:
            return alternative(value, path)
        except DecodeFailure as failure:
            causes.append(failure.error)

    raise DecodeFailure(
        DecodeError(
            DecodeErrorKind.NO_ALTERNATIVE_MATCHED,
            f"Content matched neither text nor a list of content parts "
            f"(got {json_type_name(value)})",
            path,
            expected="string or array of content parts",
            causes=tuple(causes),
        )
    )


def _read_role(obj: dict[str, Any], path: Path) -> MessageRole:
    raw = required_str(obj, "role", path)
    try:
        return MessageRole(raw)
    except ValueError:
        raise DecodeFailure(
            DecodeError(
                DecodeErrorKind.INVALID_DISCRIMINATOR,
                f"Invalid message role {raw!r}",
                path + ("role",),
                expected=_ROLES,
            )
        ) from None


def _decode_assistant(obj: dict[str, Any], path: Path) -> AssistantMessage:
    """
    ``tool_calls`` and ``prefix`` are both optional. Besides being absent,
    either may be ``null``: that also means no tool calls and ``prefix=False``.
    """
    content = required_str(obj, "content", path)
    tool_calls = read_tool_calls(obj.get("tool_calls"), path + ("tool_calls",))

    prefix = obj.get("prefix")
    if prefix is None:
        prefix = False
    else:
        prefix = expect_bool(prefix, path + ("prefix",))

    return AssistantMessage(content=content, tool_calls=tool_calls, prefix=prefix)


def _decode_message(value: Any, path: Path) -> Message:
    obj = expect_object(value, path)
    role = _read_role(obj, path)

    if role is MessageRole.SYSTEM:
        return SystemMessage(_decode_content(required(obj, "content", path), path + ("content",)))
    if role is MessageRole.USER:
        return UserMessage(_decode_content(required(obj, "content", path), path + ("content",)))
    if role is MessageRole.ASSISTANT:
        return _decode_assistant(obj, path)
    if role is MessageRole.TOOL:
        return ToolMessage(
            content=_decode_content(required(obj, "content", path), path + ("content",)),
            tool_call_id=required_str(obj, "tool_call_id", path),
            name=required_str(obj, "name", path),
        )
    raise AssertionError(f"Unhandled message role: {role!r}")


def _decode_conversation(value: Any, path: Path) -> list[Message]:
    items = expect_list(value, path)
    return [_decode_message(item, path + (i,)) for i, item in enumerate(items)]


def decode_message(
    value: Any, *, logger: Optional[logging.Logger] = None
) -> DecodeResult[Message]:
    """
    Decode a single message object.

    Args:
        value: Parsed JSON value, typically a ``dict`` from the service.
        logger: Optional logger for rejected payloads. Defaults to this
                module's logger.

    Returns:
        A `DecodeResult` holding the typed message, or the first failure with
        its field path.

    Example
    -------
    >>> decode_message({"role": "user", "content": "hello"}).value
    UserMessage(content=TextContent(text='hello'))
    """
    return run(_decode_message, value, logger or _log)


def decode_messages(
    value: Any, *, logger: Optional[logging.Logger] = None
) -> DecodeResult[list[Message]]:
    """
    Decode a conversation (a JSON array of messages).

    All or nothing: one bad message fails the whole list, and the error path
    starts with that message's index.
    """
    return run(_decode_conversation, value, logger or _log)


def _parse(text: Union[str, bytes]) -> Any:
    # ValueError covers JSONDecodeError, UnicodeDecodeError and oversized integers
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise DecodeFailure(
            DecodeError(
                DecodeErrorKind.INVALID_JSON,
                f"Invalid JSON: {exc}",
                (),
            )
        ) from exc


def loads_message(
    text: Union[str, bytes], *, logger: Optional[logging.Logger] = None
) -> DecodeResult[Message]:
    """Parse JSON text and decode it as a single message."""
    return run(lambda raw, path: _decode_message(_parse(raw), path), text, logger or _log)


def loads_messages(
    text: Union[str, bytes], *, logger: Optional[logging.Logger] = None
) -> DecodeResult[list[Message]]:
    """Parse JSON text and decode it as a conversation."""
    return run(lambda raw, path: _decode_conversation(_parse(raw), path), text, logger or _log)
