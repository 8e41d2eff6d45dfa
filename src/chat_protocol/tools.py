"""
JSON codec for tool calls.

Wire shape (OpenAI-compatible)::

    {"id": "call_1", "type": "function",
     "function": {"name": "calc", "arguments": "{\"a\": 2}"}}

``arguments`` is passed through untouched: most services send a JSON string,
some send an object.

`decode_tool_call` / `decode_tool_calls` return a `DecodeResult` like the
message decoders. The ``read_*`` variants raise the internal failure signal and
are composed inside the message decoder; encoders are total.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from chat_protocol._fields import (
    expect_list,
    expect_object,
    mismatch,
    required,
    required_str,
    run,
)
from chat_protocol.errors import DecodeResult, Path
from chat_protocol.types.tool import ToolCall, thaw_arguments

__all__ = [
    "decode_tool_call",
    "decode_tool_calls",
    "encode_tool_call",
    "encode_tool_calls",
]

_log = logging.getLogger(__name__)


def read_tool_call(value: Any, path: Path) -> ToolCall:
    obj = expect_object(value, path)
    call_id = required_str(obj, "id", path)

    call_type = obj.get("type")
    if call_type is None:
        call_type = "function"
    elif not isinstance(call_type, str):
        raise mismatch(call_type, "string", path + ("type",))

    fn_path = path + ("function",)
    fn = expect_object(required(obj, "function", path), fn_path)
    name = required_str(fn, "name", fn_path)
    arguments = required(fn, "arguments", fn_path)
    if not isinstance(arguments, (str, dict)):
        raise mismatch(arguments, "string or object", fn_path + ("arguments",))

    return ToolCall(id=call_id, name=name, arguments=arguments, type=call_type)


def read_tool_calls(value: Any, path: Path) -> Optional[tuple[ToolCall, ...]]:
    """Read an optional list of tool calls; ``None`` (null or absent) stays ``None``."""
    if value is None:
        return None
    items = expect_list(value, path)
    return tuple(read_tool_call(item, path + (i,)) for i, item in enumerate(items))


def decode_tool_call(
    value: Any, *, logger: Optional[logging.Logger] = None
) -> DecodeResult[ToolCall]:
    return run(read_tool_call, value, logger or _log)


def decode_tool_calls(
    value: Any, *, logger: Optional[logging.Logger] = None
) -> DecodeResult[Optional[tuple[ToolCall, ...]]]:
    """
    Decode an optional list of tool calls.

    A successful result may hold ``None``: JSON ``null`` means no tool calls.
    """
    return run(read_tool_calls, value, logger or _log)


def encode_tool_call(call: ToolCall) -> dict[str, Any]:
    return {
        "id": call.id,
        "type": call.type,
        "function": {"name": call.name, "arguments": thaw_arguments(call.arguments)},
    }


def encode_tool_calls(calls: Optional[Sequence[ToolCall]]) -> Optional[list[dict[str, Any]]]:
    if calls is None:
        return None
    return [encode_tool_call(call) for call in calls]
