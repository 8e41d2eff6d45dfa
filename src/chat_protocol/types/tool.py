"""
Provider‑neutral value type for tool calls attached to assistant messages.

Only the shape matters here; executing tools lives elsewhere.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

__all__ = ["ToolCall", "freeze_arguments", "thaw_arguments"]


def freeze_arguments(value: Any) -> Any:
    """Read-only copy of a JSON value: objects become mapping proxies, arrays tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze_arguments(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze_arguments(item) for item in value)
    return value


def thaw_arguments(value: Any) -> Any:
    """Inverse of `freeze_arguments`: plain dicts and lists, ready for `json.dumps`."""
    if isinstance(value, Mapping):
        return {key: thaw_arguments(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw_arguments(item) for item in value]
    return value


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A request emitted by the model to call a function tool.

    ``arguments`` is the JSON-encoded string most services send, or an object.
    Objects are stored as a read-only copy, so a tool call can be hashed and
    is not affected by later changes to the dict it was built from.
    """
    id: str
    name: str
    arguments: Union[str, Mapping[str, Any]]
    type: str = "function"

    def __init__(
        self,
        id: str,
        name: str,
        arguments: Union[str, Mapping[str, Any]],
        type: str = "function",
    ) -> None:
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "name", name)
        object.__setattr__(
            self,
            "arguments",
            arguments if isinstance(arguments, str) else freeze_arguments(arguments),
        )
        object.__setattr__(self, "type", type)

    def __hash__(self) -> int:
        arguments = self.arguments
        if not isinstance(arguments, str):
            # equal objects compare equal regardless of key order
            arguments = json.dumps(thaw_arguments(arguments), sort_keys=True)
        return hash((self.id, self.name, arguments, self.type))
