"""Field access primitives for the JSON decoders."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from chat_protocol.errors import DecodeError, DecodeErrorKind, DecodeResult, Path

T = TypeVar("T")

_MISSING: Any = object()

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "boolean",
    int: "number",
    float: "number",
    type(None): "null",
}


class DecodeFailure(Exception):
    """Internal signal carrying a `DecodeError` up to the public entry point."""

    def __init__(self, error: DecodeError) -> None:
        super().__init__(str(error))
        self.error = error


def json_type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def mismatch(value: Any, expected: str, path: Path) -> DecodeFailure:
    return DecodeFailure(
        DecodeError(
            DecodeErrorKind.TYPE_MISMATCH,
            f"Expected {expected}, got {json_type_name(value)}",
            path,
            expected=expected,
        )
    )


def expect_object(value: Any, path: Path) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise mismatch(value, "object", path)
    return value


def expect_list(value: Any, path: Path) -> list[Any]:
    if not isinstance(value, list):
        raise mismatch(value, "array", path)
    return value


def expect_str(value: Any, path: Path) -> str:
    if not isinstance(value, str):
        raise mismatch(value, "string", path)
    return value


def expect_bool(value: Any, path: Path) -> bool:
    if not isinstance(value, bool):
        raise mismatch(value, "boolean", path)
    return value


def required(obj: dict[str, Any], key: str, path: Path) -> Any:
    """Return ``obj[key]`` or fail with MISSING_FIELD at ``path + (key,)``."""
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise DecodeFailure(
            DecodeError(
                DecodeErrorKind.MISSING_FIELD,
                f"Missing required field '{key}'",
                path + (key,),
            )
        )
    return value


def required_str(obj: dict[str, Any], key: str, path: Path) -> str:
    return expect_str(required(obj, key, path), path + (key,))


def run(
    decode: Callable[[Any, Path], T],
    value: Any,
    logger: logging.Logger,
) -> DecodeResult[T]:
    """Run an internal decoder and turn its failure signal into a result."""
    try:
        return DecodeResult.ok(decode(value, ()))
    except DecodeFailure as failure:
        error = failure.error
        logger.warning(
            "Rejected message payload: %s [%s]",
            error,
            error.kind.value,
            extra={"decode_error": error},
        )
        return DecodeResult.fail(error)
