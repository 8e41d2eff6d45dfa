"""
Structured decode failures.

Decoding never raises on bad input: the public entry points return a
`DecodeResult` carrying either the value or a `DecodeError`. Callers that
prefer exceptions use `raise_for_error()` / `unwrap()`, which raise
`MessageDecodeError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

__all__: tuple[str, ...] = (
    "DecodeErrorKind",
    "DecodeError",
    "DecodeResult",
    "MessageDecodeError",
    "Path",
    "format_path",
)

T = TypeVar("T")

# Object keys and list indices from the document root to the failing value
Path = tuple[Union[str, int], ...]


class DecodeErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_DISCRIMINATOR = "invalid_discriminator"
    NO_ALTERNATIVE_MATCHED = "no_alternative_matched"
    INVALID_JSON = "invalid_json"


def format_path(path: Path) -> str:
    """
    Render a path the way it would be written in Python or JavaScript.

    >>> format_path(("messages", 2, "content", 0, "type"))
    'messages[2].content[0].type'
    >>> format_path(())
    '<root>'
    """
    if not path:
        return "<root>"
    out = ""
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        elif out:
            out += f".{part}"
        else:
            out = part
    return out


@dataclass(frozen=True, slots=True)
class DecodeError:
    """What went wrong and where.

    Attributes:
        kind: Failure category.
        message: Human readable description.
        path: Location of the offending value.
        expected: The JSON type or value set that was expected, if any.
        causes: For ``NO_ALTERNATIVE_MATCHED``, the failure of each alternative
            in the order they were tried.
    """

    kind: DecodeErrorKind
    message: str
    path: Path = ()
    expected: Optional[str] = None
    causes: tuple["DecodeError", ...] = field(default=())

    @property
    def location(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        text = f"{self.message} at {self.location}"
        if self.expected is not None:
            text += f" (expected {self.expected})"
        return text


class MessageDecodeError(ValueError):
    """Raised when a failed `DecodeResult` is forced.

    Attributes:
        error: The structured decode failure.
    """

    error: DecodeError

    def __init__(self, error: DecodeError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True, slots=True)
class DecodeResult(Generic[T]):
    """Outcome of a decode: exactly one of ``value`` and ``error`` is set."""

    value: Optional[T] = None
    error: Optional[DecodeError] = None

    @classmethod
    def ok(cls, value: T) -> "DecodeResult[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: DecodeError) -> "DecodeResult[T]":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise MessageDecodeError(self.error)

    def unwrap(self) -> T:
        """Return the decoded value or raise `MessageDecodeError`."""
        self.raise_for_error()
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return not self.is_error

    def __repr__(self) -> str:
        if self.error is not None:
            return f"{self.__class__.__name__}(error={str(self.error)!r})"
        return f"{self.__class__.__name__}(value={self.value!r})"
