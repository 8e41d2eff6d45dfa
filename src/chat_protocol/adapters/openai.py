"""OpenAI adapter: typed messages to request payloads, SDK completions back to typed messages."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from openai.types.chat import ChatCompletion

from chat_protocol.decoder import decode_message
from chat_protocol.encoder import encode_messages
from chat_protocol.errors import DecodeError, DecodeErrorKind, DecodeResult
from chat_protocol.types.message import AssistantMessage, Message


class OpenAIMessageAdapter:
    """Adapter between typed messages and the OpenAI chat completions SDK."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def to_provider(self, messages: Sequence[Message]) -> list[dict[str, Any]]:
        """Build the ``messages`` argument of ``chat.completions.create``."""
        return encode_messages(messages)

    def assistant_message_from(self, raw: ChatCompletion) -> DecodeResult[AssistantMessage]:
        """Decode the first choice of a completion into an `AssistantMessage`."""
        if not raw.choices or not raw.choices[0].message:
            return DecodeResult.ok(AssistantMessage(content=""))

        message = raw.choices[0].message
        dumped = message.model_dump(mode="json")
        payload: dict[str, Any] = {
            "role": "assistant",
            # content is null when the model only calls tools
            "content": message.content or "",
            "tool_calls": dumped.get("tool_calls"),
        }

        # only function tools map onto the wire shape; newer SDKs also return "custom" calls
        for i, call in enumerate(payload["tool_calls"] or ()):
            call_type = call.get("type", "function")
            if call_type != "function":
                error = DecodeError(
                    DecodeErrorKind.INVALID_DISCRIMINATOR,
                    f"Unsupported tool call type {call_type!r}",
                    ("tool_calls", i, "type"),
                    expected="'function'",
                )
                self.logger.warning(
                    "Rejected completion message: %s", error, extra={"decode_error": error}
                )
                return DecodeResult.fail(error)

        return decode_message(payload, logger=self.logger)  # type: ignore[return-value]
