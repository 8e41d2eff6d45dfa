"""Test suite for decoding wire JSON into typed messages."""

import logging

import pytest

from chat_protocol import (
    AssistantMessage,
    DecodeErrorKind,
    ImageUrl,
    MessageDecodeError,
    MultiContent,
    SystemMessage,
    Text,
    TextContent,
    ToolCall,
    ToolMessage,
    UserMessage,
    decode_message,
    decode_messages,
    loads_message,
    loads_messages,
)


class TestRoleDispatch:
    """Test that each role decodes to its own variant."""

    def test_system_message(self):
        result = decode_message({"role": "system", "content": "You are helpful"})

        assert not result.is_error
        assert result.value == SystemMessage(TextContent("You are helpful"))

    def test_user_message(self):
        result = decode_message({"role": "user", "content": "Hello"})

        assert result.value == UserMessage(TextContent("Hello"))

    def test_assistant_message_defaults(self):
        """Test tool_calls and prefix defaults when the fields are absent."""
        result = decode_message({"role": "assistant", "content": "Hi!"})

        assert result.value == AssistantMessage(content="Hi!")
        assert result.value.tool_calls is None
        assert result.value.prefix is False

    def test_assistant_message_null_tool_calls(self):
        result = decode_message(
            {"role": "assistant", "content": "hi", "tool_calls": None}
        )

        assert result.value == AssistantMessage(content="hi", tool_calls=None, prefix=False)

    def test_assistant_message_with_tool_calls_and_prefix(self):
        result = decode_message(
            {
                "role": "assistant",
                "content": "",
                "tool_calls": [
                    {
                        "id": "call_1",
                        "type": "function",
                        "function": {"name": "calc", "arguments": '{"a": 2, "b": 2}'},
                    }
                ],
                "prefix": True,
            }
        )

        message = result.unwrap()
        assert isinstance(message, AssistantMessage)
        assert message.prefix is True
        assert message.tool_calls == (
            ToolCall(id="call_1", name="calc", arguments='{"a": 2, "b": 2}'),
        )

    def test_assistant_null_prefix_defaults_to_false(self):
        result = decode_message({"role": "assistant", "content": "x", "prefix": None})

        assert result.value.prefix is False

    def test_tool_message(self):
        result = decode_message(
            {"role": "tool", "content": "4", "tool_call_id": "call_1", "name": "calc"}
        )

        assert result.value == ToolMessage(
            content=TextContent("4"), tool_call_id="call_1", name="calc"
        )


class TestRoleErrors:
    """Test failures on the role discriminator."""

    def test_unknown_role(self):
        result = decode_message({"role": "unknown", "content": "hi"})

        assert result.is_error
        assert not result
        assert result.value is None
        assert result.error.kind is DecodeErrorKind.INVALID_DISCRIMINATOR
        assert result.error.path == ("role",)
        assert "Invalid message role" in result.error.message

    def test_missing_role(self):
        result = decode_message({"content": "hi"})

        assert result.error.kind is DecodeErrorKind.MISSING_FIELD
        assert result.error.location == "role"

    def test_non_string_role(self):
        result = decode_message({"role": 3, "content": "hi"})

        assert result.error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert result.error.location == "role"

    def test_non_object_message(self):
        result = decode_message(["role", "user"])

        assert result.error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert result.error.path == ()
        assert result.error.location == "<root>"
        assert result.error.expected == "object"


class TestContentDecoding:
    """Test the text-or-parts content alternatives."""

    def test_bare_string_is_text_content(self):
        result = decode_message({"role": "user", "content": "hello"})

        assert result.value.content == TextContent("hello")

    def test_list_of_parts_is_multi_content(self):
        result = decode_message(
            {"role": "user", "content": [{"type": "text", "text": "hi"}]}
        )

        assert result.value.content == MultiContent([Text("hi")])

    def test_mixed_parts_keep_order(self):
        result = decode_message(
            {
                "role": "user",
                "content": [
                    {"type": "image_url", "image_url": "http://x/y.png"},
                    {"type": "text", "text": "what is this?"},
                ],
            }
        )

        assert result.value.content.parts == (
            ImageUrl("http://x/y.png"),
            Text("what is this?"),
        )

    def test_empty_list_is_empty_multi_content(self):
        result = decode_message({"role": "system", "content": []})

        assert result.value == SystemMessage(MultiContent([]))

    def test_number_matches_no_alternative(self):
        result = decode_message({"role": "user", "content": 42})

        assert result.error.kind is DecodeErrorKind.NO_ALTERNATIVE_MATCHED
        assert result.error.location == "content"
        assert [cause.kind for cause in result.error.causes] == [
            DecodeErrorKind.TYPE_MISMATCH,
            DecodeErrorKind.TYPE_MISMATCH,
        ]

    def test_unknown_part_type(self):
        result = decode_message(
            {"role": "user", "content": [{"type": "audio", "data": "..."}]}
        )

        assert result.error.kind is DecodeErrorKind.NO_ALTERNATIVE_MATCHED
        part_error = result.error.causes[1]
        assert part_error.kind is DecodeErrorKind.INVALID_DISCRIMINATOR
        assert part_error.location == "content[0].type"
        assert "Unknown content part type" in part_error.message

    def test_part_missing_field_reports_nested_path(self):
        result = decode_message(
            {
                "role": "tool",
                "content": [{"type": "text", "text": "ok"}, {"type": "image_url"}],
                "tool_call_id": "call_1",
                "name": "shot",
            }
        )

        part_error = result.error.causes[1]
        assert part_error.kind is DecodeErrorKind.MISSING_FIELD
        assert part_error.location == "content[1].image_url"

    def test_missing_content(self):
        result = decode_message({"role": "system"})

        assert result.error.kind is DecodeErrorKind.MISSING_FIELD
        assert result.error.location == "content"

    def test_assistant_rejects_multi_part_content(self):
        result = decode_message(
            {"role": "assistant", "content": [{"type": "text", "text": "hi"}]}
        )

        assert result.error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert result.error.location == "content"
        assert result.error.expected == "string"


class TestFieldErrors:
    """Test required and optional field failures."""

    def test_tool_message_missing_tool_call_id(self):
        result = decode_message({"role": "tool", "content": "4", "name": "calc"})

        assert result.error.kind is DecodeErrorKind.MISSING_FIELD
        assert result.error.path == ("tool_call_id",)

    def test_tool_message_missing_name(self):
        result = decode_message({"role": "tool", "content": "4", "tool_call_id": "c"})

        assert result.error.kind is DecodeErrorKind.MISSING_FIELD
        assert result.error.location == "name"

    def test_malformed_tool_calls(self):
        result = decode_message(
            {"role": "assistant", "content": "", "tool_calls": {"id": "call_1"}}
        )

        assert result.error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert result.error.location == "tool_calls"

    def test_tool_call_missing_function_name(self):
        result = decode_message(
            {
                "role": "assistant",
                "content": "",
                "tool_calls": [{"id": "call_1", "function": {"arguments": "{}"}}],
            }
        )

        assert result.error.kind is DecodeErrorKind.MISSING_FIELD
        assert result.error.location == "tool_calls[0].function.name"

    def test_non_boolean_prefix(self):
        result = decode_message({"role": "assistant", "content": "", "prefix": "yes"})

        assert result.error.kind is DecodeErrorKind.TYPE_MISMATCH
        assert result.error.location == "prefix"

    def test_raise_for_error(self):
        result = decode_message({"role": "tool", "content": "4", "name": "calc"})

        with pytest.raises(MessageDecodeError) as exc_info:
            result.raise_for_error()

        assert exc_info.value.error is result.error
        assert "tool_call_id" in str(exc_info.value)


class TestConversation:
    """Test decoding lists of messages and JSON text."""

    def test_decode_messages(self):
        result = decode_messages(
            [
                {"role": "system", "content": "Be brief"},
                {"role": "user", "content": "Hi"},
            ]
        )

        assert result.value == [
            SystemMessage(TextContent("Be brief")),
            UserMessage(TextContent("Hi")),
        ]

    def test_decode_messages_error_path_has_index(self):
        result = decode_messages(
            [{"role": "user", "content": "Hi"}, {"role": "robot", "content": "?"}]
        )

        assert result.error.kind is DecodeErrorKind.INVALID_DISCRIMINATOR
        assert result.error.path == (1, "role")
        assert result.error.location == "[1].role"

    def test_loads_message(self):
        result = loads_message('{"role": "user", "content": "hello"}')

        assert result.value == UserMessage(TextContent("hello"))

    def test_loads_messages_bytes(self):
        result = loads_messages(b'[{"role": "assistant", "content": "ok"}]')

        assert result.value == [AssistantMessage(content="ok")]

    def test_loads_invalid_json(self):
        result = loads_message('{"role": "user",')

        assert result.error.kind is DecodeErrorKind.INVALID_JSON
        assert result.error.path == ()

    def test_loads_oversized_integer(self):
        """Test valid JSON whose integer exceeds the conversion limit."""
        result = loads_message('{"role": "user", "content": ' + "1" * 5000 + "}")

        assert result.is_error
        assert result.error.kind is DecodeErrorKind.INVALID_JSON
        assert result.error.path == ()

    def test_loads_deeply_nested_json(self):
        """Test input nested deeper than the parser can recurse."""
        text = '{"role": "user", "content": ' + "[" * 100000 + "]" * 100000 + "}"

        result = loads_messages(text)

        assert result.is_error
        assert result.error.kind is DecodeErrorKind.INVALID_JSON


class TestLogging:
    """Test that rejected payloads are logged and accepted ones are not."""

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chat_protocol.decoder"):
            decode_message({"role": "unknown"})

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert "Rejected message payload" in record.getMessage()
        assert record.decode_error.kind is DecodeErrorKind.INVALID_DISCRIMINATOR

    def test_success_is_silent(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="chat_protocol.decoder"):
            decode_message({"role": "user", "content": "hi"})

        assert caplog.records == []

    def test_custom_logger(self, caplog):
        logger = logging.getLogger("test.decoder")
        with caplog.at_level(logging.WARNING, logger="test.decoder"):
            decode_message({"role": "user"}, logger=logger)

        assert [r.name for r in caplog.records] == ["test.decoder"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
