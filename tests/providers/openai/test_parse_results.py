"""Tests for OpenAI result parsing."""

import json

from chatbatch.core import ErrorOutput
from chatbatch.providers.openai import parse_results
from chatbatch.providers.openai.parse_results import assistant_text, describe_outputs
from tests.mocks import make_completion, make_tool_call


class TestParseResults:
    """Tests for parse_results."""

    def test_text_reply(self):
        response = parse_results([make_completion("Hello", model="gpt-4o-2024-08-06", total_tokens=9)], "gpt-4o")

        assert response.model_type == "gpt-4o-2024-08-06"
        assert response.to_dict()["Completions"] == [{"Content": "Hello", "TokenUsage": 9}]

    def test_error_output(self):
        response = parse_results([ErrorOutput(error="timeout", model="gpt-4o")], "gpt-4o")

        assert response.to_dict() == {
            "Completions": [{"Content": None, "Error": "timeout"}],
            "ModelType": "gpt-4o",
        }

    def test_missing_usage(self):
        response = parse_results([make_completion("Hi", total_tokens=None)], "gpt-4o")

        assert response.to_dict()["Completions"] == [{"Content": "Hi"}]

    def test_null_content_on_success_is_empty_string(self):
        """Test only failed turns carry a null Content."""
        response = parse_results([make_completion(content=None)], "gpt-4o")

        completion = response.completions[0]
        assert completion.content == ""
        assert completion.is_success

    def test_tool_calls(self):
        """Test tool calls are reported instead of the message text."""
        calls = [make_tool_call(), make_tool_call(name="weather", arguments="{}", call_id="call_2")]
        output = make_completion(content=None, finish_reason="tool_calls", tool_calls=calls, total_tokens=8)

        completion = parse_results([output], "gpt-4o").completions[0]

        assert completion.finish_reason == "tool_calls"
        assert completion.token_usage == 8
        assert [call["function"]["name"] for call in json.loads(completion.content)] == ["lookup", "weather"]

    def test_no_outputs_uses_requested_model(self):
        response = parse_results([], "gpt-4o")

        assert response.completions == []
        assert response.model_type == "gpt-4o"


class TestHelpers:

    def test_assistant_text(self):
        assert assistant_text(make_completion("Yes")) == "Yes"
        assert assistant_text(make_completion(content=None)) is None

    def test_describe_outputs(self):
        outputs = [make_completion(), ErrorOutput(error="x", model="m"), make_completion()]
        assert describe_outputs(outputs) == "2 succeeded, 1 failed"
