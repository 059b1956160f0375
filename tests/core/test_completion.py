"""Tests for completion data models."""

from chatbatch.core import Completion, ConnectorFailure, ConnectorResponse


class TestCompletion:
    """Tests for Completion serialization."""

    def test_success_omits_unset_fields(self):
        completion = Completion(content="Hi", token_usage=12)

        assert completion.is_success
        assert completion.to_dict() == {"Content": "Hi", "TokenUsage": 12}

    def test_failure_keeps_null_content(self):
        """Test a failed turn serializes Content as None next to the error."""
        completion = Completion(content=None, error="rate limited")

        assert not completion.is_success
        assert completion.to_dict() == {"Content": None, "Error": "rate limited"}

    def test_tool_call_finish_reason(self):
        completion = Completion(content="[]", token_usage=3, finish_reason="tool_calls")

        assert completion.to_dict() == {"Content": "[]", "TokenUsage": 3, "FinishReason": "tool_calls"}


class TestConnectorResults:

    def test_response_shape(self):
        response = ConnectorResponse(
            completions=[Completion(content="a"), Completion(content=None, error="boom")],
            model_type="gpt-4o-2024-08-06"
        )

        assert response.is_success
        assert response.to_dict() == {
            "Completions": [{"Content": "a"}, {"Content": None, "Error": "boom"}],
            "ModelType": "gpt-4o-2024-08-06",
        }

    def test_failure_shape(self):
        failure = ConnectorFailure(error="bad key", model_type="gpt-4o")

        assert not failure.is_success
        assert failure.to_dict() == {"Error": "bad key", "ModelType": "gpt-4o"}
