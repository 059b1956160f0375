"""Result parsing for OpenAI chat completion responses."""

from typing import Any, List, Optional, Sequence

from ...core.completion import Completion, ConnectorResponse, ErrorOutput
from ...utils import to_json
from .models import TOOL_CALLS_FINISH_REASON


def parse_results(outputs: Sequence[Any], model: str) -> ConnectorResponse:
    """Map raw turn outputs to a ConnectorResponse.

    Args:
        outputs: ChatCompletion objects and ErrorOutput records, in prompt order
        model: Requested model name, used when no output reports a model

    Returns:
        ConnectorResponse with one Completion per output
    """
    completions = [_parse_output(output) for output in outputs]

    model_type = model
    if outputs:
        model_type = getattr(outputs[0], "model", None) or model

    return ConnectorResponse(completions=completions, model_type=model_type)


def _parse_output(output: Any) -> Completion:
    """Convert a single output into a Completion."""
    if isinstance(output, ErrorOutput):
        return Completion(content=None, error=output.error)

    choice = _first_choice(output)
    message = getattr(choice, "message", None)
    token_usage = _total_tokens(output)

    if getattr(choice, "finish_reason", None) == TOOL_CALLS_FINISH_REASON:
        return Completion(
            content=to_json(getattr(message, "tool_calls", None)),
            token_usage=token_usage,
            finish_reason=TOOL_CALLS_FINISH_REASON
        )

    # A successful turn always has content, even if the reply text was empty
    content = getattr(message, "content", None)
    return Completion(
        content=content if content is not None else "",
        token_usage=token_usage
    )


def _first_choice(output: Any) -> Optional[Any]:
    choices = getattr(output, "choices", None) or []
    return choices[0] if choices else None


def _total_tokens(output: Any) -> Optional[int]:
    usage = getattr(output, "usage", None)
    return getattr(usage, "total_tokens", None) if usage else None


def assistant_text(output: Any) -> Optional[str]:
    """Text content of the first choice, if any."""
    message = getattr(_first_choice(output), "message", None)
    return getattr(message, "content", None)


def describe_outputs(outputs: List[Any]) -> str:
    """Short human-readable summary used in log lines."""
    failed = sum(1 for output in outputs if isinstance(output, ErrorOutput))
    return f"{len(outputs) - failed} succeeded, {failed} failed"
