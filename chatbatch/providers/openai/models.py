"""OpenAI model families."""

from typing import Iterable


# finish_reason reported when the model asks for tool calls
TOOL_CALLS_FINISH_REASON = "tool_calls"


def accepts_instruction(model: str, no_instruction_prefixes: Iterable[str]) -> bool:
    """Whether a leading instruction message should be sent to ``model``.
    
    Reasoning models such as the o1 family reject system/developer turns.
    """
    name = model.lower()
    return not any(name.startswith(prefix.lower()) for prefix in no_instruction_prefixes)
