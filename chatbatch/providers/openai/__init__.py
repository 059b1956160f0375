"""OpenAI provider."""

from .models import TOOL_CALLS_FINISH_REASON, accepts_instruction
from .openai_provider import OpenAIChatProvider
from .parse_results import parse_results

__all__ = ["OpenAIChatProvider", "TOOL_CALLS_FINISH_REASON", "accepts_instruction", "parse_results"]
