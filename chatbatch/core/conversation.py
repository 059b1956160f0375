"""Stateful multi-turn conversation with per-turn failure isolation."""

import json
from typing import Any, Dict, List, Optional, Tuple

from .completion import ErrorOutput
from ..config import ConnectorConfig
from ..providers.openai.models import accepts_instruction
from ..providers.openai.parse_results import assistant_text
from ..providers.provider import ChatProvider
from ..references import ReferenceExtractor, ReferenceResolver
from ..types import ContentPart, Message, TextPart
from ..utils import get_logger


logger = get_logger(__name__)


def describe_error(error: BaseException) -> str:
    """Error message, or a JSON rendering of the error when it has none."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message

    text = str(error)
    if text:
        return text

    return json.dumps({"type": type(error).__name__, "args": list(error.args)}, default=str)


class Conversation:
    """Ordered message history driven one prompt at a time.

    The history is append-only: each turn adds a user message, and an
    assistant message only if the call succeeded. A failed call leaves its
    user message in place and later turns still see it.

    Example:
        >>> conversation = Conversation("gpt-4o", provider, config=config)
        >>> conversation.start("Be concise.")
        >>> outputs = [conversation.run_turn(p) for p in prompts]
    """

    def __init__(
        self,
        model: str,
        provider: ChatProvider,
        config: Optional[ConnectorConfig] = None,
        resolver: Optional[ReferenceResolver] = None,
        extractor: Optional[ReferenceExtractor] = None,
        params: Optional[Dict[str, Any]] = None
    ):
        """Initialize conversation.

        Args:
            model: Requested model name
            provider: Chat provider that performs the remote call
            config: Connector configuration
            resolver: Reference resolver (default: real network and disk)
            extractor: Reference extractor
            params: Extra request parameters sent with every call
        """
        self.model = model
        self.provider = provider
        self.config = config or ConnectorConfig()
        self.resolver = resolver or ReferenceResolver()
        self.extractor = extractor or ReferenceExtractor()
        self.params = dict(params or {})
        self._messages: List[Message] = []
        self._started = False

    @property
    def messages(self) -> Tuple[Message, ...]:
        """Snapshot of the conversation history."""
        return tuple(self._messages)

    def start(self, instruction: Any) -> None:
        """Open the conversation with the instruction message, if the model takes one.

        Non-string instructions (e.g. a number from a JSON-decoded property)
        are sent as their ``str()`` form.
        """
        if self._started:
            raise RuntimeError("Conversation already started")
        self._started = True

        if not accepts_instruction(self.model, self.config.no_instruction_prefixes):
            logger.debug(f"Model {self.model} takes no instruction message")
            return

        self._messages.append(Message.text(self.config.instruction_role, str(instruction)))

    def build_user_content(self, prompt: str) -> List[ContentPart]:
        """Prompt text followed by one part per reference found in it."""
        content: List[ContentPart] = [TextPart(text=prompt)]

        for reference in self.extractor.extract(prompt):
            resolution = self.resolver.resolve(reference)
            if resolution.is_fallback:
                content.append(self.resolver.builder.fallback(resolution.fallback_text))
            else:
                content.append(resolution.attachment)

        return content

    def run_turn(self, prompt: str, index: int = 0, total: int = 1) -> Any:
        """Run one prompt through the conversation.

        Failures of the remote call are returned as ErrorOutput. Anything
        raised while building the user message propagates.

        Returns:
            The provider's response, or ErrorOutput
        """
        if not self._started:
            raise RuntimeError("Conversation not started")

        self._messages.append(Message(role="user", content=self.build_user_content(prompt)))
        logger.debug(f"Conversation history before prompt {index + 1}: {self._messages}")

        try:
            response = self.provider.complete(self.messages, self.model, self.params)
        except Exception as e:
            error = describe_error(e)
            logger.warning(f"Prompt {index + 1} of {total} failed: {error}")
            return ErrorOutput(error=error, model=self.model)

        reply = assistant_text(response) or self.config.empty_response_placeholder
        self._messages.append(Message.text("assistant", reply))
        logger.info(f"Response to prompt {index + 1} of {total}: {response}")

        return response
