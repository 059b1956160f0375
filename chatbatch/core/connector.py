"""Batch entry point: prompts in, ConnectorResponse out."""

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .completion import ConnectorFailure, ConnectorResponse
from .conversation import Conversation, describe_error
from ..config import ConnectorConfig, load_config
from ..providers.openai import OpenAIChatProvider, parse_results
from ..providers.openai.parse_results import describe_outputs
from ..providers.provider import ChatProvider
from ..references import HttpxFetcher, ReferenceResolver
from ..utils import get_logger


logger = get_logger(__name__)

# Property holding the instruction text; consumed at the start of the batch
PROMPT_PROPERTY = "prompt"

ConnectorResult = Union[ConnectorResponse, ConnectorFailure]


class Connector:
    """Run prompt batches as one conversation against a chat provider.

    Example:
        >>> connector = Connector(config=load_config())
        >>> result = connector.run(
        ...     "gpt-4o",
        ...     ["Describe /tmp/cat.png", "Now make it shorter"],
        ...     properties={"temperature": 0.2},
        ...     settings={"API_KEY": "sk-..."}
        ... )
        >>> result.to_dict()["Completions"][0]["Content"]
    """

    def __init__(
        self,
        config: Optional[ConnectorConfig] = None,
        provider_factory: Optional[Callable[[Mapping[str, Any], ConnectorConfig], ChatProvider]] = None,
        resolver: Optional[ReferenceResolver] = None
    ):
        """Initialize connector.

        Args:
            config: Connector configuration (default: loaded from the environment)
            provider_factory: Builds the chat provider from run settings
            resolver: Reference resolver shared by all runs
        """
        self.config = config or load_config()
        self.provider_factory = provider_factory or _openai_provider
        self.resolver = resolver

    def run(
        self,
        model: str,
        prompts: List[str],
        properties: Optional[Mapping[str, Any]] = None,
        settings: Optional[Mapping[str, Any]] = None
    ) -> ConnectorResult:
        """Process all prompts in order as a single conversation.

        Args:
            model: Model name
            prompts: User prompts, one turn each
            properties: Request properties; "prompt" is the instruction text,
                everything else is sent with every request
            settings: Run settings, must hold the API credential

        Returns:
            ConnectorResponse with one completion per prompt, or
            ConnectorFailure if the batch could not be processed
        """
        properties = dict(properties or {})
        settings = settings or {}

        try:
            instruction = properties.pop(PROMPT_PROPERTY, None)
            if instruction is None or instruction == "":
                instruction = self.config.default_prompt
            provider = self.provider_factory(settings, self.config)

            conversation = Conversation(
                model,
                provider,
                config=self.config,
                resolver=self.resolver or ReferenceResolver(HttpxFetcher(timeout=self.config.fetch_timeout)),
                params=properties
            )
            conversation.start(instruction)

            total = len(prompts)
            outputs = [
                conversation.run_turn(prompt, index, total)
                for index, prompt in enumerate(prompts)
            ]

            logger.info(f"Batch finished for {model}: {describe_outputs(outputs)}")
            return parse_results(outputs, model)

        except Exception as e:
            logger.exception(f"Batch for {model} failed")
            return ConnectorFailure(error=describe_error(e), model_type=model)


def _openai_provider(settings: Mapping[str, Any], config: ConnectorConfig) -> ChatProvider:
    return OpenAIChatProvider(api_key=settings.get(config.api_key_setting))


def run(
    model: str,
    prompts: List[str],
    properties: Optional[Dict[str, Any]] = None,
    settings: Optional[Dict[str, Any]] = None,
    config: Optional[ConnectorConfig] = None,
    provider: Optional[ChatProvider] = None,
    resolver: Optional[ReferenceResolver] = None
) -> ConnectorResult:
    """Run a prompt batch.

    Args:
        model: Model name (e.g., "gpt-4o")
        prompts: User prompts, processed strictly in order
        properties: Request properties ("prompt" sets the instruction text)
        settings: Run settings holding "API_KEY"
        config: Connector configuration (default: loaded from the environment)
        provider: Chat provider to use instead of building one from settings
        resolver: Reference resolver to use instead of the network/disk default

    Returns:
        ConnectorResponse, or ConnectorFailure on a fatal error
    """
    provider_factory = None
    if provider is not None:
        def provider_factory(settings, config):
            return provider

    connector = Connector(config=config, provider_factory=provider_factory, resolver=resolver)
    return connector.run(model, prompts, properties, settings)
