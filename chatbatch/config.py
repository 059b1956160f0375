"""Connector configuration."""

import os
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from dotenv import load_dotenv

from .exceptions import ConfigurationError


DEFAULT_PROMPT = "You are a helpful assistant."
EMPTY_RESPONSE_PLACEHOLDER = "No response."
API_KEY = "API_KEY"

# Model name prefixes that take no leading instruction message
NO_INSTRUCTION_PREFIXES = ("o1",)


@dataclass(frozen=True)
class ConfigProperty:
    """A user-facing connector property and its default value."""

    id: str
    label: str
    type: str
    value: Any = None


# Properties understood by the connector. "prompt" is the instruction text,
# everything else is passed through to the chat completion call.
PROPERTIES: List[ConfigProperty] = [
    ConfigProperty(id="prompt", label="System Prompt", type="string", value=DEFAULT_PROMPT),
    ConfigProperty(id="max_completion_tokens", label="Max Completion Tokens", type="number"),
    ConfigProperty(id="temperature", label="Temperature", type="number"),
    ConfigProperty(id="top_p", label="Top P", type="number"),
    ConfigProperty(id="seed", label="Seed", type="number"),
]


def get_property_default(property_id: str, properties: Optional[List[ConfigProperty]] = None) -> Any:
    """Default value of a property, ``None`` if unknown."""
    for prop in properties or PROPERTIES:
        if prop.id == property_id:
            return prop.value
    return None


@dataclass
class ConnectorConfig:
    """Configuration for a connector run.

    Attributes:
        default_prompt: Instruction text used when the run doesn't supply one
        instruction_role: Role of the leading instruction message
        no_instruction_prefixes: Model name prefixes that get no instruction message
        empty_response_placeholder: Assistant text recorded when a reply has no text
        fetch_timeout: Seconds to wait for remote references, None waits forever
        api_key_setting: Settings key holding the API credential
    """

    default_prompt: str = field(default_factory=lambda: get_property_default("prompt"))
    instruction_role: str = "developer"
    no_instruction_prefixes: Tuple[str, ...] = NO_INSTRUCTION_PREFIXES
    empty_response_placeholder: str = EMPTY_RESPONSE_PLACEHOLDER
    fetch_timeout: Optional[float] = None
    api_key_setting: str = API_KEY

    def __post_init__(self):
        """Validate configuration."""
        if self.instruction_role not in ("system", "developer"):
            raise ConfigurationError(
                f"instruction_role must be 'system' or 'developer', got {self.instruction_role!r}"
            )
        if self.fetch_timeout is not None and self.fetch_timeout <= 0:
            raise ConfigurationError("fetch_timeout must be positive")


def load_config(dotenv_path: Optional[str] = None) -> ConnectorConfig:
    """Build a config from the environment (and a ``.env`` file, if present).

    Environment variables:
        CHATBATCH_DEFAULT_PROMPT: Overrides the default instruction text
        CHATBATCH_INSTRUCTION_ROLE: "developer" or "system"
        CHATBATCH_FETCH_TIMEOUT: Seconds, empty for no timeout
    """
    load_dotenv(dotenv_path)

    kwargs = {}

    default_prompt = os.getenv("CHATBATCH_DEFAULT_PROMPT", "").strip()
    if default_prompt:
        kwargs["default_prompt"] = default_prompt

    instruction_role = os.getenv("CHATBATCH_INSTRUCTION_ROLE", "").strip()
    if instruction_role:
        kwargs["instruction_role"] = instruction_role

    fetch_timeout = os.getenv("CHATBATCH_FETCH_TIMEOUT", "").strip()
    if fetch_timeout:
        try:
            kwargs["fetch_timeout"] = float(fetch_timeout)
        except ValueError:
            raise ConfigurationError(f"CHATBATCH_FETCH_TIMEOUT is not a number: {fetch_timeout!r}")

    return ConnectorConfig(**kwargs)
