"""
chatbatch

Run a batch of prompts as one conversation with a chat-completion service,
attaching the images and documents the prompts mention.
"""

from .config import ConnectorConfig, load_config
from .core import (
    Completion,
    Connector,
    ConnectorFailure,
    ConnectorResponse,
    Conversation,
    ErrorOutput,
    run,
)
from .exceptions import ChatBatchError, ConfigurationError, ResolutionError
from .references import FileReference, ReferenceExtractor, ReferenceResolver, extract_references

__version__ = "0.1.0"

__all__ = [
    "ChatBatchError",
    "Completion",
    "ConfigurationError",
    "Connector",
    "ConnectorConfig",
    "ConnectorFailure",
    "ConnectorResponse",
    "Conversation",
    "ErrorOutput",
    "FileReference",
    "ReferenceExtractor",
    "ReferenceResolver",
    "ResolutionError",
    "extract_references",
    "load_config",
    "run",
]
