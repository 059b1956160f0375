"""Core conversation and batch components."""

from .completion import Completion, ConnectorFailure, ConnectorResponse, ErrorOutput
from .conversation import Conversation
from .connector import Connector, run

__all__ = [
    "Completion",
    "Connector",
    "ConnectorFailure",
    "ConnectorResponse",
    "Conversation",
    "ErrorOutput",
    "run",
]
