"""OpenAI provider implementation."""

import os
from typing import Any, Mapping, Optional, Sequence

from openai import OpenAI
from openai.types.chat import ChatCompletion

from ...exceptions import ConfigurationError
from ...types import Message
from ...utils import get_logger
from ..provider import ChatProvider
from .message_prepare import prepare_messages


logger = get_logger(__name__)


class OpenAIChatProvider(ChatProvider):
    """Chat provider backed by the OpenAI Chat Completions API."""
    
    def __init__(self, api_key: Optional[str] = None, client: Optional[OpenAI] = None):
        """Initialize OpenAI provider.
        
        Args:
            api_key: API key, falls back to the OPENAI_API_KEY environment variable
            client: Pre-built client, skips key handling entirely
        """
        if client is not None:
            self.client = client
            return
        
        api_key = (api_key or os.getenv("OPENAI_API_KEY", "")).strip()
        if not api_key:
            raise ConfigurationError(
                "An OpenAI API key is required. "
                "Pass it in settings['API_KEY'] or set OPENAI_API_KEY."
            )
        
        self.client = OpenAI(api_key=api_key)
    
    def complete(
        self,
        messages: Sequence[Message],
        model: str,
        params: Optional[Mapping[str, Any]] = None
    ) -> ChatCompletion:
        """Send the conversation to the Chat Completions endpoint.
        
        Request properties are applied last and override the prepared
        messages and model when they carry those keys.
        """
        request = {"messages": prepare_messages(messages), "model": model}
        request.update(params or {})
        logger.debug(f"Requesting completion from {request['model']} with {len(messages)} messages")
        return self.client.chat.completions.create(**request)
