"""Base chat provider class."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence

from ..types import Message


class ChatProvider(ABC):
    """Abstract base class for chat-completion providers.
    
    A provider receives the full conversation on every call and returns the
    service's raw response object. Errors are raised, not returned.
    """
    
    @abstractmethod
    def complete(
        self,
        messages: Sequence[Message],
        model: str,
        params: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """Request a completion for the conversation.
        
        Args:
            messages: Entire conversation so far, oldest first
            model: Model name
            params: Extra request parameters, merged over the request so a
                "model" or "messages" entry replaces the default
            
        Returns:
            Raw provider response
        """
        pass
