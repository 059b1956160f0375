"""Completion and connector response data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ErrorOutput:
    """Failed chat call, recorded in place of the provider's response.

    Attributes:
        error: Error message (or serialized error when it had none)
        model: Model that was requested
    """

    error: str
    model: str


@dataclass
class Completion:
    """Normalized outcome of one prompt.

    Attributes:
        content: Response text, serialized tool calls, or None if the turn failed
        error: Error message if the turn failed
        token_usage: Total tokens reported by the service
        finish_reason: Set only when the model stopped to call tools
    """

    content: Optional[str]
    error: Optional[str] = None
    token_usage: Optional[int] = None
    finish_reason: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Whether the turn completed successfully."""
        return self.content is not None and self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the connector output shape, omitting unset fields."""
        data: Dict[str, Any] = {"Content": self.content}
        if self.error is not None:
            data["Error"] = self.error
        if self.token_usage is not None:
            data["TokenUsage"] = self.token_usage
        if self.finish_reason is not None:
            data["FinishReason"] = self.finish_reason
        return data


@dataclass
class ConnectorResponse:
    """Result of a batch: one completion per prompt, in prompt order."""

    completions: List[Completion] = field(default_factory=list)
    model_type: str = ""

    @property
    def is_success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Completions": [completion.to_dict() for completion in self.completions],
            "ModelType": self.model_type,
        }


@dataclass
class ConnectorFailure:
    """Result of a batch that failed as a whole."""

    error: str
    model_type: str

    @property
    def is_success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"Error": self.error, "ModelType": self.model_type}
