"""Custom exceptions for chatbatch."""


class ChatBatchError(Exception):
    """Base exception for all chatbatch errors."""
    pass


class ConfigurationError(ChatBatchError):
    """Raised when connector configuration or credentials are invalid."""
    pass


class ResolutionError(ChatBatchError):
    """Raised when a file reference cannot be turned into an attachment."""
    pass
