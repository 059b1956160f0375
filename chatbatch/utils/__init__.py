"""Utility modules for chatbatch."""

from .json_encoder import ChatBatchJSONEncoder, to_json
from .logging import get_logger, set_log_level

__all__ = ["ChatBatchJSONEncoder", "to_json", "get_logger", "set_log_level"]
