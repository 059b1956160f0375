"""Custom JSON encoder for chatbatch objects."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any
from pydantic import BaseModel


class ChatBatchJSONEncoder(json.JSONEncoder):
    """JSON encoder that understands pydantic models and dataclasses.
    
    Chat provider responses (tool calls, usage, messages) are pydantic models,
    so they can be dumped directly.
    
    Usage:
        ```python
        import json
        from chatbatch.utils import ChatBatchJSONEncoder
        
        json.dumps(message.tool_calls, cls=ChatBatchJSONEncoder)
        ```
    """
    
    def default(self, obj: Any) -> Any:
        """Convert objects to JSON-serializable format."""
        # Handle Pydantic models (SDK response objects, content parts)
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json", exclude_none=True)
        
        # Handle dataclasses
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)
        
        # Let the base class handle other types
        return super().default(obj)


def to_json(obj: Any, compact: bool = True) -> str:
    """Serialize ``obj`` with :class:`ChatBatchJSONEncoder`.
    
    Args:
        obj: Object to serialize
        compact: Use compact separators (no whitespace)
    """
    if compact:
        return json.dumps(obj, cls=ChatBatchJSONEncoder, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(obj, cls=ChatBatchJSONEncoder, indent=2, ensure_ascii=False)
