"""Message preparation for the OpenAI Chat Completions API."""

from typing import Any, Dict, List, Sequence

from ...types import FilePart, ImageUrlPart, Message, TextPart


def prepare_content_part(part) -> Dict[str, Any]:
    """Convert a content part to its wire format."""
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    
    if isinstance(part, ImageUrlPart):
        return {"type": "image_url", "image_url": {"url": part.image_url.url}}
    
    if isinstance(part, FilePart):
        file_data = {}
        if part.file.filename is not None:
            file_data["filename"] = part.file.filename
        if part.file.file_data is not None:
            file_data["file_data"] = part.file.file_data
        return {"type": "file", "file": file_data}
    
    raise TypeError(f"Unsupported content part: {type(part).__name__}")


def prepare_messages(messages: Sequence[Message]) -> List[Dict[str, Any]]:
    """Convert conversation messages to OpenAI request dicts."""
    return [
        {
            "role": message.role,
            "content": [prepare_content_part(part) for part in message.content]
        }
        for message in messages
    ]
