"""Type definitions for chat messages and their content parts."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class TextPart(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    text: str


class ImageUrl(BaseModel):
    """Image location: a remote URL or a ``data:`` URL."""

    url: str


class ImageUrlPart(BaseModel):
    """Image content part."""

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


class FileData(BaseModel):
    """Inline file payload."""

    filename: Optional[str] = None
    file_data: Optional[str] = None  # data:<mime>;base64,<payload>


class FilePart(BaseModel):
    """Document content part."""

    type: Literal["file"] = "file"
    file: FileData


ContentPart = Annotated[Union[TextPart, ImageUrlPart, FilePart], Field(discriminator="type")]

MessageRole = Literal["system", "developer", "user", "assistant"]


class Message(BaseModel):
    """A single conversation message."""

    role: MessageRole
    content: List[ContentPart]

    @classmethod
    def text(cls, role: MessageRole, text: str) -> "Message":
        """Build a message holding a single text part."""
        return cls(role=role, content=[TextPart(text=text)])
