"""Supported reference file types."""

from dataclasses import dataclass
from typing import Dict, Optional


IMAGE = "image"
FILE = "file"


@dataclass(frozen=True)
class FileDescriptor:
    """Static metadata for a supported file extension.
    
    Attributes:
        kind: "image" for image parts, "file" for document parts
        mime: MIME type sent to the chat service
        data_url_prefix: Prefix placed before the base64 payload
    """
    
    kind: str
    mime: str
    data_url_prefix: str
    
    @property
    def is_image(self) -> bool:
        return self.kind == IMAGE


def _descriptor(kind: str, mime: str) -> FileDescriptor:
    return FileDescriptor(kind=kind, mime=mime, data_url_prefix=f"data:{mime};base64,")


# Extension (lower-case, with dot) -> descriptor
SUPPORTED_TYPES: Dict[str, FileDescriptor] = {
    ".png": _descriptor(IMAGE, "image/png"),
    ".jpeg": _descriptor(IMAGE, "image/jpeg"),
    ".jpg": _descriptor(IMAGE, "image/jpeg"),
    ".webp": _descriptor(IMAGE, "image/webp"),
    ".gif": _descriptor(IMAGE, "image/gif"),
    ".pdf": _descriptor(FILE, "application/pdf"),
}


def get_descriptor(extension: str) -> Optional[FileDescriptor]:
    """Look up the descriptor for an extension such as ``.PNG`` or ``.pdf``."""
    if not extension:
        return None
    return SUPPORTED_TYPES.get(extension.lower())
