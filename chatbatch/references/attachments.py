"""Conversion of resolved references into message content parts."""

import base64

from .descriptors import FileDescriptor
from ..types import FileData, FilePart, ImageUrl, ImageUrlPart, TextPart


def encode_base64(data: bytes) -> str:
    """Encode raw bytes as a base64 string."""
    return base64.b64encode(data).decode('utf-8')


def to_data_url(descriptor: FileDescriptor, data: bytes) -> str:
    """Build a ``data:<mime>;base64,`` URL for ``data``."""
    return descriptor.data_url_prefix + encode_base64(data)


class AttachmentBuilder:
    """Build typed content parts for attachments and fallbacks."""

    def image_url(self, url: str) -> ImageUrlPart:
        """Pass-through image part for a remote image URL."""
        return ImageUrlPart(image_url=ImageUrl(url=url))

    def image_data(self, descriptor: FileDescriptor, data: bytes) -> ImageUrlPart:
        """Image part carrying the bytes inline as a data URL."""
        return ImageUrlPart(image_url=ImageUrl(url=to_data_url(descriptor, data)))

    def file(self, descriptor: FileDescriptor, data: bytes, filename: str) -> FilePart:
        """Document part carrying the bytes inline."""
        return FilePart(file=FileData(filename=filename, file_data=to_data_url(descriptor, data)))

    def from_bytes(self, descriptor: FileDescriptor, data: bytes, filename: str):
        """Image or document part depending on the descriptor kind."""
        if descriptor.is_image:
            return self.image_data(descriptor, data)
        return self.file(descriptor, data, filename)

    def fallback(self, text: str) -> TextPart:
        """Literal text standing in for a reference that couldn't be attached."""
        return TextPart(text=text)
