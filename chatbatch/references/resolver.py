"""Resolution of file references into attachments."""

import os
import posixpath
import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import unquote, urlparse

from .attachments import AttachmentBuilder
from .extractor import FileReference
from .ports import Fetcher, FileSystem, HttpxFetcher, LocalFileSystem
from ..exceptions import ResolutionError
from ..types import FilePart, ImageUrlPart
from ..utils import get_logger


logger = get_logger(__name__)

DRIVE_PATH = re.compile(r"^[A-Za-z]:[\\/]")

Attachment = Union[ImageUrlPart, FilePart]


@dataclass
class Resolution:
    """Outcome of resolving one reference.

    Exactly one of ``attachment`` and ``fallback_text`` is set.
    """

    attachment: Optional[Attachment] = None
    fallback_text: Optional[str] = None

    def __post_init__(self):
        """Validate that exactly one outcome is present."""
        if (self.attachment is None) == (self.fallback_text is None):
            raise ValueError("Resolution needs exactly one of attachment or fallback_text")

    @property
    def is_fallback(self) -> bool:
        return self.fallback_text is not None


class ReferenceResolver:
    """Turn references into attachments, degrading to literal text on failure.

    Policy:
        - remote image: URL passed through, nothing fetched
        - remote file: fetched and inlined, non-2xx or transport error -> fallback
        - local image/file: read and inlined, anything but a regular file -> fallback

    Example:
        >>> resolver = ReferenceResolver()
        >>> resolution = resolver.resolve(reference)
        >>> part = resolution.attachment or TextPart(text=resolution.fallback_text)
    """

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        filesystem: Optional[FileSystem] = None,
        builder: Optional[AttachmentBuilder] = None
    ):
        """Initialize resolver.

        Args:
            fetcher: Port for remote fetches (default: httpx, no timeout)
            filesystem: Port for local reads (default: process filesystem)
            builder: Content part builder
        """
        self.fetcher = fetcher or HttpxFetcher()
        self.filesystem = filesystem or LocalFileSystem()
        self.builder = builder or AttachmentBuilder()

    def resolve(self, reference: FileReference) -> Resolution:
        """Resolve a reference. Never raises for I/O or encoding problems."""
        try:
            if reference.is_remote:
                attachment = self._resolve_remote(reference)
            else:
                attachment = self._resolve_local(reference)
        except Exception as e:
            logger.warning(f"Could not attach {reference.sanitized}, sending it as text: {e}")
            return Resolution(fallback_text=reference.sanitized)

        logger.debug(f"Attached {reference.sanitized} as {attachment.type}")
        return Resolution(attachment=attachment)

    def _resolve_remote(self, reference: FileReference) -> Attachment:
        url = reference.sanitized

        if reference.descriptor.is_image:
            return self.builder.image_url(url)

        response = self.fetcher.fetch(url)
        if not response.is_success:
            raise ResolutionError(f"Fetching {url} returned status {response.status_code}")

        return self.builder.file(
            reference.descriptor,
            response.content,
            remote_filename(url, reference.extension)
        )

    def _resolve_local(self, reference: FileReference) -> Attachment:
        path = self.absolute_path(reference.sanitized)

        if not self.filesystem.is_file(path):
            raise ResolutionError(f"{path} is not a regular file")

        data = self.filesystem.read_bytes(path)
        return self.builder.from_bytes(reference.descriptor, data, local_filename(path))

    def absolute_path(self, value: str) -> str:
        """Absolute and drive-letter paths pass through, the rest joins the cwd."""
        if DRIVE_PATH.match(value) or os.path.isabs(value):
            return value
        return os.path.normpath(os.path.join(self.filesystem.cwd(), value))


def remote_filename(url: str, extension: str) -> str:
    """Basename of the URL path, ``file<ext>`` when there is none."""
    try:
        path = urlparse(url).path
    except ValueError:
        path = ""
    name = unquote(posixpath.basename(path))
    return name or f"file{extension}"


def local_filename(path: str) -> str:
    """Basename that also understands Windows separators."""
    return re.split(r"[\\/]", path)[-1]
