"""Reference discovery and attachment resolution."""

from .attachments import AttachmentBuilder
from .descriptors import SUPPORTED_TYPES, FileDescriptor, get_descriptor
from .extractor import FileReference, ReferenceExtractor, extract_references
from .ports import FetchResponse, Fetcher, FileSystem, HttpxFetcher, LocalFileSystem
from .resolver import ReferenceResolver, Resolution

__all__ = [
    "AttachmentBuilder",
    "FetchResponse",
    "Fetcher",
    "FileDescriptor",
    "FileReference",
    "FileSystem",
    "HttpxFetcher",
    "LocalFileSystem",
    "ReferenceExtractor",
    "ReferenceResolver",
    "Resolution",
    "SUPPORTED_TYPES",
    "extract_references",
    "get_descriptor",
]
