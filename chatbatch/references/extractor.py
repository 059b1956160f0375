"""Discovery of file and URL references inside prompt text."""

import posixpath
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

from .descriptors import SUPPORTED_TYPES, FileDescriptor, get_descriptor


LEADING_PUNCTUATION = "([{<\"'`"
TRAILING_PUNCTUATION = ".,;:!?)]}>\"'`"

REMOTE_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class FileReference:
    """A supported file or URL reference found in a prompt.

    Attributes:
        original: Raw matched substring
        sanitized: Substring without wrapping punctuation, used as identity
        extension: Lower-case extension including the dot
        descriptor: Type metadata for the extension
        is_remote: Whether the reference is an http(s) URL
    """

    original: str
    sanitized: str
    extension: str
    descriptor: FileDescriptor
    is_remote: bool

    @property
    def key(self) -> str:
        """Case-insensitive identity used for deduplication."""
        return self.sanitized.lower()


def build_reference_pattern(extensions=None) -> re.Pattern:
    """Compile the reference scanner for a set of extensions.

    Alternatives are tried in order: http(s) URL, Windows drive path,
    absolute POSIX path, relative POSIX path (``~``/``.``/``..`` prefixed or
    not) and bare filename. Everything but URLs must end in one of ``extensions``; URLs are
    filtered on their parsed path afterwards so query strings don't get in
    the way.
    """
    if extensions is None:
        extensions = SUPPORTED_TYPES.keys()

    # Longest first so "jpeg" wins over "jpg"-style prefixes
    names = sorted({ext.lstrip(".") for ext in extensions}, key=len, reverse=True)
    ending = r"\.(?:" + "|".join(re.escape(name) for name in names) + r")(?![\w/\\-]|\.\w)"

    url = r"https?://[^\s<>\"'`]+"
    drive_path = r"[A-Za-z]:[\\/][^:<>\"|?*\r\n]*?" + ending
    # Absolute paths may contain spaces, like drive paths; relative ones may not
    absolute_path = r"(?<![\w.~-])/[^:<>\"'|?*`\r\n]*?" + ending
    relative_path = r"(?:~|\.{1,2}|[\w-][\w.-]*)/[^\s:<>\"'|?*`]*?" + ending
    bare_filename = r"[\w-][\w.-]*" + ending

    alternatives = (url, drive_path, absolute_path, relative_path, bare_filename)
    return re.compile(
        "|".join(f"(?:{alternative})" for alternative in alternatives),
        re.IGNORECASE,
    )


REFERENCE_PATTERN = build_reference_pattern()


def sanitize(candidate: str) -> str:
    """Strip wrapping brackets, quotes and trailing punctuation."""
    return candidate.lstrip(LEADING_PUNCTUATION).rstrip(TRAILING_PUNCTUATION)


def is_remote(value: str) -> bool:
    return value.lower().startswith(REMOTE_SCHEMES)


def get_extension(value: str) -> str:
    """Get the lower-case extension of a path or URL.

    For URLs only the path component counts. If the URL can't be parsed the
    naive suffix of the whole string is used.
    """
    if is_remote(value):
        try:
            path = urlparse(value).path
        except ValueError:
            return _naive_suffix(value)
        return posixpath.splitext(path)[1].lower()
    return _naive_suffix(value)


def _naive_suffix(value: str) -> str:
    index = value.rfind(".")
    if index == -1:
        return ""
    return value[index:].lower()


class ReferenceExtractor:
    """Scan prompts for supported file and URL references.

    Example:
        >>> extractor = ReferenceExtractor()
        >>> [ref.sanitized for ref in extractor.extract("Compare (/tmp/a.png) with b.PDF.")]
        ['/tmp/a.png', 'b.PDF']
    """

    def __init__(self, pattern: Optional[re.Pattern] = None):
        self.pattern = pattern or REFERENCE_PATTERN

    def extract(self, prompt: str) -> List[FileReference]:
        """Extract unique references in first-seen order."""
        references = []
        seen = set()

        if not prompt:
            return references

        for match in self.pattern.finditer(prompt):
            original = match.group(0)
            sanitized = sanitize(original)
            if not sanitized:
                continue

            extension = get_extension(sanitized)
            descriptor = get_descriptor(extension)
            if descriptor is None:
                continue

            key = sanitized.lower()
            if key in seen:
                continue
            seen.add(key)

            references.append(FileReference(
                original=original,
                sanitized=sanitized,
                extension=extension,
                descriptor=descriptor,
                is_remote=is_remote(sanitized),
            ))

        return references


def extract_references(prompt: str) -> List[FileReference]:
    """Extract references from ``prompt`` with the default scanner."""
    return ReferenceExtractor().extract(prompt)
