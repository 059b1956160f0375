"""Test doubles."""

from .fake_ports import FakeFetcher, FakeFileSystem
from .mock_provider import MockChatProvider, RecordedCall, make_completion, make_tool_call

__all__ = [
    "FakeFetcher",
    "FakeFileSystem",
    "MockChatProvider",
    "RecordedCall",
    "make_completion",
    "make_tool_call",
]
