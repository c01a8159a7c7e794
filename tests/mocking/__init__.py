"""Test utilities shared across the chat client suite."""
from .server import MockAnthropicServer, RecordedRequest
from .responses import error_body, message_body, text_block

__all__ = [
    "MockAnthropicServer",
    "RecordedRequest",
    "error_body",
    "message_body",
    "text_block",
]
