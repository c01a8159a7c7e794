"""Wire models for the Anthropic Messages endpoint."""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable, Iterator, List, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from errors import ResponseFormatError


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Model(str, Enum):
    """Supported model identifiers and their wire strings."""

    CLAUDE_OPUS_4 = "claude-opus-4-20250514"
    CLAUDE_SONNET_4 = "claude-sonnet-4-20250514"
    CLAUDE_SONNET_3_7 = "claude-3-7-sonnet-20250219"
    CLAUDE_HAIKU_3_5 = "claude-3-5-haiku-20241022"

    @classmethod
    def parse(cls, value: str) -> "Model":
        """Resolve *value* given either as a wire string or a member name."""

        candidate = value.strip()
        for member in cls:
            if candidate in (member.value, member.name, member.name.lower()):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"unknown model '{value}' (expected one of: {choices})")


DEFAULT_MODEL = Model.CLAUDE_SONNET_4
DEFAULT_MAX_TOKENS = 1024


class ChatMessage(BaseModel):
    """A single turn in the transcript."""

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    role: Role
    content: str


class MessageRequest(BaseModel):
    """Request envelope; serializes to exactly ``model``, ``max_tokens`` and ``messages``."""

    model_config = {
        "extra": "forbid",
    }

    model: Model
    max_tokens: int = Field(..., gt=0)
    messages: List[ChatMessage]

    @classmethod
    def from_messages(
        cls,
        messages: Iterable[ChatMessage],
        *,
        model: Model = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> "MessageRequest":
        return cls(model=model, max_tokens=max_tokens, messages=list(messages))

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()


class ContentBlockType(str, Enum):
    TEXT = "text"


class ContentBlock(BaseModel):
    model_config = {
        "extra": "ignore",
        "frozen": True,
        "populate_by_name": True,
    }

    block_type: ContentBlockType = Field(..., alias="type")
    text: str

    @field_validator("block_type", mode="before")
    @classmethod
    def validate_block_type(cls, value: Any) -> Any:
        if isinstance(value, ContentBlockType):
            return value
        known = {member.value for member in ContentBlockType}
        if not isinstance(value, str) or value not in known:
            raise ValueError(f"unsupported content block type {value!r}")
        return value


class MessageResponse(BaseModel):
    """Response envelope. Keys other than ``content`` (``id``, ``usage``...) are ignored."""

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
    }

    content_blocks: List[ContentBlock] = Field(..., alias="content")

    @classmethod
    def from_payload(cls, payload: Any) -> "MessageResponse":
        """Validate a decoded JSON body, raising :class:`ResponseFormatError` on mismatch."""

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ResponseFormatError(f"Unexpected response shape: {_describe_errors(exc)}") from exc

    @classmethod
    def from_json(cls, raw: str | bytes) -> "MessageResponse":
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise ResponseFormatError(f"Response body is not valid JSON: {exc}") from exc
        return cls.from_payload(payload)


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


class Conversation:
    """Ordered transcript for one session. Only ever appended to."""

    def __init__(self, messages: Iterable[ChatMessage] = ()) -> None:
        self._messages: List[ChatMessage] = list(messages)

    def add_user(self, text: str) -> ChatMessage:
        return self._append(ChatMessage(role=Role.USER, content=text))

    def add_assistant(self, text: str) -> ChatMessage:
        return self._append(ChatMessage(role=Role.ASSISTANT, content=text))

    def _append(self, message: ChatMessage) -> ChatMessage:
        self._messages.append(message)
        return message

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._messages)

    def to_request(
        self,
        *,
        model: Model = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> MessageRequest:
        return MessageRequest.from_messages(self._messages, model=model, max_tokens=max_tokens)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)


__all__ = [
    "ChatMessage",
    "ContentBlock",
    "ContentBlockType",
    "Conversation",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    "MessageRequest",
    "MessageResponse",
    "Model",
    "Role",
]
