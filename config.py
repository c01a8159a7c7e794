"""Configuration for the chat client, read from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from errors import ConfigurationError
from messages import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, Model

API_KEY_ENV = "ANTHROPIC_API_KEY"


@dataclass(frozen=True)
class ChatConfig:
    """Settings needed to start a chat session."""

    api_key: str
    model: Model = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"ChatConfig(api_key='***', model={self.model.value!r}, "
            f"max_tokens={self.max_tokens}, timeout={self.timeout})"
        )


def _parse_positive_int(raw: Optional[str], fallback: int) -> int:
    """Return a positive integer parsed from *raw*, or *fallback* on failure."""

    if raw is None:
        return fallback
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return fallback
    return value if value > 0 else fallback


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def load_chat_config(environ: Optional[Mapping[str, str]] = None) -> ChatConfig:
    """Load chat settings from *environ* (defaults to ``os.environ``).

    ``ANTHROPIC_API_KEY`` is mandatory. ``ANTHROPIC_MODEL``,
    ``ANTHROPIC_MAX_TOKENS`` and ``ANTHROPIC_TIMEOUT`` are optional.
    """

    env = os.environ if environ is None else environ

    api_key = (env.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

    raw_model = (env.get("ANTHROPIC_MODEL") or "").strip()
    if raw_model:
        try:
            model = Model.parse(raw_model)
        except ValueError as exc:
            raise ConfigurationError(f"ANTHROPIC_MODEL: {exc}") from exc
    else:
        model = DEFAULT_MODEL

    max_tokens = _parse_positive_int(env.get("ANTHROPIC_MAX_TOKENS"), DEFAULT_MAX_TOKENS)
    timeout = _parse_timeout(env.get("ANTHROPIC_TIMEOUT"))
    return ChatConfig(api_key=api_key, model=model, max_tokens=max_tokens, timeout=timeout)


__all__ = ["API_KEY_ENV", "ChatConfig", "load_chat_config"]
