"""Shared pytest fixtures for the chat client test suite."""
from __future__ import annotations

import io
import sys
from typing import Iterable, List, Optional

import pytest
from rich.console import Console

from tests.mocking import MockAnthropicServer


@pytest.fixture
def anthropic_server() -> MockAnthropicServer:
    """Provide a fresh ``MockAnthropicServer``."""
    return MockAnthropicServer()


@pytest.fixture
def recording_console() -> Console:
    """A colorless console that writes into a buffer readable via ``export_text``."""
    return Console(file=io.StringIO(), no_color=True, highlight=False, width=120, record=True)


class ScriptedLines:
    """Line source that yields the given lines and then ``None``."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return self._lines.pop(0) if self._lines else None


@pytest.fixture
def scripted_lines():
    """Factory for ``ScriptedLines`` line sources."""

    def factory(*lines: str) -> ScriptedLines:
        return ScriptedLines(lines)

    return factory


@pytest.fixture
def stdin_stub(monkeypatch):
    """Patch ``sys.stdin`` with a simple line-based stub."""

    def factory(*lines: str):
        class _Stub:
            def __init__(self, values: Iterable[str]):
                self._values = list(values)

            def readline(self) -> str:
                return self._values.pop(0) if self._values else ""

            def isatty(self) -> bool:
                return False

        stub = _Stub(lines)
        monkeypatch.setattr(sys, "stdin", stub)
        return stub

    return factory


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Anthropic settings inherited from the developer's shell."""
    for name in ("ANTHROPIC_API_KEY", "ANTHROPIC_MODEL", "ANTHROPIC_MAX_TOKENS", "ANTHROPIC_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
