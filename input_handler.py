"""Line input for the chat loop, using prompt_toolkit when a terminal is available."""

import re
import sys
from typing import Optional, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output


# ANSI escape code pattern
ANSI_ESCAPE_PATTERN = re.compile(r'\x1b\[[0-9;]*m')


def _format_prompt_for_toolkit(prompt: str) -> Union[ANSI, str]:
    """
    Format prompt string for prompt_toolkit.

    If the prompt contains ANSI escape codes, wrap it in ANSI() so
    prompt_toolkit renders the colors instead of printing the raw codes.
    """
    if ANSI_ESCAPE_PATTERN.search(prompt):
        return ANSI(prompt)
    return prompt


class InputHandler:
    """Reads one line per turn with in-session editing history."""

    def __init__(
        self,
        custom_input: Optional[Input] = None,
        custom_output: Optional[Output] = None,
    ):
        """
        Initialize input handler.

        Args:
            custom_input: Custom input for prompt_toolkit. Used for testing.
            custom_output: Custom output for prompt_toolkit. Used for testing.
        """
        self._session: Optional[PromptSession] = None
        self._custom_input = custom_input
        self._custom_output = custom_output
        self._fallback_mode = False

    def _get_session(self) -> Optional[PromptSession]:
        """Get or create PromptSession, or None if in fallback mode."""
        if self._fallback_mode:
            return None

        if self._session is None:
            if self._custom_input is None and not sys.stdin.isatty():
                # Piped input: prompt_toolkit needs a terminal
                self._fallback_mode = True
                return None
            try:
                kwargs = {
                    "history": InMemoryHistory(),
                    "enable_history_search": True,
                    "multiline": False,
                }
                if self._custom_input is not None:
                    kwargs["input"] = self._custom_input
                if self._custom_output is not None:
                    kwargs["output"] = self._custom_output
                self._session = PromptSession(**kwargs)
            except Exception:
                # No usable console (e.g. some CI runners); plain readline still works
                self._fallback_mode = True
                return None
        return self._session

    def get_input(self, prompt: str = "") -> str:
        """
        Get user input with editing support.

        Raises:
            EOFError: When the input source is exhausted (Ctrl+D)
            KeyboardInterrupt: When user sends interrupt (Ctrl+C)
        """
        session = self._get_session()

        if session is None:
            if prompt:
                print(prompt, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                raise EOFError
            return line.rstrip("\n")

        return session.prompt(_format_prompt_for_toolkit(prompt))

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return the next line, or ``None`` once input is exhausted."""
        try:
            return self.get_input(prompt)
        except EOFError:
            return None
