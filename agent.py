"""Interactive chat loop that resends the full transcript every turn."""

import logging
from enum import Enum
from typing import Callable, Optional

from pyfiglet import Figlet
from rich.console import Console
from rich.text import Text

from anthropic_client import AnthropicClient
from messages import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    ContentBlockType,
    Conversation,
    MessageResponse,
    Model,
)


# Receives the prompt to display, returns the next line or None at end of input.
LineSource = Callable[[str], Optional[str]]

ASSISTANT_NAME = "Claude"
GREETING = "Chat with Syl (use 'ctrl-c' to quit)"

logger = logging.getLogger(__name__)


class AgentState(Enum):
    AWAITING_INPUT = "awaiting_input"
    PROCESSING = "processing"
    STOPPED = "stopped"


class Agent:
    """Owns the conversation and drives one request per user line."""

    def __init__(
        self,
        client: AnthropicClient,
        input_reader: LineSource,
        *,
        model: Model = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        console: Optional[Console] = None,
        use_color: bool = True,
        show_banner: bool = True,
    ) -> None:
        self.client = client
        self.input_reader = input_reader
        self.model = model
        self.max_tokens = max_tokens
        self.use_color = use_color
        self.show_banner = show_banner
        self.console = console or Console(no_color=not use_color, highlight=False, soft_wrap=False)
        self.conversation = Conversation()
        self.state = AgentState.AWAITING_INPUT

    @property
    def prompt(self) -> str:
        if self.use_color:
            return "\u001b[94mYou\u001b[0m: "
        return "You: "

    def run(self) -> None:
        """Loop until the line source reports end of input."""

        if self.show_banner:
            self._print_banner()
        self.console.print(GREETING)

        try:
            while True:
                self.state = AgentState.AWAITING_INPUT
                line = self.input_reader(self.prompt)
                if line is None:
                    break
                if not line.strip():
                    # The API rejects empty text content
                    continue
                self.run_turn(line)
        except KeyboardInterrupt:
            style = "bold yellow" if self.use_color else ""
            self.console.print()
            self.console.print(Text("Goodbye!", style=style))
        finally:
            self.state = AgentState.STOPPED
            logger.debug("Chat stopped after %d messages", len(self.conversation))

    def run_turn(self, text: str) -> MessageResponse:
        """Send *text* with the whole transcript and print every reply block.

        Errors from the client propagate unchanged; the user message stays in
        the transcript since the session ends anyway.
        """

        self.state = AgentState.PROCESSING
        self.conversation.add_user(text)
        request = self.conversation.to_request(model=self.model, max_tokens=self.max_tokens)
        response = self.client.send_message(request)

        for block in response.content_blocks:
            self.conversation.add_assistant(block.text)
            if block.block_type is ContentBlockType.TEXT:
                self._print_assistant_text(block.text)

        self.state = AgentState.AWAITING_INPUT
        return response

    def _print_assistant_text(self, text: str) -> None:
        style = "bright_yellow" if self.use_color else ""
        self.console.print(Text.assemble((ASSISTANT_NAME, style), ": ", text))

    def _print_banner(self) -> None:
        figlet = Figlet(font="standard")
        art_lines = figlet.renderText("SYL").rstrip("\n").split("\n")
        max_len = max((len(line) for line in art_lines), default=0)
        horizontal_border = "+" + "=" * (max_len + 2) + "+"
        style = "cyan" if self.use_color else ""

        self.console.print(Text(horizontal_border, style=style))
        for line in art_lines:
            self.console.print(Text("| " + line.ljust(max_len) + " |", style=style))
        self.console.print(Text(horizontal_border, style=style))


__all__ = ["ASSISTANT_NAME", "Agent", "AgentState", "GREETING", "LineSource"]
