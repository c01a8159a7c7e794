"""Command-line entry point for the Syl chat client."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console

from agent import Agent
from anthropic_client import AnthropicClient
from config import load_chat_config
from errors import ChatError, ConfigurationError
from input_handler import InputHandler

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chat with Claude from the terminal")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI color output")
    parser.add_argument("--no-banner", action="store_true", help="Skip the ASCII-art banner")
    parser.add_argument("--verbose", action="store_true", help="Log request details to stderr")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    use_color = not args.no_color
    err_console = Console(stderr=True, no_color=not use_color, highlight=False, soft_wrap=True)

    load_dotenv(override=False)
    try:
        config = load_chat_config()
    except ConfigurationError as exc:
        err_console.print(f"Configuration error: {exc.message}", style="bold red", markup=False)
        return 1
    logger.debug("Loaded %r", config)

    input_handler = InputHandler()
    with AnthropicClient(config.api_key, timeout=config.timeout) as client:
        agent = Agent(
            client,
            input_handler.read_line,
            model=config.model,
            max_tokens=config.max_tokens,
            use_color=use_color,
            show_banner=not args.no_banner,
        )
        try:
            agent.run()
        except ChatError as exc:
            err_console.print(f"Anthropic error: {exc.message}", style="bold red", markup=False)
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
