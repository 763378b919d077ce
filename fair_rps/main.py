"""Main entry point for fair rock-paper-scissors."""

import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from .communication.console import ConsoleDisplay, ConsoleReader
from .config import AppConfig, load_config
from .engine.game import Session
from .engine.moves import MoveSet
from .errors import ConfigurationError

USAGE_EXAMPLE = "fair-rps rock paper scissors"

console = Console()
error_console = Console(stderr=True)


def configure_logging(level: int) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(console=error_console, show_path=False, rich_tracebacks=True)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)


def display_welcome(moves: MoveSet):
    """Display welcome message."""
    console.print(Panel.fit(
        f"[bold cyan]FAIR {len(moves)}-WAY ROCK PAPER SCISSORS[/bold cyan]\n"
        "[dim]The computer commits to its move before you choose. "
        "Check the HMAC key after each round.[/dim]",
        border_style="cyan",
    ))
    console.print()


def display_usage_error(error: ConfigurationError):
    """Display why the move list was rejected."""
    error_console.print(
        "[red]Invalid arguments! Please provide an odd number of unique moves.[/red]"
    )
    for problem in error.problems:
        error_console.print(f"[red]  - {escape(problem)}[/red]", highlight=False)
    console.print(f"Example: {USAGE_EXAMPLE}")


async def play(moves: MoveSet, config: AppConfig) -> int:
    """Run an interactive session on the terminal.

    Returns:
        Number of rounds played.
    """
    display = ConsoleDisplay(console, show_verification_hint=config.display.show_verification_hint)
    session = Session(moves, display, config=config.session.to_session_config())
    return await session.run(ConsoleReader(console))


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Move labels; defaults to the process arguments.

    Returns:
        Process exit status.
    """
    load_dotenv()
    args = sys.argv[1:] if argv is None else argv

    try:
        config = load_config()
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        return 1
    configure_logging(config.logging.level_number)

    try:
        moves = MoveSet.from_args(args)
    except ConfigurationError as e:
        display_usage_error(e)
        return 1

    if config.display.show_banner:
        display_welcome(moves)

    try:
        rounds = asyncio.run(play(moves, config))
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted by user.[/yellow]")
        return 0
    except Exception as e:
        error_console.print(f"\n[red]Error during game: {escape(str(e))}[/red]")
        raise

    logging.getLogger(__name__).info("Played %d rounds", rounds)
    return 0


def run():
    """Entry point for the CLI."""
    sys.exit(main())


if __name__ == "__main__":
    run()
