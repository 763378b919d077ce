"""Terminal rendering of session output with rich."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..engine.rules import Outcome
from .views import HelpView, MenuView, ResultView

PROMPT = "Enter your move: "

OUTCOME_STYLES = {
    Outcome.DRAW: "yellow",
    Outcome.WIN: "green",
    Outcome.LOSE: "red",
}


class ConsoleDisplay:
    """Renders menus, help tables and results to the terminal."""

    def __init__(self, console: Optional[Console] = None, show_verification_hint: bool = True):
        """Initialize the display.

        Args:
            console: Rich console to print to.
            show_verification_hint: Explain how to check the key after each round.
        """
        self.console = console or Console()
        self.show_verification_hint = show_verification_hint

    def show_menu(self, view: MenuView) -> None:
        self.console.print(f"[bold]HMAC:[/bold] {view.digest}")
        self.console.print("Available moves:")
        for position, move in enumerate(view.moves, start=1):
            self.console.print(f"{position} - {move}", markup=False)
        self.console.print(f"{view.quit_token} - exit", markup=False)
        self.console.print(f"{view.help_token} - help", markup=False)

    def show_help(self, view: HelpView) -> None:
        self.console.print(build_help_table(view))
        self.console.print(
            "[dim]Each cell is the result for your move (row) "
            "against the computer's move (column).[/dim]"
        )
        self.console.print()

    def show_result(self, view: ResultView) -> None:
        style = OUTCOME_STYLES[view.outcome]
        lines = [
            f"Your move: {escape(view.human_move)}",
            f"Computer move: {escape(view.opponent_move)}",
            f"[bold {style}]{view.headline}[/bold {style}]",
            f"HMAC key: {view.revealed_key}",
        ]
        self.console.print(Panel(
            "\n".join(lines),
            title=f"Round {view.round_number}",
            border_style=style,
            expand=False,
        ))
        if self.show_verification_hint:
            self.console.print(
                "[dim]Check: HMAC-SHA256 of the computer move, keyed with the HMAC key "
                "as text, must equal the HMAC shown before your move.[/dim]"
            )
        self.console.print()

    def show_invalid(self, line: str) -> None:
        self.console.print("[red]Invalid move![/red]")

    def show_exit(self) -> None:
        self.console.print("Exiting the game.")


def build_help_table(view: HelpView) -> Table:
    """Lay the outcome matrix out as a table."""
    table = Table(title="Outcomes for your move", show_header=True, header_style="bold magenta")
    table.add_column("Moves", style="cyan")
    for move in view.moves:
        table.add_column(Text(move))

    for move, row in zip(view.moves, view.matrix):
        table.add_row(
            Text(move),
            *(f"[{OUTCOME_STYLES[cell]}]{cell.value}[/{OUTCOME_STYLES[cell]}]" for cell in row),
        )
    return table


class ConsoleReader:
    """Reads one input line per call. Blocks until the player answers."""

    def __init__(self, console: Optional[Console] = None, prompt: str = PROMPT):
        self.console = console or Console()
        self.prompt = prompt

    async def __call__(self) -> str:
        return self.console.input(self.prompt)
