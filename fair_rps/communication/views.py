"""Data the session hands to the display - no formatting here."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from ..engine.rules import Outcome

HEADLINES = {
    Outcome.DRAW: "Draw!",
    Outcome.WIN: "You Win!",
    Outcome.LOSE: "You Lose!",
}


class MenuView(BaseModel):
    """Shown before every prompt."""
    model_config = ConfigDict(frozen=True)

    round_number: int
    digest: str
    moves: list[str]
    help_token: str
    quit_token: str


class HelpView(BaseModel):
    """Outcome table: matrix[r][c] is moves[r] (player) against moves[c] (computer)."""
    model_config = ConfigDict(frozen=True)

    moves: list[str]
    matrix: list[list[Outcome]]


class ResultView(BaseModel):
    """The reveal at the end of a round."""
    model_config = ConfigDict(frozen=True)

    round_number: int
    human_move: str
    opponent_move: str
    outcome: Outcome
    revealed_key: str
    digest: str

    @property
    def headline(self) -> str:
        return HEADLINES[self.outcome]


class Display(Protocol):
    """Whatever renders session output; the terminal UI or a test recorder."""

    def show_menu(self, view: MenuView) -> None: ...

    def show_help(self, view: HelpView) -> None: ...

    def show_result(self, view: ResultView) -> None: ...

    def show_invalid(self, line: str) -> None: ...

    def show_exit(self) -> None: ...
