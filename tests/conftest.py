"""Shared fixtures: deterministic randomness and a recording display."""

import random

import pytest

from fair_rps.communication.views import HelpView, MenuView, ResultView
from fair_rps.engine.moves import MoveSet


class SeededRandomSource:
    """Deterministic stand-in for the system random source."""

    def __init__(self, seed: int = 0, moves: list[int] | None = None):
        self._random = random.Random(seed)
        self._moves = list(moves or [])

    def token_bytes(self, num_bytes: int) -> bytes:
        return self._random.randbytes(num_bytes)

    def randbelow(self, upper: int) -> int:
        if self._moves:
            return self._moves.pop(0) % upper
        return self._random.randrange(upper)


class RecordingDisplay:
    """Collects everything the session shows."""

    def __init__(self):
        self.menus: list[MenuView] = []
        self.helps: list[HelpView] = []
        self.results: list[ResultView] = []
        self.invalid: list[str] = []
        self.exits = 0

    def show_menu(self, view: MenuView) -> None:
        self.menus.append(view)

    def show_help(self, view: HelpView) -> None:
        self.helps.append(view)

    def show_result(self, view: ResultView) -> None:
        self.results.append(view)

    def show_invalid(self, line: str) -> None:
        self.invalid.append(line)

    def show_exit(self) -> None:
        self.exits += 1


def scripted_reader(lines):
    """Async line reader that replays lines, then raises EOFError."""
    pending = list(lines)

    async def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def rps():
    return MoveSet.from_args(["rock", "paper", "scissors"])


@pytest.fixture
def five():
    return MoveSet.from_args(["A", "B", "C", "D", "E"])


@pytest.fixture
def source():
    return SeededRandomSource(seed=42)


@pytest.fixture
def display():
    return RecordingDisplay()
