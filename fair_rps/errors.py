"""Exception hierarchy for the fair rock-paper-scissors game."""

from typing import Optional, Sequence


class FairRPSError(Exception):
    """Base exception for all game errors."""


class ConfigurationError(FairRPSError):
    """Raised when the move list or the configuration file is unusable.

    Fatal at startup: the session is never constructed.
    """

    def __init__(self, problems: Sequence[str], source: Optional[str] = None):
        self.problems = list(problems)
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(prefix + "; ".join(self.problems))


class InvalidInputError(FairRPSError):
    """Raised when an input line is not a help/quit signal or a valid move number."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Invalid move {line!r}: {reason}")


class InvalidMoveError(FairRPSError):
    """Raised when a move or move index outside the move set reaches the engine.

    Inputs are validated before they get here, so this is a bug, not a
    user error.
    """


class EntropyError(FairRPSError):
    """Raised when the secure random source cannot produce bytes."""
