"""Move set definition and validation."""

from dataclasses import dataclass
from typing import Iterator, Sequence

from ..errors import ConfigurationError, InvalidMoveError

MIN_MOVES = 3


def find_problems(labels: Sequence[str]) -> list[str]:
    """List every rule a proposed move list breaks.

    Args:
        labels: Move labels in play order.

    Returns:
        Human-readable problems; empty if the list is playable.
    """
    problems = []
    if len(labels) < MIN_MOVES:
        problems.append(f"at least {MIN_MOVES} moves are required, got {len(labels)}")
    if len(labels) % 2 == 0:
        problems.append(f"the number of moves must be odd, got {len(labels)}")

    seen: set[str] = set()
    duplicates: list[str] = []
    for label in labels:
        if label in seen and label not in duplicates:
            duplicates.append(label)
        seen.add(label)
    if duplicates:
        problems.append(f"moves must be unique, repeated: {', '.join(duplicates)}")

    return problems


@dataclass(frozen=True)
class MoveSet:
    """An ordered, immutable set of moves.

    Order matters: it defines which moves are neighbours on the circle
    the rules are evaluated on.
    """

    labels: tuple[str, ...]

    def __post_init__(self):
        problems = find_problems(self.labels)
        if problems:
            raise ConfigurationError(problems)

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "MoveSet":
        """Build a move set from command-line arguments."""
        return cls(labels=tuple(args))

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __getitem__(self, index: int) -> str:
        return self.labels[index]

    def __contains__(self, move: object) -> bool:
        return move in self.labels

    def index_of(self, move: str) -> int:
        """Get the 0-based position of a move."""
        try:
            return self.labels.index(move)
        except ValueError:
            raise InvalidMoveError(
                f"Unknown move: {move!r}. Available: {list(self.labels)}"
            ) from None

    def move_at(self, position: int) -> str:
        """Get the move at a 1-based menu position."""
        if isinstance(position, bool) or not isinstance(position, int):
            raise InvalidMoveError(f"Move position must be an int, got {position!r}")
        if not 1 <= position <= len(self.labels):
            raise InvalidMoveError(
                f"Move position {position} outside 1..{len(self.labels)}"
            )
        return self.labels[position - 1]

    def __str__(self) -> str:
        return ", ".join(self.labels)
