"""Winner determination for circular N-move rock-paper-scissors.

Moves sit on a circle in the order given. Each move loses to the next
(N-1)/2 moves and beats the previous (N-1)/2, which makes every pair
decided and no move stronger than another. With three moves this is
the classic game.
"""

from enum import Enum

from .moves import MoveSet


class Outcome(Enum):
    """Result of a comparison, from the first-named move's side."""
    DRAW = "Draw"
    WIN = "Win"
    LOSE = "Lose"


def determine_outcome(moves: MoveSet, move_a: str, move_b: str) -> Outcome:
    """Decide how move_a fares against move_b.

    Args:
        moves: The move set both moves belong to.
        move_a: Move whose perspective the outcome is stated from.
        move_b: Opposing move.

    Returns:
        WIN if move_a beats move_b, LOSE if move_b beats move_a, DRAW if equal.

    Raises:
        InvalidMoveError: If either move is not in the move set.
    """
    size = len(moves)
    offset = (moves.index_of(move_b) - moves.index_of(move_a)) % size

    if offset == 0:
        return Outcome.DRAW
    # Every offset in 1..(N-1)/2 loses, not only the first and last one.
    if offset <= (size - 1) // 2:
        return Outcome.LOSE
    return Outcome.WIN


def generate_outcome_matrix(moves: MoveSet) -> list[list[Outcome]]:
    """Build the full pairwise outcome table.

    Args:
        moves: The move set.

    Returns:
        matrix[r][c] is the outcome of moves[r] against moves[c].
    """
    return [
        [determine_outcome(moves, row_move, column_move) for column_move in moves]
        for row_move in moves
    ]
