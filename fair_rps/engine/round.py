"""Single round orchestration: commit, accept the player's move, reveal."""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..errors import InvalidMoveError
from ..fairness.commitment import Commitment, commit
from ..fairness.entropy import RandomSource, SystemRandomSource
from .moves import MoveSet
from .rules import Outcome, determine_outcome

logger = logging.getLogger(__name__)


class RoundResult(BaseModel):
    """Everything revealed once the player's move is locked in."""

    model_config = ConfigDict(frozen=True)

    human_move: str
    opponent_move: str
    outcome: Outcome  # from the player's side
    revealed_key: str
    digest: str


@dataclass
class Round:
    """State of one round, alive for a single trip around the game loop."""
    number: int
    commitment: Commitment
    human_move_index: Optional[int] = None
    result: Optional[RoundResult] = None

    @property
    def digest(self) -> str:
        """The only part of the commitment safe to show before the reveal."""
        return self.commitment.digest

    @property
    def resolved(self) -> bool:
        return self.result is not None


class RoundController:
    """Runs rounds against the computer for a fixed move set."""

    def __init__(self, moves: MoveSet, source: Optional[RandomSource] = None):
        """Initialize the controller.

        Args:
            moves: The session's move set.
            source: Randomness for moves and keys. Defaults to the system CSPRNG.
        """
        self.moves = moves
        self.source = source or SystemRandomSource()
        self._rounds_started = 0

    def start_round(self) -> Round:
        """Start a round with a fresh commitment.

        Returns:
            The new round. Show only its digest until it is resolved.
        """
        self._rounds_started += 1
        round_ = Round(
            number=self._rounds_started,
            commitment=commit(self.moves, self.source),
        )
        logger.debug("Round %d started, digest %s", round_.number, round_.digest)
        return round_

    def resolve(self, round_: Round, human_move_index: int) -> RoundResult:
        """Play the player's move against the committed one.

        Args:
            round_: The round started by start_round.
            human_move_index: 1-based position of the player's move.

        Returns:
            The result, including the key that opens the commitment.

        Raises:
            InvalidMoveError: If the index is outside the move set or the
                round was already resolved.
        """
        if round_.resolved:
            raise InvalidMoveError(f"Round {round_.number} is already resolved")

        human_move = self.moves.move_at(human_move_index)
        opponent_move = round_.commitment.committed_move
        outcome = determine_outcome(self.moves, human_move, opponent_move)

        result = RoundResult(
            human_move=human_move,
            opponent_move=opponent_move,
            outcome=outcome,
            revealed_key=round_.commitment.secret_key,
            digest=round_.digest,
        )
        round_.human_move_index = human_move_index
        round_.result = result

        logger.debug(
            "Round %d resolved: %s vs %s -> %s (key %s)",
            round_.number,
            human_move,
            opponent_move,
            outcome.value,
            result.revealed_key,
        )
        return result
