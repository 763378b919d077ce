"""Game session: sequences rounds and handles help and quit."""

import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..communication.views import Display, HelpView, MenuView, ResultView
from ..errors import InvalidInputError
from .moves import MoveSet
from .phases import PhaseManager, SessionEvent, SessionPhase
from .round import Round, RoundController
from .rules import generate_outcome_matrix

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"\+?[0-9]+")

LineReader = Callable[[], Awaitable[str]]


@dataclass
class SessionConfig:
    """Input tokens for a session."""
    help_token: str = "?"
    quit_token: str = "0"


class Session:
    """An interactive session against the computer.

    The session owns the move set and the phase state. Each round lives in
    its own Round value, replaced as soon as the result has been shown.
    """

    def __init__(
        self,
        moves: MoveSet,
        display: Display,
        controller: Optional[RoundController] = None,
        config: Optional[SessionConfig] = None,
    ):
        """Initialize the session.

        Args:
            moves: Validated move set.
            display: Receives everything the player should see.
            controller: Round controller; built from moves if not given.
            config: Help and quit tokens.
        """
        self.moves = moves
        self.display = display
        self.controller = controller or RoundController(moves)
        self.config = config or SessionConfig()
        self.phase_manager = PhaseManager()

        self.current_round: Optional[Round] = None
        self.rounds_resolved = 0
        self.help_requests = 0

    @property
    def phase(self) -> SessionPhase:
        return self.phase_manager.phase

    @property
    def finished(self) -> bool:
        return self.phase_manager.finished

    def start(self) -> None:
        """Commit to the first round's move and wait for input."""
        self.current_round = self.controller.start_round()
        self.phase_manager.start_game(self.current_round.number)
        logger.info("Session started with moves: %s", self.moves)

    def menu(self) -> MenuView:
        """Build the menu for the round on screen."""
        return MenuView(
            round_number=self.current_round.number,
            digest=self.current_round.digest,
            moves=list(self.moves),
            help_token=self.config.help_token,
            quit_token=self.config.quit_token,
        )

    def handle_line(self, line: str) -> SessionPhase:
        """Process one line of player input.

        Args:
            line: Raw input line.

        Returns:
            The phase the session is in afterwards.
        """
        if self.phase != SessionPhase.AWAITING_INPUT:
            raise ValueError(f"Not waiting for input (phase {self.phase.name})")

        text = line.strip()
        if text == self.config.help_token:
            self._show_help()
        elif text == self.config.quit_token:
            self.phase_manager.transition(SessionEvent.QUIT)
            logger.info("Player quit after %d rounds", self.rounds_resolved)
            self.display.show_exit()
        else:
            try:
                index = self.parse_selection(text)
            except InvalidInputError as e:
                logger.debug("%s", e)
                self.phase_manager.transition(SessionEvent.INVALID)
                self.display.show_invalid(line)
            else:
                self._play(index)
        return self.phase

    def parse_selection(self, text: str) -> int:
        """Turn an input line into a 1-based move index.

        Raises:
            InvalidInputError: If the text is not a number in 1..N.
        """
        if not _DECIMAL.fullmatch(text):
            raise InvalidInputError(text, "not a move number")
        try:
            index = int(text)
        except ValueError:
            # Longer than int() accepts from a string.
            raise InvalidInputError(text, "not a move number") from None
        if not 1 <= index <= len(self.moves):
            raise InvalidInputError(text, f"choose 1..{len(self.moves)}")
        return index

    def _show_help(self) -> None:
        self.phase_manager.transition(SessionEvent.HELP)
        self.help_requests += 1
        logger.debug("Help requested (%d)", self.help_requests)
        self.display.show_help(HelpView(
            moves=list(self.moves),
            matrix=generate_outcome_matrix(self.moves),
        ))
        self.phase_manager.transition(SessionEvent.HELP_SHOWN)

    def _play(self, index: int) -> None:
        self.phase_manager.transition(SessionEvent.MOVE)
        finished_round = self.current_round
        result = self.controller.resolve(finished_round, index)
        self.phase_manager.transition(SessionEvent.RESOLVED)

        self.rounds_resolved += 1
        self.display.show_result(ResultView(
            round_number=finished_round.number,
            **result.model_dump(),
        ))

        # Fresh commitment; the old round and its key are dropped here.
        self.current_round = self.controller.start_round()
        self.phase_manager.next_round(self.current_round.number)

    async def run(self, read_line: LineReader) -> int:
        """Run the session until the player quits.

        Args:
            read_line: Awaitable producing the next input line. EOFError
                from it counts as quitting.

        Returns:
            Number of rounds played.
        """
        if self.phase == SessionPhase.SETUP:
            self.start()

        while not self.finished:
            self.display.show_menu(self.menu())
            try:
                line = await read_line()
            except EOFError:
                logger.info("End of input, quitting")
                line = self.config.quit_token
            self.handle_line(line)

        return self.rounds_resolved
