"""Session phase definitions and transitions."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    """Phases of a game session."""
    SETUP = auto()           # Constructed, no commitment yet
    AWAITING_INPUT = auto()  # Digest shown, waiting for a line
    SHOWING_HELP = auto()    # Outcome table being shown
    RESOLVING = auto()       # Player's move accepted, scoring it
    SHOWING_RESULT = auto()  # Reveal being shown
    EXITED = auto()          # Player quit


class SessionEvent(Enum):
    """Events that move a session between phases."""
    START = auto()
    HELP = auto()
    HELP_SHOWN = auto()
    QUIT = auto()
    MOVE = auto()
    RESOLVED = auto()
    NEXT_ROUND = auto()
    INVALID = auto()


# {current_phase: {event: next_phase}}
TRANSITIONS = {
    SessionPhase.SETUP: {
        SessionEvent.START: SessionPhase.AWAITING_INPUT,
    },
    SessionPhase.AWAITING_INPUT: {
        SessionEvent.HELP: SessionPhase.SHOWING_HELP,
        SessionEvent.QUIT: SessionPhase.EXITED,
        SessionEvent.MOVE: SessionPhase.RESOLVING,
        SessionEvent.INVALID: SessionPhase.AWAITING_INPUT,
    },
    SessionPhase.SHOWING_HELP: {
        SessionEvent.HELP_SHOWN: SessionPhase.AWAITING_INPUT,
    },
    SessionPhase.RESOLVING: {
        SessionEvent.RESOLVED: SessionPhase.SHOWING_RESULT,
    },
    SessionPhase.SHOWING_RESULT: {
        SessionEvent.NEXT_ROUND: SessionPhase.AWAITING_INPUT,
    },
    SessionPhase.EXITED: {},
}


@dataclass
class PhaseState:
    """Current state of the session."""
    phase: SessionPhase
    round_number: int = 0  # Round whose commitment is on screen

    @property
    def phase_name(self) -> str:
        """Get a human-readable phase name with round number."""
        if self.phase in (SessionPhase.SETUP, SessionPhase.EXITED):
            return self.phase.name.lower()
        return f"round_{self.round_number}_{self.phase.name.lower()}"


class PhaseManager:
    """Validates and applies phase transitions."""

    def __init__(self):
        self.state = PhaseState(phase=SessionPhase.SETUP)

    @property
    def phase(self) -> SessionPhase:
        return self.state.phase

    @property
    def finished(self) -> bool:
        return self.state.phase == SessionPhase.EXITED

    def can_transition(self, event: SessionEvent) -> bool:
        """Check if an event is allowed in the current phase."""
        return event in TRANSITIONS.get(self.state.phase, {})

    def transition(self, event: SessionEvent, round_number: Optional[int] = None) -> PhaseState:
        """Apply an event.

        Args:
            event: The event to apply.
            round_number: Round now on screen, if the event starts one.

        Returns:
            The new phase state.

        Raises:
            ValueError: If the event is not allowed in the current phase.
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.name} from {self.state.phase.name}"
            )

        old_phase = self.state.phase
        self.state.phase = TRANSITIONS[old_phase][event]
        if round_number is not None:
            self.state.round_number = round_number
        logger.debug("%s --%s--> %s", old_phase.name, event.name, self.state.phase_name)
        return self.state

    def start_game(self, round_number: int) -> PhaseState:
        """Enter the first round once its commitment exists."""
        return self.transition(SessionEvent.START, round_number)

    def next_round(self, round_number: int) -> PhaseState:
        """Leave the result screen for a freshly committed round."""
        return self.transition(SessionEvent.NEXT_ROUND, round_number)
