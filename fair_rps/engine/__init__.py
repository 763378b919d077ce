"""Game engine - move set, rules, rounds and session phases."""

from .moves import MoveSet
from .phases import SessionPhase
from .round import Round, RoundController, RoundResult
from .rules import Outcome, determine_outcome, generate_outcome_matrix

__all__ = [
    "MoveSet",
    "SessionPhase",
    "Round",
    "RoundController",
    "RoundResult",
    "Outcome",
    "determine_outcome",
    "generate_outcome_matrix",
]
