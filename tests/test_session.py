"""Tests for the game session."""

import asyncio

import pytest

from conftest import SeededRandomSource, scripted_reader
from fair_rps.engine.game import Session, SessionConfig
from fair_rps.engine.phases import SessionPhase
from fair_rps.engine.round import RoundController
from fair_rps.engine.rules import Outcome
from fair_rps.fairness.commitment import verify_reveal


def make_session(moves, display, source=None, config=None):
    controller = RoundController(moves, source or SeededRandomSource(seed=1))
    return Session(moves, display, controller=controller, config=config)


def run_session(session, lines):
    return asyncio.run(session.run(scripted_reader(lines)))


class TestSessionFlow:
    """End-to-end flows through run()."""

    def test_quit_first(self, rps, display):
        session = make_session(rps, display)
        rounds = run_session(session, ["0"])
        assert rounds == 0
        assert session.phase == SessionPhase.EXITED
        assert session.rounds_resolved == 0
        assert display.results == []
        assert display.exits == 1

    def test_help_then_quit(self, rps, display):
        session = make_session(rps, display)
        run_session(session, ["?", "0"])
        assert len(display.helps) == 1
        assert display.helps[0].moves == ["rock", "paper", "scissors"]
        assert display.helps[0].matrix[0] == [Outcome.DRAW, Outcome.LOSE, Outcome.WIN]
        assert session.rounds_resolved == 0
        assert session.phase == SessionPhase.EXITED

    def test_play_two_rounds(self, rps, display):
        session = make_session(rps, display, SeededRandomSource(moves=[2, 0]))
        rounds = run_session(session, ["1", "1", "0"])
        assert rounds == 2
        assert [r.outcome for r in display.results] == [Outcome.WIN, Outcome.DRAW]
        assert [r.round_number for r in display.results] == [1, 2]

    def test_menu_shown_before_every_prompt(self, rps, display):
        session = make_session(rps, display)
        run_session(session, ["?", "x", "2", "0"])
        assert len(display.menus) == 4
        assert display.menus[0].moves == ["rock", "paper", "scissors"]
        assert display.menus[0].quit_token == "0"
        assert display.menus[0].help_token == "?"

    def test_end_of_input_quits(self, rps, display):
        session = make_session(rps, display)
        rounds = run_session(session, ["1"])
        assert rounds == 1
        assert session.finished

    def test_reveal_matches_digest_shown_before(self, five, display):
        session = make_session(five, display)
        run_session(session, ["3", "5", "0"])
        for menu, result in zip(display.menus, display.results):
            assert result.digest == menu.digest
            assert verify_reveal(menu.digest, result.revealed_key, result.opponent_move)


class TestHandleLine:
    """Tests for single-line handling."""

    def test_help_keeps_commitment(self, rps, display):
        session = make_session(rps, display)
        session.start()
        before = session.current_round
        session.handle_line("?")
        assert session.current_round is before
        assert session.help_requests == 1
        assert session.phase == SessionPhase.AWAITING_INPUT

    @pytest.mark.parametrize("line", ["", "4", "-1", "+0", "++1", "abc", "1.5", "00", "0x1", "1 2"])
    def test_invalid_input_reprompts(self, rps, display, line):
        session = make_session(rps, display)
        session.start()
        before = session.current_round
        phase = session.handle_line(line)
        assert phase == SessionPhase.AWAITING_INPUT
        assert session.current_round is before
        assert display.invalid == [line]
        assert session.rounds_resolved == 0

    def test_whitespace_is_ignored(self, rps, display):
        session = make_session(rps, display)
        session.start()
        session.handle_line("  2\n")
        assert session.rounds_resolved == 1
        assert display.results[0].human_move == "paper"

    def test_leading_zeros_select_move(self, rps, display):
        session = make_session(rps, display)
        session.start()
        session.handle_line("03")
        assert display.results[0].human_move == "scissors"

    def test_plus_sign_selects_move(self, rps, display):
        """Test that "+1" is read as move 1, like any integer in range."""
        session = make_session(rps, display)
        session.start()
        phase = session.handle_line("+1")
        assert phase == SessionPhase.AWAITING_INPUT
        assert session.rounds_resolved == 1
        assert display.invalid == []
        assert display.results[0].human_move == "rock"

    def test_move_starts_new_round(self, rps, display):
        session = make_session(rps, display)
        session.start()
        first = session.current_round
        session.handle_line("1")
        assert first.resolved
        assert session.current_round is not first
        assert session.current_round.number == 2
        assert session.current_round.digest != first.digest
        assert display.results[0].revealed_key == first.result.revealed_key
        assert session.phase == SessionPhase.AWAITING_INPUT

    def test_input_after_exit_rejected(self, rps, display):
        session = make_session(rps, display)
        session.start()
        session.handle_line("0")
        with pytest.raises(ValueError):
            session.handle_line("1")

    def test_custom_tokens(self, rps, display):
        config = SessionConfig(help_token="h", quit_token="q")
        session = make_session(rps, display, config=config)
        run_session(session, ["?", "h", "0", "q"])
        assert display.invalid == ["?", "0"]
        assert len(display.helps) == 1
        assert session.finished

    def test_parse_selection_range(self, five, display):
        session = make_session(five, display)
        assert session.parse_selection("5") == 5
        assert session.parse_selection("1") == 1
