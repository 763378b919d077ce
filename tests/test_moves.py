"""Tests for move set validation."""

import pytest

from fair_rps.engine.moves import MoveSet, find_problems
from fair_rps.errors import ConfigurationError, InvalidMoveError


class TestMoveSetValidation:
    """Tests for the argument rules."""

    def test_classic_moves_accepted(self):
        """Test that rock, paper, scissors is a valid move set."""
        moves = MoveSet.from_args(["rock", "paper", "scissors"])
        assert len(moves) == 3
        assert list(moves) == ["rock", "paper", "scissors"]

    @pytest.mark.parametrize("args", [[], ["rock"], ["rock", "paper"]])
    def test_too_few_rejected(self, args):
        with pytest.raises(ConfigurationError):
            MoveSet.from_args(args)

    def test_even_count_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MoveSet.from_args(["a", "b", "c", "d"])
        assert any("odd" in p for p in exc_info.value.problems)

    def test_duplicate_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            MoveSet.from_args(["rock", "paper", "rock"])
        assert any("rock" in p for p in exc_info.value.problems)

    def test_all_problems_reported(self):
        """Test that every broken rule is listed, not just the first."""
        problems = find_problems(["x", "x"])
        assert len(problems) == 3

    def test_empty_label_accepted(self):
        """Test that an empty string is an ordinary label."""
        moves = MoveSet.from_args(["", "a", "b"])
        assert moves.index_of("") == 0

    def test_labels_are_case_sensitive(self):
        """Test that labels differing only by case are distinct moves."""
        moves = MoveSet.from_args(["Rock", "rock", "ROCK"])
        assert len(moves) == 3


class TestMoveSetLookup:
    """Tests for index and position lookups."""

    def test_index_of(self, rps):
        assert rps.index_of("rock") == 0
        assert rps.index_of("scissors") == 2

    def test_index_of_unknown_raises(self, rps):
        with pytest.raises(InvalidMoveError):
            rps.index_of("lizard")

    def test_move_at_is_one_based(self, rps):
        assert rps.move_at(1) == "rock"
        assert rps.move_at(3) == "scissors"

    @pytest.mark.parametrize("position", [0, 4, -1, True, "1", 1.0])
    def test_move_at_rejects_bad_positions(self, rps, position):
        with pytest.raises(InvalidMoveError):
            rps.move_at(position)

    def test_membership(self, rps):
        assert "paper" in rps
        assert "lizard" not in rps

    def test_immutable(self, rps):
        with pytest.raises(AttributeError):
            rps.labels = ("a", "b", "c")
