"""Tests for the invariant validator and randomized consistency properties."""

import logging
import random

import pytest

from tengen.core.board import empty_board
from tengen.core.constants import Color
from tengen.core.errors import InvariantViolation
from tengen.core.validation import (
    VALIDATIONS,
    Validation,
    calculate_atari,
    calculate_group,
    calculate_liberties,
    validate_positions,
)
from tests.helpers import at, random_playout, setup_stones


class TestValidatePositions:
    def test_empty_board_passes(self, board9):
        assert validate_positions(board9) is board9

    def test_capture_sequence_passes(self, ko_board):
        validate_positions(ko_board)
        ko_board.place_stone(Color.WHITE, at(ko_board, "E6"))
        validate_positions(ko_board)

    def test_table_covers_every_field(self):
        assert [v.field for v in VALIDATIONS] == [
            "white_neighbors",
            "black_neighbors",
            "sum",
            "sum_of_squares",
            "group",
            "liberties",
            "atari",
        ]

    def test_corrupt_liberties_detected(self, ko_board, caplog):
        d5 = at(ko_board, "D5")
        ko_board.positions[ko_board.root(d5)].liberties += 1
        with caplog.at_level(logging.ERROR, logger="tengen.core.validation"):
            with pytest.raises(InvariantViolation) as excinfo:
                validate_positions(ko_board)
        assert excinfo.value.context["field"] == "liberties"
        assert excinfo.value.context["index"] == d5
        assert str(excinfo.value).startswith("liberties at D5")
        assert "Black: 0" in caplog.text

    def test_corrupt_neighbor_count_on_empty_point(self, board9):
        board9.positions[40].white_neighbors = 2
        with pytest.raises(InvariantViolation) as excinfo:
            validate_positions(board9)
        assert excinfo.value.context["field"] == "white_neighbors"

    def test_corrupt_parent_detected(self, board9):
        setup_stones(board9, black=["C3", "D3"], white=["E3"])
        e3 = at(board9, "E3")
        board9.positions[e3].parent = at(board9, "D3")
        with pytest.raises(InvariantViolation):
            validate_positions(board9)

    def test_empty_positions_out_of_sync(self, board9):
        board9.empty_positions.discard(5)
        with pytest.raises(InvariantViolation) as excinfo:
            validate_positions(board9)
        assert excinfo.value.context["missing"] == [5]

    def test_is_an_assertion_error(self, board9):
        board9.empty_positions.add(1000)
        with pytest.raises(AssertionError):
            validate_positions(board9)

    def test_custom_table(self, board9):
        always_wrong = Validation("bogus", frozenset(Color), lambda b, p: 0, lambda b, p: 1)
        validate_positions(board9, validations=())
        with pytest.raises(InvariantViolation):
            validate_positions(board9, validations=[always_wrong])


@pytest.mark.parametrize("dim,seed", [(5, 1), (5, 2), (7, 3), (7, 4), (9, 5), (9, 6)])
class TestRandomPlayouts:
    """Incremental state agrees with recomputation after every move."""

    def test_validator_after_every_move(self, dim, seed):
        board = empty_board(dim)
        played = random_playout(board, random.Random(seed), dim * dim * 2, on_move=validate_positions)
        assert played

    def test_atari_identity_matches_distinct_count(self, dim, seed):
        board = empty_board(dim)
        random_playout(board, random.Random(seed), dim * dim)
        for p in board.position_range():
            if board.color(p) is not Color.EMPTY:
                assert board.is_atari(p) == calculate_atari(board, p)
                assert board.liberties(p) == calculate_liberties(board, p)

    def test_union_find_roots(self, dim, seed):
        board = empty_board(dim)
        random_playout(board, random.Random(seed), dim * dim)
        for p in board.position_range():
            if board.color(p) is Color.EMPTY:
                assert board.root(p) == p
            else:
                assert {board.root(q) for q in board.group(p)} == {board.root(p)}
                assert calculate_group(board, p) == board.group(p)
