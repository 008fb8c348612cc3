"""From-scratch checks of the incrementally maintained board state.

Debug and test instrument only: a full pass costs O(dim^2) group traversals
and is never run on the normal move path.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, FrozenSet, List, Sequence, Set

from tengen.core import geometry
from tengen.core.board import Board
from tengen.core.constants import STONE_COLORS, Color
from tengen.core.errors import InvariantViolation

logger = logging.getLogger(__name__)

ALL_COLORS: FrozenSet[Color] = frozenset(Color)
STONES: FrozenSet[Color] = frozenset(STONE_COLORS)


def _empty_neighbors_of_group(board: Board, index: int) -> List[int]:
    return [n for s in board.group(index) for n in board.neighbors(s, (Color.EMPTY,))]


def calculate_group(board: Board, index: int) -> Set[int]:
    root = board.root(index)
    return {p for p in board.position_range() if board.root(p) == root}


def calculate_sum(board: Board, index: int) -> int:
    return sum(_empty_neighbors_of_group(board, index))


def calculate_sum_of_squares(board: Board, index: int) -> int:
    return sum(n * n for n in _empty_neighbors_of_group(board, index))


def calculate_liberties(board: Board, index: int) -> int:
    """Liberty edges with multiplicity, matching the stored aggregate."""
    return len(_empty_neighbors_of_group(board, index))


def calculate_white_neighbors(board: Board, index: int) -> int:
    return len(board.neighbors(index, (Color.WHITE,)))


def calculate_black_neighbors(board: Board, index: int) -> int:
    return len(board.neighbors(index, (Color.BLACK,)))


def calculate_atari(board: Board, index: int) -> bool:
    return len(set(_empty_neighbors_of_group(board, index))) == 1


@dataclass(frozen=True)
class Validation:
    """One checked field: applies to points whose color is in ``colors``."""

    field: str
    colors: FrozenSet[Color]
    lookup: Callable[[Board, int], Any]
    from_scratch: Callable[[Board, int], Any]


VALIDATIONS = (
    Validation("white_neighbors", ALL_COLORS, Board.white_neighbors, calculate_white_neighbors),
    Validation("black_neighbors", ALL_COLORS, Board.black_neighbors, calculate_black_neighbors),
    Validation("sum", STONES, Board.neighbor_sum, calculate_sum),
    Validation("sum_of_squares", STONES, Board.neighbor_sum_of_squares, calculate_sum_of_squares),
    Validation("group", STONES, Board.group, calculate_group),
    Validation("liberties", STONES, Board.liberties, calculate_liberties),
    Validation("atari", STONES, Board.is_atari, calculate_atari),
)


def _fail(board: Board, message: str, **context: Any) -> None:
    logger.error("%s\n%s", message, board.render())
    raise InvariantViolation(message, context=context)


def validate_positions(board: Board, validations: Sequence[Validation] = VALIDATIONS) -> Board:
    """Compare every incremental accessor with its from-scratch recomputation.

    Returns:
        The board, unchanged.

    Raises:
        InvariantViolation: On the first mismatch, after logging the rendered board.
    """
    empty = {p for p in board.position_range() if board.color(p) is Color.EMPTY}
    if empty != board.empty_positions:
        _fail(
            board,
            "empty_positions out of sync with point colors",
            missing=sorted(empty - board.empty_positions),
            extra=sorted(board.empty_positions - empty),
        )
    for p in board.position_range():
        color = board.color(p)
        for check in validations:
            if color not in check.colors:
                continue
            incremental = check.lookup(board, p)
            recomputed = check.from_scratch(board, p)
            if incremental != recomputed:
                _fail(
                    board,
                    f"{check.field} at {geometry.label(p, board.dim)}: {incremental}, {recomputed}",
                    field=check.field,
                    index=p,
                    incremental=incremental,
                    recomputed=recomputed,
                )
    return board
