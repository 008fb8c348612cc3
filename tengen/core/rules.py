"""Capture classification and move legality."""

import logging
from typing import List

from tengen.core import geometry
from tengen.core.board import Board
from tengen.core.constants import CaptureType, Color, opponent
from tengen.core.errors import IllegalMoveError

logger = logging.getLogger(__name__)


def capture_type(board: Board, color: Color, index: int) -> CaptureType:
    """Classify what playing ``color`` at ``index`` would capture.

    Only the first adjacent opponent group in atari is considered. A single
    stone capture is a ko if the position it leads to is already retained in
    the board's hash history. The board is not modified.

    Args:
        board: Board to inspect.
        color: Color of the prospective stone.
        index: Point to play on.

    Returns:
        CaptureType.NONE, CaptureType.VALID or CaptureType.KO
    """
    other = opponent(color)
    target = next((n for n in board.neighbors(index, (other,)) if board.is_atari(n)), None)
    if target is None:
        return CaptureType.NONE
    single_stone = board.root(target) == target and board.stone_neighbors(target, other) == 0
    if single_stone and board.hash.rotate().update(index, color).update(target, other).is_repeat():
        return CaptureType.KO
    return CaptureType.VALID


def is_suicide(board: Board, color: Color, index: int) -> bool:
    """True if the stone would be left without liberties and captures nothing."""
    if board.color(index) is not Color.EMPTY:
        return False
    if board.neighbors(index, (Color.EMPTY,)):
        return False
    if capture_type(board, color, index) is not CaptureType.NONE:
        return False
    # a friendly group keeps a liberty unless ``index`` is its only one
    return all(
        board.is_atari(n) and board.neighbor_sum(n) == index * board.liberties(n)
        for n in board.neighbors(index, (color,))
    )


def play_move(board: Board, color: Color, index: int) -> List[int]:
    """Apply a move after checking it is legal.

    Returns:
        Indices of the captured stones.

    Raises:
        IllegalMoveError: If the point is occupied, the move is a ko recapture or suicide.
    """
    current = board.color(index)
    point_label = geometry.label(index, board.dim)
    if current is not Color.EMPTY:
        raise IllegalMoveError(f"Point {point_label} is already occupied", reason="occupied", context={"index": index})
    kind = capture_type(board, color, index)
    if kind is CaptureType.KO:
        logger.debug("Rejected ko recapture by %s at %s", color.value, point_label)
        raise IllegalMoveError(
            f"Capture at {point_label} would repeat a previous position",
            user_message="Ko rule violation",
            reason="ko",
            context={"index": index},
        )
    if kind is CaptureType.NONE and is_suicide(board, color, index):
        raise IllegalMoveError(
            f"{color.value} at {point_label} has no liberties",
            user_message="Suicide move not allowed",
            reason="suicide",
            context={"index": index},
        )
    return board.place_stone(color, index)
