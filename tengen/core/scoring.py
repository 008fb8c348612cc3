"""Score estimate from captures plus single-point eyes.

This is a heuristic for settled positions, not a rules-correct count: it
does no life-and-death analysis and misjudges contested boards.
"""

from dataclasses import dataclass

from tengen.core import geometry
from tengen.core.board import Board
from tengen.core.constants import CaptureType, Color
from tengen.core.rules import capture_type


@dataclass(frozen=True)
class Score:
    white: int
    black: int

    def for_color(self, color: Color) -> int:
        return self.white if color is Color.WHITE else self.black


def eye_type(board: Board, index: int) -> Color:
    """Owner of ``index`` as a single-point eye, or Color.EMPTY if it is nobody's.

    A point is a white eye when all its neighbors are white stones and black
    cannot capture by playing there; symmetrically for black. The point itself
    may be occupied: a stone walled in by its own color counts too.
    """
    num_neighbors = len(geometry.neighbors(board.dim, index))
    if num_neighbors == board.white_neighbors(index) and capture_type(board, Color.BLACK, index) is CaptureType.NONE:
        return Color.WHITE
    if num_neighbors == board.black_neighbors(index) and capture_type(board, Color.WHITE, index) is CaptureType.NONE:
        return Color.BLACK
    return Color.EMPTY


def final_score(board: Board) -> Score:
    eyes = {Color.WHITE: 0, Color.BLACK: 0, Color.EMPTY: 0}
    for index in board.position_range():
        eyes[eye_type(board, index)] += 1
    return Score(white=board.white_score + eyes[Color.WHITE], black=board.black_score + eyes[Color.BLACK])
