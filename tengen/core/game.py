"""A game driver over a single Board: turn order, passes and settings."""

import logging
from typing import List, Optional

from tengen.common.config_store import JsonFileConfigStore
from tengen.common.typed_config import BoardConfig, TypedConfigReader
from tengen.core import geometry
from tengen.core.board import Board, empty_board
from tengen.core.constants import Color, opponent
from tengen.core.errors import IllegalMoveError
from tengen.core.rules import play_move
from tengen.core.scoring import Score, final_score
from tengen.core.validation import validate_positions

logger = logging.getLogger(__name__)


class Move:
    """A stone placement or a pass (``index`` is None)."""

    def __init__(self, index: Optional[int] = None, player: Color = Color.BLACK):
        opponent(player)  # validates the color
        self.index = index
        self.player = player

    @classmethod
    def from_gtp(cls, gtp_coords: str, dim: int, player: Color = Color.BLACK) -> "Move":
        """Initialize a move from a GTP-style label such as "D4" or "pass".

        Raises:
            ValueError: If the label is malformed.
            BoardIndexError: If it names a point off the board.
        """
        if gtp_coords.strip().lower() == "pass":
            return cls(index=None, player=player)
        return cls(index=geometry.parse_label(gtp_coords, dim), player=player)

    @property
    def is_pass(self) -> bool:
        return self.index is None

    def gtp(self, dim: int) -> str:
        if self.index is None:
            return "pass"
        return geometry.label(self.index, dim)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.index == other.index and self.player == other.player

    def __hash__(self) -> int:
        return hash((self.index, self.player))

    def __repr__(self) -> str:
        return f"Move({self.player.value}, {'pass' if self.index is None else self.index})"


class Game:
    """Plays moves on one board in turn, black first."""

    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.board: Board = empty_board(self.config.dim, self.config.history_window)
        self.next_player = Color.BLACK
        self.moves: List[Move] = []
        self.consecutive_passes = 0

    @classmethod
    def from_config_file(cls, filename: str) -> "Game":
        store = JsonFileConfigStore(filename)
        return cls(TypedConfigReader(dict(store)).get_board())

    def save_config(self, filename: str) -> None:
        """Write this game's settings to the "board" section of ``filename``.

        Other sections in the file are kept.
        """
        JsonFileConfigStore(filename).put("board", **self.config.to_dict())

    @property
    def is_over(self) -> bool:
        return self.consecutive_passes >= 2

    def play(self, move: Move) -> List[int]:
        """Play ``move`` for its player and hand the turn to the opponent.

        Returns:
            Captured stone indices (empty for a pass).

        Raises:
            IllegalMoveError: If it is not ``move.player``'s turn or the rules reject
                the move; the game is unchanged.
            InvariantViolation: If validate_moves is set and the board is inconsistent.
        """
        if move.player is not self.next_player:
            raise IllegalMoveError(
                f"{move.player.value} played out of turn, {self.next_player.value} to move",
                reason="turn",
                context={"player": move.player.value, "next_player": self.next_player.value},
            )
        if move.is_pass:
            captured: List[int] = []
            self.consecutive_passes += 1
        else:
            captured = play_move(self.board, move.player, move.index)
            self.consecutive_passes = 0
            if self.config.validate_moves:
                validate_positions(self.board)
        self.moves.append(move)
        self.next_player = opponent(move.player)
        logger.debug("Move %d: %s %s", len(self.moves), move.player.value, move.gtp(self.board.dim))
        return captured

    def play_gtp(self, gtp_coords: str) -> List[int]:
        return self.play(Move.from_gtp(gtp_coords, self.board.dim, self.next_player))

    def pass_move(self) -> None:
        self.play(Move(None, self.next_player))

    def score(self) -> Score:
        return final_score(self.board)
