"""tengen - incremental board-state engine for Go-like games."""

from tengen.core.board import Board, empty_board
from tengen.core.constants import CaptureType, Color, opponent
from tengen.core.errors import (
    BoardIndexError,
    ConfigError,
    IllegalMoveError,
    InvalidColorError,
    InvalidDimensionError,
    InvariantViolation,
    TengenError,
)
from tengen.core.game import Game, Move
from tengen.core.rules import capture_type, is_suicide, play_move
from tengen.core.scoring import Score, eye_type, final_score
from tengen.core.validation import validate_positions

__version__ = "0.1.0"

__all__ = [
    "Board",
    "empty_board",
    "CaptureType",
    "Color",
    "opponent",
    "Game",
    "Move",
    "capture_type",
    "is_suicide",
    "play_move",
    "Score",
    "eye_type",
    "final_score",
    "validate_positions",
    "TengenError",
    "ConfigError",
    "BoardIndexError",
    "IllegalMoveError",
    "InvalidColorError",
    "InvalidDimensionError",
    "InvariantViolation",
]
