"""
Pytest configuration and shared fixtures for tengen tests.

This module provides:
- Empty 9x9 board fixture
- The classic one-stone ko shape on a 9x9 board
"""

import pytest

from tengen.core.board import Board, empty_board
from tests.helpers import setup_stones


@pytest.fixture
def board9() -> Board:
    return empty_board(9)


@pytest.fixture
def ko_board(board9) -> Board:
    """Black E5 with a single liberty at E6; a white stone on E6 is itself in atari.

        4 ....O....
        5 ...OXO...
        6 ...X.X...
        7 ....X....
    """
    return setup_stones(board9, black=["E5", "D6", "F6", "E7"], white=["D5", "F5", "E4"])
