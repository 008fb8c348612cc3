"""Grid geometry: index arithmetic, neighbor enumeration and point labels.

Points are stored in scan order, row by row from the top-left corner:
``index = y * dim + x`` where ``x`` is the column and ``y`` the row.
"""

import re
from functools import lru_cache
from typing import Any, Tuple

from tengen.core.constants import Color
from tengen.core.errors import BoardIndexError, InvalidDimensionError
from tengen.core.point import Point

# GTP skips "I"; two-letter columns extend past 25
GTP_COORD = list("ABCDEFGHJKLMNOPQRSTUVWXYZ") + [xa + c for xa in "ABCDEFGH" for c in "ABCDEFGHJKLMNOPQRSTUVWXYZ"]


def check_dim(dim: Any) -> int:
    if isinstance(dim, bool) or not isinstance(dim, int) or dim < 1:
        raise InvalidDimensionError(f"Board dimension must be a positive integer, got {dim!r}")
    return dim


def check_index(dim: int, index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < dim * dim:
        raise BoardIndexError(
            f"Point index {index!r} outside board of dimension {dim}",
            context={"dim": dim, "index": repr(index)},
        )
    return index


def to_index(dim: int, x: int, y: int) -> int:
    """Convert column ``x`` and row ``y`` to a point index.

    Raises:
        BoardIndexError: If either coordinate is off the board.
    """
    if not (0 <= x < dim and 0 <= y < dim):
        raise BoardIndexError(f"Invalid position: ({x}, {y}) on {dim}x{dim}", context={"x": x, "y": y})
    return y * dim + x


def from_index(dim: int, index: int) -> Tuple[int, int]:
    check_index(dim, index)
    y, x = divmod(index, dim)
    return x, y


@lru_cache(maxsize=None)
def neighbors(dim: int, index: int) -> Tuple[int, ...]:
    """Orthogonally adjacent indices of ``index`` that lie on the board."""
    x, y = from_index(dim, index)
    adjacent = []
    for dx, dy in [(0, -1), (-1, 0), (1, 0), (0, 1)]:
        nx, ny = x + dx, y + dy
        if 0 <= nx < dim and 0 <= ny < dim:
            adjacent.append(ny * dim + nx)
    return tuple(adjacent)


def initial_point(dim: int, index: int) -> Point:
    check_index(dim, index)
    return Point(color=Color.EMPTY, parent=index)


def label(index: int, dim: int) -> str:
    """GTP-style label of a point, e.g. ``D4``. Rows count from 1 at the top."""
    x, y = from_index(dim, index)
    return GTP_COORD[x] + str(y + 1)


def parse_label(text: str, dim: int) -> int:
    """Inverse of :func:`label`.

    Raises:
        ValueError: If the label is malformed.
        BoardIndexError: If the label names a point off the board.
    """
    match = re.fullmatch(r"([A-Z]+)(\d+)", text.strip().upper())
    if not match:
        raise ValueError(f"Invalid point label format: {text!r}")
    col_str, row_str = match.groups()
    try:
        x = GTP_COORD.index(col_str)
    except ValueError:
        raise ValueError(f"Invalid column '{col_str}' in: {text!r}")
    return to_index(dim, x, int(row_str) - 1)
