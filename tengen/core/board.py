"""Board state with incremental group tracking.

Groups are tracked with a union-find over point indices. Each root carries
three aggregates over the adjacency edges from the group's stones to empty
points, counted with multiplicity: the number of edges (``liberties``), the sum
of the empty points' indices and the sum of their squares. A group has exactly
one distinct liberty iff every term of that multiset is equal, which is the
Cauchy-Schwarz equality case ``sum * sum == liberties * sum_of_squares``.
This gives an O(1) atari test with no liberty scan.

Neighbor color counts are kept for every point, occupied or not.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from tengen.core import geometry
from tengen.core.constants import DEFAULT_HISTORY_WINDOW, GLYPHS, Color, opponent
from tengen.core.errors import IllegalMoveError, InvalidColorError
from tengen.core.point import Point
from tengen.core.zobrist import PositionHash

logger = logging.getLogger(__name__)


class Board:
    """A dim x dim board. The single owned, mutable object of the engine.

    Analysis branches must work on their own :meth:`copy`.
    """

    def __init__(self, dim: int, window: int = DEFAULT_HISTORY_WINDOW):
        self.dim = geometry.check_dim(dim)
        self.positions: List[Point] = [geometry.initial_point(dim, i) for i in range(dim * dim)]
        self.empty_positions: Set[int] = set(range(dim * dim))
        self.white_score = 0
        self.black_score = 0
        self.hash = PositionHash.fresh(window)

    def copy(self) -> "Board":
        new_board = Board.__new__(Board)
        new_board.dim = self.dim
        new_board.positions = [p.copy() for p in self.positions]
        new_board.empty_positions = set(self.empty_positions)
        new_board.white_score = self.white_score
        new_board.black_score = self.black_score
        new_board.hash = self.hash
        return new_board

    # ------------------------------------------------------------------
    # Point accessors
    # ------------------------------------------------------------------

    def _point(self, index: int) -> Point:
        return self.positions[geometry.check_index(self.dim, index)]

    def _root_point(self, index: int) -> Point:
        return self.positions[self.root(index)]

    def position_range(self) -> range:
        return range(self.dim * self.dim)

    def color(self, index: int) -> Color:
        return self._point(index).color

    def local_parent(self, index: int) -> int:
        return self._point(index).parent

    def root(self, index: int) -> int:
        """Follow parent links to the group's representative."""
        parent = self._point(index).parent
        while parent != index:
            index = parent
            parent = self.positions[index].parent
        return index

    def neighbors(self, index: int, colors: Optional[Iterable[Color]] = None) -> List[int]:
        """Adjacent indices, optionally only those whose color is in ``colors``."""
        adjacent = geometry.neighbors(self.dim, geometry.check_index(self.dim, index))
        if colors is None:
            return list(adjacent)
        wanted = set(colors)
        return [n for n in adjacent if self.positions[n].color in wanted]

    def group(self, index: int) -> Set[int]:
        """Connected same-color points containing ``index``, by traversal.

        An empty point is its own singleton group.
        """
        color = self.color(index)
        if color is Color.EMPTY:
            return {index}
        group = set()
        to_check = [index]
        while to_check:
            n = to_check.pop()
            if n in group:
                continue
            group.add(n)
            to_check.extend(m for m in self.neighbors(n, (color,)) if m not in group)
        return group

    def liberties(self, index: int) -> int:
        return self._root_point(index).liberties

    def neighbor_sum(self, index: int) -> int:
        return self._root_point(index).neighbor_sum

    def neighbor_sum_of_squares(self, index: int) -> int:
        return self._root_point(index).neighbor_sum_of_squares

    def white_neighbors(self, index: int) -> int:
        return self._point(index).white_neighbors

    def black_neighbors(self, index: int) -> int:
        return self._point(index).black_neighbors

    def stone_neighbors(self, index: int, color: Color) -> int:
        point = self._point(index)
        if color is Color.WHITE:
            return point.white_neighbors
        if color is Color.BLACK:
            return point.black_neighbors
        raise InvalidColorError(f"Not a stone color: {color!r}")

    def is_atari(self, index: int) -> bool:
        """True if the group at ``index`` has exactly one distinct liberty."""
        root = self._root_point(index)
        total = root.neighbor_sum
        return root.liberties > 0 and total * total == root.liberties * root.neighbor_sum_of_squares

    def score(self, color: Color) -> int:
        """Stones captured by ``color``."""
        if color is Color.WHITE:
            return self.white_score
        if color is Color.BLACK:
            return self.black_score
        raise InvalidColorError(f"Not a stone color: {color!r}")

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _add_neighbor_count(self, index: int, color: Color, delta: int) -> None:
        point = self.positions[index]
        if color is Color.WHITE:
            point.white_neighbors += delta
        else:
            point.black_neighbors += delta

    def _add_liberty(self, root: int, liberty: int, delta: int) -> None:
        point = self.positions[root]
        point.liberties += delta
        point.neighbor_sum += delta * liberty
        point.neighbor_sum_of_squares += delta * liberty * liberty

    def _union(self, a: int, b: int) -> None:
        root_a, root_b = self.root(a), self.root(b)
        if root_a == root_b:
            return
        merged, kept = self.positions[root_a], self.positions[root_b]
        kept.liberties += merged.liberties
        kept.neighbor_sum += merged.neighbor_sum
        kept.neighbor_sum_of_squares += merged.neighbor_sum_of_squares
        merged.clear_aggregates()
        merged.parent = root_b

    def _remove_group(self, index: int) -> List[int]:
        color = self.positions[index].color
        stones = sorted(self.group(index))
        for s in stones:
            point = self.positions[s]
            point.color = Color.EMPTY
            point.parent = s
            point.clear_aggregates()
            self.empty_positions.add(s)
        # every stone still adjacent to a removed point belongs to another group
        for s in stones:
            for n in geometry.neighbors(self.dim, s):
                self._add_neighbor_count(n, color, -1)
                if self.positions[n].color is not Color.EMPTY:
                    self._add_liberty(self.root(n), s, 1)
        return stones

    def place_stone(self, color: Color, index: int) -> List[int]:
        """Place a stone and remove every adjacent opponent group left without liberties.

        Ko and suicide are not checked here; see :func:`tengen.core.rules.play_move`.

        Args:
            color: Color of the stone to place.
            index: Empty point to play on.

        Returns:
            Indices of the captured stones, in ascending order.

        Raises:
            IllegalMoveError: If the point is occupied.
        """
        other = opponent(color)
        point = self._point(index)
        if point.color is not Color.EMPTY:
            raise IllegalMoveError(
                f"Point {geometry.label(index, self.dim)} is already occupied",
                reason="occupied",
                context={"index": index, "color": point.color.value},
            )

        point.color = color
        point.parent = index
        point.clear_aggregates()
        self.empty_positions.discard(index)

        adjacent = geometry.neighbors(self.dim, index)
        for n in adjacent:
            self._add_neighbor_count(n, color, 1)
            if self.positions[n].color is Color.EMPTY:
                self._add_liberty(index, n, 1)
            else:
                self._add_liberty(self.root(n), index, -1)

        for n in adjacent:
            if self.positions[n].color is color:
                self._union(index, n)

        captured: List[int] = []
        for n in adjacent:
            if self.positions[n].color is other and self.liberties(n) == 0:
                captured.extend(self._remove_group(n))
        captured.sort()

        if color is Color.WHITE:
            self.white_score += len(captured)
        else:
            self.black_score += len(captured)

        position_hash = self.hash.rotate().update(index, color)
        for s in captured:
            position_hash = position_hash.update(s, other)
        self.hash = position_hash

        if captured:
            logger.debug(
                "%s at %s captured %d stone(s): %s",
                color.value,
                geometry.label(index, self.dim),
                len(captured),
                ", ".join(geometry.label(s, self.dim) for s in captured),
            )
        return captured

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        letters = geometry.GTP_COORD[: self.dim]
        # two-letter columns past Z need a separator to stay readable
        width = max(len(c) for c in letters)
        sep = "" if width == 1 else " "
        cols = sep.join(c.rjust(width) for c in letters)
        lines = [f"Black: {self.black_score}", f"White: {self.white_score}", f"  {cols}", ""]
        for y in range(self.dim):
            row = sep.join(GLYPHS[self.positions[y * self.dim + x].color].rjust(width) for x in range(self.dim))
            lines.append(f"{y + 1} {row} {y + 1}")
        lines += ["", f"  {cols}", ""]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(dim={self.dim}, stones={self.dim * self.dim - len(self.empty_positions)})"


_TEMPLATES: Dict[Tuple[int, int], Board] = {}


def empty_board(dim: int, window: int = DEFAULT_HISTORY_WINDOW) -> Board:
    """Fresh empty board, copied from a process-wide template per (dim, window)."""
    key = (geometry.check_dim(dim), window)
    template = _TEMPLATES.get(key)
    if template is None:
        template = _TEMPLATES[key] = Board(dim, window)
    return template.copy()
