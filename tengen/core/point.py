from dataclasses import dataclass, replace

from tengen.core.constants import Color


@dataclass
class Point:
    """State of one intersection.

    Attributes:
        color: Contents of the point.
        parent: Union-find parent index; the point is a root when parent is its own index.
        liberties: Adjacency edges from the group to empty points (root only).
        neighbor_sum: Sum of the indices of those empty points, with multiplicity (root only).
        neighbor_sum_of_squares: Sum of their squares, with multiplicity (root only).
        white_neighbors: Adjacent white stones, kept for every point.
        black_neighbors: Adjacent black stones, kept for every point.
    """

    color: Color
    parent: int
    liberties: int = 0
    neighbor_sum: int = 0
    neighbor_sum_of_squares: int = 0
    white_neighbors: int = 0
    black_neighbors: int = 0

    def copy(self) -> "Point":
        return replace(self)

    def clear_aggregates(self) -> None:
        self.liberties = 0
        self.neighbor_sum = 0
        self.neighbor_sum_of_squares = 0
