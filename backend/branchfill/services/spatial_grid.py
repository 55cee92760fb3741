"""
Uniform acceleration grid for minimum-distance queries.

- Cell size = floor(radius / √2): a cell's diagonal is at most `radius`, so two
  accepted samples (pairwise distance > radius) never share a cell.
- Dimensions = ceil(size / cell_size) per axis, so a sample at the maximum
  coordinate of the domain still maps inside the grid.
- Neighbor search covers the 5×5 block around the sample's cell (offsets -2..+2).
  Cell size is kept at or above radius / 2, so two cells span at least `radius`
  and no sample within `radius` is missed.
- Storage is sparse: only occupied cells are kept, keyed by (i, j).
"""

from __future__ import annotations

import math

Point = tuple[float, float]

# Offsets -2..+2 in each axis around the query cell
NEIGHBOR_REACH = 2


def cell_size_for_radius(radius: float) -> float:
    """
    Largest cell size that keeps one sample per cell.

    Integer cells (floor) when the floor is at least 1 and two cells still reach
    `radius`. Otherwise (e.g. radius < √2, or 2 < radius < 2√2 where the floor is 1)
    the exact radius / √2 is used.
    """
    if radius <= 0:
        raise ValueError("radius must be positive")
    exact = radius / math.sqrt(2)
    floored = math.floor(exact)
    if floored >= 1 and NEIGHBOR_REACH * floored >= radius:
        return float(floored)
    return exact


class SpatialGrid:
    """Sparse bucket grid over [0, size_x) × [0, size_y) holding at most one point per cell."""

    def __init__(self, size_x: float, size_y: float, radius: float) -> None:
        if size_x <= 0 or size_y <= 0:
            raise ValueError("Grid extents must be positive")
        self.size_x = size_x
        self.size_y = size_y
        self.radius = radius
        self.cell_size = cell_size_for_radius(radius)
        self.columns = grid_dimension(size_x, self.cell_size)
        self.rows = grid_dimension(size_y, self.cell_size)
        self._cells: dict[tuple[int, int], Point] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def cell_of(self, point: Point) -> tuple[int, int]:
        """Cell index (i, j) for a point."""
        return (int(point[0] // self.cell_size), int(point[1] // self.cell_size))

    def contains_cell(self, i: int, j: int) -> bool:
        return 0 <= i < self.columns and 0 <= j < self.rows

    def get(self, i: int, j: int) -> Point | None:
        return self._cells.get((i, j))

    def insert(self, point: Point) -> bool:
        """
        Store point in its cell. Returns False (and stores nothing) when the cell
        is already occupied; raises ValueError for a point outside the grid.
        """
        i, j = self.cell_of(point)
        if not self.contains_cell(i, j):
            raise ValueError(f"Point {point} lies outside the grid ({self.columns}×{self.rows} cells)")
        if (i, j) in self._cells:
            return False
        self._cells[(i, j)] = point
        return True

    def neighbors(self, point: Point) -> list[Point]:
        """Occupied cells in the 5×5 block around point's cell, clipped to grid bounds."""
        ci, cj = self.cell_of(point)
        res: list[Point] = []
        for i in range(max(ci - NEIGHBOR_REACH, 0), min(ci + NEIGHBOR_REACH + 1, self.columns)):
            for j in range(max(cj - NEIGHBOR_REACH, 0), min(cj + NEIGHBOR_REACH + 1, self.rows)):
                stored = self._cells.get((i, j))
                if stored is not None:
                    res.append(stored)
        return res

    def is_far_enough(self, point: Point) -> bool:
        """True iff every neighbor is strictly farther than `radius` from point."""
        px, py = point
        return all(math.hypot(px - nx, py - ny) > self.radius for nx, ny in self.neighbors(point))


def grid_dimension(extent: float, cell_size: float) -> int:
    """Number of cells covering [0, extent)."""
    return max(1, int(math.ceil(extent / cell_size)))


def grid_cell_count(size_x: float, size_y: float, radius: float) -> int:
    """Cells a grid for this domain and radius would span."""
    cell_size = cell_size_for_radius(radius)
    return grid_dimension(size_x, cell_size) * grid_dimension(size_y, cell_size)
