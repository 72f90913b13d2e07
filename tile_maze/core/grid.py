from array import array
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from tile_maze.core.errors import InvalidDimension, NotAdjacent, OutOfBounds

# (path_row, path_col)
PathCoord = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """Read-only view of one lattice cell, as handed to renderers."""
    row: int
    col: int
    x: int
    y: int
    is_path_cell: bool
    is_open_wall: bool
    highlighted: bool


class Grid:
    # Flags
    PATH_CELL = 0b0001
    OPEN_WALL = 0b0010
    HIGHLIGHT = 0b0100
    VISITED   = 0b1000

    # Exclusive bounds for resized()
    MIN_SIZE = 10
    MAX_SIZE = 100

    # Probe order: up, down, left, right
    DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

    __slots__ = ('num_rows', 'num_cols', 'path_rows', 'path_cols', 'cells', 'generated')

    def __init__(self, num_rows: int, num_cols: int):
        for name, value in (("num_rows", num_rows), ("num_cols", num_cols)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDimension(f"{name} must be an integer, got {value!r}")
            if value < 3 or value % 2 == 0:
                raise InvalidDimension(f"{name} must be odd and >= 3, got {value}")

        self.num_rows = num_rows
        self.num_cols = num_cols
        self.path_rows = (num_rows - 1) // 2
        self.path_cols = (num_cols - 1) // 2
        self.generated = False
        # 1 byte per lattice cell, row-major
        self.cells = array('B', bytes(num_rows * num_cols))
        self.reset()

    def reset(self):
        """
        Clears every flag, then marks the odd/odd cells as path cells.
        The buffer is rewritten in place so numpy views stay valid.
        """
        self.generated = False
        self.cells[:] = array('B', bytes(self.num_rows * self.num_cols))
        for row in range(1, self.num_rows, 2):
            base = row * self.num_cols
            for col in range(1, self.num_cols, 2):
                self.cells[base + col] = self.PATH_CELL

    def resized(self, delta: int) -> "Grid":
        """
        Returns a fresh grid with both dimensions changed by delta, or self if
        either result would leave the (MIN_SIZE, MAX_SIZE) window.
        """
        rows = self.num_rows + delta
        cols = self.num_cols + delta
        if not (self.MIN_SIZE < rows < self.MAX_SIZE and self.MIN_SIZE < cols < self.MAX_SIZE):
            return self
        return Grid(rows, cols)

    # --- Lattice coordinates ---

    def get_index(self, row: int, col: int) -> int:
        if 0 <= row < self.num_rows and 0 <= col < self.num_cols:
            return row * self.num_cols + col
        raise OutOfBounds(f"Cell ({row}, {col}) out of bounds")

    def is_path_cell(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.PATH_CELL) != 0

    def is_open_wall(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.OPEN_WALL) != 0

    def is_highlighted(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.HIGHLIGHT) != 0

    def set_highlight(self, row: int, col: int, highlighted: bool = True):
        idx = self.get_index(row, col)
        if highlighted:
            self.cells[idx] |= self.HIGHLIGHT
        else:
            self.cells[idx] &= ~self.HIGHLIGHT

    def clear_highlight(self):
        mask = ~self.HIGHLIGHT & 0xFF
        cells = self.cells
        for i in range(len(cells)):
            cells[i] &= mask

    def open_wall_count(self) -> int:
        return sum(1 for val in self.cells if val & self.OPEN_WALL)

    # --- Path cell coordinates ---

    def is_valid_path_cell(self, path_row: int, path_col: int) -> bool:
        return 0 <= path_row < self.path_rows and 0 <= path_col < self.path_cols

    def path_to_cell(self, path_row: int, path_col: int) -> Tuple[int, int]:
        if not self.is_valid_path_cell(path_row, path_col):
            raise OutOfBounds(f"Path cell ({path_row}, {path_col}) out of bounds")
        return 2 * path_row + 1, 2 * path_col + 1

    def path_index(self, path_row: int, path_col: int) -> int:
        """Dense index of a path cell, used by per-run arrays."""
        return path_row * self.path_cols + path_col

    def path_cells(self) -> Iterator[PathCoord]:
        for path_row in range(self.path_rows):
            for path_col in range(self.path_cols):
                yield (path_row, path_col)

    @property
    def path_cell_count(self) -> int:
        return self.path_rows * self.path_cols

    @property
    def goal(self) -> PathCoord:
        return (self.path_rows - 1, self.path_cols - 1)

    def _path_offset(self, cell: PathCoord) -> int:
        return (2 * cell[0] + 1) * self.num_cols + 2 * cell[1] + 1

    def set_visited(self, cell: PathCoord, visited: bool = True):
        idx = self._path_offset(cell)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, cell: PathCoord) -> bool:
        return (self.cells[self._path_offset(cell)] & self.VISITED) != 0

    def get_neighbors(self, path_row: int, path_col: int) -> Iterator[PathCoord]:
        """
        Yields every in-bounds path neighbour in probe order.
        Does NOT check walls or visited flags.
        """
        for dr, dc in self.DIRECTIONS:
            nr, nc = path_row + dr, path_col + dc
            if 0 <= nr < self.path_rows and 0 <= nc < self.path_cols:
                yield (nr, nc)

    def neighbors(self, cell: PathCoord, want_visited: bool) -> List[PathCoord]:
        return [n for n in self.get_neighbors(*cell) if self.is_visited(n) == want_visited]

    def wall_between(self, a: PathCoord, b: PathCoord) -> Tuple[int, int]:
        """
        Returns the lattice (row, col) of the wall cell separating two
        adjacent path cells.
        """
        if not (self.is_valid_path_cell(*a) and self.is_valid_path_cell(*b)):
            raise OutOfBounds(f"Path cells {a} and {b} must both be in bounds")
        if abs(a[0] - b[0]) + abs(a[1] - b[1]) != 1:
            raise NotAdjacent(f"Path cells {a} and {b} are not adjacent")
        # Midpoint of (2a+1, 2b+1)
        return a[0] + b[0] + 1, a[1] + b[1] + 1

    def open_wall(self, a: PathCoord, b: PathCoord):
        row, col = self.wall_between(a, b)
        self.cells[row * self.num_cols + col] |= self.OPEN_WALL

    def is_open_between(self, a: PathCoord, b: PathCoord) -> bool:
        row, col = self.wall_between(a, b)
        return (self.cells[row * self.num_cols + col] & self.OPEN_WALL) != 0

    # --- Renderer accessors ---

    def cell(self, row: int, col: int) -> Cell:
        val = self.cells[self.get_index(row, col)]
        return Cell(
            row=row,
            col=col,
            x=col,
            y=row,
            is_path_cell=bool(val & self.PATH_CELL),
            is_open_wall=bool(val & self.OPEN_WALL),
            highlighted=bool(val & self.HIGHLIGHT),
        )

    def iter_cells(self) -> Iterator[Cell]:
        for row in range(self.num_rows):
            for col in range(self.num_cols):
                yield self.cell(row, col)

    def to_numpy(self) -> np.ndarray:
        """Zero-copy (num_rows, num_cols) uint8 view of the flag bytes."""
        arr = np.frombuffer(self.cells, dtype=np.uint8)
        return arr.reshape((self.num_rows, self.num_cols))
