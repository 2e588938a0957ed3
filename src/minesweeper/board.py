"""
Board module for Minesweeper game.

Implements the immutable game board: a grid of cells plus a flag
counter. Every mutator returns a new Board and leaves the original
untouched, so earlier snapshots stay valid.
"""
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell, CellState, CellValue
from .errors import InvalidDimensionsError, InvalidMineCountError, OutOfBoundsError


Row = Tuple[Cell, ...]
Grid = Tuple[Row, ...]

# Neighbor offsets as (dx, dy): n, s, e, w, ne, nw, se, sw
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1), (0, 1), (1, 0), (-1, 0),
    (1, -1), (-1, -1), (1, 1), (-1, 1),
)


# ============================================================================
# Validation
# ============================================================================

def validate_dimensions(rows: int, cols: int) -> None:
    """Ensure both board dimensions are positive."""
    if rows < 1 or cols < 1:
        raise InvalidDimensionsError(
            f"Board dimensions must be positive (got {rows}x{cols})"
        )


def validate_mine_count(rows: int, cols: int, total_bombs: int) -> None:
    """Ensure ``total_bombs`` leaves at least one safe cell."""
    if total_bombs < 0:
        raise InvalidMineCountError("Number of mines cannot be negative")
    max_mines = rows * cols - 1
    if total_bombs > max_mines:
        raise InvalidMineCountError(f"Too many mines (max {max_mines})")


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        total_bombs: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    total_bombs: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_dimensions(self.rows, self.cols)
        validate_mine_count(self.rows, self.cols, self.total_bombs)

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
CLASSIC = BoardConfig(16, 24, 12)


# ============================================================================
# Board Class
# ============================================================================

def _empty_grid(rows: int, cols: int) -> Grid:
    row = tuple(Cell() for _ in range(cols))
    return tuple(row for _ in range(rows))


@dataclass(frozen=True)
class Board:
    """
    Immutable Minesweeper board.

    Cells are addressed as (x, y) with x the column and y the row.
    Rows are stored as tuples, so a single-cell update rebuilds only the
    touched row and shares every other row with the previous board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        flag_count: Number of cells currently flagged.
    """

    rows: int
    cols: int
    flag_count: int = 0
    _cells: Grid = field(default=(), repr=False)

    def __post_init__(self) -> None:
        validate_dimensions(self.rows, self.cols)
        if not self._cells:
            object.__setattr__(self, "_cells", _empty_grid(self.rows, self.cols))

    # ========================================================================
    # Size Queries
    # ========================================================================

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def total_flags(self) -> int:
        """Number of flagged cells."""
        return self.flag_count

    # ========================================================================
    # Cell Access (Low-level)
    # ========================================================================

    def has_cell(self, x: int, y: int) -> bool:
        """Check if (x, y) is within board bounds."""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.has_cell(x, y):
            raise OutOfBoundsError(x, y)

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y)."""
        self._check_bounds(x, y)
        return self._cells[y][x]

    def get_cell_value(self, x: int, y: int) -> CellValue:
        return self.get_cell(x, y).value

    def get_cell_state(self, x: int, y: int) -> CellState:
        return self.get_cell(x, y).state

    def _with_cell(self, x: int, y: int, cell: Cell) -> "Board":
        """Return a new board with the cell at (x, y) replaced."""
        row = self._cells[y]
        new_row = row[:x] + (cell,) + row[x + 1:]
        cells = self._cells[:y] + (new_row,) + self._cells[y + 1:]
        return replace(self, _cells=cells)

    def set_cell_value(self, x: int, y: int, value: CellValue) -> "Board":
        """Return a new board where (x, y) holds ``value``."""
        cell = self.get_cell(x, y)
        return self._with_cell(x, y, cell.with_value(value))

    def set_cell_state(self, x: int, y: int, state: CellState) -> "Board":
        """Return a new board where (x, y) is in ``state``."""
        cell = self.get_cell(x, y)
        return self._with_cell(x, y, cell.with_state(state))

    # ========================================================================
    # Flag Counter
    # ========================================================================

    def inc_flags(self) -> "Board":
        """
        Return a new board with one more flag counted.

        Only call alongside a HIDDEN -> FLAGGED transition.
        """
        return replace(self, flag_count=self.flag_count + 1)

    def dec_flags(self) -> "Board":
        """
        Return a new board with one fewer flag counted.

        Only call alongside a FLAGGED -> HIDDEN transition.
        """
        return replace(self, flag_count=self.flag_count - 1)

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def get_cell_neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column index of center cell.
            y: Row index of center cell.

        Returns:
            List of up to 8 (x, y) tuples clipped to the board.
        """
        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.has_cell(nx, ny):
                neighbors.append((nx, ny))
        return neighbors

    def count_neighbor_bombs(self, x: int, y: int) -> int:
        """Count mines adjacent to (x, y)."""
        return sum(
            1 for nx, ny in self.get_cell_neighbors(x, y)
            if self._cells[ny][nx].is_mine
        )

    # ========================================================================
    # Iteration and Aggregate Queries
    # ========================================================================

    def get_row(self, y: int) -> Row:
        """Get row ``y``, or an empty tuple if there is no such row."""
        if not 0 <= y < self.rows:
            return ()
        return self._cells[y]

    def get_rows(self) -> Grid:
        return self._cells

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (x, y, cell) in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield x, y, cell

    def count_state(self, state: CellState) -> int:
        """Count cells currently in ``state``."""
        return sum(1 for _, _, cell in self.cells() if cell.state == state)

    def count_mines(self) -> int:
        """Count mine cells on the board."""
        return sum(1 for _, _, cell in self.cells() if cell.is_mine)

    def to_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols), see Cell.to_observation.
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for x, y, cell in self.cells():
            obs[y, x] = cell.to_observation()
        return obs
