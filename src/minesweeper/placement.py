"""
Mine placement and neighbor counting.

Mines are placed by rejection sampling with a bounded retry budget,
then every safe cell is given its adjacent mine count.
"""
import logging
from typing import Optional, Protocol, Union

import numpy as np

from .board import Board, BoardConfig, validate_dimensions, validate_mine_count
from .cell import CellValue


logger = logging.getLogger(__name__)

# Consecutive collisions tolerated before placement gives up
MAX_FAILED_GUESSES = 10


class RandomSource(Protocol):
    """Anything with numpy ``Generator.integers(low, high)`` semantics."""

    def integers(self, low: int, high: int) -> int:
        ...


RandomLike = Union[None, int, RandomSource]


def as_random_source(rng: RandomLike = None) -> RandomSource:
    """
    Normalize ``rng`` into a random source.

    None or an integer seed builds a fresh numpy Generator; any other
    object is assumed to already be a random source and is returned.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


# ============================================================================
# Mine Placement
# ============================================================================

def place_mines(
    rows: int,
    cols: int,
    total_bombs: int,
    rng: RandomLike = None,
) -> Board:
    """
    Create a board and scatter mines on it by rejection sampling.

    A coordinate is drawn uniformly (x first, then y). If the cell is
    not a mine yet it becomes one; otherwise the draw counts as a failed
    guess. Sampling stops once every mine is placed or after
    MAX_FAILED_GUESSES consecutive failures.

    The retry budget makes this best-effort: on small or dense boards
    fewer than ``total_bombs`` mines may be placed. That shortfall is
    logged, not raised.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        total_bombs: Mines to place, in [0, rows * cols).
        rng: Random source, integer seed, or None for a fresh generator.

    Returns:
        A board with mines placed and every other value still zero.
    """
    validate_dimensions(rows, cols)
    validate_mine_count(rows, cols, total_bombs)
    source = as_random_source(rng)

    board = Board(rows, cols)
    remaining = total_bombs
    failed_guesses = 0
    while remaining > 0 and failed_guesses < MAX_FAILED_GUESSES:
        x = int(source.integers(0, cols))
        y = int(source.integers(0, rows))

        if board.get_cell_value(x, y) != CellValue.MINE:
            board = board.set_cell_value(x, y, CellValue.MINE)
            remaining -= 1
            failed_guesses = 0
        else:
            failed_guesses += 1

    if remaining > 0:
        logger.warning(
            "Placed %d of %d mines on a %dx%d board after %d failed guesses",
            total_bombs - remaining, total_bombs, rows, cols, failed_guesses,
        )
    else:
        logger.debug("Placed %d mines on a %dx%d board", total_bombs, rows, cols)
    return board


# ============================================================================
# Neighbor Counter
# ============================================================================

def compute_values(board: Board) -> Board:
    """Give every non-mine cell its adjacent mine count."""
    for x, y, cell in board.cells():
        if cell.is_mine:
            continue
        count = board.count_neighbor_bombs(x, y)
        board = board.set_cell_value(x, y, CellValue(count))
    return board


def generate_board(
    config: Optional[BoardConfig] = None,
    rng: RandomLike = None,
) -> Board:
    """Place mines for ``config`` and compute neighbor counts."""
    config = config or BoardConfig()
    board = place_mines(config.rows, config.cols, config.total_bombs, rng)
    return compute_values(board)
