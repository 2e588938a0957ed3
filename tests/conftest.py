"""
Pytest configuration and shared fixtures.
"""
from typing import Callable, Iterable, List, Sequence

import pytest

from minesweeper import (
    Board,
    BoardConfig,
    Cell,
    CellValue,
    GameController,
    compute_values,
)


# ============================================================================
# Helpers
# ============================================================================

class ScriptedRng:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws: Iterable[int]) -> None:
        self.draws: List[int] = list(draws)
        self.calls: List[tuple] = []

    def integers(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        value = self.draws.pop(0)
        assert low <= value < high
        return value


def layout_board(layout: Sequence[str]) -> Board:
    """
    Build a board from rows of text, '*' marking a mine.

    Neighbor values are computed; every cell starts hidden.
    """
    board = Board(len(layout), len(layout[0]))
    for y, line in enumerate(layout):
        for x, char in enumerate(line):
            if char == "*":
                board = board.set_cell_value(x, y, CellValue.MINE)
    return compute_values(board)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[Sequence[str]], Board]:
    """Factory for boards described by text layouts."""
    return layout_board


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(5, 5)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return layout_board([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def corner_board() -> Board:
    """
    Create a 4x4 board with mines in two corners.

    Values:
        1 1 0 0
        * 1 0 0
        1 1 1 1
        0 0 1 *
    """
    return layout_board([
        "....",
        "*...",
        "....",
        "...*",
    ])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(value=CellValue.MINE)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def scripted_rng() -> Callable[[Iterable[int]], ScriptedRng]:
    """Factory for random sources with fixed draws."""
    return ScriptedRng


@pytest.fixture
def center_mine_game(center_mine_board: Board) -> GameController:
    """Controller playing the 3x3 board with a centre mine."""
    return GameController.from_board(center_mine_board)


@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)
