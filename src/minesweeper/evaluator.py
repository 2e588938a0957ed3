"""
Game evaluator for Minesweeper.

Derives game-over, win and loss purely from a board's cells.
"""
from .board import Board
from .cell import CellState


def is_game_lost(board: Board) -> bool:
    """Check if a mine has been detonated."""
    return any(cell.state == CellState.BOOM for _, _, cell in board.cells())


def is_game_over(board: Board) -> bool:
    """Check if a mine went off or no cell is hidden any more."""
    if is_game_lost(board):
        return True
    return all(not cell.is_hidden for _, _, cell in board.cells())


def is_game_won(board: Board) -> bool:
    """
    Check if the board is won.

    Every cell must be out of the HIDDEN state and every mine must be
    flagged. A detonated mine is BOOM rather than FLAGGED, so a lost
    board never counts as won.
    """
    for _, _, cell in board.cells():
        if cell.is_hidden:
            return False
        if cell.is_mine and not cell.is_flagged:
            return False
    return True
