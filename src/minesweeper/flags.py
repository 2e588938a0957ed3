"""Flag manager for Minesweeper."""
from .board import Board
from .cell import CellState


def flag_cell(board: Board, x: int, y: int) -> Board:
    """
    Toggle the flag on (x, y).

    HIDDEN becomes FLAGGED and FLAGGED becomes HIDDEN, with the flag
    counter moved in lockstep. Cells in any other state are unchanged.

    Raises:
        OutOfBoundsError: If (x, y) is not on the board.
    """
    state = board.get_cell_state(x, y)
    if state == CellState.HIDDEN:
        return board.set_cell_state(x, y, CellState.FLAGGED).inc_flags()
    if state == CellState.FLAGGED:
        return board.set_cell_state(x, y, CellState.HIDDEN).dec_flags()
    return board
