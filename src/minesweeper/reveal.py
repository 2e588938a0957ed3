"""
Reveal engine for Minesweeper.

Exposes cells, flood-fills zero-value regions and handles mine
detonation. Every function takes a Board and returns a new one.
"""
from .board import Board
from .cell import CellState, CellValue


def reveal_all_bombs(board: Board) -> Board:
    """
    Show the end-of-game board.

    Hidden mines become EXPOSED and flagged safe cells become MISTAKE.
    Every other cell is left as is. A MISTAKE is no longer a flag, so
    the flag counter drops with each one.
    """
    for x, y, cell in board.cells():
        if cell.is_mine and cell.is_hidden:
            board = board.set_cell_state(x, y, CellState.EXPOSED)
        elif not cell.is_mine and cell.is_flagged:
            board = board.set_cell_state(x, y, CellState.MISTAKE).dec_flags()
    return board


def detonate_bomb(board: Board, x: int, y: int) -> Board:
    """Reveal all mines, then mark (x, y) as the one that went off."""
    return reveal_all_bombs(board).set_cell_state(x, y, CellState.BOOM)


def reveal_cell(board: Board, x: int, y: int) -> Board:
    """
    Reveal the cell at (x, y).

    Non-hidden cells are left alone, so revealing is idempotent. A mine
    detonates. A zero cell keeps exposing its neighbors until the
    connected zero region and its numbered border are open.

    The fill walks an explicit worklist instead of recursing, so stack
    depth does not grow with the size of the region.

    Raises:
        OutOfBoundsError: If (x, y) is not on the board.
    """
    board.get_cell(x, y)

    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        cell = board.get_cell(cx, cy)
        if not cell.is_hidden:
            continue

        if cell.is_mine:
            board = detonate_bomb(board, cx, cy)
            continue

        board = board.set_cell_state(cx, cy, CellState.EXPOSED)
        if cell.value == CellValue.ZERO:
            pending.extend(reversed(board.get_cell_neighbors(cx, cy)))

    return board
