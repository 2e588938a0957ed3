"""
Minesweeper rules engine.

Provides the immutable board model, mine placement, the flood-fill
reveal, flagging, game evaluation and the game controller.
"""
from .cell import Cell, CellState, CellValue
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, CLASSIC
from .errors import (
    MinesweeperError,
    OutOfBoundsError,
    InvalidDimensionsError,
    InvalidMineCountError,
)
from .placement import MAX_FAILED_GUESSES, place_mines, compute_values, generate_board
from .reveal import reveal_cell, reveal_all_bombs, detonate_bomb
from .flags import flag_cell
from .evaluator import is_game_over, is_game_won, is_game_lost
from .controller import GameController, GameSession, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellValue",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "CLASSIC",
    "MinesweeperError",
    "OutOfBoundsError",
    "InvalidDimensionsError",
    "InvalidMineCountError",
    "MAX_FAILED_GUESSES",
    "place_mines",
    "compute_values",
    "generate_board",
    "reveal_cell",
    "reveal_all_bombs",
    "detonate_bomb",
    "flag_cell",
    "is_game_over",
    "is_game_won",
    "is_game_lost",
    "GameController",
    "GameSession",
    "GameState",
    "MinesweeperEnv",
]
