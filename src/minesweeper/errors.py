"""
Error types for the Minesweeper rules engine.

Every error here is a caller contract violation. They are raised where
the violation is detected and are never retried or masked.
"""


class MinesweeperError(Exception):
    """Base class for all rules engine errors."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Raised when a coordinate lies outside the board."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"no cell at {x}x{y}")
        self.x = x
        self.y = y


class InvalidDimensionsError(MinesweeperError, ValueError):
    """Raised when a board is requested with rows or cols <= 0."""


class InvalidMineCountError(MinesweeperError, ValueError):
    """Raised when the mine count cannot fit on the board."""
