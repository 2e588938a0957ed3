"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their content
(mine/number) and visual state (hidden/exposed/flagged/...).
"""
from dataclasses import dataclass, replace
from enum import Enum, IntEnum, auto


# ============================================================================
# Constants
# ============================================================================

class CellValue(IntEnum):
    """Number of mines around a cell, or the mine itself."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    EXPOSED = auto()
    FLAGGED = auto()
    MISTAKE = auto()
    BOOM = auto()


# Observation codes for states that hide the cell value
HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MISTAKE_OBSERVATION = -3


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; use ``with_value`` and ``with_state`` to derive
    an updated copy.

    Attributes:
        value: Adjacent mine count (0-8) or ``CellValue.MINE``.
        state: Current visual state.
    """

    value: CellValue = CellValue.ZERO
    state: CellState = CellState.HIDDEN

    def with_value(self, value: CellValue) -> "Cell":
        """Return a copy of this cell holding ``value``."""
        return replace(self, value=CellValue(value))

    def with_state(self, state: CellState) -> "Cell":
        """Return a copy of this cell in ``state``."""
        return replace(self, state=state)

    @property
    def is_mine(self) -> bool:
        """Check if cell contains a mine."""
        return self.value == CellValue.MINE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_exposed(self) -> bool:
        """Check if cell is exposed."""
        return self.state == CellState.EXPOSED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its integer observation code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Wrongly flagged cell (after game over)
            0-8: Exposed cell with adjacent mine count
            9: Exposed or detonated mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.state == CellState.MISTAKE:
            return MISTAKE_OBSERVATION
        return int(self.value)
