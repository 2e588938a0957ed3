"""
Unit tests for Cell class.

Tests cell defaults, immutable updates and observation conversion.
"""
import dataclasses

import pytest
from minesweeper import Cell, CellState, CellValue


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False
        assert hidden_cell.value == CellValue.ZERO

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Can create a cell that is a mine."""
        assert mine_cell.is_mine is True

    def test_mine_value_is_nine(self) -> None:
        """The mine sits just after the largest possible count."""
        assert int(CellValue.MINE) == 9
        assert CellValue(8) == CellValue.EIGHT


# ============================================================================
# Cell Update Tests
# ============================================================================

class TestCellUpdates:
    """Test copy-on-write cell updates."""

    def test_cell_is_frozen(self, hidden_cell: Cell) -> None:
        """Cells cannot be changed in place."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            hidden_cell.state = CellState.EXPOSED

    def test_with_state_returns_new_cell(self, hidden_cell: Cell) -> None:
        """with_state should leave the original untouched."""
        exposed = hidden_cell.with_state(CellState.EXPOSED)
        assert exposed.is_exposed is True
        assert hidden_cell.is_hidden is True

    def test_with_value_accepts_plain_int(self, hidden_cell: Cell) -> None:
        """Integer counts are converted to CellValue."""
        cell = hidden_cell.with_value(3)
        assert cell.value is CellValue.THREE

    def test_with_value_rejects_out_of_range(self, hidden_cell: Cell) -> None:
        """There is no cell value above MINE."""
        with pytest.raises(ValueError):
            hidden_cell.with_value(10)


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """A hidden mine must not leak through the observation."""
        assert mine_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        assert hidden_cell.with_state(CellState.FLAGGED).to_observation() == -2

    def test_mistake_cell_observation_is_negative_three(
        self, hidden_cell: Cell
    ) -> None:
        """Wrongly flagged cell should return -3 for observation."""
        assert hidden_cell.with_state(CellState.MISTAKE).to_observation() == -3

    @pytest.mark.parametrize("count", range(0, 9))
    def test_exposed_cell_observation_matches_count(self, count: int) -> None:
        """Exposed cell returns its adjacent mine count."""
        cell = Cell(CellValue(count), CellState.EXPOSED)
        assert cell.to_observation() == count

    @pytest.mark.parametrize("state", [CellState.EXPOSED, CellState.BOOM])
    def test_visible_mine_observation_is_nine(
        self, mine_cell: Cell, state: CellState
    ) -> None:
        """Exposed or detonated mine should return 9."""
        assert mine_cell.with_state(state).to_observation() == 9
