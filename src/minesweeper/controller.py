"""
Game controller for Minesweeper.

Sequences reveal and flag requests against the current board and runs
the game state machine:

    RESET --action--> PLAYING --action--> PLAYING
                              --action--> WON | LOST (terminal)
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from .board import Board, BoardConfig
from .cell import CellState, CellValue
from .errors import InvalidDimensionsError, OutOfBoundsError
from .evaluator import is_game_lost, is_game_over, is_game_won
from .flags import flag_cell
from .placement import RandomLike, as_random_source, generate_board
from .reveal import reveal_all_bombs, reveal_cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    RESET = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = frozenset({GameState.WON, GameState.LOST})

Action = Callable[[Board, int, int], Board]
Listener = Callable[[GameState, GameState], None]


# ============================================================================
# Game Session
# ============================================================================

@dataclass(frozen=True)
class GameSession:
    """
    Snapshot of a game in progress.

    Attributes:
        state: Current game state.
        board: Current board.
        moves: Accepted reveal and flag actions so far.
    """

    state: GameState
    board: Board
    moves: int = 0

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES


# ============================================================================
# Game Controller
# ============================================================================

class GameController:
    """
    Owns a game session and applies player actions to it.

    The session is replaced wholesale on every accepted action, never
    changed in place. Once the game is WON or LOST further actions are
    ignored.
    """

    def __init__(
        self,
        rows: int = 9,
        cols: int = 9,
        total_bombs: int = 10,
        rng: RandomLike = None,
        board: Optional[Board] = None,
    ) -> None:
        """
        Initialize the controller and lay out a new board.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            total_bombs: Mines to place.
            rng: Random source or seed used for mine placement.
            board: Prepared board to play instead of a random one. Its
                values must already be computed.
        """
        self.config = BoardConfig(rows, cols, total_bombs)
        if board is not None and (board.rows, board.cols) != (rows, cols):
            raise InvalidDimensionsError(
                f"Board is {board.rows}x{board.cols}, expected {rows}x{cols}"
            )
        self._rng = as_random_source(rng)
        self._initial_board = board
        self._listeners: List[Listener] = []
        self._session = self._new_session()

    @classmethod
    def from_config(
        cls, config: BoardConfig, rng: RandomLike = None
    ) -> "GameController":
        """Create a controller for a board configuration."""
        return cls(config.rows, config.cols, config.total_bombs, rng=rng)

    @classmethod
    def from_board(cls, board: Board) -> "GameController":
        """Create a controller that plays a prepared board."""
        return cls(board.rows, board.cols, board.count_mines(), board=board)

    def _new_session(self) -> GameSession:
        board = self._initial_board
        if board is None:
            board = generate_board(self.config, self._rng)
        self.mine_count = board.count_mines()
        return GameSession(GameState.RESET, board)

    # ========================================================================
    # Listeners
    # ========================================================================

    def add_listener(self, listener: Listener) -> None:
        """
        Register ``listener(previous, current)`` for state transitions.

        A rendering layer can use this to start its clock on PLAYING and
        stop it on WON or LOST.
        """
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _replace_session(self, session: GameSession) -> None:
        previous = self._session.state
        self._session = session
        if session.state != previous:
            for listener in list(self._listeners):
                listener(previous, session.state)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, x: int, y: int) -> GameState:
        """
        Reveal the cell at (x, y).

        Returns:
            The game state after the action.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        return self._apply(reveal_cell, x, y)

    def flag(self, x: int, y: int) -> GameState:
        """
        Toggle the flag on the cell at (x, y).

        Returns:
            The game state after the action.

        Raises:
            OutOfBoundsError: If (x, y) is not on the board.
        """
        return self._apply(flag_cell, x, y)

    def _apply(self, action: Action, x: int, y: int) -> GameState:
        session = self._session
        if not session.board.has_cell(x, y):
            raise OutOfBoundsError(x, y)
        if session.is_terminal:
            logger.debug("Ignoring %s(%d, %d): game is %s",
                         action.__name__, x, y, session.state.name)
            return session.state

        board = action(session.board, x, y)
        moves = session.moves + 1
        logger.debug("Move %d: %s(%d, %d)", moves, action.__name__, x, y)

        if is_game_over(board):
            won = is_game_won(board) and not is_game_lost(board)
            state = GameState.WON if won else GameState.LOST
            board = reveal_all_bombs(board)
            logger.info("Game %s after %d moves", state.name.lower(), moves)
        else:
            state = GameState.PLAYING

        self._replace_session(replace(session, state=state, board=board, moves=moves))
        return state

    def reset(self) -> None:
        """Start a new game with the same configuration."""
        self._replace_session(self._new_session())

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._session.state

    @property
    def board(self) -> Board:
        return self._session.board

    @property
    def moves(self) -> int:
        return self._session.moves

    @property
    def flag_count(self) -> int:
        return self._session.board.flag_count

    @property
    def remaining_mines(self) -> int:
        """Mines on the board minus flags placed. Negative if over-flagged."""
        return self.mine_count - self.flag_count

    @property
    def is_terminal(self) -> bool:
        """Check if the game is won or lost."""
        return self._session.is_terminal

    @property
    def is_won(self) -> bool:
        return self._session.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._session.state == GameState.LOST

    def rows(self) -> Tuple[Tuple[Tuple[CellValue, CellState], ...], ...]:
        """Per-row (value, state) pairs for rendering."""
        return tuple(
            tuple((cell.value, cell.state) for cell in row)
            for row in self._session.board.get_rows()
        )
