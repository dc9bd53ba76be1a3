"""
Game state management for console TicTacToe.
Tracks the board, current player, move history and result.
"""

from enum import Enum, IntEnum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np


BOARD_SIZE = 3


class Cell(IntEnum):
    """What a single board position holds."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Cell":
        """Get the other player's symbol."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        """Single character shown on the board."""
        return " " if self == Cell.EMPTY else self.name

    @classmethod
    def from_symbol(cls, text: str) -> Optional["Cell"]:
        """Parse 'x' / 'O' (case-insensitive) into a player cell."""
        text = text.strip().upper()
        if text == "X":
            return cls.X
        if text == "O":
            return cls.O
        return None


class GameStatus(Enum):
    """Whether the game is still going."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a game.

    winner is only set when status is WON.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Cell] = None

    @classmethod
    def in_progress(cls) -> "GameResult":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, winner: Cell) -> "GameResult":
        return cls(GameStatus.WON, winner)

    @classmethod
    def draw(cls) -> "GameResult":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is (0-8)


def empty_board() -> np.ndarray:
    """A fresh 3x3 grid of EMPTY cells."""
    return np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY, dtype=np.int8)


@dataclass(eq=False)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board (numpy grid of Cell codes)
    - Current player
    - Move history
    - Game result (in progress, won, draw)
    """

    board: np.ndarray = field(default_factory=empty_board)

    # Current player's turn
    current_player: Cell = Cell.X

    # Who opened the game, used again on reset
    starting_player: Cell = Cell.X

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result (set by WinChecker)
    result: GameResult = field(default_factory=GameResult.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.result.is_over

    @property
    def winner(self) -> Optional[Cell]:
        return self.result.winner

    @property
    def is_draw(self) -> bool:
        return self.result.status == GameStatus.DRAW

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        return Cell(int(self.board[row, col]))

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's symbol at the given position.

        The board is left untouched when the move is rejected.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            True if move was successful, False otherwise.
        """
        if self.is_game_over:
            print("ERROR: Game is already over!")
            return False

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            print(f"ERROR: Position ({row}, {col}) is off the board!")
            return False

        if self.cell(row, col) != Cell.EMPTY:
            return False

        self.board[row, col] = self.current_player
        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves),
        ))

        # Winner detection is done by WinChecker; just switch turns here
        self.current_player = self.current_player.opposite()
        return True

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        rows, cols = np.nonzero(self.board == Cell.EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def is_full(self) -> bool:
        return not np.any(self.board == Cell.EMPTY)

    def reset(self, starting_player: Optional[Cell] = None):
        """Clear the board for a new round."""
        if starting_player is not None:
            self.starting_player = starting_player
        self.board = empty_board()
        self.current_player = self.starting_player
        self.moves = []
        self.result = GameResult.in_progress()

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            starting_player=self.starting_player,
            moves=list(self.moves),
            result=self.result,
        )
