"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import GameState, GameResult, Cell, BOARD_SIZE


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    A line (row, column or diagonal) is won when all 3 cells hold
    the same symbol and none of them is empty.
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def _uniform(self, cells: np.ndarray) -> Optional[Cell]:
        """Return the shared symbol of a line, or None."""
        first = int(cells[0])
        if first == Cell.EMPTY:
            return None
        if np.all(cells == first):
            return Cell(first)
        return None

    def check_row(self, board: np.ndarray, row: int) -> Optional[Cell]:
        return self._uniform(board[row, :])

    def check_column(self, board: np.ndarray, col: int) -> Optional[Cell]:
        return self._uniform(board[:, col])

    def check_diagonals(self, board: np.ndarray) -> Optional[Cell]:
        """Check the main diagonal, then the anti-diagonal."""
        winner = self._uniform(np.diagonal(board))
        if winner is None:
            winner = self._uniform(np.diagonal(np.fliplr(board)))
        return winner

    def check_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> Optional[Cell]:
        """
        Check only the lines through the last move.

        Args:
            game_state: State after the move was applied.
            row: Row of the last move.
            col: Column of the last move.

        Returns:
            The winning Cell, or None if the move didn't win.
        """
        board = game_state.board
        winner = self.check_row(board, row)
        if winner is None:
            winner = self.check_column(board, col)
        if winner is None and (row == col or row + col == BOARD_SIZE - 1):
            winner = self.check_diagonals(board)
        return winner

    def check_winner(self, game_state: GameState) -> Optional[Cell]:
        """
        Check every line for a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Cell, or None if no winner yet.
        """
        line = self.get_winning_line(game_state)
        if line is None:
            return None
        row, col = line[0]
        return game_state.cell(row, col)

    def check_draw(self, game_state: GameState) -> bool:
        """
        A draw is a full board with no winning line.
        """
        if self.check_winner(game_state) is not None:
            return False
        return game_state.is_full()

    def evaluate(
        self,
        game_state: GameState,
        last_move: Optional[Tuple[int, int]] = None
    ) -> GameResult:
        """
        Work out the result of the game.

        Args:
            game_state: The game state to inspect.
            last_move: (row, col) of the move just played. When given,
                only the lines through it are scanned.

        Returns:
            GameResult for the position.
        """
        if last_move is not None:
            winner = self.check_move(game_state, *last_move)
        else:
            winner = self.check_winner(game_state)

        if winner is not None:
            return GameResult.won(winner)
        if game_state.is_full():
            return GameResult.draw()
        return GameResult.in_progress()

    def update_game_state(
        self,
        game_state: GameState,
        last_move: Optional[Tuple[int, int]] = None
    ) -> GameState:
        """
        Store the winner/draw information on the game state.

        Returns:
            The same, updated game state.
        """
        game_state.result = self.evaluate(game_state, last_move)
        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        board = game_state.board
        for line in self.WINNING_LINES:
            cells = np.array([board[r, c] for r, c in line])
            if self._uniform(cells) is not None:
                return line
        return None
