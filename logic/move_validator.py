"""
Move validator for console TicTacToe.
Validates typed coordinates and that moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .game_state import GameState, Cell, BOARD_SIZE


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Coordinates are typed as 1-3 and stored as 0-2
    2. Can only place on empty cells
    3. Game must not be over
    """

    def parse_coordinate(self, text: str) -> Tuple[ValidationResult, Optional[int]]:
        """
        Parse a typed row or column number.

        Args:
            text: Raw line from the player, e.g. "2".

        Returns:
            (ValidationResult, 0-based index or None).
        """
        try:
            value = int(text.strip())
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message="Invalid input. Insert a number (1, 2, or 3)."
            ), None

        if not 1 <= value <= BOARD_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {value}. Must be 1, 2, or 3."
            ), None

        return ValidationResult(is_valid=True), value - 1

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the symbol (0-2).
            col: Column to place the symbol (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        if game_state.cell(row, col) != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message="That slot is already filled! Try again."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
