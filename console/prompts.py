"""
Input prompts for console TicTacToe.
Asks the players for symbols, coordinates and replays until the answer is valid.
"""

from typing import Optional, Tuple, Callable

from logic.game_state import GameState, Cell
from logic.move_validator import MoveValidator
from .config import ConsoleConfig


class InputPrompter:
    """
    Reads answers from the players.

    Every ask_* method loops until it gets a valid answer. input_func and
    output_func default to input/print and can be swapped for scripted
    ones in tests.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        validator: Optional[MoveValidator] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print
    ):
        self.config = config or ConsoleConfig()
        self.validator = validator or MoveValidator()
        self.input_func = input_func
        self.output_func = output_func

    def ask_symbol(self) -> Cell:
        """Ask which symbol plays first. Only the first character counts."""
        answer = self.input_func(self.config.PROMPT_FIRST_SYMBOL)
        while True:
            symbol = Cell.from_symbol(answer.strip()[:1])
            if symbol is not None:
                return symbol
            answer = self.input_func(self.config.MSG_BAD_SYMBOL)

    def ask_coordinate(self, prompt: str) -> int:
        """
        Ask for a row or column number.

        Returns:
            The 0-based index.
        """
        while True:
            result, index = self.validator.parse_coordinate(self.input_func(prompt))
            if result.is_valid:
                return index
            self.output_func(result.error_message)

    def ask_move(self, game_state: GameState) -> Tuple[int, int]:
        """
        Ask for a row and column until they point at a free cell.

        Returns:
            (row, col), 0-based.
        """
        while True:
            row = self.ask_coordinate(self.config.PROMPT_ROW)
            col = self.ask_coordinate(self.config.PROMPT_COLUMN)

            result = self.validator.validate_move(game_state, row, col)
            if result.is_valid:
                return row, col
            self.output_func(result.error_message)

    def ask_replay(self) -> bool:
        """
        Ask whether to play another round.

        An empty answer means no.
        """
        while True:
            answer = self.input_func(self.config.PROMPT_REPLAY).strip().upper()
            if not answer or answer[0] == "N":
                return False
            if answer[0] == "Y":
                return True
            self.output_func(self.config.MSG_BAD_REPLAY)
