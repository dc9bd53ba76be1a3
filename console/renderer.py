"""
Board renderer for console TicTacToe.
Turns the game state into colored text for the terminal.
"""

from typing import Optional, List, Tuple, Callable

from logic.game_state import GameState, GameResult, GameStatus, Cell, BOARD_SIZE
from .config import ConsoleConfig


class BoardRenderer:
    """
    Draws the board and game messages.

    Rendering methods return strings; the caller decides where they go.
    Only clear_screen() writes, through output_func.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        output_func: Callable[..., None] = print
    ):
        """
        Initialize the renderer.

        Args:
            config: Console configuration. Uses defaults if not provided.
            output_func: Where clear sequences are written.
        """
        self.config = config or ConsoleConfig()
        self.output_func = output_func

    def colorize(self, text: str, color: str) -> str:
        """Wrap text in an ANSI color, if colors are on."""
        if not self.config.USE_COLOR:
            return text
        return f"{color}{text}{self.config.RESET}"

    def _cell_text(self, cell: Cell, highlight: bool = False) -> str:
        if cell == Cell.EMPTY:
            return " "
        color = self.config.COLOR_X if cell == Cell.X else self.config.COLOR_O
        if highlight:
            color = self.config.BOLD + color
        return self.colorize(cell.symbol, color)

    def render_board(
        self,
        game_state: GameState,
        winning_line: Optional[List[Tuple[int, int]]] = None
    ) -> str:
        """
        Render the 3x3 grid.

        Args:
            game_state: The state to draw.
            winning_line: Cells to draw in bold.

        Returns:
            Multi-line board string, ending with a blank line.
        """
        highlighted = set(winning_line or [])
        separator = self.colorize(self.config.COLUMN_SEPARATOR, self.config.COLOR_GRID)
        row_separator = self.colorize(self.config.ROW_SEPARATOR, self.config.COLOR_GRID)

        lines = []
        for row in range(BOARD_SIZE):
            cells = [
                f" {self._cell_text(game_state.cell(row, col), (row, col) in highlighted)} "
                for col in range(BOARD_SIZE)
            ]
            lines.append(separator.join(cells))
            if row < BOARD_SIZE - 1:
                lines.append(row_separator)
        lines.append("")
        return "\n".join(lines)

    def render_turn_header(self, player: Cell) -> str:
        """'Current turn: X' line shown above the board."""
        return f"Current turn: {self.colorize(player.symbol, self.config.COLOR_TURN)}\n"

    def render_result(self, result: GameResult) -> str:
        """Final message for a finished game."""
        if result.status == GameStatus.WON:
            return f"The winner is... {result.winner.symbol}!"
        if result.status == GameStatus.DRAW:
            return "This game ended in a draw."
        return ""

    def clear_screen(self):
        """Clear the terminal, if enabled."""
        if self.config.CLEAR_SCREEN:
            self.output_func(self.config.CLEAR_SEQUENCE, end="")
