"""
Main orchestration script for console TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking)
- Console (board rendering, player prompts)

Run this script to play TicTacToe with a friend in the terminal!
"""

from typing import Optional, Callable

# Logic imports
from logic.game_state import GameState, GameResult, Cell
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

# Console imports
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.prompts import InputPrompter


class TicTacToeGame:
    """
    Main controller for a two-player console game.

    Game flow:
    1. Pick which symbol opens (X or O)
    2. Current player types a row and a column (1-3)
    3. The move is applied and the moved lines are checked
    4. Turns switch until someone wins or the board is full
    5. Offer another round
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        first_player: Optional[Cell] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[..., None] = print
    ):
        """
        Initialize the game.

        Args:
            config: Console configuration. Uses defaults if not provided.
            first_player: Opening symbol. Asked for each round if None.
            input_func: Reads a line of player input.
            output_func: Writes a line of output.
        """
        self.config = config or ConsoleConfig()
        self.first_player = first_player
        self.output_func = output_func

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.renderer = BoardRenderer(self.config, output_func)
        self.prompter = InputPrompter(
            self.config, self.validator, input_func, output_func
        )

    def play(self) -> int:
        """
        Play rounds until the players decline a replay.

        Returns:
            Number of rounds played.
        """
        rounds = 0
        while True:
            self.play_round()
            rounds += 1
            if not self.prompter.ask_replay():
                self.output_func(self.config.MSG_GAME_OVER)
                return rounds

    def play_round(self) -> GameResult:
        """
        Play a single game from an empty board to a win or draw.

        Returns:
            The final GameResult.
        """
        starting_player = self.first_player
        if starting_player is None:
            starting_player = self.prompter.ask_symbol()
        self.game_state.reset(starting_player)

        while not self.game_state.is_game_over:
            self._show_turn()
            self._take_turn()

        self._show_game_result()
        return self.game_state.result

    def _show_turn(self):
        """Draw the header and board for the player about to move."""
        self.renderer.clear_screen()
        self.output_func(self.renderer.render_turn_header(self.game_state.current_player))
        self.output_func(self.renderer.render_board(self.game_state))

    def _take_turn(self):
        """Prompt for a move, apply it, then check the lines through it."""
        row, col = self.prompter.ask_move(self.game_state)

        if not self.game_state.make_move(row, col):
            self.output_func(self.config.MSG_SLOT_FILLED)
            return

        self.win_checker.update_game_state(self.game_state, last_move=(row, col))

    def _show_game_result(self):
        """Show the final board and the outcome."""
        self.renderer.clear_screen()
        winning_line = self.win_checker.get_winning_line(self.game_state)
        self.output_func(self.renderer.render_board(self.game_state, winning_line))
        self.output_func(self.renderer.render_result(self.game_state.result))


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--first",
        choices=["X", "O", "x", "o"],
        default=None,
        help="Symbol that opens each round (asked if omitted)"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between turns"
    )

    args = parser.parse_args(argv)

    config = ConsoleConfig(
        use_color=not args.no_color,
        clear_screen=not args.no_clear
    )
    first_player = Cell.from_symbol(args.first) if args.first else None

    game = TicTacToeGame(config=config, first_player=first_player)

    try:
        game.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
