"""
Console configuration for TicTacToe.
All the settings for colors, board drawing and prompts.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Change these values to restyle the game!
    """

    # ==================== ANSI COLORS ====================
    COLOR_X = "\x1b[31m"      # red
    COLOR_O = "\x1b[34m"      # blue
    COLOR_GRID = "\x1b[37m"   # white
    COLOR_TURN = "\x1b[33m"   # yellow
    BOLD = "\x1b[1m"
    RESET = "\x1b[0m"

    # Clear screen and move cursor home
    CLEAR_SEQUENCE = "\x1b[2J\x1b[H"

    # ==================== BOARD DRAWING ====================
    COLUMN_SEPARATOR = "|"
    ROW_SEPARATOR = "---+---+---"

    # ==================== PROMPTS ====================
    PROMPT_FIRST_SYMBOL = "Which symbol would you like to use first? (X or O) "
    PROMPT_ROW = "Insert the row: "
    PROMPT_COLUMN = "Insert the column: "
    PROMPT_REPLAY = "Would you like to play again? [y/N] "

    MSG_BAD_SYMBOL = "Invalid input. Insert X or O: "
    MSG_BAD_REPLAY = "Invalid input. Please, insert only 'y' or 'n'."
    MSG_SLOT_FILLED = "That slot is already filled! Try again."
    MSG_GAME_OVER = "\n☆  Game Over ☆ "

    # ==================== SWITCHES ====================
    USE_COLOR = True
    CLEAR_SCREEN = True

    def __init__(self, use_color=None, clear_screen=None):
        # Instance overrides for the CLI flags
        if use_color is not None:
            self.USE_COLOR = use_color
        if clear_screen is not None:
            self.CLEAR_SCREEN = clear_screen
