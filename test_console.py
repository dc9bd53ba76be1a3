"""
Tests for the console modules: rendering and prompts.
"""

from logic.game_state import GameState, GameResult, Cell
from console.config import ConsoleConfig
from console.renderer import BoardRenderer
from console.prompts import InputPrompter


class Output:
    """Collects whatever output_func is given."""

    def __init__(self):
        self.lines = []

    def __call__(self, text="", **kwargs):
        self.lines.append(text)


def scripted(*answers):
    """input_func that replays answers in order."""
    queue = list(answers)
    prompts = []

    def _input(prompt=""):
        prompts.append(prompt)
        return queue.pop(0)

    _input.prompts = prompts
    return _input


def test_render_board_plain():
    renderer = BoardRenderer(ConsoleConfig(use_color=False))
    game = GameState()
    game.make_move(0, 0)
    game.make_move(1, 1)

    assert renderer.render_board(game).split("\n") == [
        " X |   |   ",
        "---+---+---",
        "   | O |   ",
        "---+---+---",
        "   |   |   ",
        "",
    ]


def test_render_board_colored():
    config = ConsoleConfig()
    renderer = BoardRenderer(config)
    game = GameState()
    game.make_move(0, 0)
    game.make_move(0, 1)

    text = renderer.render_board(game)
    assert f"{config.COLOR_X}X{config.RESET}" in text
    assert f"{config.COLOR_O}O{config.RESET}" in text
    assert f"{config.COLOR_GRID}---+---+---{config.RESET}" in text


def test_render_board_highlights_winning_line():
    config = ConsoleConfig()
    renderer = BoardRenderer(config)
    game = GameState()
    game.board[0, 0] = Cell.X

    text = renderer.render_board(game, winning_line=[(0, 0)])
    assert f"{config.BOLD}{config.COLOR_X}X" in text


def test_render_result_and_header():
    renderer = BoardRenderer(ConsoleConfig(use_color=False))
    assert renderer.render_result(GameResult.won(Cell.O)) == "The winner is... O!"
    assert renderer.render_result(GameResult.draw()) == "This game ended in a draw."
    assert renderer.render_result(GameResult.in_progress()) == ""
    assert renderer.render_turn_header(Cell.X) == "Current turn: X\n"


def test_clear_screen_switch():
    out = Output()
    BoardRenderer(ConsoleConfig(clear_screen=True), out).clear_screen()
    assert out.lines == [ConsoleConfig.CLEAR_SEQUENCE]

    out = Output()
    BoardRenderer(ConsoleConfig(clear_screen=False), out).clear_screen()
    assert out.lines == []


def test_config_overrides_are_per_instance():
    config = ConsoleConfig(use_color=False, clear_screen=False)
    assert not config.USE_COLOR
    assert not config.CLEAR_SCREEN
    assert ConsoleConfig.USE_COLOR
    assert ConsoleConfig().CLEAR_SCREEN


def test_ask_coordinate_reprompts_until_valid():
    out = Output()
    prompter = InputPrompter(input_func=scripted("abc", "0", "4", "2"), output_func=out)

    assert prompter.ask_coordinate("Insert the row: ") == 1
    assert len(out.lines) == 3


def test_ask_move_rejects_occupied_cell():
    out = Output()
    game = GameState()
    game.make_move(0, 0)
    answers = scripted("1", "1", "3", "3")
    prompter = InputPrompter(input_func=answers, output_func=out)

    assert prompter.ask_move(game) == (2, 2)
    assert out.lines == [ConsoleConfig.MSG_SLOT_FILLED]
    assert answers.prompts[:2] == [ConsoleConfig.PROMPT_ROW, ConsoleConfig.PROMPT_COLUMN]


def test_ask_symbol():
    answers = scripted("z", "", "o")
    prompter = InputPrompter(input_func=answers)

    assert prompter.ask_symbol() == Cell.O
    assert answers.prompts == [
        ConsoleConfig.PROMPT_FIRST_SYMBOL,
        ConsoleConfig.MSG_BAD_SYMBOL,
        ConsoleConfig.MSG_BAD_SYMBOL,
    ]


def test_ask_replay():
    assert InputPrompter(input_func=scripted("y")).ask_replay()
    assert InputPrompter(input_func=scripted("Yes")).ask_replay()
    assert not InputPrompter(input_func=scripted("n")).ask_replay()
    assert not InputPrompter(input_func=scripted("")).ask_replay()

    out = Output()
    prompter = InputPrompter(input_func=scripted("maybe", "N"), output_func=out)
    assert not prompter.ask_replay()
    assert out.lines == [ConsoleConfig.MSG_BAD_REPLAY]
