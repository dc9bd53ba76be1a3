"""
Console module for TicTacToe.
Handles board drawing, colors, and reading player input.
"""

from .config import ConsoleConfig
from .renderer import BoardRenderer
from .prompts import InputPrompter
