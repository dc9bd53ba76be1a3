"""
Logic module for console TicTacToe.
Handles game state, rules, and win/draw detection.
"""

from .game_state import GameState, Cell, GameStatus, GameResult, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
