"""
Tic-rng-toe
===========
Tic-tac-toe for one player against a computer that marks cells at random.

Handles game state, move validation, win/draw detection, the random
opponent, and the turn loop that ties them together.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Owner, Outcome, Move
from .move_validator import MoveValidator, ValidationResult, ValidationError
from .win_checker import WinChecker
from .random_player import RandomPlayer
from .turn_controller import TurnController, TurnReport, Phase, GameError, GameOverError
