"""
Turn controller for Tic-rng-toe.

Ties together:
- GameState (board, open cells, turn counter)
- MoveValidator (gate for player input)
- WinChecker (win/draw detection)
- RandomPlayer (computer's reply)

Game flow:
1. Player types a cell number
2. Input is validated; bad input is reported and the player asked again
3. Player's mark is placed, then win/draw is checked
4. Computer picks a random open cell, then win/draw is checked
5. Repeat until someone wins or the board is full
"""

import logging
from enum import Enum
from typing import Optional, List, Callable, FrozenSet
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Owner, Outcome
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .random_player import RandomPlayer

logger = logging.getLogger(__name__)


class GameError(Exception):
    """Base class for game errors."""


class GameOverError(GameError):
    """A move was submitted after the game ended."""


class Phase(Enum):
    """Where the controller is in a turn."""
    AWAITING_PLAYER_INPUT = "awaiting_player_input"
    PLAYER_MOVED = "player_moved"
    OPPONENT_MOVES = "opponent_moves"
    PLAYER_WON = "player_won"
    OPPONENT_WON = "opponent_won"
    DRAW = "draw"


TERMINAL_PHASES = {
    Outcome.PLAYER_WON: Phase.PLAYER_WON,
    Outcome.OPPONENT_WON: Phase.OPPONENT_WON,
    Outcome.DRAW: Phase.DRAW,
}

WIN_OUTCOMES = {
    Owner.PLAYER: Outcome.PLAYER_WON,
    Owner.OPPONENT: Outcome.OPPONENT_WON,
}


@dataclass
class TurnReport:
    """
    What happened during one call to submit().

    Board snapshots are lists of Owner in reading order, taken right
    after each half-turn so a renderer can show both. Outcome and
    winning line are fixed when the exchange ends.
    """
    validation: ValidationResult
    phase: Phase
    state: GameState
    player_cell: Optional[int] = None
    opponent_cell: Optional[int] = None
    player_board: Optional[List[Owner]] = None
    opponent_board: Optional[List[Owner]] = None
    outcome: Optional[Outcome] = None
    winning_line: Optional[FrozenSet[int]] = None


class TurnController:
    """
    Runs a game of Tic-rng-toe, one exchange per accepted player move.
    """

    def __init__(
        self,
        state: Optional[GameState] = None,
        opponent: Optional[RandomPlayer] = None,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        self.state = state or GameState()
        self.opponent = opponent or RandomPlayer()
        self.validator = validator or MoveValidator()
        self.win_checker = win_checker or WinChecker()
        self.phase = Phase.AWAITING_PLAYER_INPUT
        self.winning_line: Optional[FrozenSet[int]] = None

        # A state handed in may already be finished
        if self.state.outcome is not None:
            self.phase = TERMINAL_PHASES[self.state.outcome]
        elif not self.state.remaining:
            self._settle_full_board()

    def submit(self, raw_input: str) -> TurnReport:
        """
        Play one exchange from a line of player input.

        Args:
            raw_input: Text typed by the player.

        Returns:
            TurnReport describing the exchange. If the input was rejected,
            nothing on the board changed.
        """
        if self.state.is_game_over:
            raise GameOverError(f"Game is already over ({self.state.outcome.value})")

        result = self.validator.validate(raw_input, self.state.remaining)
        if not result.is_valid:
            logger.info("Rejected input %r: %s", raw_input, result.error.value)
            return TurnReport(validation=result, phase=self.phase, state=self.state)

        report = TurnReport(validation=result, phase=self.phase, state=self.state)

        # Player's half
        self.state.turn += 1
        self.state.mark(result.cell, Owner.PLAYER)
        self.phase = Phase.PLAYER_MOVED
        report.player_cell = result.cell
        report.player_board = self.state.cells()

        if not self._check_outcome(Owner.PLAYER):
            # Opponent's half
            self.phase = Phase.OPPONENT_MOVES
            opponent_cell = self.opponent.select(self.state.remaining)
            self.state.mark(opponent_cell, Owner.OPPONENT)
            report.opponent_cell = opponent_cell
            report.opponent_board = self.state.cells()

            if not self._check_outcome(Owner.OPPONENT):
                self.phase = Phase.AWAITING_PLAYER_INPUT

        report.phase = self.phase
        report.outcome = self.state.outcome
        report.winning_line = self.winning_line
        return report

    def _check_outcome(self, owner: Owner) -> bool:
        """
        Check whether the side that just moved ended the game.

        Win is only possible from turn 3 on and takes precedence over draw.

        Returns:
            True if the game is now over.
        """
        if self.state.turn >= GameConfig.MIN_TURNS_FOR_WIN:
            line = self.win_checker.winning_line(self.state.occupied_by(owner))
            if line is not None:
                self._finish(WIN_OUTCOMES[owner], line)
                return True

        if self.win_checker.check_draw(self.state.remaining):
            self._finish(Outcome.DRAW)
            return True

        return False

    def _settle_full_board(self):
        """Decide the outcome of a board with no open cells left."""
        for owner in (Owner.PLAYER, Owner.OPPONENT):
            line = self.win_checker.winning_line(self.state.occupied_by(owner))
            if line is not None:
                self._finish(WIN_OUTCOMES[owner], line)
                return

        self._finish(Outcome.DRAW)

    def _finish(self, outcome: Outcome, line: Optional[FrozenSet[int]] = None):
        self.state.outcome = outcome
        self.winning_line = line
        self.phase = TERMINAL_PHASES[outcome]
        logger.info("Game over after turn %d: %s", self.state.turn, outcome.value)

    def play(
        self,
        read_line: Callable[[], str],
        on_report: Callable[[TurnReport], None],
        on_prompt: Optional[Callable[[], None]] = None
    ) -> Outcome:
        """
        Play until the game ends.

        Args:
            read_line: Returns the next line of player input.
            on_report: Called with every TurnReport, valid or not.
            on_prompt: Called before each read (e.g. to print a prompt).

        Returns:
            The terminal outcome.
        """
        while not self.state.is_game_over:
            if on_prompt is not None:
                on_prompt()
            report = self.submit(read_line())
            on_report(report)

        return self.state.outcome

    def reset(self):
        """Start a new round with the same opponent."""
        self.state.reset()
        self.phase = Phase.AWAITING_PLAYER_INPUT
        self.winning_line = None
