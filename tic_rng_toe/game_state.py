"""
Game state management for Tic-rng-toe.
Tracks the board, the remaining cells, the turn counter, and move history.
"""

import logging
from enum import Enum
from typing import Optional, List, Set
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig

logger = logging.getLogger(__name__)


class Owner(Enum):
    """Who holds a cell. Values are the codes stored in the grid."""
    EMPTY = 0
    PLAYER = 1
    OPPONENT = 2


class Outcome(Enum):
    """Terminal outcomes of a game."""
    PLAYER_WON = "player_won"
    OPPONENT_WON = "opponent_won"
    DRAW = "draw"


ALL_CELLS = range(GameConfig.MIN_CELL, GameConfig.MAX_CELL + 1)


def cell_to_index(cell: int) -> tuple:
    """Convert a cell identifier (1-9) into a (row, col) grid index."""
    offset = cell - GameConfig.MIN_CELL
    return divmod(offset, GameConfig.BOARD_SIZE)


@dataclass
class Move:
    """
    A single mark placed on the board.
    """
    owner: Owner            # Who placed the mark
    cell: int               # Cell identifier (1-9)
    turn: int               # Turn counter when the mark was placed


@dataclass
class GameState:
    """
    The complete state of a Tic-rng-toe game.

    Tracks:
    - The 3x3 grid of owner codes
    - The set of cells still empty
    - The turn counter (one per accepted player mark)
    - Move history
    - The terminal outcome, once there is one
    """

    # The 3x3 grid - 0 empty, 1 player, 2 opponent
    grid: np.ndarray = field(
        default_factory=lambda: np.zeros(
            (GameConfig.BOARD_SIZE, GameConfig.BOARD_SIZE), dtype=np.int8
        )
    )

    # Cells nobody has claimed yet
    remaining: Set[int] = field(default_factory=lambda: set(ALL_CELLS))

    turn: int = 0

    moves: List[Move] = field(default_factory=list)

    outcome: Optional[Outcome] = None

    @property
    def is_game_over(self) -> bool:
        return self.outcome is not None

    def mark(self, cell: int, owner: Owner):
        """
        Claim a cell for a side.

        The cell must be empty; callers validate before marking.

        Args:
            cell: Cell identifier (1-9).
            owner: Owner.PLAYER or Owner.OPPONENT.
        """
        row, col = cell_to_index(cell)
        self.grid[row, col] = owner.value
        self.remaining.discard(cell)
        self.moves.append(Move(owner=owner, cell=cell, turn=self.turn))
        logger.debug("%s marked cell %d (turn %d)", owner.name, cell, self.turn)

    def is_empty(self, cell: int) -> bool:
        """Check whether nobody holds the cell."""
        return self.owner_of(cell) == Owner.EMPTY

    def owner_of(self, cell: int) -> Owner:
        """Get who holds the cell."""
        row, col = cell_to_index(cell)
        return Owner(int(self.grid[row, col]))

    def occupied_by(self, owner: Owner) -> Set[int]:
        """
        Get all cells held by a side.

        Args:
            owner: The side to look up.

        Returns:
            Set of cell identifiers.
        """
        flat = np.flatnonzero(self.grid.ravel() == owner.value)
        return {int(i) + GameConfig.MIN_CELL for i in flat}

    def cells(self) -> List[Owner]:
        """All nine cells in reading order, for rendering."""
        return [Owner(int(code)) for code in self.grid.ravel()]

    def reset(self):
        """Clear the board for a new round."""
        self.grid[:, :] = Owner.EMPTY.value
        self.remaining = set(ALL_CELLS)
        self.turn = 0
        self.moves = []
        self.outcome = None
