"""
Computer opponent for Tic-rng-toe.
Picks its mark uniformly at random from the open cells.
"""

import logging
from typing import Optional, AbstractSet

import numpy as np

logger = logging.getLogger(__name__)


class RandomPlayer:
    """
    An opponent that plays without any strategy.

    Every open cell is equally likely. The random generator is passed in
    so a game can be replayed from a seed.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        """
        Initialize the random player.

        Args:
            rng: Source of randomness (default: a fresh unseeded generator).
                 Anything with a numpy-style choice(sequence) works.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "RandomPlayer":
        return cls(np.random.default_rng(seed))

    def select(self, remaining: AbstractSet[int]) -> int:
        """
        Choose the opponent's cell.

        Args:
            remaining: Cells still open. Must not be empty.

        Returns:
            A cell identifier taken from remaining.
        """
        if not remaining:
            raise ValueError("No open cells left to choose from")

        # Sorted so the same generator state always gives the same cell
        candidates = sorted(remaining)
        cell = int(self.rng.choice(candidates))
        logger.debug("Opponent picked %d from %s", cell, candidates)
        return cell
