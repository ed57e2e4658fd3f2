"""
Win checker for Tic-rng-toe.
Checks if a side has completed a line or if the board is exhausted.
"""

from typing import Optional, AbstractSet, FrozenSet, Tuple


class WinChecker:
    """
    Checks for win conditions in Tic-rng-toe.

    Win condition: one side owns all three cells of a row, column,
    or diagonal. Works on cell-identifier sets, so the same check
    serves both sides.
    """

    # All possible winning lines (cell identifiers 1-9)
    WINNING_LINES: Tuple[FrozenSet[int], ...] = (
        # Rows
        frozenset({1, 2, 3}),
        frozenset({4, 5, 6}),
        frozenset({7, 8, 9}),
        # Columns
        frozenset({1, 4, 7}),
        frozenset({2, 5, 8}),
        frozenset({3, 6, 9}),
        # Diagonals
        frozenset({1, 5, 9}),
        frozenset({3, 5, 7}),
    )

    def check_win(self, occupied: AbstractSet[int]) -> bool:
        """
        Check if a set of owned cells contains a full line.

        Args:
            occupied: Cells owned by one side.

        Returns:
            True if any winning line is a subset of the cells.
        """
        return self.winning_line(occupied) is not None

    def winning_line(self, occupied: AbstractSet[int]) -> Optional[FrozenSet[int]]:
        """
        Get the completed line, if there is one.

        Args:
            occupied: Cells owned by one side.

        Returns:
            The first winning line found, or None.
        """
        for line in self.WINNING_LINES:
            if line <= occupied:
                return line
        return None

    def check_draw(self, remaining: AbstractSet[int]) -> bool:
        """
        Check if no cells are left.

        Only meaningful once neither side has won; a win on the last
        cell is still a win.
        """
        return len(remaining) == 0
