"""
Console front end for Tic-rng-toe.
Renders the board, prompts, and results as plain text.
"""

from typing import List, Callable, Optional, AbstractSet

from .config import GameConfig
from .game_state import Owner, Outcome
from .turn_controller import TurnReport


MARKS = {
    Owner.EMPTY: GameConfig.EMPTY_MARK,
    Owner.PLAYER: GameConfig.PLAYER_MARK,
    Owner.OPPONENT: GameConfig.OPPONENT_MARK,
}

RESULT_MESSAGES = {
    Outcome.PLAYER_WON: "Congratulations! You won!",
    Outcome.OPPONENT_WON: "Computer won. Try again!",
    Outcome.DRAW: "So close! Draw.",
}


def banner(text: str) -> str:
    """Frame a line of text in '#'."""
    border = "#" * (len(text) + 4)
    return f"{border}\n# {text} #\n{border}"


def render_rows(labels: List[str]) -> str:
    """Lay out nine cell labels as a 3x3 grid."""
    size = GameConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        row_labels = labels[row * size:(row + 1) * size]
        rows.append(" " + " | ".join(row_labels))
    return f"\n{GameConfig.ROW_SEPARATOR}\n".join(rows)


def render_board(cells: List[Owner]) -> str:
    """Render the board from cells in reading order."""
    return render_rows([MARKS[owner] for owner in cells])


def render_legend() -> str:
    """Render the board with the cell numbers the player types."""
    cells = range(GameConfig.MIN_CELL, GameConfig.MAX_CELL + 1)
    return render_rows([str(cell) for cell in cells])


class ConsoleUI:
    """
    Prints the game to a text stream.

    Output goes through `write` (default: print) so tests can capture it.
    """

    def __init__(self, write: Optional[Callable[[str], None]] = None):
        self.write = write or print

    def show_welcome(self):
        self.write(banner("Tic-rng-toe!") + "\n")
        self.write(render_legend() + "\n")
        self.write(
            f"Choose a number ({GameConfig.MIN_CELL}..{GameConfig.MAX_CELL}) "
            "to place the first mark and start the game!"
        )

    def show_prompt(self):
        self.write("\nInput a valid number to continue.")

    def show_report(self, report: TurnReport):
        """Render one exchange: an error, or one or two board snapshots."""
        if not report.validation.is_valid:
            self.write(report.validation.error_message)
            return

        self.write("\nYour turn:\n")
        self.write(render_board(report.player_board))

        if report.opponent_board is not None:
            self.write("\n\nComputer turn:\n")
            self.write(render_board(report.opponent_board))

        if report.outcome is not None:
            self.show_result(report.outcome, report.winning_line)

    def show_result(self, outcome: Outcome, winning_line: Optional[AbstractSet[int]] = None):
        self.write("\n" + banner(RESULT_MESSAGES[outcome]) + "\n")
        if winning_line:
            self.write("Winning line: " + " - ".join(str(cell) for cell in sorted(winning_line)))
