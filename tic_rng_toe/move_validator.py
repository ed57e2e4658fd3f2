"""
Move validator for Tic-rng-toe.
Turns a raw line of player input into a cell identifier, or explains why not.
"""

import logging
import re
from enum import Enum
from typing import Optional, AbstractSet
from dataclasses import dataclass

from .config import GameConfig

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class ValidationError(Enum):
    """Why a player selection was rejected."""
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"
    ALREADY_TAKEN = "already_taken"


ERROR_MESSAGES = {
    ValidationError.NOT_A_NUMBER:
        f"Invalid input: Not a valid input number "
        f"({GameConfig.MIN_CELL}..{GameConfig.MAX_CELL})",
    ValidationError.OUT_OF_RANGE:
        f"Invalid input: The chosen field does not exist "
        f"({GameConfig.MIN_CELL}..{GameConfig.MAX_CELL})",
    ValidationError.ALREADY_TAKEN:
        "Invalid input: The chosen field was already marked in a previous turn",
}


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    cell: Optional[int] = None
    error: Optional[ValidationError] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, cell: int) -> "ValidationResult":
        return cls(is_valid=True, cell=cell)

    @classmethod
    def fail(cls, error: ValidationError) -> "ValidationResult":
        return cls(is_valid=False, error=error, error_message=ERROR_MESSAGES[error])


class MoveValidator:
    """
    Validates player selections.

    Rules:
    1. Input must be a whole number
    2. The number must name a cell (1-9)
    3. The cell must still be empty
    """

    def validate(
        self,
        raw_input: str,
        remaining: AbstractSet[int]
    ) -> ValidationResult:
        """
        Validate one line of player input.

        Args:
            raw_input: Text as typed by the player.
            remaining: Cells still open.

        Returns:
            ValidationResult with the cell on success, or the error.
        """
        text = raw_input.strip()

        # ASCII digits with an optional sign; int() alone would also take "1_0"
        if not NUMBER_PATTERN.fullmatch(text):
            logger.debug("Rejected %r: not a number", raw_input)
            return ValidationResult.fail(ValidationError.NOT_A_NUMBER)

        value = int(text)

        if not (GameConfig.MIN_CELL <= value <= GameConfig.MAX_CELL):
            logger.debug("Rejected %d: out of range", value)
            return ValidationResult.fail(ValidationError.OUT_OF_RANGE)

        if value not in remaining:
            logger.debug("Rejected %d: already taken", value)
            return ValidationResult.fail(ValidationError.ALREADY_TAKEN)

        return ValidationResult.ok(value)
