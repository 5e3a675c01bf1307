"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import BOARD_SIZE, Board, Cell, Move
from .errors import InvalidMove
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Position must be on the board
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, board: Board, x: int, y: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            x: Column to place the mark (0-2).
            y: Row to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if self.win_checker.get_outcome(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if x/y are in valid range
        if not all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v < BOARD_SIZE for v in (x, y)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({x}, {y}). Must be 0-2."
            )

        # Check if cell is empty
        occupant = board.get(Move(x, y))
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({x}, {y}) is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def require_valid(self, board: Board, x: int, y: int) -> Move:
        """
        Validate a move and return it.

        Raises:
            InvalidMove: with the validation error message.
        """
        result = self.validate_move(board, x, y)
        if not result.is_valid:
            raise InvalidMove(result.error_message)
        return Move(x, y)

    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all valid moves, column by column.

        Args:
            board: Current board.

        Returns:
            List of valid moves, empty if the game is over.
        """
        if self.win_checker.get_outcome(board).is_terminal:
            return []

        return board.empty_cells()
