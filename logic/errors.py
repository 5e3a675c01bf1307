"""
Exceptions raised by the TicTacToe game logic.
"""


class TicTacToeError(Exception):
    """Base class for all game logic errors."""
    pass


class InvalidMove(TicTacToeError, ValueError):
    """
    A move that cannot be played: the coordinate is outside the board,
    the cell is already taken, or the game is already over.

    The driver should reject the move and ask again.
    """
    pass


class PreconditionViolated(TicTacToeError, AssertionError):
    """
    The search was asked for a move on a finished or full board.
    This is a programming error in the caller, not a user mistake.
    """
    pass
