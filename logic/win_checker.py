"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, Cell, Move, Player


Line = Tuple[Move, Move, Move]


def _build_lines() -> Tuple[Line, ...]:
    lines = []
    for a in range(3):
        # Column a, then row a
        lines.append((Move(a, 0), Move(a, 1), Move(a, 2)))
        lines.append((Move(0, a), Move(1, a), Move(2, a)))
    # Top left to bottom right
    lines.append((Move(0, 0), Move(1, 1), Move(2, 2)))
    # Top right to bottom left
    lines.append((Move(2, 0), Move(1, 1), Move(0, 2)))
    return tuple(lines)


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The result of the game so far.

    Always computed from a board, never stored alongside it.
    """
    status: GameStatus
    winner: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == GameStatus.WON:
            return f"{self.winner.value} wins"
        if self.status == GameStatus.DRAW:
            return "draw"
        return "in progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All 8 lines, checked in this order
    WINNING_LINES = _build_lines()

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.get(line[0])

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first line owned by a single player, if there is one.

        Args:
            board: The board to check.

        Returns:
            The winning line as three moves, or None.
        """
        grid = board.grid
        for line in self.WINNING_LINES:
            a, b, c = line
            owner = grid[a.x][a.y]
            if owner != Cell.EMPTY and owner == grid[b.x][b.y] == grid[c.x][c.y]:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when no line can be won any more, i.e. every
        line holds marks of both players. This can happen before the
        board is full. A line with a winner is still "live", so a won
        board is never a draw.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        grid = board.grid
        for line in self.WINNING_LINES:
            owners = {grid[move.x][move.y] for move in line}
            owners.discard(Cell.EMPTY)
            if len(owners) <= 1:
                return False
        return True

    def get_outcome(self, board: Board) -> Outcome:
        """
        Get the outcome of the board.
        The winner check always runs before the draw check.

        Args:
            board: The board to check.

        Returns:
            Outcome with status and (for a win) the winner.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome(GameStatus.WON, winner)
        if self.check_draw(board):
            return Outcome(GameStatus.DRAW)
        return Outcome(GameStatus.IN_PROGRESS)
