"""
Game state management for TicTacToe.
Tracks the board, current player and move history.
"""

from typing import Optional, Tuple
from dataclasses import dataclass, field, replace

from .board import Board, Cell, Move, Player, opponent
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import GameStatus, Outcome, WinChecker


_win_checker = WinChecker()
_validator = MoveValidator()


def _first_player() -> Player:
    return opponent(GameConfig.INITIAL_LAST_MOVER)


@dataclass(frozen=True)
class PlayedMove:
    """
    A move that has been played.
    """
    player: Player          # Who made the move
    move: Move              # Where
    round_index: int        # Which round this was (1-9)


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board
    - Current player
    - Move history

    The state never changes in place: play() returns the next state.
    The outcome (ongoing, won, draw) is always derived from the board.
    """

    board: Board = field(default_factory=Board)

    # Player whose turn it is
    current_player: Player = field(default_factory=_first_player)

    # Moves played so far
    moves: Tuple[PlayedMove, ...] = ()

    def __post_init__(self):
        if self.current_player == Cell.EMPTY:
            raise ValueError("current_player must be CROSS or CIRCLE")

    @classmethod
    def new(cls, first_player: Optional[Player] = None) -> "GameState":
        """
        Start a new game on an empty board.

        Args:
            first_player: Who plays round 1 (default from GameConfig).
        """
        if first_player is None:
            first_player = _first_player()
        return cls(board=Board(), current_player=first_player)

    @property
    def round_index(self) -> int:
        """Number of moves played so far."""
        return len(self.moves)

    @property
    def last_player(self) -> Player:
        return opponent(self.current_player)

    @property
    def outcome(self) -> Outcome:
        """The outcome, re-evaluated from the board (winner before draw)."""
        return _win_checker.get_outcome(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome.status == GameStatus.DRAW

    def play(self, move: Move) -> "GameState":
        """
        Play the current player's mark at the given position.

        Args:
            move: Target cell.

        Returns:
            The state after the move, with the turn passed on.

        Raises:
            InvalidMove: if the cell is taken or the game is already over.
        """
        move = _validator.require_valid(self.board, move.x, move.y)

        played = PlayedMove(
            player=self.current_player,
            move=move,
            round_index=self.round_index + 1,
        )
        return replace(
            self,
            board=self.board.set(move, self.current_player),
            current_player=opponent(self.current_player),
            moves=self.moves + (played,),
        )
