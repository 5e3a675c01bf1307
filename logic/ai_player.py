"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import List, Optional, Tuple

from .board import Board, Cell, Move, Player, opponent
from .config import GameConfig
from .errors import PreconditionViolated
from .game_state import GameState
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


def score(board: Board, mover: Player, maximizing_player: Player, depth: int) -> int:
    """
    Minimax value of a position, seen from `maximizing_player`.

    Wins score WIN_SCORE - depth and losses depth - WIN_SCORE, so the
    fastest win and the slowest loss are preferred. A draw scores 0.
    No pruning: every continuation is evaluated.

    Args:
        board: Position to evaluate. Never modified.
        mover: Player to move in this position.
        maximizing_player: Player the search is run for.
        depth: Plies already played since the searched position.

    Returns:
        The score of the position.
    """
    winner = _win_checker.check_winner(board)
    if winner == maximizing_player:
        return GameConfig.WIN_SCORE - depth
    if winner is not None:
        return depth - GameConfig.WIN_SCORE
    if _win_checker.check_draw(board):
        return GameConfig.DRAW_SCORE

    # Not won and not drawn means some cell is still empty
    next_mover = opponent(mover)
    child_scores = [
        score(board.set(move, mover), next_mover, maximizing_player, depth + 1)
        for move in board.empty_cells()
    ]

    if mover == maximizing_player:
        return max(child_scores)
    return min(child_scores)


def score_move(board: Board, move: Move, player: Player) -> int:
    """
    Score one candidate move for `player`.
    The move itself is the first ply, so the search continues at depth 1.
    """
    return score(board.set(move, player), opponent(player), player, 1)


def _check_can_move(board: Board, player: Player) -> None:
    if player == Cell.EMPTY:
        raise PreconditionViolated("The search needs a player, not an empty cell")
    outcome = _win_checker.get_outcome(board)
    if outcome.is_terminal:
        raise PreconditionViolated(f"No move to search for, the game is over ({outcome})")


def rank_moves(board: Board, player: Player, workers: int = 0) -> List[Tuple[Move, int]]:
    """
    Score every empty cell for `player`.

    Args:
        board: Current board (not terminal).
        player: Player to move.
        workers: Worker processes for the top-level moves (0 or 1: none).

    Returns:
        (move, score) pairs in scan order (x outer, y inner).

    Raises:
        PreconditionViolated: if the game is already over.
    """
    _check_can_move(board, player)

    candidates = board.empty_cells()

    if workers and workers > 1 and len(candidates) > 1:
        # Each branch gets its own pickled copy of the board
        with ProcessPoolExecutor(max_workers=min(workers, len(candidates))) as pool:
            scores = list(pool.map(partial(score_move, board, player=player), candidates))
    else:
        scores = [score_move(board, move, player) for move in candidates]

    return list(zip(candidates, scores))


def _pick_best(ranked: List[Tuple[Move, int]]) -> Tuple[Move, int]:
    best, best_score = ranked[0]
    for move, move_score in ranked[1:]:
        if move_score > best_score:
            best, best_score = move, move_score
    return best, best_score


def best_move(board: Board, player: Player, workers: int = 0) -> Move:
    """
    Get the optimal move for `player`.

    Ties go to the first move in scan order: only a strictly
    greater score replaces the current best.

    Raises:
        PreconditionViolated: if the game is already over.
    """
    best, _ = _pick_best(rank_moves(board, player, workers))
    return best


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(self, player: Player = Cell.CIRCLE, workers: Optional[int] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: CIRCLE)
            workers: Worker processes for the search (default from GameConfig)
        """
        if player == Cell.EMPTY:
            raise ValueError("The AI must play CROSS or CIRCLE")
        self.player = player
        self.workers = GameConfig.SEARCH_WORKERS if workers is None else workers

        # Scores of the last search, for debugging and suggestions
        self.last_ranking: List[Tuple[Move, int]] = []

    def get_best_move(self, game_state: GameState) -> Move:
        """
        Get the best move for the current position.

        Args:
            game_state: Current game state.

        Returns:
            The best move.

        Raises:
            PreconditionViolated: if it is not the AI's turn or the game is over.
        """
        if game_state.current_player != self.player:
            raise PreconditionViolated(f"It's not {self.player.value}'s turn!")

        start = time.perf_counter()
        self.last_ranking = rank_moves(game_state.board, self.player, self.workers)

        move, move_score = _pick_best(self.last_ranking)

        logger.debug(
            "AI (%s) scored %d moves in %.1f ms. Best move: (%d, %d) (score: %d)",
            self.player.value, len(self.last_ranking),
            (time.perf_counter() - start) * 1000, move.x, move.y, move_score,
        )
        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if game_state.is_game_over:
            return "No moves available!"

        move = self.get_best_move(game_state)

        # 1-based, column first, like the console input
        return f"Place {self.player.value} at {move.x + 1}{move.y + 1}"
