"""
Logic module for TicTacToe.
Handles the board, game state, rules, and AI opponent.
"""

from .errors import TicTacToeError, InvalidMove, PreconditionViolated
from .board import Board, Cell, Move, Player, opponent
from .config import GameConfig
from .win_checker import WinChecker, Outcome, GameStatus
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameState, PlayedMove
from .ai_player import AIPlayer, best_move, score, score_move, rank_moves
