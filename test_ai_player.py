"""
Tests for the minimax AI.

The searches from an empty board walk the whole game tree
and take a few seconds each.
"""

import pytest

from logic.ai_player import AIPlayer, best_move, rank_moves, score, score_move
from logic.board import Board, Cell, Move, opponent
from logic.errors import PreconditionViolated
from logic.game_state import GameState
from logic.win_checker import GameStatus, WinChecker


X = Cell.CROSS
O = Cell.CIRCLE


def test_takes_the_immediate_win():
    board = Board.from_rows(["XOX", "OXO", "..."])

    move = best_move(board, X)

    # (0, 2) and (2, 2) both win; (0, 2) comes first in scan order
    assert move == Move(0, 2)
    assert score_move(board, move, X) == 10 - 1
    assert WinChecker().check_winner(board.set(move, X)) == X


def test_blocks_the_opponent():
    # X threatens the top row at (2, 0)
    board = Board.from_rows(["XX.", ".O.", "..."])
    assert best_move(board, O) == Move(2, 0)


def test_prefers_the_fastest_win():
    # X wins now with (2, 0); other moves may also win later
    board = Board.from_rows(["XX.", "OO.", "..."])
    ranking = dict(rank_moves(board, X))

    assert ranking[Move(2, 0)] == 9
    assert all(value < 9 for move, value in ranking.items() if move != Move(2, 0))
    assert best_move(board, X) == Move(2, 0)


def test_lost_position_scores_and_tie_break():
    # X has two open threats, O can only block one of them
    board = Board.from_rows(["X.X", ".O.", "X.O"])
    ranking = rank_moves(board, O)

    assert [move for move, _ in ranking] == [Move(0, 1), Move(1, 0), Move(1, 2), Move(2, 1)]
    assert all(value == 2 - 10 for _, value in ranking)
    assert best_move(board, O) == Move(0, 1)


def test_score_terminal_positions():
    won = Board.from_rows(["XXX", "OO.", "..."])
    assert score(won, O, X, 3) == 10 - 3
    assert score(won, O, O, 3) == 3 - 10

    drawn = Board.from_rows(["XOX", "XOO", "OX."])
    assert score(drawn, X, X, 8) == 0
    assert score(drawn, X, O, 8) == 0


def test_score_does_not_touch_the_board():
    board = Board.from_rows(["X..", ".O.", "..."])
    before = board.clone()
    score(board, X, X, 0)
    rank_moves(board, X)
    assert board == before


@pytest.mark.parametrize("rows, player", [
    (["X..", "...", "..."], O),
    (["X..", ".O.", "..X"], O),
    (["XO.", "OX.", "..."], X),
    (["XOX", "XOO", "..."], X),
])
def test_best_move_is_an_empty_cell(rows, player):
    board = Board.from_rows(rows)
    move = best_move(board, player)
    assert board.get(move) == Cell.EMPTY


def test_empty_board_opens_in_first_scanned_cell():
    # Every opening is a draw with best play, so the tie-break decides
    assert best_move(Board(), X) == Move(0, 0)


def test_perfect_play_is_a_draw():
    checker = WinChecker()
    board = Board()
    player = X

    while not checker.get_outcome(board).is_terminal:
        move = best_move(board, player)
        assert board.get(move) == Cell.EMPTY
        board = board.set(move, player)
        player = opponent(player)

    assert checker.get_outcome(board).status == GameStatus.DRAW


def test_search_on_finished_board_is_a_precondition_error():
    won = Board.from_rows(["XXX", "OO.", "..."])
    full = Board.from_rows(["XOX", "XOO", "OXX"])

    with pytest.raises(PreconditionViolated):
        best_move(won, O)
    with pytest.raises(PreconditionViolated):
        best_move(full, O)
    with pytest.raises(AssertionError):
        rank_moves(full, O)


def test_search_needs_a_player():
    with pytest.raises(PreconditionViolated):
        best_move(Board(), Cell.EMPTY)


def test_parallel_search_matches_sequential():
    board = Board.from_rows(["X..", ".O.", "..."])
    assert rank_moves(board, X, workers=2) == rank_moves(board, X)
    assert best_move(board, X, workers=2) == best_move(board, X)


# ==================== AI PLAYER ====================

def test_ai_player_blocks():
    game = GameState(board=Board.from_rows(["XX.", ".O.", "..."]), current_player=O)
    ai = AIPlayer(O)

    assert ai.get_best_move(game) == Move(2, 0)
    assert len(ai.last_ranking) == 6


def test_ai_player_refuses_other_players_turn():
    ai = AIPlayer(O)
    with pytest.raises(PreconditionViolated):
        ai.get_best_move(GameState.new())


def test_ai_player_needs_a_player():
    with pytest.raises(ValueError):
        AIPlayer(Cell.EMPTY)


def test_move_suggestion():
    game = GameState(board=Board.from_rows(["XOX", "OXO", "..."]), current_player=X)
    ai = AIPlayer(X)
    assert ai.get_move_suggestion(game) == "Place cross at 13"

    finished = game.play(Move(0, 2))
    assert AIPlayer(O).get_move_suggestion(finished) == "No moves available!"
