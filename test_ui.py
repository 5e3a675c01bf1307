"""
Tests for the console UI and the command line entry point.
"""

import pytest

import main
from logic.board import Board, Cell, Move
from logic.game_state import GameState
from ui import ConsoleGame, ask_yes_no, parse_move, read_move, render_board, result_message


X = Cell.CROSS
O = Cell.CIRCLE


def scripted(answers):
    """A read() function that returns the given answers and records prompts."""
    answers = iter(answers)
    prompts = []

    def read(prompt):
        prompts.append(prompt)
        return next(answers)

    read.prompts = prompts
    return read


def test_render_empty_board():
    assert render_board(Board()) == "\n".join([
        "   1   2   3 ",
        "1    |   |   ",
        "  ---+---+---",
        "2    |   |   ",
        "  ---+---+---",
        "3    |   |   ",
    ])


def test_render_board_with_marks():
    board = Board.from_rows(["X..", ".O.", "..X"])
    lines = render_board(board).splitlines()
    assert lines[1] == "1  X |   |   "
    assert lines[3] == "2    | O |   "
    assert lines[5] == "3    |   | X "


@pytest.mark.parametrize("text, move", [
    ("11", Move(0, 0)),
    ("13", Move(0, 2)),
    ("31", Move(2, 0)),
    (" 2 3 \n", Move(1, 2)),
])
def test_parse_move(text, move):
    assert parse_move(text) == move


@pytest.mark.parametrize("text", ["", "1", "04", "40", "1a", "ab", "123", "-11", "1²", "²1"])
def test_parse_move_rejects(text):
    assert parse_move(text) is None


def test_ask_yes_no():
    read = scripted(["maybe", "Y"])
    assert ask_yes_no("Play?", read) is True
    assert read.prompts == ["Play? [y/n]: ", "please answer y or n: "]

    assert ask_yes_no("Play?", scripted(["no"])) is False


def test_read_move_asks_again():
    board = Board.from_rows(["X..", "...", "..."])
    read = scripted(["hello", "11", "22"])

    assert read_move(board, read) == Move(1, 1)
    assert read.prompts == [
        "move:   ",
        "invalid input, please try again: ",
        "field already taken, please try again: ",
    ]


def test_read_move_asks_again_after_non_ascii_digits():
    read = scripted(["1\u00b2", "22"])

    assert read_move(Board(), read) == Move(1, 1)
    assert read.prompts[1] == "invalid input, please try again: "


def test_human_game_until_win():
    output = []
    read = scripted(["11", "21", "12", "22", "13"])

    state = ConsoleGame(read=read, write=output.append).run()

    assert state.winner == X
    assert state.round_index == 5
    assert output[0] == "Tic Tac Toe"
    assert "player: cross" in output
    assert "player: circle" in output
    assert output[-1] == "Player cross won after 5 rounds"


def test_computer_answers_a_threat():
    # Cross (human) threatens the left column, the computer must block
    start = GameState.new().play(Move(0, 0)).play(Move(1, 1)).play(Move(0, 1))
    output = []
    read = scripted(["31", "23", "33"])

    state = ConsoleGame([O], read=read, write=output.append).run(start)

    assert state.moves[3].player == O
    assert state.moves[3].move == Move(0, 2)
    assert "move:   13 (computer)" in output


def test_computer_against_itself_is_a_draw():
    start = GameState.new().play(Move(1, 1)).play(Move(0, 0))
    output = []

    state = ConsoleGame([X, O], write=output.append).run(start)

    assert state.is_draw
    assert output[-1] == f"Draw after {state.round_index} rounds"


def test_result_message_in_progress():
    assert result_message(GameState.new()) == "Game not finished after 0 rounds"


# ==================== COMMAND LINE ====================

def test_parse_args():
    args = main.parse_args(["--computer", "both", "--workers", "2", "--verbose"])
    assert args.computer == "both"
    assert args.workers == 2
    assert args.verbose

    defaults = main.parse_args([])
    assert defaults.computer is None
    assert defaults.workers == 0


def test_ask_computer_players():
    assert main.ask_computer_players(scripted(["n"])) == []
    assert main.ask_computer_players(scripted(["y", "y"])) == [X]
    assert main.ask_computer_players(scripted(["y", "n"])) == [O]


def test_main_rejects_negative_workers(capsys):
    assert main.main(["--workers", "-1"]) == 2
    assert "--workers" in capsys.readouterr().out
