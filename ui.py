"""
TicTacToe console UI.
Draws the board with ASCII characters and reads moves from the terminal.

Moves are typed as two digits, column first, both 1-3 (e.g. "13" is
the bottom left cell). All game rules live in the logic package.
"""

from typing import Callable, Dict, Iterable, Optional

from logic.ai_player import AIPlayer
from logic.board import BOARD_SIZE, Board, Cell, Move, Player
from logic.errors import InvalidMove
from logic.game_state import GameState
from logic.win_checker import GameStatus


ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]

YES_ANSWERS = ("y", "yes")
NO_ANSWERS = ("n", "no")


def render_board(board: Board) -> str:
    """
    Paint the board with ASCII characters.

    Example:
           1   2   3
        1  X |   |
          ---+---+---
        2    | O |
          ---+---+---
        3    |   |
    """
    # The column indices
    lines = ["   " + "   ".join(str(x + 1) for x in range(BOARD_SIZE)) + " "]

    for y, row in enumerate(board.rows()):
        if y != 0:
            lines.append("  ---+---+---")
        cells = "|".join(f" {cell.symbol} " for cell in row)
        lines.append(f"{y + 1} {cells}")

    return "\n".join(lines)


def parse_move(text: str) -> Optional[Move]:
    """
    Parse a move typed by the player.

    Args:
        text: Two digits 1-3, column first. Whitespace is ignored.

    Returns:
        The move (0-based), or None if the text is not a valid move.
    """
    text = text.strip()
    if len(text) < 2:
        return None

    x_str, y_str = text[0], text[1:].strip()
    if not (x_str.isdecimal() and y_str.isdecimal()):
        return None

    x, y = int(x_str), int(y_str)
    if not (1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE):
        return None

    # Minus one to translate from human indices to board indices
    return Move(x - 1, y - 1)


def ask_yes_no(question: str, read: ReadFn = input) -> bool:
    """Ask a yes/no question until the answer is one of the two."""
    prompt = f"{question} [y/n]: "
    while True:
        answer = read(prompt).strip().lower()
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        prompt = "please answer y or n: "


def read_move(board: Board, read: ReadFn = input, prompt: str = "move:   ") -> Move:
    """
    Read moves until one targets an empty cell.

    Args:
        board: The current board.
        read: Function that shows a prompt and returns a line.
        prompt: The first prompt.

    Returns:
        A move on an empty cell.
    """
    while True:
        move = parse_move(read(prompt))
        if move is None:
            prompt = "invalid input, please try again: "
        elif board.get(move) != Cell.EMPTY:
            prompt = "field already taken, please try again: "
        else:
            return move


def result_message(state: GameState) -> str:
    """Describe the end of the game."""
    outcome = state.outcome
    if outcome.status == GameStatus.WON:
        return f"Player {outcome.winner.value} won after {state.round_index} rounds"
    if outcome.status == GameStatus.DRAW:
        return f"Draw after {state.round_index} rounds"
    return f"Game not finished after {state.round_index} rounds"


class ConsoleGame:
    """
    Runs one game in the terminal.

    Human players type their moves, computer players ask the AI.
    """

    def __init__(
        self,
        computer_players: Iterable[Player] = (),
        workers: Optional[int] = None,
        read: ReadFn = input,
        write: WriteFn = print,
    ):
        """
        Initialize the game.

        Args:
            computer_players: Players controlled by the AI (none, one or both).
            workers: Worker processes for the AI search.
            read: Function used to read a line from the player.
            write: Function used to show text.
        """
        self.ais: Dict[Player, AIPlayer] = {
            player: AIPlayer(player, workers=workers) for player in computer_players
        }
        self.read = read
        self.write = write

    def is_computer(self, player: Player) -> bool:
        return player in self.ais

    def run(self, state: Optional[GameState] = None) -> GameState:
        """
        Play until someone wins or it's a draw.

        Returns:
            The final game state.
        """
        if state is None:
            state = GameState.new()

        self.write("Tic Tac Toe")
        self.write(render_board(state.board))

        while not state.is_game_over:
            player = state.current_player

            self.write("\n*****************")
            self.write(f"round:  {state.round_index + 1}")
            self.write(f"player: {player.value}")

            if self.is_computer(player):
                move = self.ais[player].get_best_move(state)
                self.write(f"move:   {move.x + 1}{move.y + 1} (computer)")
            else:
                move = read_move(state.board, self.read)

            try:
                state = state.play(move)
            except InvalidMove as e:
                self.write(str(e))
                continue

            # Show the current game state
            self.write(render_board(state.board))

        self.write(result_message(state))
        return state
