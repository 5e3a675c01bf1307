"""
Board representation for TicTacToe.
Cells, players, moves and the immutable 3x3 board.
"""

from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union
from dataclasses import dataclass, field

from .errors import InvalidMove


BOARD_SIZE = 3


class Cell(Enum):
    """The value of one board cell. CROSS and CIRCLE are also the players."""
    EMPTY = "none"
    CROSS = "cross"
    CIRCLE = "circle"

    @property
    def symbol(self) -> str:
        """Single character used when drawing the board."""
        return _SYMBOLS[self]

    def opposite(self) -> "Cell":
        """Get the opposite player."""
        return opponent(self)


# A player is one of the two non-empty cell values
Player = Cell

_SYMBOLS = {
    Cell.EMPTY: " ",
    Cell.CROSS: "X",
    Cell.CIRCLE: "O",
}

# Characters accepted by Board.from_rows()
_PARSE = {
    "X": Cell.CROSS,
    "O": Cell.CIRCLE,
    " ": Cell.EMPTY,
    ".": Cell.EMPTY,
    "_": Cell.EMPTY,
}


def opponent(player: Player) -> Player:
    """
    Get the other player.

    Raises:
        ValueError: if called with Cell.EMPTY.
    """
    if player == Cell.CROSS:
        return Cell.CIRCLE
    if player == Cell.CIRCLE:
        return Cell.CROSS
    raise ValueError(f"{player} is not a player")


@dataclass(frozen=True)
class Move:
    """
    A target cell on the board.

    x is the column and y the row, both 0-2.
    """
    x: int
    y: int

    def __post_init__(self):
        for value in (self.x, self.y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidMove(f"Invalid position ({self.x}, {self.y}). Must be integers.")
            if not 0 <= value < BOARD_SIZE:
                raise InvalidMove(f"Invalid position ({self.x}, {self.y}). Must be 0-2.")


# Every cell, column by column (x outer, y inner)
ALL_MOVES: Tuple[Move, ...] = tuple(Move(x, y) for x in range(BOARD_SIZE) for y in range(BOARD_SIZE))


def _empty_grid() -> Tuple[Tuple[Cell, ...], ...]:
    return tuple(tuple(Cell.EMPTY for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


@dataclass(frozen=True)
class Board:
    """
    The 3x3 board as an immutable value.

    The grid is stored column first: grid[x][y].
    Every "change" returns a new Board, so a board handed to the
    search (or anyone else) can never be modified behind its back.
    """

    grid: Tuple[Tuple[Cell, ...], ...] = field(default_factory=_empty_grid)

    def __post_init__(self):
        grid = tuple(tuple(column) for column in self.grid)
        if len(grid) != BOARD_SIZE or any(len(column) != BOARD_SIZE for column in grid):
            raise ValueError("Board must be 3x3")
        if not all(isinstance(cell, Cell) for column in grid for cell in column):
            raise ValueError("Board cells must be Cell values")
        object.__setattr__(self, "grid", grid)

    @classmethod
    def _from_trusted_grid(cls, grid: Tuple[Tuple[Cell, ...], ...]) -> "Board":
        # Skips __post_init__ checks; only for grids built from a valid board
        board = object.__new__(cls)
        object.__setattr__(board, "grid", grid)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[Cell]]]) -> "Board":
        """
        Build a board from three rows, top row first.

        Each row is either a string like "XO." or a sequence of Cell values.

        Raises:
            ValueError: if the rows are not 3x3 or hold unknown symbols.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError("Board must have 3 rows")

        parsed: List[List[Cell]] = []
        for row in rows:
            if isinstance(row, str):
                try:
                    cells = [_PARSE[char.upper()] for char in row]
                except KeyError as e:
                    raise ValueError(f"Unknown board symbol {e.args[0]!r}") from None
            else:
                cells = list(row)
            if len(cells) != BOARD_SIZE:
                raise ValueError("Board rows must have 3 cells")
            parsed.append(cells)

        # Rows come in as [y][x], the grid is [x][y]
        return cls(tuple(tuple(parsed[y][x] for y in range(BOARD_SIZE)) for x in range(BOARD_SIZE)))

    def get(self, move: Move) -> Cell:
        """Get the cell value at the move's coordinate."""
        return self.grid[move.x][move.y]

    def set(self, move: Move, cell: Cell) -> "Board":
        """
        Return a new board with `cell` written at the move's coordinate.

        This is a primitive: it does not check that the cell was empty.
        Use MoveValidator or GameState.play() for rule checks.
        """
        column = self.grid[move.x]
        new_column = column[:move.y] + (cell,) + column[move.y + 1:]
        return Board._from_trusted_grid(self.grid[:move.x] + (new_column,) + self.grid[move.x + 1:])

    def clone(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(tuple(tuple(column) for column in self.grid))

    def empty_cells(self) -> List[Move]:
        """
        Get all empty cells, column by column (x outer, y inner).

        This order is also the search's tie-break order.
        """
        return [move for move in ALL_MOVES if self.grid[move.x][move.y] == Cell.EMPTY]

    def filled_count(self) -> int:
        return sum(1 for column in self.grid for cell in column if cell != Cell.EMPTY)

    def is_full(self) -> bool:
        return self.filled_count() == BOARD_SIZE * BOARD_SIZE

    def rows(self) -> Iterable[Tuple[Cell, ...]]:
        """Iterate over the rows, top row first."""
        for y in range(BOARD_SIZE):
            yield tuple(self.grid[x][y] for x in range(BOARD_SIZE))
