import logging
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .constants import ROWS, COLS, CONNECT, EMPTY
from .enums import Player
from .schemas import Move

# Logger setup
logger = logging.getLogger(__name__)

Window = Tuple[Tuple[int, int], ...]


@lru_cache(maxsize=None)
def _window_coordinates(rows: int, cols: int, connect: int) -> Tuple[Window, ...]:
    """
    Every run of `connect` cells that could hold a winning line.
    Order: horizontal (top row first), vertical, diagonal \\, diagonal /.
    """
    # Directions: Horizontal, Vertical, Diagonal \, Diagonal /
    directions = [(0, 1), (1, 0), (1, 1), (1, -1)]
    windows = []
    for dr, dc in directions:
        for r in range(rows):
            for c in range(cols):
                end_r = r + dr * (connect - 1)
                end_c = c + dc * (connect - 1)
                if 0 <= end_r < rows and 0 <= end_c < cols:
                    windows.append(tuple((r + dr * i, c + dc * i) for i in range(connect)))
    return tuple(windows)


class Board:
    def __init__(self, rows: int = ROWS, cols: int = COLS, connect: int = CONNECT,
                 grid: Optional[Sequence[Sequence[int]]] = None):
        """
        Immutable board using (row, col) indexing.
        Row 0 is the TOP of the board.
        Row `rows - 1` is the BOTTOM of the board.
        Values: 0=Empty, 1=Player.ONE, 2=Player.TWO
        """
        self.rows = rows
        self.cols = cols
        self.connect = connect
        if grid is None:
            self._grid = tuple(tuple(EMPTY for _ in range(cols)) for _ in range(rows))
        else:
            self._grid = tuple(tuple(_occupant(v) for v in row) for row in grid)

    @classmethod
    def from_matrix(cls, matrix: List[List[int]], connect: int = CONNECT) -> "Board":
        """Builds a board from an app style 2D matrix (Row 0=Top)."""
        if not matrix or not matrix[0]:
            raise ValueError("Matrix must have at least one row and one column")
        cols = len(matrix[0])
        if any(len(row) != cols for row in matrix):
            raise ValueError("Matrix rows must all have the same length")
        return cls(len(matrix), cols, connect, grid=matrix)

    def to_matrix(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self._grid]

    def tile(self, r: int, c: int) -> int:
        return self._grid[r][c]

    def get_valid_moves(self) -> List[int]:
        """Returns a list of column indices that are not full."""
        return [c for c in range(self.cols) if self._grid[0][c] == EMPTY]

    def is_valid_move(self, col: int) -> bool:
        if col < 0 or col >= self.cols:
            return False
        return self._grid[0][col] == EMPTY

    def play(self, player: Player, col: int) -> "Board":
        """
        Returns a NEW board with `player`'s piece dropped into `col`.
        Raises ValueError if the column is out of range or full.
        """
        if not self.is_valid_move(col):
            raise ValueError(f"Illegal move: column {col} is full or out of range")

        # Gravity: Find the lowest empty row
        for r in range(self.rows - 1, -1, -1):
            if self._grid[r][col] == EMPTY:
                grid = [list(row) for row in self._grid]
                grid[r][col] = player
                return Board(self.rows, self.cols, self.connect, grid=grid)
        raise ValueError(f"Illegal move: column {col} is full")

    def get_possible_moves(self, player: Player) -> List[Tuple[Move, "Board"]]:
        """Every legal move for `player` with its resulting board, ascending by column."""
        return [(Move(player=player, column=c), self.play(player, c)) for c in self.get_valid_moves()]

    def win_locations(self) -> List[List[int]]:
        """Occupants of every winnable window on the board."""
        return [[self._grid[r][c] for r, c in window]
                for window in _window_coordinates(self.rows, self.cols, self.connect)]

    def has_connect_four(self) -> Optional[Player]:
        """Returns the player owning a full window, or None."""
        for window in self.win_locations():
            first = window[0]
            if first != EMPTY and all(v == first for v in window):
                return Player(first)
        return None

    def is_full(self) -> bool:
        return all(self._grid[0][c] != EMPTY for c in range(self.cols))

    def next_player(self) -> Player:
        """Player ONE moves first, so an even piece count means it is ONE's turn."""
        pieces = sum(1 for row in self._grid for v in row if v != EMPTY)
        return Player.ONE if pieces % 2 == 0 else Player.TWO

    # --- Formatting ---

    def get_visual_board(self) -> str:
        """Generates an ASCII grid representation."""
        symbols = {EMPTY: ".", Player.ONE: Player.ONE.symbol, Player.TWO: Player.TWO.symbol}
        header = " " + " ".join([str(i) for i in range(self.cols)])
        rows_str = []
        for r in range(self.rows):
            row_cells = [symbols[self._grid[r][c]] for c in range(self.cols)]
            rows_str.append("|" + "|".join(row_cells) + "|")
        return header + "\n" + "\n".join(rows_str)

    def __str__(self) -> str:
        return self.get_visual_board()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.connect == other.connect and self._grid == other._grid

    def __hash__(self) -> int:
        return hash((self.connect, self._grid))


def _occupant(value: int) -> int:
    if value == EMPTY:
        return EMPTY
    return Player(value)
