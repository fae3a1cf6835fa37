"""
board.py - Board representation for Connect Four

This module implements the Board class which holds cell occupancy and
answers column-capacity queries. Row 0 is the bottom row and column 0 is
the leftmost column.
"""

from typing import Iterable, Optional, Sequence

import numpy as np

from connectfour.debug import debug
from connectfour.errors import CellOccupiedError, OutOfRangeError
from connectfour.utils import WIDTH, HEIGHT, Player, render_board_ascii


class Board:
    """
    Represents a Connect Four game board.

    The grid is a numpy array of shape (height, width) holding
    ``Player`` values. Cells are only ever filled, never cleared, while
    a game is running; starting over means building a new board.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        """Initialize an empty board."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.grid = np.full((height, width), Player.EMPTY.value, dtype=np.int8)
        debug.trace(f"Created empty {height}x{width} board", "board")

    @classmethod
    def create_empty(cls, width: int = WIDTH, height: int = HEIGHT) -> 'Board':
        """Create a board with every cell empty."""
        return cls(width, height)

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[int]]) -> 'Board':
        """
        Build a board from explicit rows, bottom row first.

        Gravity is not enforced, which makes this handy for analysing
        fabricated positions.

        Args:
            rows: Sequence of rows holding 0, 1 or 2 per cell

        Returns:
            A new Board instance

        Raises:
            ValueError: If rows differ in length or hold values other than 0, 1, 2
        """
        rows = [list(row) for row in rows]
        allowed = {p.value for p in Player}
        # Checked before conversion so values outside int8 cannot overflow or wrap
        if any(value not in allowed for row in rows for value in row):
            raise ValueError("Cells must be 0 (empty), 1 or 2")

        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2:
            raise ValueError("Rows must all have the same length")

        height, width = grid.shape
        board = cls(width, height)
        board.grid = grid
        return board

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board instance with the same cells
        """
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def in_bounds(self, row: int, column: int) -> bool:
        """Check if a position is within the board boundaries."""
        return 0 <= row < self.height and 0 <= column < self.width

    def _check_column(self, column: int):
        if not (0 <= column < self.width):
            debug.debug(f"Column {column} out of bounds", "board")
            raise OutOfRangeError(column, self.width)

    def first_empty_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped into ``column`` would land on.

        Args:
            column: The column to check (0-indexed)

        Returns:
            The lowest empty row index, or None if the column is full

        Raises:
            OutOfRangeError: If the column is outside the board
        """
        self._check_column(column)

        for row in range(self.height):
            if self.grid[row, column] == Player.EMPTY.value:
                return row
        return None

    def is_column_full(self, column: int) -> bool:
        """Check if a column has no room left."""
        return self.first_empty_row(column) is None

    def occupy(self, row: int, column: int, player: Player):
        """
        Place ``player``'s piece on a cell.

        Raises:
            OutOfRangeError: If the cell is outside the board
            CellOccupiedError: If the cell already holds a piece
            ValueError: If ``player`` is Player.EMPTY
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot occupy a cell with Player.EMPTY")
        if not self.in_bounds(row, column):
            raise OutOfRangeError(column, self.width, row=row, height=self.height)
        if self.grid[row, column] != Player.EMPTY.value:
            raise CellOccupiedError(row, column)

        debug.trace(f"Placing {player.label} at ({row}, {column})", "board")
        self.grid[row, column] = player.value

    def cell_owner(self, row: int, column: int) -> Player:
        """
        Get the player occupying a cell.

        Returns:
            The occupying player, or Player.EMPTY
        """
        if not self.in_bounds(row, column):
            raise OutOfRangeError(column, self.width, row=row, height=self.height)
        return Player(int(self.grid[row, column]))

    def occupied_count(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self.grid != Player.EMPTY.value))

    def is_full(self) -> bool:
        """Check if every cell holds a piece."""
        return bool(np.all(self.grid != Player.EMPTY.value))

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid.

        Returns:
            2D numpy array, row 0 is the bottom row
        """
        return self.grid.copy()

    def render(self) -> str:
        """Render the board as a string, top row first."""
        return render_board_ascii(self.grid)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    __hash__ = None

    def __str__(self) -> str:
        return self.render()
