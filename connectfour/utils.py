"""
utils.py - Constants, enumerations and helpers for the Connect Four engine

This module provides the board dimensions, the player and game status
enumerations, the direction vectors used by win detection, and the ASCII
renderer shared by the board and the command-line interface.
"""

from enum import Enum, auto
from typing import List, Tuple

import numpy as np

# Game constants
WIDTH = 7
HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'Player 1'."""
        if self == Player.EMPTY:
            return "Empty"
        return f"Player {self.value}"

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameStatus(Enum):
    """Enumeration representing the state of a game."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game has reached a terminal state."""
        return self != GameStatus.IN_PROGRESS

    @staticmethod
    def win_for(player: Player) -> 'GameStatus':
        """Status for a game won by ``player``."""
        if player == Player.ONE:
            return GameStatus.PLAYER_ONE_WIN
        if player == Player.TWO:
            return GameStatus.PLAYER_TWO_WIN
        raise ValueError(f"No win status for {player!r}")


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP = auto()    # Bottom-left to top-right
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right


# Step (row, col) for each direction; row 0 is the bottom row
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_UP: (1, 1),
    Direction.DIAGONAL_DOWN: (-1, 1),
}


def parse_int_list(text: str) -> List[int]:
    """
    Parse a comma-separated list of integers (columns or cell values).

    Args:
        text: String such as "3,3,4"

    Returns:
        List of integers

    Raises:
        ValueError: If an entry is not an integer
    """
    return [int(part) for part in text.split(',') if part.strip()]


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art.

    The grid is stored with row 0 at the bottom, so rows are printed in
    reverse to show the board the way it stands.

    Args:
        grid: 2D array of player values, shape (height, width)

    Returns:
        ASCII representation of the board
    """
    height, width = grid.shape
    result = []
    result.append("|" + "-" * (width * 2 - 1) + "|")

    for row in range(height - 1, -1, -1):
        cells = [str(Player(int(value))) for value in grid[row]]
        result.append("|" + " ".join(cells) + "|")

    result.append("|" + "-" * (width * 2 - 1) + "|")
    result.append("|" + " ".join(str(col % 10) for col in range(width)) + "|")

    return "\n".join(result)


def run_to_string(run: List[Tuple[int, int]]) -> str:
    """Format a list of (row, col) cells for log messages."""
    return " ".join(f"({row},{col})" for row, col in run)
