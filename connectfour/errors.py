"""
errors.py - Exceptions raised by the Connect Four engine

Every rejected operation raises one of these before touching the board,
so callers can ignore the input or report it without any cleanup.
"""

from typing import Optional


class ConnectFourError(Exception):
    """Base class for all engine errors."""


class OutOfRangeError(ConnectFourError, IndexError):
    """A row or column index lies outside the board."""

    def __init__(self, column: int, width: int,
                 row: Optional[int] = None, height: Optional[int] = None):
        self.column = column
        self.row = row
        if row is None:
            message = f"Column {column} is out of range [0, {width})"
        else:
            message = (f"Cell ({row}, {column}) is out of range "
                       f"[0, {height}) x [0, {width})")
        super().__init__(message)


class ColumnFullError(ConnectFourError):
    """The chosen column has no empty row left."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameOverError(ConnectFourError):
    """A move was attempted after the game reached a terminal state."""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Game is already over ({status.name})")


class CellOccupiedError(ConnectFourError):
    """A piece was placed on a cell that already holds one."""

    def __init__(self, row: int, column: int):
        self.row = row
        self.column = column
        super().__init__(f"Cell ({row}, {column}) is already occupied")
