"""
win.py - Win detection for Connect Four

Scans every cell of the board as the anchor of four candidate runs
(horizontal, vertical and both diagonals) and reports the first run of
CONNECT_N cells owned by the player being checked.
"""

from typing import Iterator, List, Tuple

from connectfour.debug import debug
from connectfour.game.board import Board
from connectfour.utils import CONNECT_N, DIRECTION_VECTORS, Direction, Player, run_to_string

Cell = Tuple[int, int]


def candidate_runs(row: int, col: int) -> Iterator[Tuple[Direction, List[Cell]]]:
    """
    Yield the four runs that start at (row, col).

    Runs may leave the board; bounds are checked by the caller.
    """
    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        yield direction, [(row + dr * i, col + dc * i) for i in range(CONNECT_N)]


def _is_winning_run(board: Board, run: List[Cell], player: Player) -> bool:
    return all(board.in_bounds(r, c) and board.grid[r, c] == player.value
               for r, c in run)


def find_winning_run(board: Board, player: Player) -> List[Cell]:
    """
    Find a run of CONNECT_N cells owned by ``player``.

    Args:
        board: The board to scan
        player: The player to check, normally the one who just moved

    Returns:
        The (row, col) cells of the first winning run found, or an empty list
    """
    if player == Player.EMPTY:
        return []

    for row in range(board.height):
        for col in range(board.width):
            for direction, run in candidate_runs(row, col):
                if _is_winning_run(board, run, player):
                    debug.debug(f"{direction.name} run for {player.label}: "
                                f"{run_to_string(run)}", "win")
                    return run
    return []


def check_for_win(board: Board, player: Player) -> bool:
    """Check whether ``player`` has CONNECT_N in a row anywhere on the board."""
    return bool(find_winning_run(board, player))
