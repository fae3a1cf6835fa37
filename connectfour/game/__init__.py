"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board representation, win detection and the
game engine that applies moves and tracks turns.
"""

from connectfour.game.board import Board
from connectfour.game.rules import ConnectFourEnv, GameEngine, MoveOutcome, Outcome
from connectfour.game.win import check_for_win, find_winning_run

__all__ = ['Board', 'GameEngine', 'MoveOutcome', 'Outcome', 'ConnectFourEnv',
           'check_for_win', 'find_winning_run']
