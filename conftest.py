import pytest

from connectfour.game.rules import GameEngine

# Fills the 6x7 board without any four-in-a-row; the last move ties the game
TIE_MOVES = [0] * 6 + [1] * 6 + [4] + [2] * 6 + [3] * 6 + [4] * 5 + [5] + [6] * 6 + [5] * 5


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def tie_moves():
    return list(TIE_MOVES)
