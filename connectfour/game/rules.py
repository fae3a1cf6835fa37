"""
rules.py - Game state management and Gymnasium environment for Connect Four

This module provides:
1. GameEngine, the turn controller that owns a board and applies drops
2. A gymnasium-compatible environment wrapping the engine for external agents
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.errors import ColumnFullError, ConnectFourError, GameOverError
from connectfour.game.board import Board
from connectfour.game.win import find_winning_run
from connectfour.utils import WIDTH, HEIGHT, GameStatus, Player


class Outcome(Enum):
    """Result kinds of a successful drop."""
    CONTINUE = auto()
    WON = auto()
    TIED = auto()


@dataclass(frozen=True)
class MoveOutcome:
    """What happened after a piece was dropped."""
    kind: Outcome
    player: Player
    row: int
    column: int

    @property
    def winner(self) -> Optional[Player]:
        return self.player if self.kind == Outcome.WON else None

    @property
    def is_terminal(self) -> bool:
        return self.kind != Outcome.CONTINUE


class GameEngine:
    """
    Turn controller for a single Connect Four game.

    The engine owns its board exclusively. Player 1 moves first; after
    each successful drop the engine checks for a win by the player who
    moved, then for a full board, and only then hands the turn over.
    """

    def __init__(self):
        debug.debug("Initializing GameEngine", "engine")
        self.reset()

    def reset(self) -> None:
        """Start a new game on an empty board."""
        debug.debug("Resetting game", "engine")
        self.board = Board.create_empty(WIDTH, HEIGHT)
        self.active_player = Player.ONE
        self.status = GameStatus.IN_PROGRESS
        self.moves_made: List[int] = []
        self.last_move: Optional[Tuple[int, int]] = None
        self._winning_run: List[Tuple[int, int]] = []

    def drop_piece(self, column: int) -> MoveOutcome:
        """
        Drop the active player's piece into a column.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The outcome of the move

        Raises:
            GameOverError: If the game has already ended
            OutOfRangeError: If the column is outside the board
            ColumnFullError: If the column has no empty row
        """
        if self.status.is_game_over():
            debug.debug(f"Rejected drop in column {column}: game is over", "engine")
            raise GameOverError(self.status)

        row = self.board.first_empty_row(column)
        if row is None:
            debug.debug(f"Rejected drop in column {column}: column is full", "engine")
            raise ColumnFullError(column)

        player = self.active_player
        self.board.occupy(row, column, player)
        self.moves_made.append(column)
        self.last_move = (row, column)
        debug.debug(f"{player.label} dropped into column {column}, landed on row {row}", "engine")

        debug.start_timer("win_check")
        run = find_winning_run(self.board, player)
        debug.end_timer("win_check", "engine")

        if run:
            self._winning_run = run
            self.status = GameStatus.win_for(player)
            debug.info(f"{player.label} wins after move at {self.last_move}", "engine")
            return MoveOutcome(Outcome.WON, player, row, column)

        if self.board.is_full():
            self.status = GameStatus.DRAW
            debug.info("Game ends in a tie", "engine")
            return MoveOutcome(Outcome.TIED, player, row, column)

        self.active_player = player.other()
        return MoveOutcome(Outcome.CONTINUE, player, row, column)

    def get_active_player(self) -> Player:
        return self.active_player

    def get_cell_owner(self, row: int, column: int) -> Player:
        return self.board.cell_owner(row, column)

    def is_terminal(self) -> bool:
        return self.status.is_game_over()

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            The winning player, or None if nobody has won (yet)
        """
        if self.status == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        elif self.status == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    def get_winning_run(self) -> List[Tuple[int, int]]:
        """Cells of the winning run, or an empty list if the game was not won."""
        return list(self._winning_run)

    def is_valid_move(self, column: int) -> bool:
        """Check if dropping into ``column`` would be accepted."""
        if self.is_terminal() or not (0 <= column < self.board.width):
            return False
        return not self.board.is_column_full(column)

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that still accept a piece.

        Returns:
            List of column indices, empty once the game is over
        """
        return [col for col in range(self.board.width) if self.is_valid_move(col)]

    def render(self) -> str:
        return self.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through ``step``; rewards are given from Player 1's
    point of view. Illegal columns are penalised and truncate the episode
    without changing the board.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        debug.debug("Initializing ConnectFourEnv", "env")

        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.action_space = spaces.Discrete(WIDTH)
        # Observation: HEIGHTxWIDTH board with 3 possible values (0, 1, 2)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(HEIGHT, WIDTH), dtype=np.int8
        )

        self.engine = GameEngine()
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to an empty board.

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.engine.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Drop a piece for the active player.

        Args:
            action: Column to drop into (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)

        Raises:
            GameOverError: If the episode has already terminated
        """
        action = int(action)
        debug.debug(f"Environment step with action {action}", "env")

        try:
            outcome = self.engine.drop_piece(action)
        except GameOverError:
            raise
        except ConnectFourError as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = outcome.is_terminal
        if outcome.winner == Player.ONE:
            reward = self.reward_win
        elif outcome.winner == Player.TWO:
            reward = self.reward_lose
        elif terminated:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode over: {self.engine.status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.engine.render()
        if self.render_mode == "human":
            print(self.engine.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.engine.board.get_state()

    def _get_info(self) -> Dict:
        valid_moves = self.engine.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.engine.active_player.value,
            'game_result': self.engine.status.name,
            'moves_made': len(self.engine.moves_made),
            'winning_line': self.engine.get_winning_run(),
            'last_move': self.engine.last_move,
        }

    def close(self):
        """Clean up resources."""
        debug.debug("Closing environment", "env")
