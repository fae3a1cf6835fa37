"""
cli.py - Command-line interface for the Connect Four engine

This module provides a CLI for playing hot-seat games, replaying move
lists, analysing board positions and benchmarking the engine.
"""

import argparse
import random
import sys
import time
from collections import Counter
from typing import List, Optional, Sequence

from connectfour.debug import debug, DebugLevel
from connectfour.errors import ConnectFourError
from connectfour.game.board import Board
from connectfour.game.rules import GameEngine, MoveOutcome, Outcome
from connectfour.game.win import find_winning_run
from connectfour.utils import WIDTH, HEIGHT, Player, parse_int_list, run_to_string

QUIT = 'q'
RESTART = 'r'


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for all commands."""
    parser = argparse.ArgumentParser(description='Connect Four CLI')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode with detailed logging')
    parser.add_argument('--debug-level', default='warning',
                        choices=[level.name.lower() for level in DebugLevel],
                        help='Logging level (ignored when --debug is given)')
    parser.add_argument('--log-file', default=None,
                        help='Also write log messages to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    subparsers.add_parser('play', help='Play a two-player game at this terminal')

    replay_parser = subparsers.add_parser('replay', help='Replay a list of moves')
    replay_parser.add_argument('--moves', type=str, required=True,
                               help='Comma-separated columns, e.g. 3,3,4,2')

    test_parser = subparsers.add_parser('test', help='Analyse a board position')
    test_parser.add_argument('--position', type=str,
                             help=f'{WIDTH * HEIGHT} comma-separated cell values, bottom row first')

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark performance')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of random games to play')
    benchmark_parser.add_argument('--seed', type=int, default=None,
                                  help='Seed for the random move picker')

    return parser


class SimpleCLI:
    """Simple command-line interface around a GameEngine."""

    def __init__(self, argv: Optional[Sequence[str]] = None):
        self.engine = GameEngine()
        self.argv = argv
        self.args = None

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(self.argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the selected command and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'replay':
            return self.replay()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a Connect Four game with two people taking turns."""
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{WIDTH - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")

        self.engine.reset()
        print(self.engine.render())

        while not self.engine.is_terminal():
            player = self.engine.get_active_player()
            move = self.get_human_move(player)

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return 0
            elif move == RESTART:
                self.engine.reset()
                print("Game restarted.")
                print(self.engine.render())
                continue

            try:
                outcome = self.engine.drop_piece(move)
            except ConnectFourError as e:
                print(f"{e}. Try another column.")
                continue

            print(self.engine.render())
            self.announce(outcome)

        return 0

    def get_human_move(self, player: Player):
        """
        Read one move from standard input.

        Returns:
            Column index, QUIT, RESTART, or None if the input was not understood
        """
        try:
            user_input = input(f"{player.label} ({player}), your move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input in (QUIT, RESTART):
            return user_input

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or command.")
            return None

    def announce(self, outcome: MoveOutcome) -> None:
        """Print the end-of-game message, if the game just ended."""
        if outcome.kind == Outcome.WON:
            print(f"Game over! {outcome.player.label} wins!")
            print(f"Winning run: {run_to_string(self.engine.get_winning_run())}")
        elif outcome.kind == Outcome.TIED:
            print("Game over! It's a tie!")

    def replay(self) -> int:
        """Replay the given columns through a fresh engine."""
        try:
            moves = parse_int_list(self.args.moves)
        except ValueError as e:
            print(f"Error parsing moves: {e}")
            return 1

        self.engine.reset()
        outcome = None
        for number, column in enumerate(moves, start=1):
            try:
                outcome = self.engine.drop_piece(column)
            except ConnectFourError as e:
                print(self.engine.render())
                print(f"Move {number} (column {column}) rejected: {e}")
                return 1

        print(self.engine.render())
        if outcome is None or outcome.kind == Outcome.CONTINUE:
            print(f"Game in progress, {self.engine.get_active_player().label} to move.")
        else:
            self.announce(outcome)
        return 0

    def test_position(self) -> int:
        """Analyse a position given as comma-separated cell values."""
        if not self.args.position:
            print("Please provide a position string with --position")
            return 1

        try:
            values = parse_int_list(self.args.position)
            if len(values) != WIDTH * HEIGHT:
                raise ValueError(f"Position string must have {WIDTH * HEIGHT} values")
            board = Board.from_rows([values[r * WIDTH:(r + 1) * WIDTH] for r in range(HEIGHT)])
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        has_win = False
        for player in (Player.ONE, Player.TWO):
            run = find_winning_run(board, player)
            if run:
                print(f"Win for {player.label} detected at {run_to_string(run)}")
                has_win = True
        if not has_win:
            print("No win detected for any player")

        if board.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {WIDTH * HEIGHT - board.occupied_count()}")
            valid = [col for col in range(WIDTH) if not board.is_column_full(col)]
            print(f"Valid moves: {valid}")
        return 0

    def benchmark(self) -> int:
        """Play random games and report timing and results."""
        iterations = self.args.iterations
        if iterations <= 0:
            print("Iterations must be positive")
            return 1

        rng = random.Random(self.args.seed)
        results = Counter()
        total_moves = 0

        print(f"Playing {iterations} random games...")
        start = time.perf_counter()
        for _ in range(iterations):
            engine = GameEngine()
            while not engine.is_terminal():
                engine.drop_piece(rng.choice(engine.get_valid_moves()))
            results[engine.status.name] += 1
            total_moves += len(engine.moves_made)
        elapsed = time.perf_counter() - start

        print(f"Completed in {elapsed:.3f} seconds "
              f"({elapsed / iterations * 1000:.3f} ms per game, "
              f"{total_moves / iterations:.1f} moves per game)")
        for name, count in sorted(results.items()):
            print(f"  {name}: {count}")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    return SimpleCLI(argv).run()


if __name__ == "__main__":
    sys.exit(main())
