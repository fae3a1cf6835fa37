#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine CLI

    Examples:

    # Two players at one terminal
    python run.py play

    # Replay a game from a list of columns
    python run.py replay --moves 0,1,0,1,0,1,0

    # Analyse a position (bottom row first, 42 values)
    python run.py test --position 1,1,1,1,0,0,0,2,2,2,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0

    # Benchmark the engine with 5000 random games
    python run.py --debug-level info benchmark --iterations 5000
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
