"""
connectfour - Connect Four game-state engine

This package provides the board representation, win detection and turn
handling for two-player Connect Four, plus a Gymnasium environment and a
command-line interface built on top of the engine.
"""

# Version number
__version__ = '0.1.0'
