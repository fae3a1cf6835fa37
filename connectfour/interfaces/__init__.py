"""
connectfour.interfaces - User interfaces for Connect Four

This package contains the command-line interface that drives the
game engine from a terminal.
"""

# Don't import anything here to avoid circular imports
__all__ = []
