"""Draughts (checkers) on an 8x8 board, with forced captures, queens and a computer opponent."""

__version__ = "0.1.0"