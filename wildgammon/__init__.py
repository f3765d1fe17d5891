"""Backgammon building blocks: dice, positions, mixed-roll moves, net inputs and training records."""

__version__ = "0.1.0"