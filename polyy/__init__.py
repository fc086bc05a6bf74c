"""Poly-Y: the game of Y played on polygonal boards."""

__version__ = "0.1.0"
