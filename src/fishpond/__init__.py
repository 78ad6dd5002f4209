"""Fishpond — chessboard layout facts for rendering a game position."""

__version__ = "0.1.0"
