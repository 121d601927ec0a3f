"""Chessrules: a chess rules engine (positions, legal moves, game status)."""
