# chesser/world/errors.py
from __future__ import annotations


class ChesserError(Exception):
    """Base class for errors reported by the move catalog and the path engine."""


class UnknownPiece(ChesserError, KeyError):
    """Raised when a piece id has no entry in the move catalog."""

    def __init__(self, piece: object) -> None:
        super().__init__(piece)
        self.piece = piece

    def __str__(self) -> str:
        return f"Unknown piece {self.piece!r}"


class InvalidInput(ChesserError, ValueError):
    """Raised when search arguments break the call contract (bounds, grid size, offsets)."""
