# chesser/world/moves.py
from __future__ import annotations
from chesser.world.errors import UnknownPiece

Offset = tuple[int, int]  # (d_row, d_col)

# Every offset is one step; nothing slides.
ROOK: tuple[Offset, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP: tuple[Offset, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
QUEEN: tuple[Offset, ...] = ROOK + BISHOP
KING: tuple[Offset, ...] = QUEEN
KNIGHT: tuple[Offset, ...] = (
    (2, 1), (2, -1), (-2, 1), (-2, -1),
    (1, 2), (1, -2), (-1, 2), (-1, -2),
)

# Display order in the piece picker
PIECES: tuple[str, ...] = ("Rook", "Bishop", "Queen", "King", "Knight")

MOVE_INDEX: dict[str, tuple[Offset, ...]] = {
    "Rook": ROOK,
    "Bishop": BISHOP,
    "Queen": QUEEN,
    "King": KING,
    "Knight": KNIGHT,
}

_BY_LOWER: dict[str, str] = {name.lower(): name for name in MOVE_INDEX}


def canonical_piece(piece: str) -> str:
    """'  rook ' -> 'Rook'. Raises UnknownPiece."""
    if not isinstance(piece, str):
        raise UnknownPiece(piece)
    name = _BY_LOWER.get(piece.strip().lower())
    if name is None:
        raise UnknownPiece(piece)
    return name


def offsets_for(piece: str) -> tuple[Offset, ...]:
    return MOVE_INDEX[canonical_piece(piece)]
