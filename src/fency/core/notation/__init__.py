"""Notation package: FEN / SAN parsing and serialization."""

from fency.core.notation.fen import (
    STARTING_FEN,
    position_fields,
    position_from_fen,
    position_to_fen,
)
from fency.core.notation.san import MoveDescriptor, parse_castling, parse_san

__all__ = [
    "STARTING_FEN",
    "MoveDescriptor",
    "position_fields",
    "position_from_fen",
    "position_to_fen",
    "parse_castling",
    "parse_san",
]
