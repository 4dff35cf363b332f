"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from fency.core import new_game

    pos = new_game()
    for san in ("e4", "e5", "Nf3"):
        pos.apply_move(san)
    print(pos.to_fen(), pos.uci)
"""

from fency.core.board import Board
from fency.core.castling import CastlingRights
from fency.core.enums import CastleSide, Color, PieceType
from fency.core.errors import (
    AmbiguousMover,
    BoardInvariantError,
    IllegalOwnColorCapture,
    InvalidCastlingLetter,
    InvalidColorChar,
    InvalidCoordinate,
    InvalidPieceChar,
    MalformedPositionString,
    MoveResolutionError,
    NoLegalMover,
    NotationError,
    UnparsableMoveToken,
)
from fency.core.move import Move
from fency.core.move_generator import MoveGenerator
from fency.core.notation import (
    STARTING_FEN,
    MoveDescriptor,
    parse_castling,
    parse_san,
    position_fields,
    position_from_fen,
    position_to_fen,
)
from fency.core.piece import Figure
from fency.core.position import Position, new_game
from fency.core.resolver import resolve_mover
from fency.core.settings import DEFAULT_SETTINGS, EngineSettings
from fency.core.types import (
    SQUARES,
    Square,
    parse_square,
    square_at,
    square_from_index,
)

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    # Types / helpers
    "SQUARES",
    "Square",
    "parse_square",
    "square_at",
    "square_from_index",
    # Domain objects
    "Board",
    "CastlingRights",
    "Figure",
    "Move",
    "MoveDescriptor",
    "MoveGenerator",
    "Position",
    "new_game",
    "resolve_mover",
    # Settings
    "DEFAULT_SETTINGS",
    "EngineSettings",
    # Notation
    "STARTING_FEN",
    "parse_castling",
    "parse_san",
    "position_fields",
    "position_from_fen",
    "position_to_fen",
    # Errors
    "AmbiguousMover",
    "BoardInvariantError",
    "IllegalOwnColorCapture",
    "InvalidCastlingLetter",
    "InvalidColorChar",
    "InvalidCoordinate",
    "InvalidPieceChar",
    "MalformedPositionString",
    "MoveResolutionError",
    "NoLegalMover",
    "NotationError",
    "UnparsableMoveToken",
]
