"""fency: replay SAN move lists into FEN position snapshots."""

from fency.core import (
    STARTING_FEN,
    EngineSettings,
    NotationError,
    Position,
    new_game,
    position_from_fen,
    position_to_fen,
)
from fency.game import GameReplay, PlyRecord, positions_from_moves

__all__ = [
    "STARTING_FEN",
    "EngineSettings",
    "GameReplay",
    "NotationError",
    "PlyRecord",
    "Position",
    "new_game",
    "position_from_fen",
    "position_to_fen",
    "positions_from_moves",
]
