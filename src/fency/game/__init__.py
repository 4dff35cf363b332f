"""Game layer: replaying a move list into position snapshots.

Quick start::

    from fency.game import positions_from_moves

    fens = positions_from_moves(["e4", "c5", "Nf3"])
"""

from fency.game.replay import GameReplay, PlyRecord, positions_from_moves

__all__ = [
    "GameReplay",
    "PlyRecord",
    "positions_from_moves",
]
