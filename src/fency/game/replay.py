"""Game replay: turns a SAN move list into one position string per ply."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from fency.core.errors import NotationError
from fency.core.notation.fen import STARTING_FEN, position_from_fen
from fency.core.position import Position
from fency.core.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlyRecord:
    """A single entry in the replay history."""

    ply: int
    san: str
    uci: str
    fen_after: str


@dataclass
class GameReplay:
    """Owns one :class:`Position` and feeds it SAN tokens one at a time.

    A rejected token raises; the records produced before it stay available.
    """

    start_fen: str = STARTING_FEN
    settings: EngineSettings | None = None
    position: Position = field(init=False)
    records: list[PlyRecord] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.position = position_from_fen(self.start_fen, self.settings)

    # ── Move application ─────────────────────────────────────────────────

    def push(self, san: str) -> PlyRecord:
        """Apply *san* and return the history record."""
        ply = len(self.records) + 1
        try:
            move = self.position.apply_move(san)
        except NotationError:
            _LOGGER.warning("Rejected move %r at ply %d", san, ply)
            raise

        record = PlyRecord(
            ply=ply,
            san=san,
            uci=move.uci,
            fen_after=self.position.to_fen(),
        )
        self.records.append(record)
        return record

    def extend(self, sans: Iterable[str]) -> list[PlyRecord]:
        return [self.push(san) for san in sans]

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def fens(self) -> list[str]:
        return [r.fen_after for r in self.records]

    @property
    def ucis(self) -> list[str]:
        return [r.uci for r in self.records]

    @property
    def ply_count(self) -> int:
        return len(self.records)


def positions_from_moves(
    sans: Iterable[str],
    *,
    start_fen: str | None = None,
    settings: EngineSettings | None = None,
) -> list[str]:
    """FEN after each SAN token of one game."""
    replay = GameReplay(start_fen or STARTING_FEN, settings)
    replay.extend(sans)
    return replay.fens
