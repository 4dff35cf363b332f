"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from fency.core.enums import Color, PieceType
from fency.core.types import Square

NULL_MOVE_UCI = "0000"


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable record of an applied move: source, target, promotion."""

    source: Square
    target: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.source}{self.target}"
        if self.promotion is not None:
            # UCI is always lower case.
            base += self.promotion.to_char(Color.BLACK)
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)
