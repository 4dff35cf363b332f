"""Figure value object: one piece standing on one square."""

from __future__ import annotations

from dataclasses import dataclass

from fency.core.enums import Color, PieceType
from fency.core.errors import InvalidPieceChar
from fency.core.types import Square, parse_square


@dataclass(frozen=True, slots=True)
class Figure:
    """Immutable (owner, square, kind) triple."""

    color: Color
    square: Square
    kind: PieceType

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return self.kind.to_char(self.color)

    def __str__(self) -> str:
        """Compact form, e.g. 'Nc3' or 'pe7'."""
        return f"{self.char}{self.square}"

    @classmethod
    def from_char(cls, char: str, square: Square) -> Figure:
        """Create a figure from a FEN letter; the letter's case picks the color."""
        if len(char) != 1 or not char.isalpha():
            raise InvalidPieceChar(f"Invalid piece character: {char!r}", char)
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, square, PieceType.from_char(char))

    @classmethod
    def from_string(cls, text: str) -> Figure:
        """Parse the compact form, e.g. 'Ba3' → white bishop on a3."""
        if len(text) != 3:
            raise InvalidPieceChar(f"Invalid figure string: {text!r}", text)
        return cls.from_char(text[0], parse_square(text[1:]))

    # ── Movement ─────────────────────────────────────────────────────────

    def move_to(self, target: Square) -> Figure:
        """Same owner and kind on *target*; the board is not touched."""
        return Figure(self.color, target, self.kind)
