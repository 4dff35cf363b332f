"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum

from fency.core.errors import InvalidColorChar, InvalidPieceChar


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def next(self) -> Color:
        """The side that moves after this one."""
        return self.opposite

    def factor(self) -> int:
        """Pawn advance direction: +1 toward rank 8, -1 toward rank 1."""
        return 1 if self == Color.WHITE else -1

    @property
    def is_white(self) -> bool:
        return self == Color.WHITE

    @property
    def is_black(self) -> bool:
        return self == Color.BLACK

    @property
    def char(self) -> str:
        """FEN side-to-move character."""
        return "w" if self == Color.WHITE else "b"

    @classmethod
    def from_char(cls, char: str) -> Color:
        if char == "w":
            return cls.WHITE
        if char == "b":
            return cls.BLACK
        raise InvalidColorChar(f"Invalid color character: {char!r}", char)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        """Upper-case notation letter."""
        return _LETTERS[self]

    def to_char(self, color: Color) -> str:
        """FEN letter: upper case for White, lower case for Black."""
        letter = _LETTERS[self]
        return letter if color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> PieceType:
        """Case-insensitive lookup over P, N, B, R, Q, K."""
        try:
            return _FROM_LETTER[char.upper()]
        except KeyError:
            raise InvalidPieceChar(f"Invalid piece character: {char!r}", char) from None


class CastleSide(Enum):
    """Which rook a castling move uses."""

    KINGSIDE = "O-O"
    QUEENSIDE = "O-O-O"


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_FROM_LETTER: dict[str, PieceType] = {v: k for k, v in _LETTERS.items()}
