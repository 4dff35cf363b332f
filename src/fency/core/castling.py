"""Castling availability flags."""

from __future__ import annotations

from dataclasses import dataclass, replace

from fency.core.enums import Color, PieceType
from fency.core.errors import InvalidCastlingLetter
from fency.core.piece import Figure
from fency.core.types import A1, A8, H1, H8

_FIELD_LETTERS = frozenset("KQkq-")


@dataclass(slots=True)
class CastlingRights:
    """Four independent castling flags; all available at game start."""

    white_kingside: bool = True
    white_queenside: bool = True
    black_kingside: bool = True
    black_queenside: bool = True

    def castle(self, color: Color) -> None:
        """Clear both rights of *color* after it castled."""
        if color == Color.WHITE:
            self.white_kingside = False
            self.white_queenside = False
        else:
            self.black_kingside = False
            self.black_queenside = False

    def update(self, figure: Figure) -> None:
        """Account for *figure* leaving its square in a non-castling move."""
        if figure.kind == PieceType.KING:
            self.castle(figure.color)
        elif figure.kind == PieceType.ROOK:
            sq = figure.square
            if figure.color == Color.WHITE:
                if sq == A1:
                    self.white_queenside = False
                elif sq == H1:
                    self.white_kingside = False
            elif sq == A8:
                self.black_queenside = False
            elif sq == H8:
                self.black_kingside = False

    def has(self, color: Color, kingside: bool) -> bool:
        if color == Color.WHITE:
            return self.white_kingside if kingside else self.white_queenside
        return self.black_kingside if kingside else self.black_queenside

    def any(self) -> bool:
        return (
            self.white_kingside
            or self.white_queenside
            or self.black_kingside
            or self.black_queenside
        )

    def copy(self) -> CastlingRights:
        return replace(self)

    # ── FEN field ────────────────────────────────────────────────────────

    def __str__(self) -> str:
        # Order matters: K, Q, k, q.
        text = ""
        if self.white_kingside:
            text += "K"
        if self.white_queenside:
            text += "Q"
        if self.black_kingside:
            text += "k"
        if self.black_queenside:
            text += "q"
        return text or "-"

    @classmethod
    def from_string(cls, text: str, strict: bool = False) -> CastlingRights:
        """Read a castling field by letter membership.

        Unknown characters are ignored unless *strict* is set.
        """
        if strict:
            for ch in text:
                if ch not in _FIELD_LETTERS:
                    raise InvalidCastlingLetter(
                        f"Invalid castling letter {ch!r} in {text!r}", text
                    )
        return cls(
            white_kingside="K" in text,
            white_queenside="Q" in text,
            black_kingside="k" in text,
            black_queenside="q" in text,
        )

    @classmethod
    def none(cls) -> CastlingRights:
        return cls(False, False, False, False)
