"""SAN (Standard Algebraic Notation) token parsing.

Grammar of a non-castling token::

    [KQRBN]? [a-h]? [1-8]? x? [a-h][1-8] (=?[QRBN])? [+#]? [!?]*

The lexer walks the token from the right, consuming one part at a time. Every
flag on :class:`MoveDescriptor` comes from exactly the part that was consumed;
anything left over makes the token unparsable.
"""

from __future__ import annotations

from dataclasses import dataclass

from fency.core.enums import CastleSide, PieceType
from fency.core.errors import UnparsableMoveToken
from fency.core.types import FILES, RANKS, Square, parse_square

_PIECE_LETTERS: dict[str, PieceType] = {
    "N": PieceType.KNIGHT,
    "B": PieceType.BISHOP,
    "R": PieceType.ROOK,
    "Q": PieceType.QUEEN,
    "K": PieceType.KING,
}
_PROMOTION_LETTERS: dict[str, PieceType] = {
    k: v for k, v in _PIECE_LETTERS.items() if v != PieceType.KING
}
_ANNOTATION_CHARS = "!?"

_CASTLING_TOKENS: dict[str, CastleSide] = {
    "O-O": CastleSide.KINGSIDE,
    "0-0": CastleSide.KINGSIDE,
    "O-O-O": CastleSide.QUEENSIDE,
    "0-0-0": CastleSide.QUEENSIDE,
}


@dataclass(frozen=True, slots=True)
class MoveDescriptor:
    """Decomposed non-castling SAN token."""

    token: str
    target: Square
    piece: PieceType = PieceType.PAWN
    from_file: str | None = None
    from_rank: str | None = None
    is_capture: bool = False
    is_check: bool = False
    is_checkmate: bool = False
    promotion: PieceType | None = None

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    @property
    def has_disambiguator(self) -> bool:
        return self.from_file is not None or self.from_rank is not None

    def matches_origin(self, square: Square) -> bool:
        """Whether *square* agrees with the disambiguating file/rank."""
        if self.from_file is not None and square.file != self.from_file:
            return False
        if self.from_rank is not None and square.rank != self.from_rank:
            return False
        return True


def _strip_suffixes(token: str) -> tuple[str, bool, bool]:
    """Drop annotation glyphs and the check marker; return (rest, check, mate)."""
    rest = token.rstrip(_ANNOTATION_CHARS)
    if rest.endswith("#"):
        return rest[:-1], True, True
    if rest.endswith("+"):
        return rest[:-1], True, False
    return rest, False, False


def parse_castling(token: str) -> CastleSide | None:
    """Castling side for ``O-O`` / ``O-O-O`` tokens, ``None`` otherwise."""
    rest, _, _ = _strip_suffixes(token.strip())
    return _CASTLING_TOKENS.get(rest)


def parse_san(token: str) -> MoveDescriptor:
    """Parse a non-castling SAN token into a :class:`MoveDescriptor`."""
    san = token.strip()

    def fail(reason: str) -> UnparsableMoveToken:
        return UnparsableMoveToken(f"Unparsable move token {token!r}: {reason}", token)

    if not san:
        raise fail("empty token")
    if parse_castling(san) is not None:
        raise fail("castling is not a piece move")

    rest, is_check, is_checkmate = _strip_suffixes(san)

    # Promotion: trailing piece letter, optionally preceded by '='.
    promotion: PieceType | None = None
    if rest and rest[-1] in _PROMOTION_LETTERS:
        promotion = _PROMOTION_LETTERS[rest[-1]]
        rest = rest[:-1]
        if rest.endswith("="):
            rest = rest[:-1]
    elif rest.endswith("="):
        raise fail("missing promotion piece")

    # Target square: always the last two characters left.
    if len(rest) < 2 or rest[-2] not in FILES or rest[-1] not in RANKS:
        raise fail("no target square")
    target = parse_square(rest[-2:])
    rest = rest[:-2]

    is_capture = rest.endswith("x")
    if is_capture:
        rest = rest[:-1]

    # Leading piece letter (absent for pawns).
    piece = PieceType.PAWN
    if rest and rest[0] in _PIECE_LETTERS:
        piece = _PIECE_LETTERS[rest[0]]
        rest = rest[1:]

    from_file: str | None = None
    from_rank: str | None = None
    if rest and rest[0] in FILES:
        from_file = rest[0]
        rest = rest[1:]
    if rest and rest[0] in RANKS:
        from_rank = rest[0]
        rest = rest[1:]
    if rest:
        raise fail(f"unexpected {rest!r}")

    if promotion is not None and piece != PieceType.PAWN:
        raise fail("only pawns promote")

    return MoveDescriptor(
        token=token,
        target=target,
        piece=piece,
        from_file=from_file,
        from_rank=from_rank,
        is_capture=is_capture,
        is_check=is_check,
        is_checkmate=is_checkmate,
        promotion=promotion,
    )
