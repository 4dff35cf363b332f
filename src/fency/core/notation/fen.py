"""FEN parsing and serialization."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fency.core.board import Board
from fency.core.castling import CastlingRights
from fency.core.enums import Color
from fency.core.errors import InvalidPieceChar, MalformedPositionString
from fency.core.piece import Figure
from fency.core.settings import DEFAULT_SETTINGS, EngineSettings
from fency.core.types import SQUARES, Square, parse_square

if TYPE_CHECKING:
    from fency.core.position import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

FIELD_NAMES: tuple[str, ...] = (
    "FEN",
    "Color",
    "Castling",
    "EnPassant",
    "HalfMoveClock",
    "FullMoveClock",
)


def _malformed(message: str, fen: str, field: str) -> MalformedPositionString:
    return MalformedPositionString(f"{message}: {fen!r}", fen, field)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise _malformed("Invalid FEN board (must contain 8 ranks)", fen, "placement")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= 8):
                    raise _malformed(f"Invalid FEN digit {ch!r}", fen, "placement")
                col += step
            else:
                if col >= 8:
                    raise _malformed("Invalid FEN rank width", fen, "placement")
                try:
                    board.place(Figure.from_char(ch, SQUARES[row * 8 + col]))
                except InvalidPieceChar:
                    raise _malformed(
                        f"Invalid FEN piece {ch!r}", fen, "placement"
                    ) from None
                col += 1
            if col > 8:
                raise _malformed("Invalid FEN rank width", fen, "placement")
        if col != 8:
            raise _malformed("Invalid FEN rank width", fen, "placement")
    return board


def _parse_clock(text: str, fen: str, field: str, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise _malformed(f"Invalid FEN {field} {text!r}", fen, field) from None
    if value < minimum:
        raise _malformed(f"Invalid FEN {field} {text!r}", fen, field)
    return value


def position_from_fen(fen: str, settings: EngineSettings | None = None) -> Position:
    """Parse a FEN string into a :class:`Position`."""
    from fency.core.position import Position

    settings = settings or DEFAULT_SETTINGS
    parts = fen.split()
    if len(parts) != 6:
        raise _malformed("Invalid FEN (need 6 fields)", fen, "fields")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    # 1. Piece placement
    board = _parse_placement(placement, fen)

    # 2. Side to move
    side = Color.from_char(side_part)

    # 3. Castling
    castling = CastlingRights.from_string(
        castling_part, strict=settings.strict_castling_field
    )

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_rank = "6" if side == Color.WHITE else "3"
        if ep.rank != expected_rank:
            raise _malformed(
                f"Invalid FEN en-passant square for side-to-move {ep_part!r}",
                fen,
                "en_passant",
            )

    # 5–6. Clocks
    halfmove = _parse_clock(half_part, fen, "halfmove clock", 0)
    fullmove = _parse_clock(full_part, fen, "fullmove number", 1)

    return Position(
        board,
        side,
        castling,
        ep,
        halfmove,
        fullmove,
        settings=settings,
    )


def placement_to_fen(board: Board) -> str:
    """Render the piece-placement field."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        text = ""
        for col in range(8):
            figure = board.at_index(row * 8 + col)
            if figure is None:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += figure.char
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)


def position_fields(pos: Position) -> dict[str, str]:
    """The six FEN fields keyed by name."""
    values = (
        placement_to_fen(pos.board),
        pos.side_to_move.char,
        str(pos.castling),
        str(pos.en_passant) if pos.en_passant is not None else "-",
        str(pos.halfmove_clock),
        str(pos.fullmove_number),
    )
    return dict(zip(FIELD_NAMES, values))


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    return " ".join(position_fields(pos).values())
