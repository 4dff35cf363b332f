"""Position: complete game state (board + metadata) with SAN move application."""

from __future__ import annotations

import logging

from fency.core.board import Board
from fency.core.castling import CastlingRights
from fency.core.enums import CastleSide, Color, PieceType
from fency.core.errors import IllegalOwnColorCapture, NoLegalMover
from fency.core.move import NULL_MOVE_UCI, Move
from fency.core.move_generator import MoveGenerator
from fency.core.notation.fen import position_to_fen
from fency.core.notation.san import MoveDescriptor, parse_castling, parse_san
from fency.core.piece import Figure
from fency.core.resolver import captured_figure, resolve_mover
from fency.core.settings import DEFAULT_SETTINGS, EngineSettings
from fency.core.types import (
    A1,
    A8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
    square_at,
)

_LOGGER = logging.getLogger(__name__)

# (king from, king to, rook from, rook to) per side and castling wing.
_CASTLING_SQUARES: dict[tuple[Color, CastleSide], tuple[Square, Square, Square, Square]] = {
    (Color.WHITE, CastleSide.KINGSIDE): (E1, G1, H1, F1),
    (Color.WHITE, CastleSide.QUEENSIDE): (E1, C1, A1, D1),
    (Color.BLACK, CastleSide.KINGSIDE): (E8, G8, H8, F8),
    (Color.BLACK, CastleSide.QUEENSIDE): (E8, C8, A8, D8),
}


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    :meth:`apply_move` takes one SAN token, works out which figure it refers
    to and updates the state in place. Every check happens before the first
    mutation, so a rejected token leaves the position untouched.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
        "last_move",
        "settings",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
        *,
        last_move: Move | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling if castling is not None else CastlingRights()
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number
        self.last_move = last_move
        self.settings = settings or DEFAULT_SETTINGS

    @classmethod
    def from_fen(cls, fen: str, settings: EngineSettings | None = None) -> Position:
        from fency.core.notation.fen import position_from_fen

        return position_from_fen(fen, settings)

    def to_fen(self) -> str:
        return position_to_fen(self)

    @property
    def uci(self) -> str:
        """UCI text of the last applied move, ``0000`` if none."""
        return self.last_move.uci if self.last_move is not None else NULL_MOVE_UCI

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, token: str) -> Move:
        """Apply one SAN token and return the move that was played."""
        side = parse_castling(token)
        if side is not None:
            move = self._castle(token, side)
        else:
            move = self._play(parse_san(token))
        _LOGGER.debug("%s -> %s", token, move)
        return move

    def _play(self, descriptor: MoveDescriptor) -> Move:
        mover = resolve_mover(self, descriptor)
        target = descriptor.target

        occupant = self.board[target]
        if occupant is not None and occupant.color == mover.color:
            raise IllegalOwnColorCapture(
                f"{descriptor.token!r} would capture own {occupant}",
                descriptor.token,
                (mover,),
            )
        victim = captured_figure(self, mover, target)
        if descriptor.is_capture and victim is None:
            raise NoLegalMover(
                f"{descriptor.token!r}: nothing to capture on {target}",
                descriptor.token,
                (mover,),
            )
        last_rank = 7 if mover.color == Color.WHITE else 0
        reaches_last_rank = mover.kind == PieceType.PAWN and target.y == last_rank
        if reaches_last_rank != descriptor.is_promotion:
            raise NoLegalMover(
                f"{descriptor.token!r}: promotion does not match a pawn on {target}",
                descriptor.token,
                (mover,),
            )

        # From here on nothing may fail.
        self.board.remove(mover)
        if victim is not None:
            self.board.remove(victim)
        if descriptor.promotion is not None:
            self.board.place(Figure(mover.color, target, descriptor.promotion))
        else:
            self.board.place(mover.move_to(target))

        self.en_passant = self._en_passant_after(mover, target)
        self.castling.update(mover)
        if mover.kind == PieceType.PAWN or victim is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1
        self._end_turn()

        self.last_move = Move(mover.square, target, descriptor.promotion)
        return self.last_move

    def _en_passant_after(self, mover: Figure, target: Square) -> Square | None:
        """Skipped square of a double step that an enemy pawn can take."""
        if mover.kind != PieceType.PAWN or abs(mover.square.y - target.y) != 2:
            return None
        enemy = mover.color.opposite
        for dx in (-1, 1):
            x = target.x + dx
            if not 0 <= x < 8:
                continue
            neighbour = self.board[square_at(x, target.y)]
            if (
                neighbour is not None
                and neighbour.kind == PieceType.PAWN
                and neighbour.color == enemy
            ):
                return square_at(target.x, (mover.square.y + target.y) // 2)
        return None

    def _castle(self, token: str, side: CastleSide) -> Move:
        color = self.side_to_move
        king_from, king_to, rook_from, rook_to = _CASTLING_SQUARES[(color, side)]
        king = self.board[king_from]
        rook = self.board[rook_from]
        if (
            king is None
            or king.kind != PieceType.KING
            or king.color != color
            or rook is None
            or rook.kind != PieceType.ROOK
            or rook.color != color
        ):
            raise NoLegalMover(
                f"{token!r}: {color} king and rook are not on {king_from}/{rook_from}",
                token,
            )
        for sq in (king_to, rook_to):
            occupant = self.board[sq]
            if occupant is not None and occupant not in (king, rook):
                raise NoLegalMover(f"{token!r}: {sq} is occupied by {occupant}", token)
        if self.settings.strict_legality:
            self._check_castling_allowed(token, side, king_from, king_to, rook_from)

        self.board.remove(king)
        self.board.remove(rook)
        self.board.place(king.move_to(king_to))
        self.board.place(rook.move_to(rook_to))

        self.castling.castle(color)
        self.en_passant = None
        self.halfmove_clock += 1
        self._end_turn()

        self.last_move = Move(king_from, king_to)
        return self.last_move

    def _check_castling_allowed(
        self,
        token: str,
        side: CastleSide,
        king_from: Square,
        king_to: Square,
        rook_from: Square,
    ) -> None:
        color = self.side_to_move
        if not self.castling.has(color, kingside=side == CastleSide.KINGSIDE):
            raise NoLegalMover(f"{token!r}: {color} has no castling right", token)

        y = king_from.y
        low, high = sorted((king_from.x, rook_from.x))
        for x in range(low + 1, high):
            if not self.board.is_empty(square_at(x, y)):
                raise NoLegalMover(f"{token!r}: path between king and rook is blocked", token)

        gen = MoveGenerator(self.board, self.en_passant)
        step = 1 if king_to.x > king_from.x else -1
        for x in range(king_from.x, king_to.x + step, step):
            if gen.is_attacked(square_at(x, y), color.opposite):
                raise NoLegalMover(f"{token!r}: king passes an attacked square", token)

    def _end_turn(self) -> None:
        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent deep copy."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling.copy(),
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            last_move=self.last_move,
            settings=self.settings,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
            and self.last_move == other.last_move
        )

    def __repr__(self) -> str:
        return f"Position({self.to_fen()!r})"


def new_game(settings: EngineSettings | None = None) -> Position:
    """Standard starting position."""
    return Position(settings=settings)
