"""Destination sets per figure + attack detection.

Only what SAN disambiguation needs: the squares a given figure could move or
capture to. There is no full legal-move enumeration here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fency.core.enums import Color, PieceType
from fency.core.piece import Figure
from fency.core.types import SQUARES, Square, is_valid_index

if TYPE_CHECKING:
    from fency.core.board import Board


# Index deltas in the a8=0 layout: -8 is one rank up, +1 one file right.
KNIGHT_DELTAS: tuple[int, ...] = (-17, -15, -10, -6, 6, 10, 15, 17)
KING_DELTAS: tuple[int, ...] = (-9, -8, -7, -1, 1, 7, 8, 9)

# Each diagonal delta stays on one of the two diagonal keys of its origin.
BISHOP_RAYS: tuple[tuple[int, str], ...] = (
    (-9, "anti_diagonal"),
    (9, "anti_diagonal"),
    (-7, "main_diagonal"),
    (7, "main_diagonal"),
)
ROOK_RAYS: tuple[tuple[int, str], ...] = (
    (-8, "x"),
    (8, "x"),
    (-1, "y"),
    (1, "y"),
)

LINE_PIECES: frozenset[PieceType] = frozenset(
    (PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN)
)


class MoveGenerator:
    """Computes reachable squares on a board.

    *en_passant* is the current en-passant target; pawns may capture onto it.
    """

    __slots__ = ("_board", "_en_passant")

    def __init__(self, board: Board, en_passant: Square | None = None) -> None:
        self._board = board
        self._en_passant = en_passant

    # ── Public API ───────────────────────────────────────────────────────

    def destinations(self, figure: Figure) -> list[Square]:
        """Squares *figure* can reach with a non-capturing token."""
        kind = figure.kind
        if kind == PieceType.PAWN:
            return self._pawn_pushes(figure)
        if kind == PieceType.KNIGHT:
            return self._steps(figure, KNIGHT_DELTAS, max_file_distance=2)
        if kind == PieceType.BISHOP:
            return self._rays(figure, BISHOP_RAYS)
        if kind == PieceType.ROOK:
            return self._rays(figure, ROOK_RAYS)
        if kind == PieceType.QUEEN:
            return self._rays(figure, BISHOP_RAYS) + self._rays(figure, ROOK_RAYS)
        return self._steps(figure, KING_DELTAS, max_file_distance=1)

    def captures(self, figure: Figure) -> list[Square]:
        """Squares *figure* can reach with a capturing token."""
        if figure.kind == PieceType.PAWN:
            return self._pawn_captures(figure)
        return self.destinations(figure)

    def is_line_attacked(self, square: Square, by_color: Color) -> bool:
        """Whether a rook, bishop or queen of *by_color* hits *square*."""
        return any(
            square in self.destinations(f)
            for f in self._board.figures(color=by_color)
            if f.kind in LINE_PIECES
        )

    def is_attacked(self, square: Square, by_color: Color) -> bool:
        """Whether any figure of *by_color* hits *square*."""
        for f in self._board.figures(color=by_color):
            if f.kind == PieceType.PAWN:
                if square in self._pawn_attack_squares(f):
                    return True
            elif square in self.destinations(f):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        king = self._board.king(color)
        return self.is_attacked(king.square, color.opposite)

    # ── Pawns ────────────────────────────────────────────────────────────

    def _pawn_pushes(self, figure: Figure) -> list[Square]:
        squares: list[Square] = []
        sq = figure.square
        step = -8 * figure.color.factor()

        one = sq.idx + step
        if not is_valid_index(one) or self._board.at_index(one) is not None:
            return squares
        squares.append(SQUARES[one])

        start_y = 1 if figure.color == Color.WHITE else 6
        two = one + step
        if sq.y == start_y and self._board.at_index(two) is None:
            squares.append(SQUARES[two])
        return squares

    def _pawn_attack_squares(self, figure: Figure) -> list[Square]:
        sq = figure.square
        forward = -8 * figure.color.factor()
        squares: list[Square] = []
        for side in (-1, 1):
            idx = sq.idx + forward + side
            if is_valid_index(idx) and abs(SQUARES[idx].x - sq.x) == 1:
                squares.append(SQUARES[idx])
        return squares

    def _pawn_captures(self, figure: Figure) -> list[Square]:
        squares: list[Square] = []
        for target in self._pawn_attack_squares(figure):
            occupant = self._board[target]
            if occupant is not None:
                if occupant.color != figure.color:
                    squares.append(target)
            elif target == self._en_passant:
                squares.append(target)
        return squares

    # ── Leapers ──────────────────────────────────────────────────────────

    def _steps(
        self,
        figure: Figure,
        deltas: tuple[int, ...],
        max_file_distance: int,
    ) -> list[Square]:
        sq = figure.square
        squares: list[Square] = []
        for delta in deltas:
            idx = sq.idx + delta
            if not is_valid_index(idx):
                continue
            target = SQUARES[idx]
            if abs(target.x - sq.x) > max_file_distance:
                continue
            occupant = self._board.at_index(idx)
            if occupant is None or occupant.color != figure.color:
                squares.append(target)
        return squares

    # ── Sliders ──────────────────────────────────────────────────────────

    def _rays(
        self,
        figure: Figure,
        rays: tuple[tuple[int, str], ...],
    ) -> list[Square]:
        sq = figure.square
        squares: list[Square] = []
        for delta, key in rays:
            origin_key = getattr(sq, key)
            idx = sq.idx + delta
            while is_valid_index(idx) and getattr(SQUARES[idx], key) == origin_key:
                occupant = self._board.at_index(idx)
                if occupant is None:
                    squares.append(SQUARES[idx])
                else:
                    if occupant.color != figure.color:
                        squares.append(SQUARES[idx])
                    break
                idx += delta
        return squares
