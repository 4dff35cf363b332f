"""Board - figure placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from fency.core.enums import Color, PieceType
from fency.core.errors import BoardInvariantError
from fency.core.piece import Figure
from fency.core.types import SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-slot board with a redundant set of present figures.

    A figure is in the set iff it occupies its square in the slot array.
    :meth:`place` and :meth:`remove` are the only mutators and keep both
    views in step.
    """

    __slots__ = ("_squares", "_figures")

    def __init__(self) -> None:
        self._squares: list[Figure | None] = [None] * 64
        self._figures: set[Figure] = set()

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Figure | None:
        return self._squares[sq.idx]

    def at_index(self, idx: int) -> Figure | None:
        return self._squares[idx]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.idx] is None

    def __contains__(self, figure: object) -> bool:
        return figure in self._figures

    def __iter__(self) -> Iterator[Figure]:
        return iter(self._figures)

    def __len__(self) -> int:
        return len(self._figures)

    # -- Mutation -----------------------------------------------------------

    def place(self, figure: Figure) -> None:
        idx = figure.square.idx
        occupant = self._squares[idx]
        if occupant is not None:
            raise BoardInvariantError(f"Cannot place {figure}: {occupant} is there")
        self._squares[idx] = figure
        self._figures.add(figure)

    def remove(self, figure: Figure) -> None:
        idx = figure.square.idx
        if self._squares[idx] != figure:
            raise BoardInvariantError(f"Cannot remove {figure}: not on the board")
        self._squares[idx] = None
        self._figures.discard(figure)

    def relocate(self, figure: Figure, target: Square) -> Figure:
        """Move *figure* to an empty *target*; returns the moved figure."""
        moved = figure.move_to(target)
        self.remove(figure)
        self.place(moved)
        return moved

    # -- Query helpers ------------------------------------------------------

    def figures(
        self,
        color: Color | None = None,
        kind: PieceType | None = None,
    ) -> list[Figure]:
        """Present figures, optionally filtered, in board order."""
        return [
            f
            for f in self._squares
            if f is not None
            and (color is None or f.color == color)
            and (kind is None or f.kind == kind)
        ]

    def king(self, color: Color) -> Figure:
        """Return the single king of *color*."""
        for f in self._figures:
            if f.kind == PieceType.KING and f.color == color:
                return f
        raise ValueError(f"No {color.name} king on board")

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._figures = self._figures.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for x, kind in enumerate(_BACK_RANK):
            b.place(Figure(Color.BLACK, SQUARES[x], kind))
            b.place(Figure(Color.BLACK, SQUARES[8 + x], PieceType.PAWN))
            b.place(Figure(Color.WHITE, SQUARES[48 + x], PieceType.PAWN))
            b.place(Figure(Color.WHITE, SQUARES[56 + x], kind))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = []
            for f in self._squares[row * 8 : row * 8 + 8]:
                cells.append(f.char if f else ".")
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
