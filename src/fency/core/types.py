"""Square value type and coordinate helpers.

Board layout (FEN reading order):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63

Besides file/rank each square carries its two diagonal keys, so ray walks can
test diagonal membership without recomputing deltas.
"""

from __future__ import annotations

from dataclasses import dataclass

from fency.core.errors import InvalidCoordinate

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board coordinate."""

    file: str
    rank: str
    x: int
    y: int
    idx: int
    anti_diagonal: int
    main_diagonal: int

    def __str__(self) -> str:
        return self.file + self.rank

    @property
    def name(self) -> str:
        """Algebraic name, e.g. 'e4'."""
        return str(self)


def _make(x: int, y: int) -> Square:
    return Square(
        file=FILES[x],
        rank=RANKS[y],
        x=x,
        y=y,
        idx=x + 8 * (7 - y),
        anti_diagonal=x + y,
        main_diagonal=7 + y - x,
    )


# Built once; every Square handed out by this module is an entry of this table.
SQUARES: tuple[Square, ...] = tuple(_make(i % 8, 7 - i // 8) for i in range(64))


def is_valid_index(idx: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= idx < 64


def square_from_index(idx: int) -> Square:
    """Square for a linear index, e.g. 0 → a8, 63 → h1."""
    if not is_valid_index(idx):
        raise InvalidCoordinate(f"Invalid square index: {idx!r}", str(idx))
    return SQUARES[idx]


def square_at(x: int, y: int) -> Square:
    """Square from zero-based file and rank numbers."""
    if not (0 <= x < 8 and 0 <= y < 8):
        raise InvalidCoordinate(f"Invalid square coordinates: ({x}, {y})", f"{x},{y}")
    return SQUARES[x + 8 * (7 - y)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4'."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
        raise InvalidCoordinate(f"Invalid square name: {name!r}", name)
    return square_at(FILES.index(name[0]), RANKS.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = SQUARES[0:8]
A7, B7, C7, D7, E7, F7, G7, H7 = SQUARES[8:16]
A6, B6, C6, D6, E6, F6, G6, H6 = SQUARES[16:24]
A5, B5, C5, D5, E5, F5, G5, H5 = SQUARES[24:32]
A4, B4, C4, D4, E4, F4, G4, H4 = SQUARES[32:40]
A3, B3, C3, D3, E3, F3, G3, H3 = SQUARES[40:48]
A2, B2, C2, D2, E2, F2, G2, H2 = SQUARES[48:56]
A1, B1, C1, D1, E1, F1, G1, H1 = SQUARES[56:64]
