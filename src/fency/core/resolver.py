"""Resolve which figure a SAN token refers to.

The cascade narrows the candidates in four stages and stops as soon as a
single figure is left:

1. side to move + piece kind
2. disambiguating file / rank
3. reachability of the target square
4. own-king safety, tested on a scratch copy of the board

Strict mode runs every stage regardless of how many candidates remain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from fency.core.enums import Color, PieceType
from fency.core.errors import AmbiguousMover, NoLegalMover
from fency.core.move_generator import MoveGenerator
from fency.core.notation.san import MoveDescriptor
from fency.core.piece import Figure
from fency.core.types import Square, square_at

if TYPE_CHECKING:
    from fency.core.board import Board
    from fency.core.position import Position

_LOGGER = logging.getLogger(__name__)

_Stage = Callable[["Position", MoveDescriptor, list[Figure]], list[Figure]]


def en_passant_victim(position: Position, mover: Figure, target: Square) -> Figure | None:
    """The pawn taken en passant if *mover* steps onto the en-passant square."""
    if (
        mover.kind != PieceType.PAWN
        or position.en_passant is None
        or target != position.en_passant
        or target.x == mover.square.x
    ):
        return None
    victim = position.board[square_at(target.x, mover.square.y)]
    if (
        victim is not None
        and victim.kind == PieceType.PAWN
        and victim.color != mover.color
    ):
        return victim
    return None


def captured_figure(position: Position, mover: Figure, target: Square) -> Figure | None:
    """Enemy figure removed when *mover* goes to *target*, if any."""
    occupant = position.board[target]
    if occupant is not None:
        return occupant if occupant.color != mover.color else None
    return en_passant_victim(position, mover, target)


# ── Stages ───────────────────────────────────────────────────────────────────


def _by_kind(
    position: Position, descriptor: MoveDescriptor, figures: list[Figure]
) -> list[Figure]:
    return position.board.figures(color=position.side_to_move, kind=descriptor.piece)


def _by_disambiguator(
    position: Position, descriptor: MoveDescriptor, figures: list[Figure]
) -> list[Figure]:
    if not descriptor.has_disambiguator:
        return figures
    return [f for f in figures if descriptor.matches_origin(f.square)]


def _by_reachability(
    position: Position, descriptor: MoveDescriptor, figures: list[Figure]
) -> list[Figure]:
    gen = MoveGenerator(position.board, position.en_passant)
    reach = gen.captures if descriptor.is_capture else gen.destinations
    return [f for f in figures if descriptor.target in reach(f)]


def _by_king_safety(
    position: Position, descriptor: MoveDescriptor, figures: list[Figure]
) -> list[Figure]:
    strict = position.settings.strict_legality
    return [
        f
        for f in figures
        if not leaves_king_attacked(position, f, descriptor.target, strict=strict)
    ]


_STAGES: tuple[tuple[str, _Stage], ...] = (
    ("kind", _by_kind),
    ("disambiguator", _by_disambiguator),
    ("reachability", _by_reachability),
    ("king safety", _by_king_safety),
)


# ── Public API ───────────────────────────────────────────────────────────────


def leaves_king_attacked(
    position: Position,
    mover: Figure,
    target: Square,
    *,
    strict: bool = False,
) -> bool:
    """Simulate *mover* → *target* on a scratch board and test the own king.

    By default only enemy rooks, bishops and queens count as attackers;
    *strict* counts every enemy figure.
    """
    scratch: Board = position.board.copy()
    victim = captured_figure(position, mover, target)
    if victim is not None:
        scratch.remove(victim)
    if scratch[target] is not None:
        # Own figure on the target; the move cannot be simulated.
        return True
    scratch.relocate(mover, target)

    enemy: Color = mover.color.opposite
    try:
        king_square = scratch.king(mover.color).square
    except ValueError:
        return False
    gen = MoveGenerator(scratch, None)
    if strict:
        return gen.is_attacked(king_square, enemy)
    return gen.is_line_attacked(king_square, enemy)


def resolve_mover(position: Position, descriptor: MoveDescriptor) -> Figure:
    """Return the unique figure that plays *descriptor*.

    Raises :class:`NoLegalMover` when a stage leaves no candidate and
    :class:`AmbiguousMover` when several survive every stage.
    """
    strict = position.settings.strict_legality
    candidates: list[Figure] = []
    for name, stage in _STAGES:
        if len(candidates) == 1 and not strict:
            break
        candidates = stage(position, descriptor, candidates)
        _LOGGER.debug(
            "%s: %d candidate(s) after %s stage", descriptor.token, len(candidates), name
        )
        if not candidates:
            _LOGGER.debug("%s: rejected at %s stage", descriptor.token, name)
            raise NoLegalMover(
                f"No {position.side_to_move} {descriptor.piece.name.lower()} "
                f"can play {descriptor.token!r}",
                descriptor.token,
            )

    if len(candidates) > 1:
        _LOGGER.debug("%s: ambiguous between %s", descriptor.token, candidates)
        raise AmbiguousMover(
            f"Ambiguous move {descriptor.token!r}: "
            + ", ".join(sorted(str(f) for f in candidates)),
            descriptor.token,
            candidates,
        )
    return candidates[0]
