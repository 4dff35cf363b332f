"""Typed failures raised by the notation and board-state layers.

Every input error derives from :class:`NotationError`, itself a
:class:`ValueError`, and keeps the offending text on ``.text``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fency.core.piece import Figure


class NotationError(ValueError):
    """Base class for every malformed-input failure."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class InvalidCoordinate(NotationError):
    """Square name or index outside the 8x8 board."""


class InvalidColorChar(NotationError):
    """Side-to-move character other than ``w`` / ``b``."""


class InvalidPieceChar(NotationError):
    """Letter that names no piece kind."""


class InvalidCastlingLetter(NotationError):
    """Unexpected character in a castling-rights field (strict mode only)."""


class MalformedPositionString(NotationError):
    """Position string with a broken field."""

    def __init__(self, message: str, text: str = "", field: str = "") -> None:
        super().__init__(message, text)
        self.field = field


class UnparsableMoveToken(NotationError):
    """SAN token that does not follow the move grammar."""


class MoveResolutionError(NotationError):
    """A well-formed token that does not map onto exactly one legal mover."""

    def __init__(
        self,
        message: str,
        token: str,
        candidates: Iterable[Figure] = (),
    ) -> None:
        super().__init__(message, token)
        self.token = token
        self.candidates: tuple[Figure, ...] = tuple(sorted(candidates, key=str))


class NoLegalMover(MoveResolutionError):
    """No figure of the side to move can play the token."""


class AmbiguousMover(MoveResolutionError):
    """More than one figure can play the token."""


class IllegalOwnColorCapture(MoveResolutionError):
    """The resolved move would land on a figure of the mover's own color."""


class BoardInvariantError(RuntimeError):
    """Occupancy array and figure set would disagree."""
