"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from fency.core.notation import STARTING_FEN, position_from_fen
from fency.core.position import Position
from fency.core.settings import EngineSettings


@pytest.fixture
def start_position() -> Position:
    """Fresh standard starting position."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def play() -> Callable[..., Position]:
    """Build a position from FEN (default: start) and apply SAN tokens to it."""

    def _play(
        *sans: str,
        fen: str = STARTING_FEN,
        settings: EngineSettings | None = None,
    ) -> Position:
        pos = position_from_fen(fen, settings)
        for san in sans:
            pos.apply_move(san)
        return pos

    return _play


@pytest.fixture
def strict() -> EngineSettings:
    return EngineSettings(strict_legality=True, strict_castling_field=True)
