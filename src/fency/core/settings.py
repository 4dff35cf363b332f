"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Knobs that change how strictly input is checked."""

    # Run every disambiguation stage even for a lone candidate, test king
    # safety against all enemy pieces, and validate castling.
    strict_legality: bool = False

    # Reject unknown letters in the FEN castling field instead of ignoring them.
    strict_castling_field: bool = False

    def with_overrides(self, **changes: Any) -> EngineSettings:
        return replace(self, **changes)


DEFAULT_SETTINGS = EngineSettings()
