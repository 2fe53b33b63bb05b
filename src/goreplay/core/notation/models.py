"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from goreplay.core.move import Move
from goreplay.core.types import MAX_BOARD_SIZE


@dataclass(frozen=True, slots=True)
class GameRecord:
    """Parsed game record: root properties plus the flattened move list."""

    properties: dict[str, list[str]] = field(default_factory=dict)
    moves: tuple[Move, ...] = ()

    @property
    def move_count(self) -> int:
        return len(self.moves)

    def get_property(self, key: str) -> str | None:
        """First value stored for *key*, or ``None``."""
        values = self.properties.get(key)
        if not values:
            return None
        return values[0]

    def board_size(self, default: int = 19) -> int:
        """Board side length from ``SZ``, or *default* if missing or unusable."""
        raw = self.get_property("SZ")
        if raw is None:
            return default
        digits = raw.strip()
        if not (digits.isascii() and digits.isdigit()):
            return default
        size = int(digits)
        return size if 1 <= size <= MAX_BOARD_SIZE else default
