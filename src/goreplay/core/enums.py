"""Core enumerations for the Go domain."""

from __future__ import annotations

from enum import IntEnum


class Stone(IntEnum):
    """Stone color."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Stone:
        return Stone(1 - self.value)

    @property
    def label(self) -> str:
        """Capitalised name, e.g. ``"Black"``."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()
