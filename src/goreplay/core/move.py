"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from goreplay.core.enums import Stone
from goreplay.core.types import Point, point_label


@dataclass(frozen=True, slots=True)
class Move:
    """A single recorded move.

    ``position`` is ``None`` for a pass.
    """

    color: Stone
    position: Point | None = None
    comment: str | None = None

    @property
    def is_pass(self) -> bool:
        return self.position is None

    def __str__(self) -> str:
        return f"{self.color.label} {point_label(self.position)}"
