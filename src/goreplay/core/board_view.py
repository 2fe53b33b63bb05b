"""BoardView — read-only rotated projection over a :class:`Board`.

A view borrows its board. Any navigation call on the owning
:class:`~goreplay.game.state.ReplayEngine` mutates that board in place,
so views are built fresh for each render pass and never stored.
"""

from __future__ import annotations

from collections.abc import Iterator

from goreplay.core.board import Board
from goreplay.core.enums import Stone


class BoardView:
    """Quarter-turn rotation of a board, for display only."""

    __slots__ = ("_board", "_rotation")

    def __init__(self, board: Board, rotation: int = 0) -> None:
        self._board = board
        self._rotation = rotation % 4

    @property
    def rotation(self) -> int:
        return self._rotation

    @property
    def size(self) -> int:
        return self._board.size

    def board_point(self, view_row: int, view_col: int) -> tuple[int, int]:
        """Map a view coordinate to the ``(row, col)`` board cell it shows."""
        last = self._board.size - 1
        rotation = self._rotation
        if rotation == 0:
            return view_row, view_col
        if rotation == 1:
            return view_col, last - view_row
        if rotation == 2:
            return last - view_row, last - view_col
        return last - view_col, view_row

    def get(self, view_row: int, view_col: int) -> Stone | None:
        return self._board.get(*self.board_point(view_row, view_col))

    def rows(self) -> Iterator[list[Stone | None]]:
        """Yield each view row top to bottom."""
        size = self._board.size
        for view_row in range(size):
            yield [self.get(view_row, view_col) for view_col in range(size)]
