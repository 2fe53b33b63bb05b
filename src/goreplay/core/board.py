"""Board - stone placement on a square grid."""

from __future__ import annotations

from collections.abc import Iterator

from goreplay.core.enums import Stone


class Board:
    """Mutable ``size x size`` grid of optional stones.

    Cells are addressed as ``(row, col)``. Coordinates outside
    ``[0, size)`` are a caller error and raise :class:`IndexError`.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self._size = size
        self._cells: list[Stone | None] = [None] * (size * size)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self._size}x{self._size} board"
            )
        return row * self._size + col

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def get(self, row: int, col: int) -> Stone | None:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, stone: Stone) -> None:
        self._cells[self._index(row, col)] = stone

    def clear(self, row: int, col: int) -> None:
        self._cells[self._index(row, col)] = None

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is None

    # -- Query helpers ------------------------------------------------------

    def stones(self) -> Iterator[tuple[int, int, Stone]]:
        """Yield ``(row, col, stone)`` for every occupied cell, row-major."""
        for idx, stone in enumerate(self._cells):
            if stone is not None:
                row, col = divmod(idx, self._size)
                yield row, col, stone

    def stone_count(self, color: Stone | None = None) -> int:
        """Number of stones on the board, optionally of one *color*."""
        if color is None:
            return sum(1 for stone in self._cells if stone is not None)
        return sum(1 for stone in self._cells if stone == color)

    # -- Mutation / copying -------------------------------------------------

    def reset(self) -> None:
        """Remove every stone."""
        self._cells = [None] * (self._size * self._size)

    def copy(self) -> Board:
        b = Board(self._size)
        b._cells = self._cells.copy()
        return b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(size={self._size}, stones={self.stone_count()})"
