"""Replay engine — a navigable cursor over a recorded move list.

The board always equals ``moves[:cursor]`` applied in order to an empty
board. Stepping back rebuilds from scratch instead of undoing, so there
is no undo state to drift out of sync.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from goreplay.core.board import Board
from goreplay.core.board_view import BoardView
from goreplay.core.move import Move
from goreplay.game.config import ReplayConfig

if TYPE_CHECKING:
    from goreplay.core.notation.models import GameRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

PositionCallback = Callable[[int, int], None]  # cursor, total
LoopingCallback = Callable[[bool], None]
WrapCallback = Callable[[], None]


@dataclass
class ReplayEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_looping_changed: list[LoopingCallback] = field(default_factory=list)
    on_wrapped: list[WrapCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class ReplayEngine:
    """Owns a board, a read-only move list, and a playback cursor.

    Cursor ``0`` is the empty board; cursor ``N`` (``move_count``) has every
    move applied. ``advance`` at ``N`` wraps back to ``0`` while looping is
    enabled, otherwise it reports ``False`` and leaves the state alone.

    Not thread-safe; a single UI thread drives all navigation.
    """

    __slots__ = (
        "_board",
        "_moves",
        "_properties",
        "_cursor",
        "_looping",
        "events",
    )

    def __init__(
        self,
        board_size: int,
        moves: Iterable[Move],
        properties: Mapping[str, Sequence[str]] | None = None,
        *,
        looping: bool = True,
    ) -> None:
        self._board = Board(board_size)
        self._moves: tuple[Move, ...] = tuple(moves)
        self._properties: dict[str, list[str]] = {
            key: list(values) for key, values in (properties or {}).items()
        }
        self._cursor = 0
        self._looping = looping
        self.events = ReplayEvents()

    @classmethod
    def from_record(
        cls, record: GameRecord, config: ReplayConfig | None = None
    ) -> ReplayEngine:
        """Build an engine for *record*, sized from its ``SZ`` property."""
        cfg = config or ReplayConfig()
        return cls(
            record.board_size(cfg.default_board_size),
            record.moves,
            record.properties,
            looping=cfg.looping,
        )

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def moves(self) -> tuple[Move, ...]:
        return self._moves

    @property
    def properties(self) -> dict[str, list[str]]:
        return self._properties

    @property
    def current_move(self) -> int:
        """Cursor: number of moves currently applied."""
        return self._cursor

    @property
    def move_count(self) -> int:
        return len(self._moves)

    @property
    def last_move(self) -> Move | None:
        """The most recently applied move, or ``None`` at the start."""
        if self._cursor == 0:
            return None
        return self._moves[self._cursor - 1]

    @property
    def is_at_start(self) -> bool:
        return self._cursor == 0

    @property
    def is_at_end(self) -> bool:
        return self._cursor == len(self._moves)

    def get_property(self, key: str) -> str | None:
        values = self._properties.get(key)
        if not values:
            return None
        return values[0]

    def view(self, rotation: int = 0) -> BoardView:
        """Fresh rotated view of the current board; do not keep it across navigation."""
        return BoardView(self._board, rotation)

    # ── Looping ──────────────────────────────────────────────────────────

    def is_looping_enabled(self) -> bool:
        return self._looping

    def set_looping(self, enabled: bool) -> None:
        if enabled == self._looping:
            return
        self._looping = enabled
        self._emit_looping()

    def toggle_looping(self) -> None:
        self.set_looping(not self._looping)

    # ── Navigation ───────────────────────────────────────────────────────

    def advance(self) -> bool:
        """Apply the next move, or wrap to the start when looping at the end."""
        if self._cursor >= len(self._moves):
            if not self._looping:
                return False
            _LOGGER.debug("Wrapping replay after %d moves", len(self._moves))
            self._reset_board()
            self._cursor = 0
            self._emit_wrapped()
            self._emit_position()
            return True

        self._apply(self._moves[self._cursor])
        self._cursor += 1
        self._emit_position()
        return True

    def retreat(self) -> bool:
        """Step back one move. Returns ``False`` when already at the start."""
        if self._cursor == 0:
            return False
        self._rebuild(self._cursor - 1)
        self._emit_position()
        return True

    def jump_to_start(self) -> None:
        self._reset_board()
        self._cursor = 0
        self._emit_position()

    def jump_to_end(self) -> None:
        """Show every move; never triggers a wrap."""
        self._rebuild(len(self._moves))
        self._emit_position()

    def jump_to(self, index: int) -> bool:
        """Rebuild the board at cursor *index* (clamped to ``[0, N]``).

        Returns whether the cursor moved.
        """
        target = max(0, min(index, len(self._moves)))
        if target == self._cursor:
            return False
        self._rebuild(target)
        self._emit_position()
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _apply(self, move: Move) -> None:
        if move.position is None:
            return
        column, row = move.position
        size = self._board.size
        if column >= size or row >= size:
            # Decoded coordinates go up to 19; smaller boards drop the rest.
            _LOGGER.debug("Ignoring %s outside %dx%d board", move, size, size)
            return
        self._board.set(row, column, move.color)

    def _reset_board(self) -> None:
        self._board.reset()

    def _rebuild(self, cursor: int) -> None:
        self._reset_board()
        for move in self._moves[:cursor]:
            self._apply(move)
        self._cursor = cursor

    def _emit_position(self) -> None:
        total = len(self._moves)
        for cb in self.events.on_position_changed:
            cb(self._cursor, total)

    def _emit_looping(self) -> None:
        for cb in self.events.on_looping_changed:
            cb(self._looping)

    def _emit_wrapped(self) -> None:
        for cb in self.events.on_wrapped:
            cb()
