"""Timer-driven automatic playback over a :class:`ReplayEngine`."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from goreplay.game.config import MAX_PLAYBACK_SPEED, MIN_PLAYBACK_SPEED, ReplayConfig
from goreplay.game.state import ReplayEngine

_LOGGER = logging.getLogger(__name__)


class AutoPlayer(QObject):
    """Advances the engine once per timer tick while playing.

    Signals:
        position_changed(int, int): cursor and move count after any navigation.
        playing_changed(bool): playback started or paused.
        looping_changed(bool): engine looping flag toggled.
        stopped_at_end(): a tick reached the last move with looping off.
    """

    position_changed = pyqtSignal(int, int)
    playing_changed = pyqtSignal(bool)
    looping_changed = pyqtSignal(bool)
    stopped_at_end = pyqtSignal()

    def __init__(
        self,
        engine: ReplayEngine,
        config: ReplayConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        cfg = config or ReplayConfig()
        self._base_interval_ms = cfg.autoplay_interval_ms
        self._speed = cfg.playback_speed

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_tick)
        self._timer.setInterval(self.interval_ms)

        self._engine = engine
        self._connect_engine(engine)

        if cfg.autoplay:
            self.play()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> ReplayEngine:
        return self._engine

    @property
    def is_playing(self) -> bool:
        return self._timer.isActive()

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def interval_ms(self) -> int:
        return max(1, self._base_interval_ms // self._speed)

    # ── Playback control ─────────────────────────────────────────────────

    @pyqtSlot()
    def play(self) -> None:
        if self._timer.isActive():
            return
        self._timer.start()
        self.playing_changed.emit(True)

    @pyqtSlot()
    def pause(self) -> None:
        if not self._timer.isActive():
            return
        self._timer.stop()
        self.playing_changed.emit(False)

    @pyqtSlot()
    def toggle(self) -> None:
        if self._timer.isActive():
            self.pause()
        else:
            self.play()

    @pyqtSlot(int)
    def set_speed(self, speed: int) -> None:
        """Set the speed multiplier, clamped to the supported range."""
        self._speed = max(MIN_PLAYBACK_SPEED, min(MAX_PLAYBACK_SPEED, speed))
        self._timer.setInterval(self.interval_ms)

    def set_engine(self, engine: ReplayEngine) -> None:
        """Switch to another record, keeping the current play state."""
        self._disconnect_engine(self._engine)
        self._engine = engine
        self._connect_engine(engine)
        self.position_changed.emit(engine.current_move, engine.move_count)
        self.looping_changed.emit(engine.is_looping_enabled())

    # ── Manual navigation ────────────────────────────────────────────────

    @pyqtSlot()
    def step_forward(self) -> bool:
        return self._engine.advance()

    @pyqtSlot()
    def step_back(self) -> bool:
        return self._engine.retreat()

    @pyqtSlot()
    def go_to_start(self) -> None:
        self._engine.jump_to_start()

    @pyqtSlot()
    def go_to_end(self) -> None:
        self._engine.jump_to_end()

    @pyqtSlot()
    def toggle_looping(self) -> None:
        self._engine.toggle_looping()

    # ── Internal ─────────────────────────────────────────────────────────

    def _connect_engine(self, engine: ReplayEngine) -> None:
        engine.events.on_position_changed.append(self._forward_position)
        engine.events.on_looping_changed.append(self._forward_looping)

    def _disconnect_engine(self, engine: ReplayEngine) -> None:
        events = engine.events
        if self._forward_position in events.on_position_changed:
            events.on_position_changed.remove(self._forward_position)
        if self._forward_looping in events.on_looping_changed:
            events.on_looping_changed.remove(self._forward_looping)

    def _forward_position(self, cursor: int, total: int) -> None:
        self.position_changed.emit(cursor, total)

    def _forward_looping(self, enabled: bool) -> None:
        self.looping_changed.emit(enabled)

    @pyqtSlot()
    def _on_tick(self) -> None:
        if self._engine.advance():
            return
        _LOGGER.debug("Auto-play reached the end with looping disabled")
        self.pause()
        self.stopped_at_end.emit()
