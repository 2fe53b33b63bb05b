"""Replay configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace

MIN_PLAYBACK_SPEED = 1
MAX_PLAYBACK_SPEED = 8


@dataclass(frozen=True)
class ReplayConfig:
    """User-configurable replay settings."""

    # Record
    default_board_size: int = 19  # used when SZ is missing or unusable

    # Navigation
    looping: bool = True

    # Auto-play
    autoplay: bool = True
    autoplay_interval_ms: int = 1000  # at speed 1
    playback_speed: int = MIN_PLAYBACK_SPEED

    def __post_init__(self) -> None:
        if self.default_board_size < 1:
            raise ValueError(
                f"default_board_size must be positive, got {self.default_board_size}"
            )
        if self.autoplay_interval_ms < 1:
            raise ValueError(
                f"autoplay_interval_ms must be positive, got {self.autoplay_interval_ms}"
            )
        if not MIN_PLAYBACK_SPEED <= self.playback_speed <= MAX_PLAYBACK_SPEED:
            raise ValueError(
                f"playback_speed must be in [{MIN_PLAYBACK_SPEED}, "
                f"{MAX_PLAYBACK_SPEED}], got {self.playback_speed}"
            )

    def with_speed(self, speed: int) -> ReplayConfig:
        """Copy with *speed* clamped into the supported range."""
        clamped = max(MIN_PLAYBACK_SPEED, min(MAX_PLAYBACK_SPEED, speed))
        return replace(self, playback_speed=clamped)
