"""Playback layer — Qt timer driven auto-play."""

from goreplay.playback.autoplay import AutoPlayer

__all__ = ["AutoPlayer"]
