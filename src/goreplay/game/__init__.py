"""Game layer — replay engine, configuration, record loading.

Quick start::

    from goreplay.game import load_record

    engine = load_record("games/shusaku.sgf")
    engine.advance()
    print(engine.last_move)
"""

from goreplay.game.config import MAX_PLAYBACK_SPEED, MIN_PLAYBACK_SPEED, ReplayConfig
from goreplay.game.loader import RecordLoadError, load_record, load_record_text
from goreplay.game.state import ReplayEngine, ReplayEvents

__all__ = [
    # Configuration
    "MAX_PLAYBACK_SPEED",
    "MIN_PLAYBACK_SPEED",
    "ReplayConfig",
    # Loading
    "RecordLoadError",
    "load_record",
    "load_record_text",
    # Engine
    "ReplayEngine",
    "ReplayEvents",
]
