"""Record loading helpers used by the replay front end."""

from __future__ import annotations

import logging
from pathlib import Path

from goreplay.core.notation import GameRecord, SgfParseError, parse_sgf
from goreplay.game.config import ReplayConfig
from goreplay.game.state import ReplayEngine

_LOGGER = logging.getLogger(__name__)


class RecordLoadError(Exception):
    """A record file could not be read or parsed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


def _engine_for(record: GameRecord, config: ReplayConfig) -> ReplayEngine:
    raw_size = record.get_property("SZ")
    if raw_size is not None and record.board_size(default=0) == 0:
        _LOGGER.warning(
            "Unusable board size %r, falling back to %d",
            raw_size,
            config.default_board_size,
        )
    return ReplayEngine.from_record(record, config)


def load_record_text(text: str, config: ReplayConfig | None = None) -> ReplayEngine:
    """Parse record *text* and return an engine positioned at the start."""
    cfg = config or ReplayConfig()
    try:
        record = parse_sgf(text)
    except SgfParseError as exc:
        raise RecordLoadError(f"Failed to parse SGF: {exc.reason}") from exc
    return _engine_for(record, cfg)


def load_record(path: Path | str, config: ReplayConfig | None = None) -> ReplayEngine:
    """Load an SGF file from disk and return an engine positioned at the start."""
    file_path = Path(path)
    cfg = config or ReplayConfig()
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RecordLoadError(f"Failed to read {file_path}: {exc}", file_path) from exc

    try:
        record = parse_sgf(text)
    except SgfParseError as exc:
        raise RecordLoadError(
            f"Failed to parse SGF in {file_path}: {exc.reason}", file_path
        ) from exc

    engine = _engine_for(record, cfg)
    _LOGGER.info(
        "Loaded %s: %d moves on %dx%d board",
        file_path,
        engine.move_count,
        engine.board.size,
        engine.board.size,
    )
    return engine
