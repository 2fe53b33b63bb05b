"""Core domain layer — pure Go record logic with zero external dependencies.

Quick start::

    from goreplay.core import BoardView, parse_sgf

    record = parse_sgf("(;SZ[9];B[cc];W[gg])")
    for move in record.moves:
        print(move)
"""

from goreplay.core.board import Board
from goreplay.core.board_view import BoardView
from goreplay.core.enums import Stone
from goreplay.core.move import Move
from goreplay.core.notation import GameRecord, SgfParseError, parse_sgf
from goreplay.core.types import (
    MAX_BOARD_SIZE,
    MAX_SGF_COORDINATE,
    SGF_COORDINATE_BASE,
    Point,
    point_from_sgf,
    point_label,
    point_to_sgf,
)

__all__ = [
    # Enums
    "Stone",
    # Types / helpers
    "MAX_BOARD_SIZE",
    "MAX_SGF_COORDINATE",
    "SGF_COORDINATE_BASE",
    "Point",
    "point_from_sgf",
    "point_label",
    "point_to_sgf",
    # Domain objects
    "Board",
    "BoardView",
    "Move",
    # Notation
    "GameRecord",
    "SgfParseError",
    "parse_sgf",
]
