"""Notation package: SGF record parsing."""

from goreplay.core.notation.models import GameRecord
from goreplay.core.notation.sgf import SgfParseError, parse_sgf

__all__ = [
    "GameRecord",
    "SgfParseError",
    "parse_sgf",
]
