"""Point type alias and SGF coordinate helpers.

Points are ``(column, row)`` pairs, zero-based from the top-left corner.
SGF encodes them as two lowercase letters, column first::

    "aa" -> (0, 0)
    "dd" -> (3, 3)
    "pd" -> (15, 3)
"""

from __future__ import annotations

from typing import TypeAlias

Point: TypeAlias = tuple[int, int]  # (column, row)

SGF_COORDINATE_BASE = "a"
MAX_SGF_COORDINATE = 19
MAX_BOARD_SIZE = 255  # larger SZ values are treated as unusable

_BASE_ORD = ord(SGF_COORDINATE_BASE)
_COLUMN_LETTERS = "ABCDEFGHJKLMNOPQRST"


def point_from_sgf(token: str) -> Point | None:
    """Decode an SGF coordinate token.

    Empty tokens are passes. Tokens that are not exactly two characters,
    or that decode outside ``[0, 19)``, are treated as passes as well.
    """
    if len(token) != 2:
        return None
    column = ord(token[0]) - _BASE_ORD
    row = ord(token[1]) - _BASE_ORD
    if 0 <= column < MAX_SGF_COORDINATE and 0 <= row < MAX_SGF_COORDINATE:
        return column, row
    return None


def point_to_sgf(point: Point | None) -> str:
    """Encode *point* as an SGF token (``""`` for a pass)."""
    if point is None:
        return ""
    column, row = point
    if not (0 <= column < MAX_SGF_COORDINATE and 0 <= row < MAX_SGF_COORDINATE):
        raise ValueError(f"Point out of SGF range: {point!r}")
    return chr(_BASE_ORD + column) + chr(_BASE_ORD + row)


def point_label(point: Point | None, size: int = 19) -> str:
    """Go board label on a *size* board, e.g. ``(3, 3)`` -> ``"D16"`` on 19x19.

    Columns are lettered without ``I``; rows count up from the bottom line,
    so SGF row 0 (the top) is row *size*. ``None`` is ``"Pass"``.
    """
    if point is None:
        return "Pass"
    column, row = point
    return f"{_COLUMN_LETTERS[column]}{size - row}"
