"""SGF record parsing.

Only a flattened subset of the format is understood: every node is read
in encounter order as one straight line of play, so variations are not
modelled. Root-node properties are kept; later nodes contribute only
their ``B``/``W`` moves (and a ``C`` comment attached to those moves).
"""

from __future__ import annotations

import logging

from goreplay.core.enums import Stone
from goreplay.core.move import Move
from goreplay.core.notation.models import GameRecord
from goreplay.core.types import point_from_sgf

_LOGGER = logging.getLogger(__name__)

_MOVE_KEYS: dict[str, Stone] = {"B": Stone.BLACK, "W": Stone.WHITE}
_COMMENT_KEY = "C"


class SgfParseError(ValueError):
    """Record text does not have a valid ``(;...)`` envelope."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _scan_node(node: str) -> list[tuple[str, list[str]]]:
    """Split one node into ``(key, values)`` pairs in order of appearance.

    Keys are runs of uppercase ASCII letters. A key without at least one
    following ``[...]`` group is dropped.
    """
    props: list[tuple[str, list[str]]] = []
    idx = 0
    total = len(node)

    while idx < total:
        if not ("A" <= node[idx] <= "Z"):
            idx += 1
            continue

        key_end = idx
        while key_end < total and "A" <= node[key_end] <= "Z":
            key_end += 1
        key = node[idx:key_end]
        idx = key_end

        values: list[str] = []
        while idx < total and node[idx] == "[":
            end = node.find("]", idx + 1)
            if end < 0:
                values.append(node[idx + 1 :])
                idx = total
            else:
                values.append(node[idx + 1 : end])
                idx = end + 1

        if values:
            props.append((key, values))

    return props


def _make_move(color: Stone, token: str, comment: str | None) -> Move:
    position = point_from_sgf(token)
    if position is None and token:
        _LOGGER.debug("Treating unreadable coordinate %r as a pass", token)
    return Move(color=color, position=position, comment=comment)


def parse_sgf(text: str) -> GameRecord:
    """Parse SGF *text* into a :class:`GameRecord`.

    Raises:
        SgfParseError: the outer ``(`` / ``)`` or the leading ``;`` is missing.
    """
    text = text.strip()
    if not (text.startswith("(") and text.endswith(")")):
        raise SgfParseError("Missing outer parentheses")

    content = text[1:-1]
    if not content.startswith(";"):
        raise SgfParseError("Missing initial semicolon")

    properties: dict[str, list[str]] = {}
    moves: list[Move] = []

    nodes = [fragment for fragment in content.split(";") if fragment]
    for node_idx, node in enumerate(nodes):
        props = _scan_node(node)
        comment = next(
            (values[0] for key, values in props if key == _COMMENT_KEY), None
        )

        for key, values in props:
            color = _MOVE_KEYS.get(key)
            if color is not None:
                moves.append(_make_move(color, values[0], comment))
            elif node_idx == 0:
                properties.setdefault(key, values)

    return GameRecord(properties=properties, moves=tuple(moves))
