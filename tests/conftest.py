"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from goreplay.core.enums import Stone
from goreplay.core.move import Move

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for timer-driven tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def two_moves() -> list[Move]:
    return [
        Move(Stone.BLACK, (3, 3)),
        Move(Stone.WHITE, (15, 3)),
    ]


@pytest.fixture
def sample_moves() -> list[Move]:
    """Five moves including a pass in the middle."""
    return [
        Move(Stone.BLACK, (3, 3)),
        Move(Stone.WHITE, (15, 15)),
        Move(Stone.BLACK, None),
        Move(Stone.WHITE, (2, 16)),
        Move(Stone.BLACK, (16, 2)),
    ]
