"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.position import Position


@pytest.fixture
def start_position() -> Position:
    """A fresh standard starting position, MAJOR to move."""
    return Position.initial()

