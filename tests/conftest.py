"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from ichess.core.board import Board
from ichess.core.properties import GameProperties


@pytest.fixture
def standard_board() -> Board:
    """A board holding the 32-piece starting position."""
    return Board.initial()


@pytest.fixture
def props() -> GameProperties:
    """Game-start properties: nothing moved, no prior move."""
    return GameProperties()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ICHESS_* variables out of the tests."""
    monkeypatch.delenv("ICHESS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ICHESS_SHOW_BANNER", raising=False)
