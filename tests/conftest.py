"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgrid.core import STARTING_FEN, Game, game_from_fen


@pytest.fixture
def starting_game() -> Game:
    """Game decoded from the standard starting position."""
    return game_from_fen(STARTING_FEN)
