import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tenpin.scoring.bowling import Game  # noqa: E402


@pytest.fixture
def game():
    """A fresh, empty game."""
    return Game()


@pytest.fixture
def roll_many():
    def _roll_many(game, pins, times):
        for _ in range(times):
            game.record(pins)
        return game

    return _roll_many
