import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from tetris_game import Game
from tetris_rng import ScriptedRandom


@pytest.fixture
def make_game():
    def _make(*sequence, now=0.0):
        return Game(rng=ScriptedRandom(sequence or ("I",)), now=now)
    return _make
