import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from smoothsnake.config import Config  # noqa: E402
from smoothsnake.game import new_game_state  # noqa: E402


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def state(cfg):
    return new_game_state(cfg, now_ms=0)


@pytest.fixture
def rng():
    return random.Random(42)
