"""Starting configurations for the difficulty presets."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

from .config import get_game_config
from .points import Point
from .sticks import Stick

logger = logging.getLogger(__name__)

Preset = Callable[[np.random.Generator], List[Stick]]


def _randint(rng: np.random.Generator, upper: int) -> int:
    return int(rng.integers(upper))


def random_stick(rng: np.random.Generator, max_x: Optional[int] = None, max_y: Optional[int] = None) -> Stick:
    """A stick with two distinct points in ``[0, max_x) x [0, max_y)``."""

    config = get_game_config()
    max_x = config.window_x if max_x is None else max_x
    max_y = config.window_y if max_y is None else max_y
    if max_x * max_y < 2:
        raise ValueError(f"window {max_x}x{max_y} is too small for a stick")

    x1, y1 = _randint(rng, max_x), _randint(rng, max_y)
    x2, y2 = x1, y1
    while (x1, y1) == (x2, y2):
        x2, y2 = _randint(rng, max_x), _randint(rng, max_y)
    return Stick.from_coords(x1, y1, x2, y2)


def level_zero_game(rng: np.random.Generator) -> List[Stick]:
    """A vertical stick on the y axis and a horizontal stick."""

    config = get_game_config()
    if config.window_x < 2 or config.window_y < 2:
        raise ValueError(f"window {config.window_x}x{config.window_y} is too small for a level zero game")
    half_x, half_y = config.window_x // 2, config.window_y // 2

    a = _randint(rng, half_y)
    b = a + _randint(rng, half_y) + 1
    c = _randint(rng, half_x)
    d = c + _randint(rng, half_y) + 1
    e = 0 if rng.random() < 0.5 else _randint(rng, config.window_y)
    return [Stick(Point(0, a), Point(0, b)), Stick(Point(c, e), Point(d, e))]


def level_one_game(rng: np.random.Generator) -> List[Stick]:
    """A vertical stick and a diagonal stick of the same height."""

    config = get_game_config()
    window_x, window_y = config.window_x, config.window_y
    if window_x < 2 or window_y < 1:
        raise ValueError(f"window {window_x}x{window_y} is too small for a level one game")

    a = _randint(rng, min(5, window_x - 1))
    b1 = _randint(rng, window_y)
    b2 = b1 + _randint(rng, window_y) + 1

    c = a + 1 + _randint(rng, window_x - a - 1)
    d = _randint(rng, window_y)
    while d == c:
        d = _randint(rng, window_y)
    e = c + _randint(rng, window_x) + 1
    f = b2 - b1 + d
    return [Stick(Point(a, b1), Point(a, b2)), Stick(Point(c, d), Point(e, f))]


def random_game(rng: np.random.Generator) -> List[Stick]:
    """Two distinct random sticks."""

    first = random_stick(rng)
    second = random_stick(rng)
    while second == first:
        second = random_stick(rng)
    return [first, second]


PRESETS: Dict[str, Preset] = {
    "zero": level_zero_game,
    "one": level_one_game,
    "random": random_game,
}


def make_configuration(level: str = "random", seed: Optional[int] = None) -> List[Stick]:
    """Build the starting configuration for ``level`` from ``seed``."""

    try:
        preset = PRESETS[level]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"unknown preset {level!r} (expected one of: {known})") from None
    rng = np.random.default_rng(seed)
    configuration = preset(rng)
    logger.info("Preset %s (seed=%s): %s", level, seed, ", ".join(map(str, configuration)))
    return configuration


__all__ = [
    "Preset",
    "PRESETS",
    "random_stick",
    "level_zero_game",
    "level_one_game",
    "random_game",
    "make_configuration",
]
