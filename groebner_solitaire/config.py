"""Configuration shared by game sessions."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GameConfig:
    """Palette, window and animation settings for a game session."""

    # default color of a stick in play
    stick_color: str = "#000000"
    # sticks that may still be paired with the selected one
    pair_color: str = "#deadbe"
    highlight_color: str = "#ff0000"
    solution_color: str = "#0000ff"
    inactive_color: str = "#aaaaaa80"
    animation_color: str = "#dd00dd80"

    window_x: int = 10
    window_y: int = 10

    meeting_frames: int = 1
    reduction_step_frames: int = 1

    max_reduction_steps: int = 10_000


_GAME_CONFIG = GameConfig()


def get_game_config() -> GameConfig:
    return copy.deepcopy(_GAME_CONFIG)


def set_game_config(config: GameConfig) -> None:
    global _GAME_CONFIG
    _GAME_CONFIG = copy.deepcopy(config)


__all__ = ["GameConfig", "get_game_config", "set_game_config"]
