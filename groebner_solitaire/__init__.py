from .points import Point
from .orderings import GrevLex, Lex, WeightedGrevLex, Ordering, GREVLEX, LEX, get_ordering
from .sticks import Stick, ReductionLimitError, meeting_point, new_stick, reduction_path, reduce
from .buchberger import BasisResult, prune_gcd, prune_lcm, pair_comparison, buchberger_basis
from .minimize import minimize
from .config import GameConfig, get_game_config, set_game_config
from .session import (
    Session,
    SessionState,
    RenderConfiguration,
    AnimateMeeting,
    AnimateReduction,
    PresentationCommand,
)
from .presets import PRESETS, random_stick, level_zero_game, level_one_game, random_game, make_configuration

__all__ = [
    'Point',
    'GrevLex',
    'Lex',
    'WeightedGrevLex',
    'Ordering',
    'GREVLEX',
    'LEX',
    'get_ordering',
    'Stick',
    'ReductionLimitError',
    'meeting_point',
    'new_stick',
    'reduction_path',
    'reduce',
    'BasisResult',
    'prune_gcd',
    'prune_lcm',
    'pair_comparison',
    'buchberger_basis',
    'minimize',
    'GameConfig',
    'get_game_config',
    'set_game_config',
    'Session',
    'SessionState',
    'RenderConfiguration',
    'AnimateMeeting',
    'AnimateReduction',
    'PresentationCommand',
    'PRESETS',
    'random_stick',
    'level_zero_game',
    'level_one_game',
    'random_game',
    'make_configuration',
]
