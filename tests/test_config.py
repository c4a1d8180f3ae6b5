from groebner_solitaire.config import GameConfig, get_game_config, set_game_config
from groebner_solitaire.session import Session
from groebner_solitaire.sticks import Stick


def test_config_is_copied_in_and_out():
    original = get_game_config()
    try:
        custom = GameConfig(stick_color='#111111')
        set_game_config(custom)
        custom.stick_color = '#222222'

        assert get_game_config().stick_color == '#111111'
        session = Session([Stick.from_coords(2, 0, 0, 1)])
        assert session.colors == ('#111111',)

        get_game_config().stick_color = '#333333'
        assert get_game_config().stick_color == '#111111'
    finally:
        set_game_config(original)


def test_sessions_snapshot_the_config():
    original = get_game_config()
    try:
        session = Session([Stick.from_coords(2, 0, 0, 1)])
        set_game_config(GameConfig(stick_color='#444444'))
        assert session.colors == (original.stick_color,)
    finally:
        set_game_config(original)
