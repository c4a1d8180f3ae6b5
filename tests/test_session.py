import pytest

from groebner_solitaire.config import GameConfig
from groebner_solitaire.orderings import LEX, WeightedGrevLex
from groebner_solitaire.points import Point
from groebner_solitaire.session import (
    AnimateMeeting,
    AnimateReduction,
    RenderConfiguration,
    Session,
    SessionState,
)
from groebner_solitaire.sticks import ReductionLimitError, Stick

X2_Y = Stick.from_coords(2, 0, 0, 1)
XY_1 = Stick.from_coords(1, 1, 0, 0)
Y2_X = Stick.from_coords(0, 2, 1, 0)

BLACK = GameConfig().stick_color


def test_fresh_session_is_idle():
    session = Session([X2_Y, XY_1])
    assert session.state is SessionState.IDLE
    assert session.configuration == (X2_Y, XY_1)
    assert session.start_configuration == (X2_Y, XY_1)
    assert session.colors == (BLACK, BLACK)
    assert session.show_region == (False, False)
    assert session.previous_moves == frozenset()
    assert not session.stick_is_selected()


@pytest.mark.parametrize('index', [-1, 2, 99])
def test_out_of_range_selection_is_ignored(index):
    session = Session([X2_Y, XY_1])
    session.select_stick(index)
    assert session.state is SessionState.IDLE
    session.select_stick(0)
    session.select_stick(index)
    assert session.state is SessionState.FIRST_SELECTED
    assert session.selected == 0


def test_first_selection_highlights_candidates():
    config = GameConfig(highlight_color='#00ff00', pair_color='#123456')
    session = Session([X2_Y, XY_1, Y2_X], config=config)
    session.select_stick(1)
    assert session.state is SessionState.FIRST_SELECTED
    assert session.stick_is_selected()
    assert session.candidates == frozenset({0, 2})
    assert session.stick_is_potential_pair(2)
    assert not session.stick_is_potential_pair(1)
    assert session.colors == ('#123456', '#00ff00', '#123456')


def test_reselecting_clears_the_selection():
    session = Session([X2_Y, XY_1])
    session.select_stick(0)
    session.select_stick(0)
    assert session.state is SessionState.IDLE
    assert session.candidates == frozenset()
    assert session.colors == (BLACK, BLACK)
    assert session.previous_moves == frozenset()


def test_move_queues_new_stick_until_committed():
    session = Session([X2_Y, XY_1])
    session.select_stick(0)
    session.select_stick(1)
    assert session.state is SessionState.IDLE
    assert session.previous_moves == frozenset({(0, 1)})
    assert session.pending_stick == Y2_X
    assert session.configuration == (X2_Y, XY_1)

    assert session.finish_move()
    assert session.configuration == (X2_Y, XY_1, Y2_X)
    assert session.pending_stick is None


def test_repeated_pair_changes_nothing():
    session = Session([X2_Y, XY_1])
    session.select_stick(0)
    session.select_stick(1)
    moves, configuration, colors = session.previous_moves, session.configuration, session.colors

    session.select_stick(1)
    assert session.candidates == frozenset()
    session.select_stick(0)
    assert session.state is SessionState.IDLE
    assert session.perform_move(1, 0) == 0

    assert session.previous_moves == moves
    assert session.configuration == configuration
    assert session.colors == colors
    assert session.player_moves == 1


def test_add_stick_refuses_duplicates_and_vanished_sticks():
    session = Session([X2_Y])
    assert session.add_stick(Stick(Point(1, 1), Point(3, 3)))
    assert not session.add_stick(Stick(Point(3, 3), Point(1, 1)))
    assert not session.add_stick(Stick(Point(2, 2), Point(2, 2)))
    assert session.configuration == (X2_Y, Stick.from_coords(1, 1, 3, 3))
    assert len(session.colors) == len(session.show_region) == 2


def test_duplicate_sticks_in_the_starting_configuration_collapse():
    session = Session([X2_Y, Stick.from_coords(0, 1, 2, 0), XY_1])
    assert session.configuration == (X2_Y, XY_1)


def test_move_rejects_bad_indices():
    session = Session([X2_Y, XY_1])
    with pytest.raises(ValueError):
        session.move(0, 7)
    with pytest.raises(ValueError):
        session.move(-1, 1)
    assert session.previous_moves == frozenset()


def test_minimal_basis_is_over_immediately():
    session = Session([X2_Y, XY_1, Y2_X])
    assert session.is_over()
    assert session.num_moves == 0
    assert session.solution == frozenset({X2_Y, XY_1, Y2_X})


def test_game_over_marks_solution_and_greys_out_the_rest():
    config = GameConfig()
    session = Session([X2_Y, XY_1], config=config)
    assert not session.is_over()
    # x^3 + xy is a multiple of x^2 + y, so it belongs to the game but not the solution
    session.add_stick(Stick.from_coords(3, 0, 1, 1))

    assert session.play(0, 1)
    assert session.configuration[-1] == Y2_X
    assert session.colors == (
        config.solution_color,
        config.solution_color,
        config.inactive_color,
        config.solution_color,
    )
    assert session.show_region == (True, True, False, True)
    assert session.num_moves == 1
    assert session.player_moves == 1


def test_lex_game_needs_two_moves():
    session = Session([X2_Y, XY_1], LEX)
    y3_1 = Stick.from_coords(0, 3, 0, 0)
    x_y2 = Stick.from_coords(1, 0, 0, 2)
    assert session.solution == frozenset({x_y2, y3_1})
    assert session.num_moves == 2

    assert not session.play(0, 1)
    assert session.configuration[-1] == x_y2
    assert session.play(1, 2)
    assert session.configuration[-1] == y3_1
    assert session.player_moves == 2


def test_presentation_commands():
    session = Session([X2_Y, XY_1])
    assert session.drain_commands() == [RenderConfiguration((X2_Y, XY_1))]

    assert session.perform_move(0, 1) == 1
    session.finish_move()
    commands = session.drain_commands()
    assert commands == [
        AnimateMeeting(X2_Y, XY_1, Point(2, 1), GameConfig().animation_color),
        AnimateReduction((Y2_X,), BLACK, delay=1),
        RenderConfiguration((X2_Y, XY_1, Y2_X)),
    ]
    assert session.drain_commands() == []


def test_reset_restores_a_fresh_session():
    session = Session([X2_Y, XY_1])
    session.play(0, 1)
    session.select_stick(2)

    session.reset_configuration([X2_Y, XY_1])
    assert session.state is SessionState.IDLE
    assert session.configuration == (X2_Y, XY_1)
    assert session.previous_moves == frozenset()
    assert session.colors == (BLACK, BLACK)
    assert session.show_region == (False, False)
    assert session.player_moves == 0
    assert not session.is_over()


def _runaway_session():
    # with zero weights both heads sit at the origin and the new stick only ever grows
    return Session(
        [Stick.from_coords(1, 0, 0, 0), Stick.from_coords(0, 1, 0, 0)],
        WeightedGrevLex(0, 0),
        config=GameConfig(max_reduction_steps=20),
    )


def test_failed_reduction_does_not_use_up_the_pair():
    session = _runaway_session()
    with pytest.raises(ReductionLimitError):
        session.perform_move(0, 1)
    assert session.previous_moves == frozenset()
    assert session.player_moves == 0
    assert session.pending_stick is None
    assert session.drain_commands() == [RenderConfiguration(session.configuration)]


def test_failed_reduction_during_selection_leaves_session_idle():
    session = _runaway_session()
    session.select_stick(0)
    with pytest.raises(ReductionLimitError):
        session.select_stick(1)
    assert session.state is SessionState.IDLE
    assert not session.stick_is_selected()
    assert session.previous_moves == frozenset()
    session.select_stick(0)
    assert session.candidates == frozenset({1})


def test_moves_are_refused_while_a_stick_is_pending():
    y3_1 = Stick.from_coords(0, 3, 0, 0)
    session = Session([X2_Y, XY_1, y3_1])
    session.select_stick(0)
    session.select_stick(1)
    assert session.pending_stick == Y2_X

    session.select_stick(0)
    assert session.candidates == frozenset({2})
    session.select_stick(2)
    assert session.state is SessionState.IDLE
    assert session.previous_moves == frozenset({(0, 1)})
    assert session.pending_stick == Y2_X
    assert session.player_moves == 1

    assert session.perform_move(0, 2) == 0
    with pytest.raises(RuntimeError) as exc:
        session.move(0, 2)
    assert 'pending' in str(exc.value)
    assert session.pending_stick == Y2_X

    session.finish_move()
    assert session.configuration == (X2_Y, XY_1, y3_1, Y2_X)
    assert session.perform_move(0, 2) >= 1
    assert session.previous_moves == frozenset({(0, 1), (0, 2)})
    assert session.player_moves == 2
