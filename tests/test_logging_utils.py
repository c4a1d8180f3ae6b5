import logging

from groebner_solitaire.logging_utils import debug_log_call
from groebner_solitaire.orderings import GREVLEX
from groebner_solitaire.sticks import Stick, reduce


def test_engine_calls_are_traced_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="groebner_solitaire.sticks"):
        reduce(Stick.from_coords(3, 1, 0, 1), [Stick.from_coords(2, 0, 0, 0)], GREVLEX)

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("-> reduce([ ( 3 , 1 ) ; ( 0 , 1 ) ]") for message in messages)
    assert any(message == "<- reduce = [ ( 1 , 1 ) ; ( 0 , 1 ) ]" for message in messages)


def test_long_configurations_are_abbreviated(caplog):
    logger = logging.getLogger("groebner_solitaire.tests")

    @debug_log_call(logger)
    def count(sticks):
        return len(sticks)

    sticks = [Stick.from_coords(i + 1, 0, 0, 0) for i in range(10)]
    with caplog.at_level(logging.DEBUG, logger="groebner_solitaire.tests"):
        assert count(sticks) == 10

    entry = caplog.records[0].getMessage()
    assert "... 4 more" in entry


def test_wrapping_twice_is_harmless():
    logger = logging.getLogger("groebner_solitaire.tests")

    def identity(value):
        return value

    wrapped = debug_log_call(logger)(identity)
    assert debug_log_call(logger)(wrapped) is wrapped
