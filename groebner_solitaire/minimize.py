"""Reduction of a generating set to a canonical minimal form."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Set

from .config import get_game_config
from .logging_utils import apply_debug_logging
from .orderings import Ordering
from .points import Point
from .sticks import ReductionLimitError, Stick

logger = logging.getLogger(__name__)


def minimize(basis: Iterable[Stick], ordering: Ordering, *, max_steps: Optional[int] = None) -> Set[Stick]:
    """Prune sticks with redundant heads and tail-reduce the survivors.

    Vanished sticks are ignored.  A stick is dropped when another stick's head
    lies southwest of its head.  Among distinct sticks sharing the same head,
    only the one with the smallest :meth:`Stick.sort_key` is kept.  While a
    survivor's tail is covered by another head, the tail is replaced by that
    stick's tail, so no tail in the result lies under any head.
    """

    if max_steps is None:
        max_steps = get_game_config().max_reduction_steps
    generators = sorted({s for s in basis if not s.is_trivial}, key=Stick.sort_key)
    heads = [g.head(ordering) for g in generators]

    def covering(idx: int, point: Point) -> Optional[Stick]:
        return next(
            (g for other, g in enumerate(generators) if other != idx and heads[other].is_southwest_of(point)),
            None,
        )

    result: Set[Stick] = set()
    for idx, stick in enumerate(generators):
        head = heads[idx]
        redundant = any(
            other_head.is_southwest_of(head) and (other_head != head or other < idx)
            for other, other_head in enumerate(heads)
            if other != idx
        )
        if redundant:
            logger.debug("dropping %s: head %s is covered", stick, head)
            continue

        tail = stick.tail(ordering)
        steps = 0
        reducer = covering(idx, tail)
        while reducer is not None:
            steps += 1
            if steps > max_steps:
                raise ReductionLimitError(
                    f"tail of {stick} did not settle after {max_steps} steps under {ordering!r}"
                )
            tail = reducer.tail(ordering)
            reducer = covering(idx, tail)
        if tail == head:
            logger.debug("dropping %s: tail reduced onto its head", stick)
            continue
        result.add(stick if steps == 0 else Stick(head, tail))
    return result


apply_debug_logging(globals(), logger=logger)

__all__ = ["minimize"]
