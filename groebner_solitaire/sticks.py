"""Sticks: binomials in two indeterminates, drawn as segments on the lattice.

A stick joins two lattice points.  Under an ordering one endpoint is the
*head* (the leading monomial) and the other is the *tail*.  Combining two
sticks slides both up and to the right until their heads meet, which is the
S-polynomial construction for binomials over the two-element field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .config import get_game_config
from .logging_utils import apply_debug_logging
from .orderings import GREVLEX, Ordering
from .points import Point

logger = logging.getLogger(__name__)


class ReductionLimitError(RuntimeError):
    """Raised when a reduction does not settle within the configured bound."""


@dataclass(frozen=True)
class Stick:
    """An unordered pair of lattice points.

    The points are stored so that ``p`` is lexicographically larger than
    ``q``; two sticks are equal whenever their point sets are equal.  A stick
    whose points coincide has vanished (the trivial binomial).
    """

    p: Point
    q: Point

    def __post_init__(self) -> None:
        p, q = self.p, self.q
        if (p.x, p.y) < (q.x, q.y):
            object.__setattr__(self, "p", q)
            object.__setattr__(self, "q", p)

    @classmethod
    def from_coords(cls, x1: int, y1: int, x2: int, y2: int) -> "Stick":
        return cls(Point(x1, y1), Point(x2, y2))

    @property
    def is_trivial(self) -> bool:
        return self.p == self.q

    def head(self, ordering: Ordering = GREVLEX) -> Point:
        return ordering.preference(self.p, self.q)

    def tail(self, ordering: Ordering = GREVLEX) -> Point:
        return self.q if self.head(ordering) == self.p else self.p

    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.p.x, self.p.y, self.q.x, self.q.y)

    def __str__(self) -> str:
        return f"[ {self.p} ; {self.q} ]"


def meeting_point(s1: Stick, s2: Stick, ordering: Ordering) -> Point:
    """Where the heads of ``s1`` and ``s2`` meet: the join of the two heads."""

    return s1.head(ordering).join(s2.head(ordering))


def new_stick(s1: Stick, s2: Stick, ordering: Ordering) -> Stick:
    """Slide ``s1`` and ``s2`` until their heads meet, then join the tails."""

    h1, t1 = s1.head(ordering), s1.tail(ordering)
    h2, t2 = s2.head(ordering), s2.tail(ordering)
    meet = h1.join(h2)
    return Stick(t1 + (meet - h1), t2 + (meet - h2))


def reduction_path(
    stick: Stick,
    by: Iterable[Stick],
    ordering: Ordering,
    *,
    max_steps: Optional[int] = None,
) -> List[Stick]:
    """Return every stick visited while reducing ``stick`` by ``by``.

    The first element is ``stick`` itself and the last is the fully reduced
    stick.  At each step the head of ``stick`` is rewritten if some reducer's
    head lies southwest of it; otherwise the tail is tried.  The walk stops
    once the stick vanishes or no reducer applies.
    """

    if max_steps is None:
        max_steps = get_game_config().max_reduction_steps
    reducers = [(s.head(ordering), s.tail(ordering)) for s in by if not s.is_trivial]

    path = [stick]
    current = stick
    while not current.is_trivial:
        head = current.head(ordering)
        tail = current.tail(ordering)
        target, other = head, tail
        found = next(((h, t) for h, t in reducers if h.is_southwest_of(head)), None)
        if found is None:
            target, other = tail, head
            found = next(((h, t) for h, t in reducers if h.is_southwest_of(tail)), None)
        if found is None:
            break
        if len(path) > max_steps:
            raise ReductionLimitError(
                f"reduction of {stick} did not settle after {max_steps} steps under {ordering!r}"
            )
        reducer_head, reducer_tail = found
        current = Stick(other, target - reducer_head + reducer_tail)
        path.append(current)
    return path


def reduce(
    stick: Stick,
    by: Iterable[Stick],
    ordering: Ordering,
    *,
    max_steps: Optional[int] = None,
) -> Stick:
    """Reduce ``stick`` by the heads of ``by`` until nothing applies."""

    return reduction_path(stick, by, ordering, max_steps=max_steps)[-1]


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "Stick",
    "ReductionLimitError",
    "meeting_point",
    "new_stick",
    "reduction_path",
    "reduce",
]
