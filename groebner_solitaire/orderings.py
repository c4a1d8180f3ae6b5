"""Monomial orderings on lattice points.

An ordering only ever answers one question: which of two points does it
prefer?  ``preference(p1, p2)`` returns ``p1`` when the ordering favours it and
``p2`` otherwise, including when the two points compare equal.

The set of orderings is closed: :class:`GrevLex`, :class:`Lex` and
:class:`WeightedGrevLex`.  All three are immutable values, so two sessions
never observe each other's weight changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Union

from .points import Point


@dataclass(frozen=True)
class GrevLex:
    """Graded ordering: larger coordinate sum wins, ties go to the larger x."""

    name: ClassVar[str] = "grevlex"

    def preference(self, p1: Point, p2: Point) -> Point:
        return _graded_preference(p1, p2, p1.x, p1.y, p2.x, p2.y)


@dataclass(frozen=True)
class Lex:
    """Lexicographic ordering: larger x wins, ties go to the larger y."""

    name: ClassVar[str] = "lex"

    def preference(self, p1: Point, p2: Point) -> Point:
        if p1.x > p2.x or (p1.x == p2.x and p1.y > p2.y):
            return p1
        return p2


@dataclass(frozen=True)
class WeightedGrevLex:
    """Weights the coordinates, then applies the :class:`GrevLex` rule.

    The default weights give the same answers as :class:`GrevLex`.
    """

    x_weight: int = 1
    y_weight: int = 1

    name: ClassVar[str] = "weighted"

    def __post_init__(self) -> None:
        if self.x_weight < 0 or self.y_weight < 0:
            raise ValueError(
                f"ordering weights must be non-negative, got ({self.x_weight}, {self.y_weight})"
            )

    def with_weights(self, x_weight: int, y_weight: int) -> "WeightedGrevLex":
        return WeightedGrevLex(x_weight, y_weight)

    def preference(self, p1: Point, p2: Point) -> Point:
        return _graded_preference(
            p1,
            p2,
            p1.x * self.x_weight,
            p1.y * self.y_weight,
            p2.x * self.x_weight,
            p2.y * self.y_weight,
        )


Ordering = Union[GrevLex, Lex, WeightedGrevLex]

GREVLEX = GrevLex()
LEX = Lex()

_BY_NAME: Dict[str, Ordering] = {
    GrevLex.name: GREVLEX,
    Lex.name: LEX,
    WeightedGrevLex.name: WeightedGrevLex(),
}


def _graded_preference(p1: Point, p2: Point, x1: int, y1: int, x2: int, y2: int) -> Point:
    if x1 + y1 == x2 + y2:
        return p1 if x1 > x2 else p2
    return p1 if x1 + y1 > x2 + y2 else p2


def get_ordering(name: str, weights: Optional[Tuple[int, int]] = None) -> Ordering:
    """Look up an ordering by name; ``weights`` only applies to ``weighted``."""

    key = name.strip().lower()
    try:
        ordering = _BY_NAME[key]
    except KeyError:
        known = ", ".join(sorted(_BY_NAME))
        raise ValueError(f"unknown ordering {name!r} (expected one of: {known})") from None
    if weights is not None:
        if not isinstance(ordering, WeightedGrevLex):
            raise ValueError(f"ordering {key!r} does not take weights")
        ordering = ordering.with_weights(*weights)
    return ordering


__all__ = [
    "GrevLex",
    "Lex",
    "WeightedGrevLex",
    "Ordering",
    "GREVLEX",
    "LEX",
    "get_ordering",
]
