"""Completion of a stick configuration into a Groebner-style basis.

This is Buchberger's algorithm specialised to sticks: pairs of generators are
combined with :func:`~groebner_solitaire.sticks.new_stick`, the result is
reduced against everything found so far, and any stick that survives becomes
a new generator.  Two criteria discard pairs that are known to vanish:

* the gcd criterion, for heads lying on opposite coordinate axes;
* the lcm (chain) criterion, for pairs whose meeting point is already covered
  by a third generator that has been paired with both.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Iterable, List, MutableSequence, NamedTuple, Optional, Sequence, Set, Tuple

from .logging_utils import apply_debug_logging
from .orderings import Ordering
from .sticks import Stick, new_stick, reduce

logger = logging.getLogger(__name__)

IndexPair = Tuple[int, int]


class BasisResult(NamedTuple):
    basis: List[Stick]
    move_count: int


def _considered(i: int, j: int, considered: Set[IndexPair]) -> bool:
    return (i, j) in considered or (j, i) in considered


def prune_gcd(pairs: MutableSequence[IndexPair], basis: Sequence[Stick], ordering: Ordering) -> List[IndexPair]:
    """Drop pairs whose heads lie on opposite axes; return the dropped pairs."""

    pruned = []
    for i, j in pairs:
        t1 = basis[i].head(ordering)
        t2 = basis[j].head(ordering)
        if (t1.x == 0 and t2.y == 0) or (t1.y == 0 and t2.x == 0):
            pruned.append((i, j))
            logger.debug("gcd criterion pruned pair (%d, %d)", i, j)
    if pruned:
        pairs[:] = [pair for pair in pairs if pair not in pruned]
    return pruned


def prune_lcm(
    pairs: MutableSequence[IndexPair],
    basis: Sequence[Stick],
    considered: Set[IndexPair],
    ordering: Ordering,
) -> List[IndexPair]:
    """Drop pairs made redundant by a chain through a third generator."""

    pruned = []
    for i, j in pairs:
        meet = basis[i].head(ordering).join(basis[j].head(ordering))
        for k, stick in enumerate(basis):
            if k == i or k == j:
                continue
            if (
                stick.head(ordering).is_southwest_of(meet)
                and _considered(i, k, considered)
                and _considered(j, k, considered)
            ):
                pruned.append((i, j))
                logger.debug("lcm criterion pruned pair (%d, %d) via %d", i, j, k)
                break
    if pruned:
        pairs[:] = [pair for pair in pairs if pair not in pruned]
    return pruned


def pair_comparison(first: IndexPair, second: IndexPair, source: Sequence[Stick], ordering: Ordering) -> int:
    """Compare two pairs by the meeting points of their heads.

    Returns ``1`` when ``ordering`` prefers the first pair's meeting point,
    ``-1`` when it prefers the second's and ``0`` when they coincide, so that a
    sort puts the smallest meeting point first.
    """

    t12 = source[first[0]].head(ordering).join(source[first[1]].head(ordering))
    u12 = source[second[0]].head(ordering).join(source[second[1]].head(ordering))
    if t12 == u12:
        return 0
    return 1 if ordering.preference(t12, u12) == t12 else -1


def buchberger_basis(
    configuration: Iterable[Stick],
    ordering: Ordering,
    trace: Optional[List[IndexPair]] = None,
) -> BasisResult:
    """Complete ``configuration`` and count the moves the computer needed.

    The move count is the number of pairs processed up to and including the
    last one that produced a new generator.  If ``trace`` is given, every
    processed pair is appended to it in order.
    """

    intermediate = list(configuration)
    seed_size = len(intermediate)
    pending: List[IndexPair] = [(j, i) for i in range(len(intermediate)) for j in range(i)]
    considered: Set[IndexPair] = set()

    computed = 0
    trailing_trivial = 0

    prune_gcd(pending, intermediate, ordering)
    while pending:
        computed += 1
        pair = pending.pop(0)
        considered.add(pair)
        if trace is not None:
            trace.append(pair)

        candidate = reduce(new_stick(intermediate[pair[0]], intermediate[pair[1]], ordering), intermediate, ordering)
        if candidate.is_trivial:
            trailing_trivial += 1
        else:
            pending.extend((k, len(intermediate)) for k in range(len(intermediate)))
            intermediate.append(candidate)
            trailing_trivial = 0
            logger.debug("pair %s produced generator %d: %s", pair, len(intermediate) - 1, candidate)

        pending.sort(key=cmp_to_key(lambda a, b: pair_comparison(a, b, intermediate, ordering)))
        prune_gcd(pending, intermediate, ordering)
        prune_lcm(pending, intermediate, considered, ordering)

    move_count = computed - trailing_trivial
    logger.info(
        "Completed %d stick(s) into %d generator(s): %d pair(s) computed, %d move(s)",
        seed_size,
        len(intermediate),
        computed,
        move_count,
    )
    return BasisResult(intermediate, move_count)


apply_debug_logging(globals(), logger=logger, skip=("pair_comparison",))

__all__ = [
    "IndexPair",
    "BasisResult",
    "prune_gcd",
    "prune_lcm",
    "pair_comparison",
    "buchberger_basis",
]
