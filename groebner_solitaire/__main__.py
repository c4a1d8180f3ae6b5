import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from groebner_solitaire import (
    PRESETS,
    Session,
    get_ordering,
    make_configuration,
    minimize,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_int_pair(value: str) -> Tuple[int, int]:
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected two comma-separated integers, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected two comma-separated integers, got {value!r}") from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Groebner solitaire without a board")
    parser.add_argument(
        "--level",
        choices=sorted(PRESETS),
        default="random",
        help="Starting configuration preset (default: random)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the configuration generator",
    )
    parser.add_argument(
        "--ordering",
        default="grevlex",
        help="Term ordering: grevlex, lex or weighted (default: grevlex)",
    )
    parser.add_argument(
        "--weights",
        type=_parse_int_pair,
        help="Weights for the weighted ordering, e.g. 2,1",
    )
    parser.add_argument(
        "--move",
        dest="moves",
        action="append",
        type=_parse_int_pair,
        default=[],
        help="Combine sticks I,J; may be repeated",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        ordering = get_ordering(args.ordering, args.weights)
    except ValueError as exc:
        parser.error(str(exc))

    configuration = make_configuration(args.level, args.seed)
    session = Session(configuration, ordering)
    logger.info("Starting %s game under %s", args.level, ordering)

    moves: List[Tuple[int, int]] = args.moves
    over = session.is_over()
    for i, j in moves:
        if over:
            logger.warning("Game already over; ignoring move %d,%d", i, j)
            break
        before = len(session.configuration)
        over = session.play(i, j)
        if len(session.configuration) > before:
            print(f"Move {i},{j}: new stick {session.configuration[-1]}")
        else:
            print(f"Move {i},{j}: no new stick")

    print("Configuration:")
    for idx, stick in enumerate(session.configuration):
        print(f"  [{idx}] {stick}  head {stick.head(ordering)}")
    print(f"Game over: {'yes' if over else 'no'}")
    print("Minimized configuration:")
    for stick in sorted(minimize(session.configuration, ordering), key=lambda s: s.sort_key()):
        print(f"  {stick}")
    print("Solution:")
    for stick in sorted(session.solution, key=lambda s: s.sort_key()):
        print(f"  {stick}")
    print(f"Computer moves: {session.num_moves}")
    print(f"Player moves: {session.player_moves}")


if __name__ == "__main__":
    main(sys.argv[1:])
