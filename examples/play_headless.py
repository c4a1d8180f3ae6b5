"""Example: play a level-zero game to the end without a board."""

from groebner_solitaire import GREVLEX, Session, make_configuration


def main() -> None:
    session = Session(make_configuration("zero", seed=2024), GREVLEX)
    print("Start:", ", ".join(str(stick) for stick in session.configuration))

    over = session.is_over()
    while not over:
        size = len(session.configuration)
        pair = next(
            (
                (i, j)
                for i in range(size)
                for j in range(i + 1, size)
                if (i, j) not in session.previous_moves
            ),
            None,
        )
        if pair is None:
            break
        over = session.play(*pair)
        print(f"Combined {pair[0]} and {pair[1]}:", session.configuration[-1])

    print("Game over:", over)
    print("Solution:", ", ".join(str(stick) for stick in session.solution))
    print(f"Computer needed {session.num_moves} move(s); we made {session.player_moves}")


if __name__ == "__main__":
    main()
