"""Example: the same starting sticks complete differently under each ordering."""

from groebner_solitaire import GREVLEX, LEX, Stick, WeightedGrevLex, buchberger_basis, minimize

CONFIGURATION = [Stick.from_coords(2, 0, 0, 1), Stick.from_coords(1, 1, 0, 0)]


def main() -> None:
    for ordering in (GREVLEX, LEX, WeightedGrevLex(1, 3)):
        basis, moves = buchberger_basis(CONFIGURATION, ordering)
        minimal = sorted(minimize(basis, ordering), key=Stick.sort_key)
        print(f"{ordering!r}: {moves} move(s)")
        for stick in minimal:
            print(f"  {stick}  head {stick.head(ordering)}")


if __name__ == "__main__":
    main()
