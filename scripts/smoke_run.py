from battleship_abilities.domain.config import AFFECTED, SHIP
from battleship_abilities.domain.printer import format_board
from battleship_abilities.scenarios import AbilityPlacement, Scenario, ShipSpec, run_scenario


def main() -> None:
    scenario = Scenario(
        "smoke_edges",
        "Smoke Edges",
        (
            ShipSpec("s1", 0, 0, 2, "H"),
        ),
        (
            AbilityPlacement("diamond", (0, 0)),
            AbilityPlacement("cross", (9, 9)),
            AbilityPlacement("cone", (9, 0)),
        ),
    )
    board = run_scenario(scenario)
    affected = sum(row.count(AFFECTED) for row in board)
    ships = sum(row.count(SHIP) for row in board)
    print(format_board(board), end="")
    print(f"Smoke OK: affected={affected} ships={ships}")


if __name__ == "__main__":
    main()
