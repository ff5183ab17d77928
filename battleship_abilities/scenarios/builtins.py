from .definition import AbilityPlacement, Scenario, ShipSpec


def default_scenario() -> Scenario:
    ships = (
        ShipSpec(ship_id="h3", row=2, col=2, length=3, orientation="H", name="Horizontal (3)"),
        ShipSpec(ship_id="v2", row=6, col=7, length=2, orientation="V", name="Vertical (2)"),
    )
    abilities = (
        # Cone origin sits one row below the apex so the wide end lands on row 1.
        AbilityPlacement("cone", (1, 3)),
        AbilityPlacement("cross", (4, 5)),
        AbilityPlacement("diamond", (7, 2)),
    )
    return Scenario(
        scenario_id="default",
        name="Default (10x10, 2 ships, 3 abilities)",
        ships=ships,
        abilities=abilities,
        board_size=10,
    )
