from typing import Optional

from battleship_abilities.abilities.overlay import apply_ability
from battleship_abilities.abilities.registry import build_mask
from battleship_abilities.domain.board import create_board, init_board, place_ship
from battleship_abilities.domain.types import Grid
from battleship_abilities.utils import debug

from .builtins import default_scenario
from .definition import Scenario
from .validation import validate_scenario


def run_scenario(scenario: Optional[Scenario] = None) -> Grid:
    """Build the board for ``scenario`` (the default one when omitted).

    Ships are placed first, then every ability is applied in declaration
    order. Raises ValueError if the scenario does not validate.
    """
    if scenario is None:
        scenario = default_scenario()

    errors = validate_scenario(scenario)
    if errors:
        debug.debug_event(None, "Invalid scenario", scenario.scenario_id, "\n".join(errors), level="error")
        raise ValueError(f"Scenario '{scenario.scenario_id}' is invalid: " + "; ".join(errors))

    board = create_board(scenario.board_size)
    init_board(board)
    for ship in scenario.ships:
        place_ship(board, ship.cells())

    for placement in scenario.abilities:
        mask = build_mask(placement.ability)
        r, c = placement.origin
        marked = apply_ability(board, mask, r, c)
        debug.debug_event(
            None,
            "Ability applied",
            f"{placement.ability} at ({r},{c}) marked {marked} cells",
        )

    debug.debug_event(None, "Scenario complete", f"{scenario.scenario_id} [{scenario.scenario_hash}]")
    return board
