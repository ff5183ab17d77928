from typing import Dict, List, Set

from battleship_abilities.abilities.masks import mask_cells
from battleship_abilities.abilities.registry import ability_keys, build_mask
from battleship_abilities.domain.board import in_bounds
from battleship_abilities.domain.config import MASK_CENTER
from battleship_abilities.domain.types import Cell

from .definition import AbilityPlacement, Scenario, ShipSpec


def validate_scenario(scenario: Scenario) -> List[str]:
    errors: List[str] = []

    if scenario.board_size <= 0:
        errors.append("board_size must be positive")
        return errors

    ids: Set[str] = set()
    occupied: Dict[Cell, str] = {}
    for ship in scenario.ships:
        _validate_ship(ship, scenario.board_size, ids, occupied, errors)

    known = set(ability_keys())
    for placement in scenario.abilities:
        _validate_ability(placement, scenario.board_size, known, errors)

    return errors


def _validate_ship(
    ship: ShipSpec,
    board_size: int,
    ids: Set[str],
    occupied: Dict[Cell, str],
    errors: List[str],
) -> None:
    if not ship.ship_id:
        errors.append("ship ship_id must be non-empty")
    elif ship.ship_id in ids:
        errors.append(f"duplicate ship ship_id: {ship.ship_id}")
    else:
        ids.add(ship.ship_id)

    if ship.orientation not in ("H", "V"):
        errors.append(f"ship {ship.ship_id} has unsupported orientation: {ship.orientation}")
        return
    if int(ship.length) <= 0:
        errors.append(f"ship {ship.ship_id} must have length > 0")
        return

    for r, c in ship.cells():
        if not in_bounds(r, c, board_size):
            errors.append(f"ship {ship.ship_id} leaves the board at ({r},{c})")
            return

    for cell in ship.cells():
        other = occupied.get(cell)
        if other is not None:
            errors.append(f"ship {ship.ship_id} overlaps ship {other} at ({cell[0]},{cell[1]})")
            return
    for cell in ship.cells():
        occupied[cell] = ship.ship_id


def _validate_ability(
    placement: AbilityPlacement,
    board_size: int,
    known: Set[str],
    errors: List[str],
) -> None:
    if placement.ability not in known:
        errors.append(f"unknown ability: {placement.ability}")
        return
    # Off-board origins are fine as long as some of the mask lands on the board;
    # the overlay clips the rest.
    r, c = placement.origin
    for i, j in mask_cells(build_mask(placement.ability)):
        if in_bounds(r - MASK_CENTER + i, c - MASK_CENTER + j, board_size):
            return
    errors.append(f"{placement.ability} at ({r},{c}) does not reach the board")
