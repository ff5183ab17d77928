import hashlib
import json
from dataclasses import dataclass
from typing import Optional, Tuple

from battleship_abilities.domain.config import BOARD_SIZE
from battleship_abilities.domain.types import Cell


@dataclass(frozen=True)
class ShipSpec:
    ship_id: str
    row: int
    col: int
    length: int
    orientation: str = "H"  # "H" or "V"
    name: Optional[str] = None

    def cells(self) -> Tuple[Cell, ...]:
        if self.orientation == "V":
            return tuple((self.row + k, self.col) for k in range(self.length))
        return tuple((self.row, self.col + k) for k in range(self.length))

    def normalized(self) -> dict:
        return {
            "ship_id": self.ship_id,
            "row": int(self.row),
            "col": int(self.col),
            "length": int(self.length),
            "orientation": self.orientation,
            "name": self.name or "",
        }


@dataclass(frozen=True)
class AbilityPlacement:
    ability: str
    origin: Cell

    def normalized(self) -> dict:
        return {"ability": self.ability, "origin": [int(self.origin[0]), int(self.origin[1])]}


@dataclass(frozen=True)
class Scenario:
    scenario_id: str
    name: str
    ships: Tuple[ShipSpec, ...]
    abilities: Tuple[AbilityPlacement, ...]
    board_size: int = BOARD_SIZE

    def normalized(self) -> dict:
        # Ability order is significant (first writer wins), ship order is not.
        ships_sorted = sorted(self.ships, key=lambda s: s.ship_id)
        return {
            "scenario_id": self.scenario_id,
            "name": self.name,
            "board_size": int(self.board_size),
            "ships": [s.normalized() for s in ships_sorted],
            "abilities": [a.normalized() for a in self.abilities],
        }

    @property
    def scenario_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
