from typing import Callable, Dict, List

from battleship_abilities.domain.types import Grid

from .masks import build_cone, build_cross, build_diamond, make_mask

MaskBuilder = Callable[[Grid], None]

_BUILDERS: Dict[str, MaskBuilder] = {
    "cone": build_cone,
    "cross": build_cross,
    "diamond": build_diamond,
}


def ability_defs() -> List[Dict[str, object]]:
    # Keep in sync with _BUILDERS.
    return [
        {
            "key": "cone",
            "name": "Cone",
            "description": "Downward-widening triangle: 1 cell at the apex row, 5 cells two rows below.",
        },
        {
            "key": "cross",
            "name": "Cross",
            "description": "Full center row and center column of the 5x5 stencil.",
        },
        {
            "key": "diamond",
            "name": "Diamond",
            "description": "Every cell within Manhattan distance 2 of the stencil center.",
        },
    ]


def ability_keys() -> List[str]:
    return [str(d["key"]) for d in ability_defs()]


def ability_def(ability: str) -> Dict[str, object]:
    for d in ability_defs():
        if d["key"] == ability:
            return d
    raise KeyError(f"Unknown ability '{ability}'. Use one of: {', '.join(ability_keys())}.")


def get_builder(ability: str) -> MaskBuilder:
    try:
        return _BUILDERS[ability]
    except KeyError:
        raise KeyError(f"Unknown ability '{ability}'. Use one of: {', '.join(ability_keys())}.") from None


def build_mask(ability: str) -> Grid:
    builder = get_builder(ability)
    mask = make_mask()
    builder(mask)
    return mask
