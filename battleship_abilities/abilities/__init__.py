from .masks import build_cone, build_cross, build_diamond, fill_stencil, make_mask, mask_cells
from .overlay import apply_ability
from .registry import ability_def, ability_defs, ability_keys, build_mask, get_builder

__all__ = [
    "apply_ability",
    "ability_def",
    "ability_defs",
    "ability_keys",
    "build_cone",
    "build_cross",
    "build_diamond",
    "build_mask",
    "fill_stencil",
    "get_builder",
    "make_mask",
    "mask_cells",
]
