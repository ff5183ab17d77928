from .builtins import default_scenario
from .definition import AbilityPlacement, Scenario, ShipSpec
from .runner import run_scenario
from .validation import validate_scenario

__all__ = [
    "AbilityPlacement",
    "Scenario",
    "ShipSpec",
    "default_scenario",
    "run_scenario",
    "validate_scenario",
]
