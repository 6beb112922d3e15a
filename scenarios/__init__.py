"""
Scenarios — the accounts and line items a run starts from: schema, loading,
validation and the built-in household.
"""

from .default import household_scenario
from .loader import build_bank, load_scenario
from .schema import ScenarioSpec
from .validators import ValidationResult, validate_scenario

__all__ = [
    "ScenarioSpec",
    "load_scenario",
    "build_bank",
    "household_scenario",
    "validate_scenario",
    "ValidationResult",
]
