"""
Simulation engine — process runtime, date generator, bank host and runner.
"""

from .bank import Bank
from .dates import DayGenerator
from .process import Engine, Process, ProcessList, State
from .runner import SimulationResult, run_simulation

__all__ = [
    "Bank",
    "DayGenerator",
    "Engine",
    "Process",
    "ProcessList",
    "State",
    "SimulationResult",
    "run_simulation",
]
