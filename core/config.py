"""
Simulation run configuration.
Distribution parameters live in distributions/sampler.py (LendingDistributions).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path

from .utils import to_date


@dataclass(frozen=True)
class SimulationConfig:
    start_date: date
    end_date: date
    seed: int = 7

    # report output
    output_dir: str = "."
    daily_filename: str = "daily.csv"
    monthly_filename: str = "monthly.csv"

    # bounded back-pressure between processes
    inbox_size: int = 2

    log_level: str = "INFO"

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", to_date(self.start_date))
        object.__setattr__(self, "end_date", to_date(self.end_date))
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} is before start_date {self.start_date}."
            )
        if self.inbox_size < 1:
            raise ValueError("inbox_size must be at least 1.")

    @property
    def daily_path(self) -> Path:
        return Path(self.output_dir) / self.daily_filename

    @property
    def monthly_path(self) -> Path:
        return Path(self.output_dir) / self.monthly_filename
