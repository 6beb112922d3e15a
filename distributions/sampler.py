"""
Random draws for the simulation — Beta-distributed shapes and the seeded generator.

Every draw goes through an explicitly passed generator so a run is
reproducible from its seed:

  rng = make_rng(7)
  spend = BetaParams(1, 4)
  spend.draw(rng)   # → float in [0, 1]

The generator only needs two methods, which numpy's Generator provides:
  uniform()     — a float in [0, 1)
  beta(a, b)    — a Beta(a, b) draw

The investor account takes its three distributions as one bundle
(LendingDistributions) instead of reaching for module-level state:
  rate      Beta(3, 8)   — skews note rates toward the low end of 8%–20%
  start     Beta(3, 5)   — business days until a note is issued
  pay_day   Beta(20, 20) — days until the next payment, centred near 30
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np
import pandas as pd


class RandomSource(Protocol):
    def uniform(self) -> float: ...

    def beta(self, a: float, b: float) -> float: ...


@dataclass(frozen=True)
class BetaParams:
    """Shape parameters of a Beta distribution."""
    alpha: float
    beta: float

    def __post_init__(self) -> None:
        if self.alpha <= 0 or self.beta <= 0:
            raise ValueError(f"Beta shape parameters must be positive, got ({self.alpha}, {self.beta}).")

    @property
    def mean(self) -> float:
        return self.alpha / (self.alpha + self.beta)

    def draw(self, rng: RandomSource) -> float:
        return float(rng.beta(self.alpha, self.beta))


@dataclass(frozen=True)
class LendingDistributions:
    """
    Distributions the peer-to-peer investor account draws from.
    """
    rate: BetaParams = field(default_factory=lambda: BetaParams(3, 8))
    start: BetaParams = field(default_factory=lambda: BetaParams(3, 5))
    pay_day: BetaParams = field(default_factory=lambda: BetaParams(20, 20))

    def summary(self) -> pd.DataFrame:
        """Return a summary table of the distribution parameters."""
        return pd.DataFrame([
            {"Variable": "Rate", "Alpha": self.rate.alpha, "Beta": self.rate.beta, "Mean": self.rate.mean},
            {"Variable": "Start", "Alpha": self.start.alpha, "Beta": self.start.beta, "Mean": self.start.mean},
            {"Variable": "Pay Day", "Alpha": self.pay_day.alpha, "Beta": self.pay_day.beta,
             "Mean": self.pay_day.mean},
        ])


def make_rng(seed: int = 7) -> np.random.Generator:
    """Seeded generator shared by every random draw of one run."""
    return np.random.default_rng(seed)
