"""
Distributions package — Beta shapes and the seeded random source.
"""

from .sampler import BetaParams, LendingDistributions, RandomSource, make_rng

__all__ = [
    "BetaParams",
    "LendingDistributions",
    "RandomSource",
    "make_rng",
]
