"""Unit tests for random draws"""

import numpy as np
import pytest

from distributions import BetaParams, LendingDistributions, make_rng


def test_beta_mean():
    assert BetaParams(1, 4).mean == pytest.approx(0.2)
    assert BetaParams(20, 20).mean == pytest.approx(0.5)


def test_beta_rejects_non_positive_shape():
    with pytest.raises(ValueError):
        BetaParams(0, 1)


def test_draws_stay_in_unit_interval():
    rng = make_rng(1)
    draws = [BetaParams(3, 8).draw(rng) for _ in range(500)]
    assert all(0.0 <= d <= 1.0 for d in draws)
    assert np.mean(draws) == pytest.approx(3 / 11, abs=0.05)


def test_same_seed_same_sequence():
    a, b = make_rng(7), make_rng(7)
    assert [a.uniform() for _ in range(5)] == [b.uniform() for _ in range(5)]


def test_default_lending_distributions():
    dists = LendingDistributions()
    summary = dists.summary()

    assert list(summary["Variable"]) == ["Rate", "Start", "Pay Day"]
    assert list(summary["Alpha"]) == [3, 3, 20]
    assert list(summary["Beta"]) == [8, 5, 20]
