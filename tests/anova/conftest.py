"""
Shared fixtures for ANOVA support tests.
"""

import numpy as np
import pytest


@pytest.fixture
def three_groups():
    """
    3 groups of 3 with means 11, 15, 20.

    SS_between = 122, SS_within = 6, SS_total = 128, F(2, 6) = 61.
    """
    y = np.array([10, 12, 11, 15, 16, 14, 20, 21, 19], dtype=float)
    group = np.array([1, 1, 1, 2, 2, 2, 3, 3, 3])
    return y, group


@pytest.fixture
def unbalanced_groups(rng):
    """4 groups of sizes 5, 8, 6, 11 with a roughly linear trend."""
    sizes = [5, 8, 6, 11]
    y = np.concatenate([
        rng.normal(10.0 + 2.0 * i, 2.0, n) for i, n in enumerate(sizes)
    ])
    group = np.repeat(np.arange(1, 5), sizes)
    return y, group


@pytest.fixture
def two_groups(rng):
    """2 groups of 12."""
    y = np.concatenate([rng.normal(10.0, 3.0, 12), rng.normal(13.0, 3.0, 12)])
    group = np.repeat([1, 2], 12)
    return y, group
