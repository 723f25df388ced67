"""
Shared fixtures for categorical support tests.
"""

import numpy as np
import pytest


@pytest.fixture
def binomial_counts():
    """6 successes, 4 failures."""
    return np.array([6, 4])


@pytest.fixture
def multinomial_counts():
    """Observed and expected for a 3-category example."""
    return np.array([60, 40, 100]), np.array([0.25, 0.25, 0.5])


@pytest.fixture
def eggs_table():
    """S. mansoni eggs in stools by age group, 2 x 5."""
    return np.array([
        [14, 16, 14, 7, 6],
        [87, 33, 66, 34, 11],
    ])


@pytest.fixture
def table_2x3():
    """Small 2 x 3 table with hand-computable statistics."""
    return np.array([[10, 20, 30], [10, 20, 10]])
