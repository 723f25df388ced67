"""
Tests for the Brent bounded minimizer.

Validates:
    - Location of known minima to within tol
    - End points are never evaluated
    - Iteration cap reported as non-convergence
    - Bracket and tolerance validation
    - SolverTolerance defaults and validation
"""

import numpy as np
import pytest

from pylikelihood.core.compute.optimization import minimize_bounded
from pylikelihood.core.compute.tolerances import (
    DEFAULT_SOLVER_TOLERANCE,
    SolverTolerance,
)
from pylikelihood.core.exceptions import ValidationError


class TestKnownMinima:

    def test_quadratic(self):
        res = minimize_bounded(lambda x: (x - 0.3) ** 2, 0.0, 1.0, tol=1e-4)
        assert res.converged
        assert abs(res.minimum - 0.3) < 1e-4
        assert res.objective < 1e-8

    def test_extra_args(self):
        res = minimize_bounded(
            lambda x, c, s: s * (x - c) ** 2, -5.0, 5.0, args=(1.7, 3.0),
        )
        assert abs(res.minimum - 1.7) < 1e-4

    def test_non_smooth(self):
        res = minimize_bounded(lambda x: abs(x - 2.5), 0.0, 10.0, tol=1e-6)
        assert abs(res.minimum - 2.5) < 1e-5

    def test_cosine(self):
        res = minimize_bounded(np.cos, 2.0, 4.0, tol=1e-8)
        assert res.minimum == pytest.approx(np.pi, abs=1e-7)

    def test_minimum_at_edge_stays_inside(self):
        """Monotone function: minimizer approaches but never reaches b."""
        res = minimize_bounded(lambda x: -x, 0.0, 1.0, tol=1e-4)
        assert 0.999 < res.minimum < 1.0

    def test_never_evaluates_end_points(self):
        seen = []

        def f(x):
            seen.append(x)
            return np.log(x) ** 2 + np.log1p(-x) ** 2

        minimize_bounded(f, 0.0, 1.0, tol=1e-4)
        assert all(0.0 < x < 1.0 for x in seen)

    def test_deterministic(self):
        f = lambda x: (np.log(x) + 2.0) ** 2  # noqa: E731
        r1 = minimize_bounded(f, 0.0, 1.0)
        r2 = minimize_bounded(f, 0.0, 1.0)
        assert r1 == r2


class TestIterationCap:

    def test_cap_reported(self):
        res = minimize_bounded(lambda x: (x - 0.3) ** 2, 0.0, 1.0, max_iter=1)
        assert not res.converged
        assert res.iterations >= 1

    def test_iterations_counted(self):
        res = minimize_bounded(lambda x: (x - 0.3) ** 2, 0.0, 1.0)
        assert 0 < res.iterations < DEFAULT_SOLVER_TOLERANCE.max_iter


class TestValidation:

    def test_empty_bracket(self):
        with pytest.raises(ValidationError, match="bracket"):
            minimize_bounded(lambda x: x, 1.0, 1.0)

    def test_reversed_bracket(self):
        with pytest.raises(ValidationError, match="bracket"):
            minimize_bounded(lambda x: x, 1.0, 0.0)

    def test_nonpositive_tol(self):
        with pytest.raises(ValidationError, match="tol"):
            minimize_bounded(lambda x: x, 0.0, 1.0, tol=0.0)


class TestSolverTolerance:

    def test_defaults(self):
        assert DEFAULT_SOLVER_TOLERANCE.tol == 1e-4
        assert DEFAULT_SOLVER_TOLERANCE.max_iter == 500
        assert DEFAULT_SOLVER_TOLERANCE.residual_threshold == 1e-3

    def test_rejects_bad_tol(self):
        with pytest.raises(ValidationError):
            SolverTolerance(tol=-1.0)

    def test_rejects_bad_max_iter(self):
        with pytest.raises(ValidationError):
            SolverTolerance(max_iter=0)

    def test_rejects_bad_threshold(self):
        with pytest.raises(ValidationError):
            SolverTolerance(residual_threshold=0.0)
