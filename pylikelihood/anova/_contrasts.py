"""
Contrast coefficients for one-way ANOVA support.

Orthogonal polynomial contrasts match R's contr.poly(): scores 1..k are
centred, raised to powers 0..k-1, orthogonalized by QR and each column
scaled to unit length. Column 1 is linear, column 2 quadratic.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def poly_contrasts(k: int) -> NDArray[np.floating[Any]]:
    """
    Orthonormal polynomial contrasts for k equally spaced levels.

    Returns:
        (k, k-1) matrix; column j is the degree j+1 polynomial
    """
    if k < 2:
        raise ValueError(f"contrasts need at least 2 levels, got {k}")
    scores = np.arange(1, k + 1, dtype=np.float64)
    centred = scores - scores.mean()
    X = np.vander(centred, N=k, increasing=True)
    Q, R = np.linalg.qr(X)
    # Q * diag(R) is invariant to the sign convention of the QR routine
    Z = Q * np.diag(R)
    Z = Z / np.sqrt(np.sum(Z ** 2, axis=0))
    return Z[:, 1:]


def default_contrasts(
    k: int,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]] | None]:
    """Linear and (for k >= 3) quadratic polynomial contrasts."""
    P = poly_contrasts(k)
    linear = P[:, 0].copy()
    quadratic = P[:, 1].copy() if k >= 3 else None
    return linear, quadratic


def contrast_sum_sq(
    contrast: NDArray[np.floating[Any]],
    means: NDArray[np.floating[Any]],
    sizes: NDArray[np.floating[Any]],
) -> float:
    """
    Sum of squares explained by a contrast model.

    The contrast model puts group i's mean at b0 + b1 * c_i. Its
    regression sum of squares, weighted by group size, is

        SS = (sum n_i c_i (mean_i - grand))^2 / sum n_i (c_i - cbar)^2

    with cbar the size-weighted mean of c. For equal group sizes and
    coefficients summing to zero this is the familiar
    (sum c_i mean_i)^2 / sum(c_i^2 / n_i).
    """
    n = float(np.sum(sizes))
    grand = float(np.sum(sizes * means)) / n
    c_bar = float(np.sum(sizes * contrast)) / n
    sxy = float(np.sum(sizes * (contrast - c_bar) * (means - grand)))
    sxx = float(np.sum(sizes * (contrast - c_bar) ** 2))
    return sxy ** 2 / sxx
