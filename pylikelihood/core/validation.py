"""
Input validation for counts, probabilities, responses and scalar options.

Every check raises on the first violation, naming the parameter and
showing the offending values. Nothing is clipped, renormalized or
otherwise repaired: a probability vector that does not sum to 1 is an
error, not something to rescale.

Array checks return None; check_array and check_scalar_finite return the
converted value.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylikelihood.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types, None entries or
    non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating missing entries "
            f"or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of entries.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} entries, got {n}"
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is >= 0 (counts).

    Raises:
        ValidationError: If any entry is negative
    """
    negative = np.flatnonzero(np.ravel(array) < 0)
    if len(negative) > 0:
        raise ValidationError(
            f"{name}: must not contain negative counts "
            f"(positions {negative.tolist()})"
        )


def check_positive(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every entry is strictly > 0.

    Raises:
        ValidationError: If any entry is zero or negative
    """
    bad = np.flatnonzero(np.ravel(array) <= 0)
    if len(bad) > 0:
        raise ValidationError(
            f"{name}: must not contain zero or negative values "
            f"(positions {bad.tolist()})"
        )


def check_sums_to_one(
    array: NDArray[np.floating[Any]],
    name: str,
    atol: float = 1e-8,
) -> None:
    """
    Verify a probability vector sums to 1 within an absolute tolerance.

    Raises:
        ValidationError: If the sum differs from 1 by more than atol
    """
    total = float(np.sum(array))
    if abs(total - 1.0) > atol:
        raise ValidationError(
            f"{name}: probabilities must sum to 1, got {total!r}"
        )


def check_scalar_finite(value: Any, name: str) -> float:
    """
    Convert a scalar option to float and verify it is finite.

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a finite real number
    """
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: expected a number, got {value!r}") from e
    if not np.isfinite(result):
        raise ValidationError(f"{name}: must be finite, got {result}")
    return result
