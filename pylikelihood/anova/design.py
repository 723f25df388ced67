"""
ANOVA design object.

Wraps validated data, integer group codes and contrast coefficients for
one-way ANOVA support. Groups are ordered by ascending code, which is the
order contrast coefficients refer to.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylikelihood.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)
from pylikelihood.core.exceptions import DimensionError, ValidationError


@dataclass(frozen=True)
class ContrastSpec:
    """
    Contrast coefficient vectors, one coefficient per group.

    None means the default: linear orthogonal polynomial for contrast1,
    quadratic for contrast2 (three or more groups only). Coefficients need
    not sum to zero.
    """
    contrast1: NDArray[np.floating[Any]] | None = None
    contrast2: NDArray[np.floating[Any]] | None = None


def _check_contrast(contrast: Any, n_groups: int, name: str) -> NDArray[np.floating[Any]]:
    c = check_array(contrast, name)
    check_1d(c, name)
    check_finite(c, name)
    if len(c) != n_groups:
        raise DimensionError(
            f"{name}: needs one coefficient per group ({n_groups}), got {len(c)}"
        )
    if np.all(c == c[0]):
        raise ValidationError(
            f"{name}: coefficients must not all be equal, got {c.tolist()}"
        )
    return c


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA support.

    Created via for_oneway(), not directly.
    """
    y: NDArray[np.floating[Any]]
    group: NDArray[np.integer[Any]]
    levels: NDArray[np.integer[Any]]
    contrasts: ContrastSpec
    n: int

    @property
    def n_groups(self) -> int:
        return len(self.levels)

    @staticmethod
    def for_oneway(
        y: Any,
        group: Any,
        contrast1: Any = None,
        contrast2: Any = None,
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA support.

        Args:
            y: Response variable (1D numeric)
            group: Integer group codes (1D, same length as y)
            contrast1: Coefficients for the first contrast, or None
            contrast2: Coefficients for the second contrast, or None

        Returns:
            AnovaDesign
        """
        y_arr = check_array(y, "y")
        check_1d(y_arr, "y")
        check_finite(y_arr, "y")
        check_min_samples(y_arr, 2, "y")

        group_arr = np.asarray(group)
        if group_arr.ndim != 1:
            raise DimensionError(f"group: expected 1D, got {group_arr.ndim}D")
        check_consistent_length(y_arr, group_arr, names=("y", "group"))

        if np.issubdtype(group_arr.dtype, np.floating):
            if not np.all(np.isfinite(group_arr)):
                raise ValidationError("group: contains missing codes")
            if not np.all(group_arr == np.round(group_arr)):
                raise ValidationError("group: codes must be integers")
            group_arr = group_arr.astype(np.int64)
        elif not np.issubdtype(group_arr.dtype, np.integer):
            raise ValidationError(
                f"group: expected integer codes, got dtype {group_arr.dtype}"
            )

        levels = np.unique(group_arr)
        k = len(levels)
        if k < 2:
            raise ValidationError(f"group: need at least 2 groups, got {k}")

        n = len(y_arr)
        # AICc for the groups model (k means + variance) needs n > k + 2
        if n <= k + 2:
            raise ValidationError(
                f"y: need more than {k + 2} observations for {k} groups, got {n}"
            )

        c1 = None if contrast1 is None else _check_contrast(contrast1, k, "contrast1")
        c2 = None if contrast2 is None else _check_contrast(contrast2, k, "contrast2")

        return AnovaDesign(
            y=y_arr,
            group=group_arr,
            levels=levels,
            contrasts=ContrastSpec(contrast1=c1, contrast2=c2),
            n=n,
        )
