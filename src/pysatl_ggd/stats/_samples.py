"""
Sample validation shared by the shape estimators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from pysatl_ggd.errors import DomainError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_ggd.types import FloatArray


class ZeroPolicy(StrEnum):
    """
    Handling of exact zeros in samples passed to log-moment estimators.

    Attributes
    ----------
    RAISE : str
        Reject the sample with :class:`~pysatl_ggd.errors.DomainError`.
    DROP : str
        Remove zero observations before estimation.
    """

    RAISE = "raise"
    DROP = "drop"


def as_sample_array(x: ArrayLike, *, min_size: int = 2) -> FloatArray:
    """
    Convert observations to a flat float64 array and validate them.

    Parameters
    ----------
    x : array_like
        Observations; any shape, flattened in C order.
    min_size : int, default 2
        Minimum number of observations.

    Returns
    -------
    numpy.ndarray
        1D array of observations.

    Raises
    ------
    DomainError
        If any observation is NaN or infinite.
    ValueError
        If fewer than ``min_size`` observations are given.
    """
    arr = np.asarray(x, dtype=np.float64).ravel()
    if not np.all(np.isfinite(arr)):
        raise DomainError("Sample contains non-finite values")
    if arr.size < min_size:
        raise ValueError(f"At least {min_size} observations are required, got {arr.size}")
    return arr


def apply_zero_policy(
    arr: FloatArray, policy: ZeroPolicy | str, *, min_size: int = 2
) -> FloatArray:
    """
    Apply ``policy`` to exact zeros of ``arr``.

    Raises
    ------
    DomainError
        If ``arr`` contains zeros and the policy is ``"raise"``.
    ValueError
        If the policy is unknown or dropping zeros leaves fewer than
        ``min_size`` observations.
    """
    policy = ZeroPolicy(policy)
    zeros = arr == 0.0
    if not zeros.any():
        return arr

    if policy is ZeroPolicy.RAISE:
        raise DomainError(
            f"Sample contains {int(zeros.sum())} zero value(s); the logarithm of a "
            "non-positive value is undefined (use zero_policy='drop' to discard them)"
        )

    kept = arr[~zeros]
    if kept.size < min_size:
        raise ValueError(
            f"At least {min_size} non-zero observations are required, got {kept.size}"
        )
    return kept


def normalized_magnitudes(arr: FloatArray) -> FloatArray:
    """Return ``|arr| / max|arr|``, a scale-free copy with values in ``[0, 1]``."""
    magnitudes = np.abs(arr)
    peak = magnitudes.max()
    if peak == 0.0:
        raise ValueError("All observations are zero")
    return magnitudes / peak


def normalized_log_magnitudes(arr: FloatArray) -> FloatArray:
    """
    Return ``log(|arr| / max|arr|)`` for a sample without zeros.

    The logarithms are taken before the division, so tiny observations next
    to large ones stay finite instead of underflowing to ``log(0)``.
    """
    log_magnitudes = np.log(np.abs(arr))
    return log_magnitudes - log_magnitudes.max()
