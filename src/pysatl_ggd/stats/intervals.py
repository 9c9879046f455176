"""
Confidence interval for the GCM shape estimate.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_ggd.errors import DomainError


def _center(beta_hat: float) -> float:
    # acoth(s) = 0.5 log((beta + 2s + 2) / beta) for s = sqrt(beta + 1), free of s - 1
    if beta_hat == 0.0:
        return math.inf
    s = math.sqrt(beta_hat + 1.0)
    if beta_hat < 1.0:
        return 0.5 * (math.log(beta_hat + 2.0 * s + 2.0) - math.log(beta_hat))
    return 0.5 * math.log1p(2.0 * (s + 1.0) / beta_hat)


def _csch_squared(t: float) -> float:
    # coth(t)^2 - 1 for t > 0, in terms of exp(-2t)
    u = math.exp(-2.0 * t)
    return 4.0 * u / math.expm1(-2.0 * t) ** 2


def gcmci(beta_hat: float, n: int, z: float = 1.96) -> tuple[float, float]:
    """
    Confidence interval for a GCM shape estimate.

    With ``c = acoth(sqrt(beta_hat + 1))`` and ``d = z / sqrt(2 n)`` the bounds
    are ``coth(c ± d)^2 - 1``. Since ``coth`` decreases on ``(0, inf)`` the
    ``c - d`` branch gives the upper bound; when ``c - d <= 0`` that bound is
    unbounded and ``inf`` is returned.

    Parameters
    ----------
    beta_hat : float
        Shape estimate, ``beta_hat >= 0``.
    n : int
        Sample size the estimate was computed from, ``n >= 1``.
    z : float, default 1.96
        Standard normal quantile of the two-sided level (1.96 for 95%).

    Returns
    -------
    tuple[float, float]
        ``(lower, upper)`` with ``lower <= beta_hat <= upper``.

    Raises
    ------
    DomainError
        If ``beta_hat`` is negative or not finite (``acoth`` needs an
        argument of at least 1).
    ValueError
        If ``n < 1`` or ``z`` is negative or not finite.
    """
    beta_hat = float(beta_hat)
    if not (math.isfinite(beta_hat) and beta_hat >= 0.0):
        raise DomainError(
            f"beta_hat must be finite and non-negative so that acoth(sqrt(beta_hat + 1)) "
            f"is defined, got {beta_hat!r}"
        )
    if n < 1:
        raise ValueError(f"Sample size must be at least 1, got {n}")
    if not (math.isfinite(z) and z >= 0.0):
        raise ValueError(f"z must be finite and non-negative, got {z!r}")

    center = _center(beta_hat)
    half_width = z / math.sqrt(2.0 * n)

    a = _csch_squared(center + half_width)
    lower_arg = center - half_width
    b = _csch_squared(lower_arg) if lower_arg > 0.0 else math.inf

    return min(a, b), max(a, b)
