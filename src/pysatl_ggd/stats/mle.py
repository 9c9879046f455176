"""
Maximum likelihood helpers for zero-location samples.

- :func:`scale_from_shape` — closed-form ML scale at a known shape.
- :func:`mle_shape` — shape maximising the profile log-likelihood, with the
  scale profiled out through :func:`scale_from_shape`.

The profile estimate is an independent cross-check for
:func:`~pysatl_ggd.stats.gcm.gcmsearch`; it needs no logarithm of the data,
so exact zeros are allowed.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from scipy import optimize as _sp_optimize
from scipy.special import gammaln

from pysatl_ggd.errors import InvalidParameterError, NumericalDivergenceError
from pysatl_ggd.stats._samples import as_sample_array, normalized_magnitudes

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_ggd.types import FloatArray

logger = logging.getLogger(__name__)


def _log_scale(magnitudes: FloatArray, beta: float) -> float:
    # ln of (beta * mean(u^beta))^(1/beta) for normalised magnitudes u
    return (math.log(beta) + math.log(float(np.mean(magnitudes**beta)))) / beta


def scale_from_shape(x: ArrayLike, beta: float) -> float:
    """
    Maximum likelihood scale of a zero-location sample at shape ``beta``.

    ``alpha = (beta / n * sum(|x|^beta))^(1/beta)``

    Parameters
    ----------
    x : array_like
        Zero-location sample.
    beta : float
        Known shape, ``beta > 0``.

    Returns
    -------
    float
        Scale estimate.

    Raises
    ------
    InvalidParameterError
        If ``beta`` is not a finite positive number.
    """
    beta = float(beta)
    if not (math.isfinite(beta) and beta > 0):
        raise InvalidParameterError(f"beta must be a finite positive number, got {beta!r}")

    arr = as_sample_array(x)
    peak = float(np.abs(arr).max())
    return peak * math.exp(_log_scale(normalized_magnitudes(arr), beta))


def mle_shape(
    x: ArrayLike,
    bounds: tuple[float, float] = (0.05, 20.0),
    xatol: float = 1e-8,
) -> float:
    """
    Shape maximising the profile log-likelihood of a zero-location sample.

    Per observation the profile log-likelihood is
    ``ln(beta) - ln(2 Gamma(1/beta)) - ln(alpha(beta)) - 1/beta`` with
    ``alpha(beta)`` from :func:`scale_from_shape`.

    Parameters
    ----------
    x : array_like
        Zero-location sample.
    bounds : tuple[float, float], default (0.05, 20.0)
        Search interval for the shape.
    xatol : float, default 1e-8
        Absolute tolerance of the bounded scalar minimiser.

    Returns
    -------
    float
        Shape estimate within ``bounds``.

    Raises
    ------
    ValueError
        If ``bounds`` is not an increasing pair of positive numbers.
    NumericalDivergenceError
        If the optimiser reports failure.
    """
    low, high = bounds
    if not (0 < low < high and math.isfinite(high)):
        raise ValueError(f"bounds must satisfy 0 < low < high < inf, got {bounds}")

    magnitudes = normalized_magnitudes(as_sample_array(x))

    def negative_profile(beta: float) -> float:
        return -(
            math.log(beta)
            - math.log(2.0)
            - float(gammaln(1.0 / beta))
            - _log_scale(magnitudes, beta)
            - 1.0 / beta
        )

    result = _sp_optimize.minimize_scalar(
        negative_profile, bounds=(low, high), method="bounded", options={"xatol": xatol}
    )
    if not result.success:
        raise NumericalDivergenceError(
            f"Profile likelihood maximisation failed: {result.message}",
            last_iterate=float(result.x),
            iterations=int(result.nfev),
        )

    logger.debug("Profile MLE shape %.8g after %d evaluations", result.x, result.nfev)
    return float(result.x)
