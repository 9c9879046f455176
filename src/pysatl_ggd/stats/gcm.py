"""
Globally Convergent Method for the Shape Parameter
==================================================

Newton-Raphson estimation of the Generalized Gaussian shape ``beta`` from a
zero-location sample, following Song (2006).

For a sample ``x`` of size ``n`` and a trial shape ``beta``::

    S1 = mean(|x|^beta)         L1 = sum(|x|^beta  * ln|x|)
    S2 = mean(|x|^(2 beta))     L2 = sum(|x|^(2 beta) * ln|x|)

    Zn = S2 / S1^2 - (beta + 1)
    Zp = [(2/n) L2 S1^2 - (1/n) L1 S2 (2 S1)] / S1^4 - 1     (= dZn/dbeta)

``Zn`` vanishes at the true shape. It is convex and increasing to the right
of its root, so Newton steps started right of the root descend onto it
monotonically; the default starting point ``mean|x| / std(x) + 3`` lies in
that region for practical shapes.

Notes
-----
``Zn`` and ``Zp`` are invariant under rescaling of the sample. Magnitudes
are divided by ``max|x|`` before any power is taken, which keeps every
``|x|^beta`` in ``[0, 1]``.

References
----------
Song, K.-S. (2006). A globally convergent and consistent method for
estimating the shape parameter of a generalized Gaussian distribution.
IEEE Transactions on Information Theory, 52(2), 510-527.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
import warnings
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

from pysatl_ggd.errors import (
    ConvergenceWarning,
    InvalidParameterError,
    NumericalDivergenceError,
)
from pysatl_ggd.stats._samples import (
    ZeroPolicy,
    apply_zero_policy,
    as_sample_array,
    normalized_log_magnitudes,
)

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pysatl_ggd.types import FloatArray

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = math.sqrt(float(np.finfo(np.float64).eps))
"""Absolute tolerance on successive iterates, ``sqrt(machine epsilon)``."""


@dataclass(frozen=True, slots=True)
class GCMSearchConfig:
    """
    Settings of the GCM Newton-Raphson search.

    Parameters
    ----------
    max_iter : int, default 1000
        Maximum number of Newton steps.
    tol : float, default sqrt(eps)
        The search stops once two successive iterates differ by at most
        ``tol``.
    initial_offset : float, default 3.0
        Offset added to ``mean|x| / std(x)`` for the default starting point.
    zero_policy : ZeroPolicy or str, default "raise"
        ``"raise"`` rejects samples with exact zeros (``ln 0`` is undefined),
        ``"drop"`` discards them.
    strict : bool, default False
        If True, reaching ``max_iter`` without convergence raises
        :class:`~pysatl_ggd.errors.NumericalDivergenceError` instead of
        emitting a :class:`~pysatl_ggd.errors.ConvergenceWarning`.
    """

    max_iter: int = 1000
    tol: float = DEFAULT_TOLERANCE
    initial_offset: float = 3.0
    zero_policy: ZeroPolicy = ZeroPolicy.RAISE
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")
        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        object.__setattr__(self, "zero_policy", ZeroPolicy(self.zero_policy))


@dataclass(frozen=True, slots=True)
class GCMResult:
    """
    Outcome of a GCM search.

    Attributes
    ----------
    shape : float
        Last Newton iterate, the shape estimate.
    iterations : int
        Number of Newton steps taken.
    converged : bool
        Whether the successive-iterate criterion was met.
    initial : float
        Starting point of the search.
    residual : float
        ``Zn`` evaluated at ``shape``.
    n : int
        Number of observations used.
    """

    shape: float
    iterations: int
    converged: bool
    initial: float
    residual: float
    n: int


def _zn_zp(log_magnitudes: FloatArray, beta: float) -> tuple[float, float]:
    n = log_magnitudes.size
    p1 = np.exp(beta * log_magnitudes)
    p2 = p1 * p1

    s1 = float(p1.mean())
    s2 = float(p2.mean())
    l1 = float(np.dot(p1, log_magnitudes))
    l2 = float(np.dot(p2, log_magnitudes))

    zn = s2 / s1**2 - (beta + 1.0)
    zp = ((2.0 / n) * l2 * s1**2 - (1.0 / n) * l1 * s2 * (2.0 * s1)) / s1**4 - 1.0
    return zn, zp


def _prepare(x: ArrayLike, zero_policy: ZeroPolicy | str) -> tuple[FloatArray, FloatArray]:
    arr = apply_zero_policy(as_sample_array(x), zero_policy)
    return arr, normalized_log_magnitudes(arr)


def _check_shape(beta: float, what: str) -> float:
    beta = float(beta)
    if not (math.isfinite(beta) and beta > 0):
        raise InvalidParameterError(f"{what} must be a finite positive number, got {beta!r}")
    return beta


def zn(x: ArrayLike, beta: float) -> float:
    """
    Root-finding residual ``Zn(beta) = S2 / S1^2 - (beta + 1)``.

    Parameters
    ----------
    x : array_like
        Zero-location sample without exact zeros.
    beta : float
        Trial shape, ``beta > 0``.

    Returns
    -------
    float
        Residual; zero at the true shape.
    """
    _, log_magnitudes = _prepare(x, ZeroPolicy.RAISE)
    return _zn_zp(log_magnitudes, _check_shape(beta, "beta"))[0]


def zp(x: ArrayLike, beta: float) -> float:
    """
    Analytic derivative of :func:`zn` with respect to ``beta``.

    Parameters
    ----------
    x : array_like
        Zero-location sample without exact zeros.
    beta : float
        Trial shape, ``beta > 0``.

    Returns
    -------
    float
        ``dZn/dbeta`` at ``beta``.
    """
    _, log_magnitudes = _prepare(x, ZeroPolicy.RAISE)
    return _zn_zp(log_magnitudes, _check_shape(beta, "beta"))[1]


def initial_shape_estimate(x: ArrayLike, offset: float = 3.0) -> float:
    """
    Absolute-moment starting point ``mean(|x|) / std(x) + offset``.

    ``std`` is the sample standard deviation (``ddof=1``).

    Raises
    ------
    ValueError
        If the sample standard deviation is zero.
    """
    arr = as_sample_array(x)
    std = float(np.std(arr, ddof=1))
    if std == 0.0:
        raise ValueError("Sample standard deviation is zero; supply beta_init explicitly")
    return float(np.mean(np.abs(arr))) / std + offset


def gcm_fit(
    x: ArrayLike,
    beta_init: float | None = None,
    max_iter: int | None = None,
    *,
    config: GCMSearchConfig | None = None,
) -> GCMResult:
    """
    Estimate the shape parameter and report how the search went.

    Parameters
    ----------
    x : array_like
        i.i.d. sample from a zero-location Generalized Gaussian distribution.
    beta_init : float, optional
        Starting shape. Defaults to :func:`initial_shape_estimate`.
    max_iter : int, optional
        Overrides ``config.max_iter``.
    config : GCMSearchConfig, optional
        Search settings; defaults to ``GCMSearchConfig()``.

    Returns
    -------
    GCMResult
        Estimate, iteration count and convergence flag.

    Raises
    ------
    DomainError
        If the sample holds non-finite values, or zeros under the ``"raise"``
        zero policy.
    NumericalDivergenceError
        If ``Zp`` vanishes or is not finite, if an iterate leaves
        ``(0, inf)``, or (with ``strict=True``) if the search does not
        converge within ``max_iter`` steps.
    InvalidParameterError
        If ``beta_init`` is not a finite positive number.
    """
    if config is None:
        config = GCMSearchConfig()
    if max_iter is not None:
        config = replace(config, max_iter=max_iter)

    arr, log_magnitudes = _prepare(x, config.zero_policy)

    if beta_init is None:
        beta_init = initial_shape_estimate(arr, config.initial_offset)
    beta_init = _check_shape(beta_init, "beta_init")

    def newton_step(beta: float, iterations: int) -> float:
        residual, slope = _zn_zp(log_magnitudes, beta)
        if slope == 0.0 or not math.isfinite(slope) or not math.isfinite(residual):
            raise NumericalDivergenceError(
                f"Newton step undefined: Zn={residual!r}, Zp={slope!r}",
                last_iterate=beta,
                iterations=iterations,
            )
        following = beta - residual / slope
        if not (math.isfinite(following) and following > 0):
            raise NumericalDivergenceError(
                f"Newton iterate left the shape domain: {following!r}",
                last_iterate=beta,
                iterations=iterations,
            )
        return following

    logger.debug("GCM search on %d observations from beta=%.6g", arr.size, beta_init)

    previous = beta_init
    current = newton_step(previous, 0)
    iterations = 1
    while iterations < config.max_iter and abs(current - previous) > config.tol:
        previous = current
        current = newton_step(previous, iterations)
        iterations += 1
        logger.debug("GCM iteration %d: beta=%.12g", iterations, current)

    converged = abs(current - previous) <= config.tol
    if not converged:
        message = (
            f"GCM search did not converge in {iterations} iterations "
            f"(last step {abs(current - previous):.3g}, tolerance {config.tol:.3g})"
        )
        if config.strict:
            raise NumericalDivergenceError(message, last_iterate=current, iterations=iterations)
        warnings.warn(message, ConvergenceWarning, stacklevel=2)

    residual = _zn_zp(log_magnitudes, current)[0]
    logger.debug(
        "GCM search finished: beta=%.12g, iterations=%d, converged=%s",
        current,
        iterations,
        converged,
    )
    return GCMResult(
        shape=current,
        iterations=iterations,
        converged=converged,
        initial=beta_init,
        residual=residual,
        n=int(arr.size),
    )


def gcmsearch(
    x: ArrayLike,
    beta_init: float | None = None,
    max_iter: int | None = None,
    *,
    config: GCMSearchConfig | None = None,
) -> float:
    """
    Estimate the Generalized Gaussian shape parameter of ``x``.

    Parameters
    ----------
    x : array_like
        i.i.d. sample from a zero-location Generalized Gaussian distribution.
    beta_init : float, optional
        Starting shape; defaults to ``mean(|x|) / std(x) + 3``.
    max_iter : int, optional
        Maximum number of Newton steps (1000 unless ``config`` says
        otherwise). When reached without convergence the last iterate is
        returned and a :class:`~pysatl_ggd.errors.ConvergenceWarning` is
        emitted.
    config : GCMSearchConfig, optional
        Further search settings.

    Returns
    -------
    float
        Estimated shape.

    Examples
    --------
    >>> from pysatl_ggd import GeneralizedGaussian, sample
    >>> x = sample(GeneralizedGaussian(1.8), 7000, rng=1)
    >>> beta = gcmsearch(x)
    """
    return gcm_fit(x, beta_init, max_iter, config=config).shape
