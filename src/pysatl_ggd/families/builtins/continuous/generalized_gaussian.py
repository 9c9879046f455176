"""
Generalized Gaussian distribution family implementation.

Contains the Generalized Gaussian (generalized normal, exponential power)
family with scale-shape and std-shape parametrizations, its gamma/sign
sampler, and the :class:`GeneralizedGaussian` distribution class.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc, gammaincinv, gammaln

from pysatl_ggd.distributions.sampling import ArraySample
from pysatl_ggd.distributions.strategies import SamplingStrategy
from pysatl_ggd.distributions.support import ContinuousSupport
from pysatl_ggd.families.distribution import ParametricFamilyDistribution
from pysatl_ggd.families.parametric_family import ParametricFamily
from pysatl_ggd.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_ggd.families.registry import ParametricFamilyRegister
from pysatl_ggd.types import (
    CharacteristicName,
    FamilyName,
    FloatArray,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

    from pysatl_ggd.distributions.distribution import Distribution


def ggd_variates(
    rng: np.random.Generator,
    mu: float,
    alpha: float,
    beta: float,
    size: int | tuple[int, ...],
) -> FloatArray:
    """
    Draw Generalized Gaussian variates from gamma and sign variates.

    If ``G ~ Gamma(1/beta, 1)`` and ``B`` is a fair ``±1`` sign, then
    ``mu + alpha * B * G**(1/beta)`` has the GGD(mu, alpha, beta) law.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random stream the gamma and Bernoulli draws are taken from.
    mu, alpha, beta : float
        Location, scale and shape.
    size : int or tuple of int
        Output shape.

    Returns
    -------
    numpy.ndarray
        Array of variates of the requested shape.
    """
    gamma = rng.gamma(shape=1.0 / beta, scale=1.0, size=size)
    signs = 2 * rng.binomial(1, 0.5, size=size) - 1
    return cast(FloatArray, mu + alpha * signs * gamma ** (1.0 / beta))


class GammaSignSamplingStrategy(SamplingStrategy):
    """
    Exact sampler for the Generalized Gaussian family.

    Each draw combines a ``Gamma(1/beta, 1)`` variate and a fair sign; see
    :func:`ggd_variates`.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: Distribution, *, rng: np.random.Generator, **options: Any
    ) -> ArraySample:
        mu, alpha, beta = _scale_shape_values(cast(ParametricFamilyDistribution, distr))
        values = ggd_variates(rng, mu, alpha, beta, n)
        return ArraySample(np.asarray(values, dtype=np.float64).reshape(n, 1))


def _alpha_from_sigma(sigma: float, beta: float) -> float:
    return sigma * math.exp(0.5 * (gammaln(1.0 / beta) - gammaln(3.0 / beta)))


def _exp_or_inf(x: float) -> float:
    # Gamma ratios of small shapes exceed the double range
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _scale_shape_values(distr: ParametricFamilyDistribution) -> tuple[float, float, float]:
    values = distr.family.to_base(distr.parameters).parameters
    return values["mu"], values["alpha"], values["beta"]


def configure_generalized_gaussian_family() -> None:
    """
    Configure and register the Generalized Gaussian distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GENERALIZED_GAUSSIAN):
        return

    GGD_DOC = """
    Generalized Gaussian distribution.

    Symmetric unimodal family with location μ, scale α and shape β. β = 1 is
    the Laplace distribution, β = 2 the Normal distribution (with α = σ√2)
    and β → ∞ tends to the Uniform distribution on [μ - α, μ + α].

    Probability density function:
        f(x) = β / (2αΓ(1/β)) * exp(-(|x - μ|/α)^β)

    References
    ----------
    Nadarajah, S. (2005). A generalized normal distribution.
    Journal of Applied Statistics, 32(7), 685-694.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for the Generalized Gaussian distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - alpha: float (scale)
            - beta: float (shape)
        x : NumericArray
            Points at which to evaluate the density; ``±inf`` gives 0.

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_ScaleShape, parameters)
        mu, alpha, beta = parameters.mu, parameters.alpha, parameters.beta

        coefficient = _exp_or_inf(math.log(beta) - math.log(2.0 * alpha) - gammaln(1.0 / beta))
        z = np.abs(np.asarray(x, dtype=np.float64) - mu) / alpha
        return cast(NumericArray, coefficient * np.exp(-(z**beta)))

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density, evaluated in log space.

        Finite wherever ``x`` is finite, even when ``pdf`` underflows to 0;
        ``-inf`` at ``x = ±inf``.
        """
        parameters = cast(_ScaleShape, parameters)
        mu, alpha, beta = parameters.mu, parameters.alpha, parameters.beta

        log_coefficient = math.log(beta) - math.log(2.0 * alpha) - gammaln(1.0 / beta)
        z = np.abs(np.asarray(x, dtype=np.float64) - mu) / alpha
        return cast(NumericArray, log_coefficient - z**beta)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function.

        Uses the regularized lower incomplete gamma function
        ``P(1/β, (|x - μ|/α)^β)``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields mu, alpha, beta.
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_ScaleShape, parameters)
        mu, alpha, beta = parameters.mu, parameters.alpha, parameters.beta

        shifted = np.asarray(x, dtype=np.float64) - mu
        z = np.abs(shifted) / alpha
        return cast(NumericArray, 0.5 + 0.5 * np.sign(shifted) * gammainc(1.0 / beta, z**beta))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF).

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields mu, alpha, beta.
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p.
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly

        Raises
        ------
        ValueError
            If probability is outside [0, 1]
        """
        p = np.asarray(p, dtype=np.float64)
        if np.any((p < 0) | (p > 1)):
            raise ValueError("Probability must be in [0, 1]")

        parameters = cast(_ScaleShape, parameters)
        mu, alpha, beta = parameters.mu, parameters.alpha, parameters.beta

        radius = gammaincinv(1.0 / beta, np.abs(2.0 * p - 1.0)) ** (1.0 / beta)
        return cast(NumericArray, mu + np.sign(p - 0.5) * alpha * radius)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of the distribution (the location)."""
        return cast(_ScaleShape, parameters).mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance: α² Γ(3/β) / Γ(1/β)."""
        parameters = cast(_ScaleShape, parameters)
        beta = parameters.beta
        return parameters.alpha**2 * _exp_or_inf(gammaln(3.0 / beta) - gammaln(1.0 / beta))

    def std_func(parameters: Parametrization, data: Any) -> float:
        return math.sqrt(var_func(parameters, data))

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness (always 0, the density is symmetric)."""
        return 0.0

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = True) -> float:
        """Excess or raw kurtosis.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters.
        excess : bool
            If True (default) return Γ(5/β)Γ(1/β)/Γ(3/β)² - 3, otherwise the
            raw kurtosis without the -3 term.

        Returns
        -------
        float
            Kurtosis value
        """
        beta = cast(_ScaleShape, parameters).beta
        raw = _exp_or_inf(gammaln(5.0 / beta) + gammaln(1.0 / beta) - 2.0 * gammaln(3.0 / beta))
        return raw - 3.0 if excess else raw

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy: 1/β - ln(β / (2αΓ(1/β)))."""
        parameters = cast(_ScaleShape, parameters)
        alpha, beta = parameters.alpha, parameters.beta
        return 1.0 / beta - math.log(beta) + math.log(2.0 * alpha) + float(gammaln(1.0 / beta))

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of the distribution (the real line)."""
        return ContinuousSupport()

    GeneralizedGaussianFamily = ParametricFamily(
        name=FamilyName.GENERALIZED_GAUSSIAN,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scaleShape", "stdShape"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOGPDF: logpdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.MEDIAN: mean_func,
            CharacteristicName.MODE: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.STD: std_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=GammaSignSamplingStrategy(),
        support_by_parametrization=_support,
    )
    GeneralizedGaussianFamily.__doc__ = GGD_DOC

    @parametrization(family=GeneralizedGaussianFamily, name="scaleShape")
    class _ScaleShape(Parametrization):
        """
        Standard parametrization of the Generalized Gaussian distribution.

        Parameters
        ----------
        mu : float
            Location of the distribution
        alpha : float
            Scale of the distribution
        beta : float
            Shape of the distribution
        """

        mu: float
        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            """Check that scale is positive."""
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that shape is positive."""
            return self.beta > 0

    @parametrization(family=GeneralizedGaussianFamily, name="stdShape")
    class _StdShape(Parametrization):
        """
        Standard-deviation parametrization.

        Parameters
        ----------
        mu : float
            Location of the distribution
        sigma : float
            Standard deviation of the distribution
        beta : float
            Shape of the distribution
        """

        mu: float
        sigma: float
        beta: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that shape is positive."""
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to scale-shape parametrization via
            α = σ √(Γ(1/β) / Γ(3/β)).
            """
            alpha = _alpha_from_sigma(self.sigma, self.beta)
            return _ScaleShape(mu=self.mu, alpha=alpha, beta=self.beta)

    ParametricFamilyRegister.register(GeneralizedGaussianFamily)


def generalized_gaussian_family() -> ParametricFamily:
    """Return the registered Generalized Gaussian family, configuring it if needed."""
    configure_generalized_gaussian_family()
    return ParametricFamilyRegister.get(FamilyName.GENERALIZED_GAUSSIAN)


class GeneralizedGaussian(ParametricFamilyDistribution):
    """
    Generalized Gaussian distribution with location ``mu``, scale ``alpha``
    and shape ``beta``.

    ``GeneralizedGaussian(mu, alpha, beta)``
        Explicit parameters; ``alpha > 0`` and ``beta > 0``.
    ``GeneralizedGaussian(beta)``
        Shape only, with ``mu = 0`` and ``alpha = 1``.
    ``GeneralizedGaussian()``
        Standard Normal: ``mu = 0``, ``alpha = √2``, ``beta = 2``.

    Raises
    ------
    InvalidParameterError
        If ``alpha <= 0`` or ``beta <= 0``.
    TypeError
        If called with two or more than three positional arguments.

    Examples
    --------
    >>> d = GeneralizedGaussian(1.8)
    >>> d.params()
    (0.0, 1.0, 1.8)
    """

    __slots__ = ()

    def __init__(self, *args: float) -> None:
        if len(args) == 0:
            mu, alpha, beta = 0.0, math.sqrt(2.0), 2.0
        elif len(args) == 1:
            mu, alpha, beta = 0.0, 1.0, args[0]
        elif len(args) == 3:
            mu, alpha, beta = args
        else:
            raise TypeError(
                "GeneralizedGaussian expects (), (beta,) or (mu, alpha, beta), "
                f"got {len(args)} arguments"
            )

        family = generalized_gaussian_family()
        self._bind(
            family, family.make_parameters(mu=float(mu), alpha=float(alpha), beta=float(beta))
        )

    @classmethod
    def from_std(cls, mu: float, sigma: float, beta: float) -> GeneralizedGaussian:
        """
        Create the distribution from its standard deviation instead of scale.

        Parameters
        ----------
        mu : float
            Location.
        sigma : float
            Standard deviation, ``sigma > 0``.
        beta : float
            Shape, ``beta > 0``.
        """
        family = generalized_gaussian_family()
        parameters = family.make_parameters(
            "stdShape", mu=float(mu), sigma=float(sigma), beta=float(beta)
        )
        instance = cls.__new__(cls)
        instance._bind(family, parameters)
        return instance

    def _bind(self, family: ParametricFamily, parameters: Parametrization) -> None:
        ParametricFamilyDistribution.__init__(
            self,
            family.name,
            family.distribution_type,
            parameters,
            family.support_resolver(family.to_base(parameters)),
        )

    @property
    def family(self) -> ParametricFamily:
        """The Generalized Gaussian family, re-registered if the register was reset."""
        return generalized_gaussian_family()

    def __repr__(self) -> str:
        mu, alpha, beta = self.params()
        return f"{type(self).__name__}(mu={mu!r}, alpha={alpha!r}, beta={beta!r})"

    def params(self) -> tuple[float, float, float]:
        """Return ``(mu, alpha, beta)``."""
        return _scale_shape_values(self)

    def location(self) -> float:
        return self.params()[0]

    def scale(self) -> float:
        return self.params()[1]

    def shape(self) -> float:
        return self.params()[2]

    def _characteristic(self, name: CharacteristicName, **options: Any) -> float:
        return float(self.query_method(name)(None, **options))

    def mean(self) -> float:
        return self._characteristic(CharacteristicName.MEAN)

    def median(self) -> float:
        return self._characteristic(CharacteristicName.MEDIAN)

    def mode(self) -> float:
        return self._characteristic(CharacteristicName.MODE)

    def var(self) -> float:
        """Variance α² Γ(3/β) / Γ(1/β)."""
        return self._characteristic(CharacteristicName.VAR)

    def std(self) -> float:
        return self._characteristic(CharacteristicName.STD)

    def skewness(self) -> float:
        return self._characteristic(CharacteristicName.SKEW)

    def kurtosis(self, excess: bool = True) -> float:
        """Excess kurtosis by default; ``excess=False`` gives the raw value."""
        return self._characteristic(CharacteristicName.KURT, excess=excess)

    def entropy(self) -> float:
        return self._characteristic(CharacteristicName.ENTROPY)
