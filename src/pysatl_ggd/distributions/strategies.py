"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy` — resolves characteristic methods.
- :class:`DefaultComputationStrategy` — resolves analytical characteristics
  provided by the distribution.
- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; the random stream is passed in by the caller.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_ggd.distributions.computation import AnalyticalComputation
from pysatl_ggd.types import CharacteristicName, GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution provides for the
    requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical implementation for the
        characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for interface compatibility.

        Returns
        -------
        Method
            Analytical callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state not in computations:
            available = ", ".join(sorted(computations)) or "none"
            raise RuntimeError(
                f"No analytical computation for '{state}' (available: {available})."
            )
        return computations[state]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(
        self, n: int, distr: "Distribution", *, rng: np.random.Generator, **options: Any
    ) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", *, rng: np.random.Generator, **options: Any
    ) -> ArraySample:
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        U = rng.random(n)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
