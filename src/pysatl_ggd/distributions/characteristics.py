"""
Characteristics API
===================

Lightweight wrappers for calling a distribution's characteristic (e.g. ``pdf``,
``cdf``, ``ppf``) resolved by its computation strategy.

The module exposes the generic helper :class:`GenericCharacteristic` and
ready-made descriptors used as free functions::

    pdf(distribution, x)
    logpdf(distribution, x)
    cdf(distribution, x)
    ppf(distribution, p)
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from pysatl_ggd.distributions.strategies import Method
from pysatl_ggd.types import (
    CharacteristicName,
    GenericCharacteristicName,
    NumericArray,
)

if TYPE_CHECKING:
    from pysatl_ggd.distributions.distribution import Distribution


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).

    Notes
    -----
    This object does not implement the characteristic itself. It resolves and
    calls the analytical function via the distribution's
    :class:`~pysatl_ggd.distributions.strategies.ComputationStrategy`.

    Examples
    --------
    >>> from pysatl_ggd.distributions.characteristics import GenericCharacteristic
    >>> PDF = GenericCharacteristic[float, float]("pdf")
    >>> # Later:
    >>> # value = PDF(dist, 0.0)  # resolves dist's pdf(0.0)
    """

    name: GenericCharacteristicName

    def __call__(self, distribution: "Distribution", data: In, **options: Any) -> Out:
        """
        Evaluate the characteristic on the given data.

        Parameters
        ----------
        distribution : Distribution
            Distribution instance providing the computation strategy.
        data : Any
            Scalar or array input for the characteristic.
        **options
            Characteristic-specific options.

        Returns
        -------
        Any
            Characteristic value at ``data``.
        """
        method = cast(
            Method[In, Out],
            distribution.computation_strategy.query_method(self.name, distribution),
        )
        return method(data, **options)


type _Evaluated = float | NumericArray

pdf = GenericCharacteristic[_Evaluated, _Evaluated](CharacteristicName.PDF)
"""Probability density function ``pdf(distribution, x)``."""

logpdf = GenericCharacteristic[_Evaluated, _Evaluated](CharacteristicName.LOGPDF)
"""Log-density ``logpdf(distribution, x)``; ``-inf`` where the density vanishes."""

cdf = GenericCharacteristic[_Evaluated, _Evaluated](CharacteristicName.CDF)
"""Cumulative distribution function ``cdf(distribution, x)``."""

ppf = GenericCharacteristic[_Evaluated, _Evaluated](CharacteristicName.PPF)
"""Percent point function (inverse CDF) ``ppf(distribution, p)``."""
