"""
Computation Primitives
======================

Building blocks used to evaluate distribution characteristics:

- :class:`Computation` — protocol for a callable bound to one characteristic.
- :class:`AnalyticalComputation` — closed-form callable provided by a family
  for a concrete set of parameters.

Notes
-----
- Callables accept scalars or NumPy arrays; moment-like characteristics
  ignore their data argument (pass ``None``).
- ``**options`` are forwarded untouched (e.g. ``excess`` for kurtosis).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from mypy_extensions import KwArg

from pysatl_ggd.types import GenericCharacteristicName


@runtime_checkable
class Computation[In, Out](Protocol):
    """Callable for a single characteristic.

    Attributes
    ----------
    target : str
        The characteristic name this computation represents.
    """

    @property
    def target(self) -> GenericCharacteristicName: ...
    def __call__(self, data: In, **options: Any) -> Out: ...


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Closed-form callable, already bound to the distribution parameters.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)
