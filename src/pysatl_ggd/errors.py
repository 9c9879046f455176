"""
Error Taxonomy
==============

Exceptions and warnings raised by PySATL GGD:

- :class:`InvalidParameterError` — a parametrization constraint does not hold.
- :class:`DomainError` — a function is evaluated outside its analytic domain.
- :class:`NumericalDivergenceError` — an iterative procedure cannot continue.
- :class:`ConvergenceWarning` — an iterative procedure stopped at its
  iteration cap before meeting the convergence criterion.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """Distribution parameters violate a constraint of their parametrization."""


class DomainError(ValueError):
    """Argument lies outside the analytic domain of the evaluated function."""


class NumericalDivergenceError(ArithmeticError):
    """
    Newton-Raphson iteration cannot produce a valid next iterate.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    last_iterate : float
        Last valid iterate before the failure.
    iterations : int
        Number of Newton steps taken.
    """

    def __init__(self, message: str, *, last_iterate: float, iterations: int) -> None:
        super().__init__(f"{message} (last iterate {last_iterate!r}, {iterations} iterations)")
        self.last_iterate = last_iterate
        self.iterations = iterations


class ConvergenceWarning(RuntimeWarning):
    """Iteration cap reached before the convergence criterion was satisfied."""


__all__ = [
    "InvalidParameterError",
    "DomainError",
    "NumericalDivergenceError",
    "ConvergenceWarning",
]
