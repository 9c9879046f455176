"""
Sampling Interfaces
===================

Sample containers returned by sampling strategies and the public
:func:`sample` entry point.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from typing import TYPE_CHECKING, Protocol, overload

import numpy as np

from pysatl_ggd.distributions.streams import resolve_rng

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_ggd.distributions.distribution import Distribution
    from pysatl_ggd.distributions.streams import RNGLike
    from pysatl_ggd.types import FloatArray


class Sample(Protocol):
    """
    Protocol for sample containers.

    Attributes
    ----------
    array : numpy.ndarray
        Array representation of the samples.
    shape : tuple[int, ...]
        Shape of the sample array.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Array-backed sample container.

    Stores samples as a 2D floating-point array of shape
    ``(n_samples, n_dimensions)``.

    Parameters
    ----------
    data : numpy.ndarray
        2D floating-point array of shape (n, d).

    Raises
    ------
    ValueError
        If data is not 2D.
    """

    dimension: int
    data: FloatArray

    def __init__(self, data: FloatArray) -> None:
        if data.ndim != 2:
            raise ValueError("ArraySample expects 2D array of shape (n, d).")
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        """Return the number of samples (n)."""
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[FloatArray]:
        """Iterate over samples (rows of the array)."""
        yield from self.data

    @property
    def array(self) -> FloatArray:
        """Return the backing array."""
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        """Return the shape of the sample array (n, d)."""
        n, d = self.data.shape
        return int(n), int(d)

    def ravel(self) -> FloatArray:
        """Return the samples as a flat 1D array (univariate samples)."""
        return self.data.reshape(-1)


@overload
def sample(distr: Distribution, size: None = None, *, rng: RNGLike = None) -> float: ...
@overload
def sample(
    distr: Distribution, size: int | tuple[int, ...], *, rng: RNGLike = None
) -> FloatArray: ...


def sample(
    distr: Distribution,
    size: int | tuple[int, ...] | None = None,
    *,
    rng: RNGLike = None,
) -> float | FloatArray:
    """
    Draw independent values from a univariate distribution.

    Parameters
    ----------
    distr : Distribution
        Distribution to sample from.
    size : int, tuple of int or None, optional
        ``None`` draws a single value; an ``int`` draws a 1D array of that
        length; a tuple draws an array of that shape, filled in C order.
    rng : numpy.random.Generator, int or None, optional
        Random stream. ``None`` uses the process-wide default stream.

    Returns
    -------
    float or numpy.ndarray
        A single draw or an array of draws.

    Raises
    ------
    ValueError
        If a requested dimension is negative.
    """
    generator = resolve_rng(rng)

    if size is None:
        drawn = distr.sampling_strategy.sample(1, distr=distr, rng=generator)
        return float(drawn.array[0, 0])

    if isinstance(size, tuple):
        dims = tuple(operator.index(d) for d in size)
    else:
        dims = (operator.index(size),)
    if any(d < 0 for d in dims):
        raise ValueError(f"Sample dimensions must be non-negative, got {dims}")

    n = math.prod(dims)
    drawn = distr.sampling_strategy.sample(n, distr=distr, rng=generator)
    return np.asarray(drawn.array, dtype=np.float64).reshape(dims)
