"""
Core Type Definitions
=====================

Names, descriptors and numeric aliases shared by the distribution model and
the estimators.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution lives on a countable set or on a continuum."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base for distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on a Euclidean space.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Dimension of the space; 1 for univariate distributions.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Descriptor shared by all univariate continuous distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float

NumericArray = NDArray[NumPyNumber]
"""Array accepted by characteristic functions."""

FloatArray = NDArray[np.float64]
"""Double precision array: samples, estimator input, sampler output."""

BoolArray = NDArray[np.bool_]


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval on the real line.

    Parameters
    ----------
    left, right : float
        Endpoints; infinite by default.
    left_closed, right_closed : bool, default True
        Endpoint inclusion. Infinite endpoints are always open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.left == -inf:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Membership test, elementwise for arrays.

        NaN is never contained.
        """
        arr = np.asarray(x)
        above = (arr > self.left) | (self.left_closed & (arr == self.left))
        below = (arr < self.right) | (self.right_closed & (arr == self.right))
        inside = above & below

        if np.ndim(arr) == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


type GenericCharacteristicName = str
"""Characteristic key, e.g. ``"pdf"``."""

type ParametrizationName = str
"""Parametrization key, e.g. ``"scaleShape"``."""


class CharacteristicName(StrEnum):
    """
    Characteristics a family can provide analytically.

    The values are the keys accepted by ``Distribution.query_method``.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    VAR = "var"
    STD = "std"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    GENERALIZED_GAUSSIAN = "GeneralizedGaussian"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "Interval1D",
    "GenericCharacteristicName",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
]
