"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL GGD:

- distribution protocol (:mod:`.distribution`);
- analytical computations (:mod:`.computation`);
- characteristic descriptors ``pdf``/``logpdf``/``cdf``/``ppf``
  (:mod:`.characteristics`);
- sampling protocol, array-backed samples and ``sample`` (:mod:`.sampling`);
- random stream boundary (:mod:`.streams`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .characteristics import GenericCharacteristic, cdf, logpdf, pdf, ppf
from .computation import AnalyticalComputation, Computation
from .distribution import Distribution
from .sampling import ArraySample, Sample, sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .streams import default_rng, resolve_rng, seed_default_rng
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "Computation",
    # characteristics
    "GenericCharacteristic",
    "pdf",
    "logpdf",
    "cdf",
    "ppf",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    "sample",
    # random streams
    "default_rng",
    "seed_default_rng",
    "resolve_rng",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # support
    "Support",
    "ContinuousSupport",
]
