"""
Statistical estimation for the Generalized Gaussian family.

- GCM Newton-Raphson shape search (:mod:`.gcm`);
- confidence interval for the GCM estimate (:mod:`.intervals`);
- profile maximum likelihood helpers (:mod:`.mle`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from ._samples import ZeroPolicy
from .gcm import (
    DEFAULT_TOLERANCE,
    GCMResult,
    GCMSearchConfig,
    gcm_fit,
    gcmsearch,
    initial_shape_estimate,
    zn,
    zp,
)
from .intervals import gcmci
from .mle import mle_shape, scale_from_shape

__all__ = [
    "DEFAULT_TOLERANCE",
    "GCMResult",
    "GCMSearchConfig",
    "ZeroPolicy",
    "gcm_fit",
    "gcmsearch",
    "gcmci",
    "initial_shape_estimate",
    "mle_shape",
    "scale_from_shape",
    "zn",
    "zp",
]
