"""
Built-in distribution families for PySATL GGD.

This package contains the distribution families available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_ggd.families.builtins.continuous import (
    GammaSignSamplingStrategy,
    GeneralizedGaussian,
    configure_generalized_gaussian_family,
    generalized_gaussian_family,
    ggd_variates,
)

__all__ = [
    "configure_generalized_gaussian_family",
    "generalized_gaussian_family",
    "GeneralizedGaussian",
    "GammaSignSamplingStrategy",
    "ggd_variates",
]
