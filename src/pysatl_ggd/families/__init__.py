"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining parametric families of
distributions and the built-in Generalized Gaussian family.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import GeneralizedGaussian, generalized_gaussian_family
from .configuration import configure_families_register, reset_families_register
from .distribution import ParametricFamilyDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "ParametricFamilyDistribution",
    "GeneralizedGaussian",
    "generalized_gaussian_family",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
