"""
Distribution Families Configuration
====================================

Registers the built-in parametric families in the global
:class:`~pysatl_ggd.families.registry.ParametricFamilyRegister`:

- Generalized Gaussian family (``scaleShape`` and ``stdShape``
  parametrizations, gamma/sign sampler).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_ggd.families.builtins import configure_generalized_gaussian_family
from pysatl_ggd.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_generalized_gaussian_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
