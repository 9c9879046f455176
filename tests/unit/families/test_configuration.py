from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_ggd.families import (
    ParametricFamilyRegister,
    configure_families_register,
    generalized_gaussian_family,
    reset_families_register,
)
from pysatl_ggd.types import FamilyName
from tests.unit.families.test_basic import TestBaseFamily


class TestRegister(TestBaseFamily):
    def test_register_is_singleton(self) -> None:
        assert ParametricFamilyRegister() is ParametricFamilyRegister()

    def test_register_and_get(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        assert ParametricFamilyRegister.contains("Default")
        assert ParametricFamilyRegister.get("Default") is family
        assert "Default" in ParametricFamilyRegister.names()

    def test_duplicate_family_rejected(self) -> None:
        ParametricFamilyRegister.register(self.make_default_family())
        with pytest.raises(ValueError, match="already found"):
            ParametricFamilyRegister.register(self.make_default_family())

    def test_unknown_family(self) -> None:
        assert not ParametricFamilyRegister.contains("Nope")
        with pytest.raises(ValueError, match="No family"):
            ParametricFamilyRegister.get("Nope")


class TestConfiguration:
    def test_configure_registers_generalized_gaussian(self) -> None:
        register = configure_families_register()
        assert register.contains(FamilyName.GENERALIZED_GAUSSIAN)

    def test_configure_is_cached(self) -> None:
        assert configure_families_register() is configure_families_register()

    def test_reset_clears_register(self) -> None:
        configure_families_register()
        reset_families_register()
        assert not ParametricFamilyRegister.contains(FamilyName.GENERALIZED_GAUSSIAN)

        family = generalized_gaussian_family()
        assert ParametricFamilyRegister.get(FamilyName.GENERALIZED_GAUSSIAN) is family

    def test_family_accessor_is_idempotent(self) -> None:
        assert generalized_gaussian_family() is generalized_gaussian_family()
