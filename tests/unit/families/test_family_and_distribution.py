from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import pytest

from pysatl_ggd.distributions import DefaultComputationStrategy, pdf
from pysatl_ggd.families import (
    ParametricFamily,
    ParametricFamilyDistribution,
    ParametricFamilyRegister,
    Parametrization,
)
from pysatl_ggd.types import UnivariateContinuous
from tests.unit.families.test_basic import TestBaseFamily
from tests.utils.mocks import MockSamplingStrategy


class TestParametricFamily(TestBaseFamily):
    def test_family_requires_a_parametrization(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            ParametricFamily(
                name="Empty",
                distr_type=UnivariateContinuous,
                distr_parametrizations=[],
                distr_characteristics={},
            )

    def test_base_is_first_declared_parametrization(self) -> None:
        family = self.make_default_family()
        assert family.base_parametrization_name == "base"
        assert family.base is family.parametrizations["base"]
        assert family.distribution_type == UnivariateContinuous

    def test_default_strategies(self) -> None:
        family = ParametricFamily(
            name="Defaults",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        assert isinstance(family.computation_strategy, DefaultComputationStrategy)
        assert family.support_resolver(None) is None  # type: ignore[arg-type]

    def test_base_missing_raises(self) -> None:
        family = ParametricFamily(
            name="NoBase",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="not registered"):
            _ = family.base

    def test_undeclared_parametrization_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @family.parametrization(name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization_rejected(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @family.parametrization(name="base")
            class Again(Parametrization):
                value: float

    def test_make_parameters_unknown_name(self) -> None:
        family = self.make_default_family()
        with pytest.raises(KeyError):
            family.make_parameters("missing", value=1.0)

    def test_distribution_in_base_parametrization(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        distr = family(value=2.0)

        assert isinstance(distr, ParametricFamilyDistribution)
        assert distr.family is family
        assert distr.parametrization_name == "base"
        assert distr.parameters.parameters == {"value": 2.0}
        assert pdf(distr, 3.0) == pytest.approx(6.0)
        assert distr.calculate_characteristic(self.MEAN, None) == pytest.approx(2.0)

    def test_characteristics_bound_to_base_form(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        distr = family.distribution("alt", inverse=0.5)

        assert distr.parametrization_name == "alt"
        assert distr.query_method(self.MEAN)(None) == pytest.approx(2.0)
        assert set(distr.analytical_computations) == {self.PDF, self.CDF, self.MEAN}

    def test_analytical_computations_are_cached(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        distr = family(value=1.0)
        assert distr.analytical_computations is distr.analytical_computations

    def test_distribution_is_immutable_and_hashable(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        first = family(value=1.5)
        second = family(value=1.5)

        assert first == second
        assert hash(first) == hash(second)
        assert first != family(value=2.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            first.family_name = "Other"  # type: ignore[misc]

    def test_sampling_strategy_comes_from_family(self) -> None:
        family = self.make_default_family()
        ParametricFamilyRegister.register(family)

        sample = family(value=1.0).sample(5, rng=0)
        assert sample.shape == (5, 1)
        assert isinstance(family(value=1.0).sampling_strategy, MockSamplingStrategy)
