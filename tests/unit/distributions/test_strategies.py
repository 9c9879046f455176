from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_ggd.distributions import (
    AnalyticalComputation,
    Computation,
    ContinuousSupport,
    DefaultComputationStrategy,
    GenericCharacteristic,
    cdf,
    pdf,
    ppf,
)
from pysatl_ggd.types import CharacteristicName
from tests.utils.mocks import StandaloneUnivariateDistribution


def _uniform_distribution() -> StandaloneUnivariateDistribution:
    return StandaloneUnivariateDistribution(
        [
            AnalyticalComputation(
                target=CharacteristicName.PDF,
                func=lambda x: np.where((np.asarray(x) >= 0) & (np.asarray(x) <= 1), 1.0, 0.0),
            ),
            AnalyticalComputation(
                target=CharacteristicName.CDF, func=lambda x: np.clip(x, 0.0, 1.0)
            ),
            AnalyticalComputation(target=CharacteristicName.PPF, func=lambda p: p),
            AnalyticalComputation(
                target=CharacteristicName.KURT,
                func=lambda _, excess=False: -1.2 if excess else 1.8,
            ),
        ]
    )


class TestComputation:
    def test_analytical_computation_call(self) -> None:
        comp = AnalyticalComputation(target="pdf", func=lambda x: 2.0 * x)

        assert comp.target == "pdf"
        assert comp(1.5) == 3.0
        assert isinstance(comp, Computation)

    def test_options_are_forwarded(self) -> None:
        comp = AnalyticalComputation(target="kurtosis", func=lambda _, excess=False: int(excess))
        assert comp(None, excess=True) == 1


class TestDefaultComputationStrategy:
    def test_resolves_analytical(self) -> None:
        distr = _uniform_distribution()
        method = DefaultComputationStrategy().query_method(CharacteristicName.CDF, distr)

        assert method.target == CharacteristicName.CDF
        assert method(0.25) == 0.25

    def test_missing_characteristic(self) -> None:
        distr = _uniform_distribution()
        with pytest.raises(RuntimeError, match="No analytical computation for 'entropy'"):
            DefaultComputationStrategy().query_method(CharacteristicName.ENTROPY, distr)

    def test_calculate_characteristic_passes_options(self) -> None:
        distr = _uniform_distribution()

        assert distr.calculate_characteristic(CharacteristicName.KURT, None) == 1.8
        assert distr.calculate_characteristic(CharacteristicName.KURT, None, excess=True) == -1.2


class TestCharacteristicDescriptors:
    def test_free_functions(self) -> None:
        distr = _uniform_distribution()

        assert pdf(distr, 0.5) == 1.0
        assert cdf(distr, 2.0) == 1.0
        assert ppf(distr, 0.3) == 0.3

    def test_vectorised(self) -> None:
        distr = _uniform_distribution()
        np.testing.assert_array_equal(pdf(distr, np.array([-1.0, 0.5, 2.0])), [0.0, 1.0, 0.0])

    def test_custom_descriptor(self) -> None:
        kurtosis = GenericCharacteristic[None, float](CharacteristicName.KURT)
        assert kurtosis(_uniform_distribution(), None, excess=True) == -1.2

    def test_default_sampler_uses_ppf(self) -> None:
        drawn = _uniform_distribution().sample(1000, rng=0)
        x = drawn.ravel()
        assert drawn.shape == (1000, 1)
        assert np.all((x >= 0.0) & (x < 1.0))


class TestContinuousSupport:
    def test_real_line(self) -> None:
        support = ContinuousSupport()

        assert support.is_real_line
        assert 0.0 in support
        assert support.contains(1e300)
        np.testing.assert_array_equal(
            support.contains(np.array([-np.inf, 0.0, np.nan])), [False, True, False]
        )

    def test_bounded(self) -> None:
        support = ContinuousSupport(0.0, 1.0, left_closed=False)

        assert not support.is_real_line
        assert 0.0 not in support
        assert 1.0 in support
