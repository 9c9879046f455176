from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_ggd.errors import DomainError
from pysatl_ggd.stats import gcmci


def _transformed(beta: float) -> float:
    return math.atanh(1.0 / math.sqrt(beta + 1.0))


class TestGCMConfidenceInterval:
    @pytest.mark.parametrize("beta", [0.3, 1.0, 1.8, 4.0, 25.0])
    @pytest.mark.parametrize("n", [10, 100, 7000])
    def test_brackets_estimate(self, beta: float, n: int) -> None:
        lower, upper = gcmci(beta, n)
        assert 0.0 <= lower <= beta <= upper

    def test_bounds_follow_transformed_scale(self) -> None:
        beta, n, z = 1.8, 7000, 1.96
        lower, upper = gcmci(beta, n, z)
        half_width = z / math.sqrt(2 * n)

        assert _transformed(lower) == pytest.approx(_transformed(beta) + half_width, rel=1e-9)
        assert _transformed(upper) == pytest.approx(_transformed(beta) - half_width, rel=1e-9)

    def test_typical_width(self) -> None:
        lower, upper = gcmci(1.8, 7000)
        assert lower == pytest.approx(1.70, abs=0.01)
        assert upper == pytest.approx(1.90, abs=0.01)

    def test_narrows_with_sample_size(self) -> None:
        small = gcmci(1.8, 100)
        large = gcmci(1.8, 10_000)
        assert small[1] - small[0] > large[1] - large[0]

    def test_widens_with_level(self) -> None:
        narrow = gcmci(1.8, 1000, z=1.0)
        wide = gcmci(1.8, 1000, z=3.0)
        assert wide[0] < narrow[0] and wide[1] > narrow[1]

    def test_zero_width_at_zero_z(self) -> None:
        lower, upper = gcmci(1.8, 1000, z=0.0)
        assert lower == pytest.approx(1.8) and upper == pytest.approx(1.8)

    def test_unbounded_upper_for_small_samples(self) -> None:
        lower, upper = gcmci(1.8, 1)
        assert math.isinf(upper)
        assert 0.0 <= lower < 1.8

    @pytest.mark.parametrize("beta", [1e-18, 1e-200, 1e6, 1e200])
    def test_brackets_extreme_estimates(self, beta: float) -> None:
        lower, upper = gcmci(beta, 100)
        assert 0.0 < lower < beta < upper

    def test_zero_estimate(self) -> None:
        assert gcmci(0.0, 100) == (0.0, 0.0)

    @pytest.mark.parametrize("beta", [-0.1, math.nan, math.inf])
    def test_domain(self, beta: float) -> None:
        with pytest.raises(DomainError):
            gcmci(beta, 100)

    def test_domain_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            gcmci(-1.0, 100)

    @pytest.mark.parametrize("n", [0, -5])
    def test_sample_size(self, n: int) -> None:
        with pytest.raises(ValueError, match="Sample size"):
            gcmci(1.8, n)

    @pytest.mark.parametrize("z", [-1.0, math.inf, math.nan])
    def test_quantile(self, z: float) -> None:
        with pytest.raises(ValueError, match="z must be"):
            gcmci(1.8, 100, z)
