from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest

from pysatl_ggd.distributions import (
    ArraySample,
    DefaultSamplingUnivariateStrategy,
    sample,
    seed_default_rng,
)
from pysatl_ggd.families import GeneralizedGaussian


class TestArraySample:
    def test_requires_2d(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_container_protocol(self) -> None:
        data = np.arange(6, dtype=float).reshape(3, 2)
        s = ArraySample(data)

        assert len(s) == 3
        assert s.shape == (3, 2)
        assert s.dimension == 2
        assert s.array is data
        rows = list(s)
        assert len(rows) == 3
        np.testing.assert_array_equal(rows[1], [2.0, 3.0])

    def test_ravel(self) -> None:
        s = ArraySample(np.array([[1.0], [2.0], [3.0]]))
        np.testing.assert_array_equal(s.ravel(), [1.0, 2.0, 3.0])


class TestSampleFunction:
    def setup_method(self) -> None:
        self.distr = GeneralizedGaussian(1.8)

    def test_scalar_draw(self) -> None:
        value = sample(self.distr, rng=1)
        assert isinstance(value, float)
        assert math.isfinite(value)

    def test_vector_draw(self) -> None:
        values = sample(self.distr, 100, rng=1)
        assert values.shape == (100,)
        assert values.dtype == np.float64

    @pytest.mark.parametrize("size", [(100, 1), (2, 3, 4), (0,), (3, 0)])
    def test_shaped_draw(self, size: tuple[int, ...]) -> None:
        values = sample(self.distr, size, rng=1)
        assert values.shape == size

    def test_numpy_integer_sizes(self) -> None:
        assert sample(self.distr, np.int64(5), rng=1).shape == (5,)
        assert sample(self.distr, (np.int32(2), np.int64(3)), rng=1).shape == (2, 3)

    def test_non_integer_size_rejected(self) -> None:
        with pytest.raises(TypeError):
            sample(self.distr, 2.5, rng=1)  # type: ignore[call-overload]

    def test_empty_draw(self) -> None:
        assert sample(self.distr, 0, rng=1).shape == (0,)

    @pytest.mark.parametrize("size", [-1, (2, -3)])
    def test_negative_size(self, size: int | tuple[int, ...]) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            sample(self.distr, size, rng=1)

    def test_seed_reproducible(self) -> None:
        np.testing.assert_array_equal(
            sample(self.distr, 50, rng=123), sample(self.distr, 50, rng=123)
        )

    def test_generator_advances(self) -> None:
        rng = np.random.default_rng(5)
        first = sample(self.distr, 10, rng=rng)
        second = sample(self.distr, 10, rng=rng)
        assert not np.array_equal(first, second)

    def test_tuple_fills_in_c_order(self) -> None:
        flat = sample(self.distr, 6, rng=9)
        shaped = sample(self.distr, (2, 3), rng=9)
        np.testing.assert_array_equal(shaped, flat.reshape(2, 3))

    def test_default_stream(self) -> None:
        seed_default_rng(11)
        first = sample(self.distr, 20)
        seed_default_rng(11)
        second = sample(self.distr, 20)
        np.testing.assert_array_equal(first, second)

    def test_distribution_sample_method(self) -> None:
        drawn = self.distr.sample(10, rng=3)
        assert isinstance(drawn, ArraySample)
        np.testing.assert_array_equal(drawn.ravel(), sample(self.distr, 10, rng=3))


class TestInverseTransformSampling:
    def test_default_univariate_strategy(self, rng: np.random.Generator) -> None:
        distr = GeneralizedGaussian(0.5, 2.0, 1.5)
        drawn = DefaultSamplingUnivariateStrategy().sample(50_000, distr=distr, rng=rng)

        assert drawn.shape == (50_000, 1)
        x = drawn.ravel()
        assert float(np.mean(x)) == pytest.approx(0.5, abs=8 * distr.std() / math.sqrt(x.size))
        assert float(np.var(x)) == pytest.approx(distr.var(), rel=0.05)
