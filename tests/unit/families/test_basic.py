from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_ggd.families import ParametricFamily, Parametrization, constraint
from pysatl_ggd.types import GenericCharacteristicName, UnivariateContinuous
from tests.utils.mocks import MockSamplingStrategy


class TestBaseFamily:
    PDF: GenericCharacteristicName = "pdf"
    CDF: GenericCharacteristicName = "cdf"
    MEAN: GenericCharacteristicName = "mean"

    def make_default_family(
        self,
        distr_characteristics: dict[GenericCharacteristicName, Any] | None = None,
    ) -> ParametricFamily:
        if distr_characteristics is None:
            distr_characteristics = {
                self.PDF: lambda p, x: p.value * x,
                self.CDF: lambda p, x: x,
                self.MEAN: lambda p, _: p.value,
            }
        fam = ParametricFamily(
            name="Default",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics=distr_characteristics,
            sampling_strategy=MockSamplingStrategy(),
        )

        @fam.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @fam.parametrization(name="alt")
        class Alt(Parametrization):
            inverse: float

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=1.0 / self.inverse)  # type: ignore[call-arg]

        return fam
