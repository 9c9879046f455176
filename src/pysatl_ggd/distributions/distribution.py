"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by
strategies, characteristic descriptors and the sampling entry points.

Notes
-----
- Concrete distributions inherit from the protocol explicitly to reuse the
  default ``query_method``, ``calculate_characteristic`` and ``sample``.
- ``sample`` is an API boundary: it resolves ``rng=None`` to the process-wide
  default stream before delegating to the sampling strategy.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_ggd.distributions.streams import resolve_rng

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_ggd.distributions.computation import AnalyticalComputation
    from pysatl_ggd.distributions.sampling import Sample
    from pysatl_ggd.distributions.strategies import (
        ComputationStrategy,
        Method,
        SamplingStrategy,
    )
    from pysatl_ggd.distributions.streams import RNGLike
    from pysatl_ggd.distributions.support import Support
    from pysatl_ggd.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and estimators."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, rng: RNGLike = None, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, rng=resolve_rng(rng), **options)
