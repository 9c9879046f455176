"""
Distribution objects produced by parametric families.

A :class:`ParametricFamilyDistribution` stores only its family name and its
validated parameters. Strategies and characteristic functions are looked up
through the family register, so instances stay small, hashable and
immutable.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_ggd.distributions.distribution import Distribution
from pysatl_ggd.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_ggd.distributions.computation import AnalyticalComputation
    from pysatl_ggd.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_ggd.distributions.support import Support
    from pysatl_ggd.families.parametric_family import ParametricFamily
    from pysatl_ggd.families.parametrizations import Parametrization
    from pysatl_ggd.types import DistributionType, GenericCharacteristicName

    type AnalyticalTable = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    Member of a parametric family with fixed parameter values.

    Two instances are equal when they belong to the same family and were
    built from equal parameters in the same parametrization.

    Parameters
    ----------
    family_name : str
        Key of the family in :class:`ParametricFamilyRegister`.
    _distribution_type : DistributionType
        Descriptor shared by the family.
    parameters : Parametrization
        Validated parameters, in the parametrization they were given in.
    _support : Support or None
        Support resolved from the base parameters.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical: AnalyticalTable | None = field(
        default=None, init=False, repr=False, compare=False, hash=False
    )

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """Family object, resolved by name."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Characteristic functions bound to this instance's base parameters.

        The table is built on first access and reused afterwards.
        """
        if self._analytical is None:
            table = self.family._build_analytical_computations(self.parameters)
            object.__setattr__(self, "_analytical", table)
            return table
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support
