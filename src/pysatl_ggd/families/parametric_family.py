"""
Parametric families.

A family ties together its parametrizations, one closed-form function per
characteristic (written against the base parametrization), a sampler and a
characteristic resolver. Distributions are created through the family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_ggd.distributions.computation import AnalyticalComputation
from pysatl_ggd.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_ggd.families.distribution import ParametricFamilyDistribution
from pysatl_ggd.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_ggd.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_ggd.distributions.support import Support
    from pysatl_ggd.families.parametrizations import Parametrization
    from pysatl_ggd.types import (
        GenericCharacteristicName,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    Named collection of distributions sharing one functional form.

    Characteristic functions receive base parameters only: parameters
    given in another parametrization are converted before binding.

    Parameters
    ----------
    name : str
        Family key in the register.
    distr_type : DistributionType
        Descriptor of every member distribution.
    distr_parametrizations : list[ParametrizationName]
        Declared parametrization names, base first.
    distr_characteristics : dict[str, Callable]
        ``{name: func(base_parameters, data, **options)}``.
    sampling_strategy : SamplingStrategy, optional
        Sampler; inverse transform through ``ppf`` when omitted.
    computation_strategy : ComputationStrategy, optional
        Characteristic resolver; analytical lookup when omitted.
    support_by_parametrization : Callable or None, optional
        Maps base parameters to the support of the member.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[GenericCharacteristicName, ParametrizedFunction],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError("A family needs at least one parametrization name.")

        self._name = name
        self._distr_type = distr_type
        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self.distr_characteristics = dict(distr_characteristics)

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}
        self._support_resolver: SupportResolver = (
            support_by_parametrization
            if support_by_parametrization is not None
            else (lambda _params: None)
        )

        self.sampling_strategy: SamplingStrategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy: ComputationStrategy[Any, Any] = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )

    @property
    def name(self) -> str:
        """Family key in the register."""
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        """Descriptor shared by member distributions."""
        return self._distr_type

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def support_resolver(self) -> SupportResolver:
        """Function from base parameters to support."""
        return self._support_resolver

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Attach a parametrization class under a declared name.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self.name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Parametrization class registered under ``name``.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Return ``parameters`` expressed in the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Bind every characteristic to the base form of ``parameters``."""
        base_params = self.to_base(parameters)
        return {
            characteristic: AnalyticalComputation(
                target=characteristic, func=partial(func, base_params)
            )
            for characteristic, func in self.distr_characteristics.items()
        }

    def make_parameters(
        self, parametrization_name: str | None = None, **parameters_values: Any
    ) -> Parametrization:
        """
        Build parameters in a parametrization and check its constraints.

        Raises
        ------
        KeyError
            If the parametrization is not registered.
        InvalidParameterError
            If a value is not finite or a constraint fails.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return parameters

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a member distribution.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; base when omitted.
        **parameters_values
            Parameter values by field name.

        Returns
        -------
        ParametricFamilyDistribution
            Immutable member distribution.
        """
        parameters = self.make_parameters(parametrization_name, **parameters_values)
        return ParametricFamilyDistribution(
            self.name,
            self._distr_type,
            parameters,
            self._support_resolver(self.to_base(parameters)),
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Class decorator registering a parametrization with this family.

        Parameters
        ----------
        name : str
            Declared parametrization name.
        """
        from pysatl_ggd.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
