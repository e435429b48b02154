"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions, including support for multiple parameterizations and the
sampling strategy shared by the family's distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING, cast, dataclass_transform

from pysatl_families.distributions.distribution import Estimable
from pysatl_families.distributions.strategies import BatchSamplingStrategy

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from numpy.typing import ArrayLike

    from pysatl_families.distributions.strategies import SamplingStrategy
    from pysatl_families.families.distribution import ParametricFamilyDistribution
    from pysatl_families.families.parametrizations import Parametrization
    from pysatl_families.types import DistributionType, ParametrizationName


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Represents a parametric family of distributions (e.g., normal, poisson)
    that can be parameterized in different ways. The base (first)
    parametrization is the family's distribution class itself; the other
    parametrizations convert to it.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType
        Distribution type of the family's members.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    sampling_strategy : SamplingStrategy, optional
        Strategy for sampling from distributions.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        sampling_strategy: SamplingStrategy | None = None,
    ):
        self._name = name
        self.distr_type = distr_type

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy = (
            BatchSamplingStrategy() if sampling_strategy is None else sampling_strategy
        )

    def __repr__(self) -> str:
        return f"ParametricFamily({self._name!r})"

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[ParametricFamilyDistribution]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If base parametrization is not registered.
        """
        try:
            return cast(
                "type[ParametricFamilyDistribution]",
                self._parametrizations[self.base_parametrization_name],
            )
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def is_estimable(self) -> bool:
        """Whether the family provides a maximum-likelihood estimator."""
        return issubclass(self.base, Estimable)

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> ParametricFamilyDistribution:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        ParametricFamilyDistribution
            Equivalent parameters in base parametrization, i.e. the
            distribution instance.
        """
        if parameters.name == self.base_parametrization_name:
            return cast("ParametricFamilyDistribution", parameters)
        return cast("ParametricFamilyDistribution", parameters.transform_to_base_parametrization())

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        InvalidParameterError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class: type[Parametrization] = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return self.to_base(parameters)

    def mle(self, observations: ArrayLike) -> ParametricFamilyDistribution:
        """
        Estimate a member of the family from ``observations``.

        Raises
        ------
        TypeError
            If the family has no maximum-likelihood estimator.
        """
        base = self.base
        if not issubclass(base, Estimable):
            raise TypeError(f"Family {self.name} does not provide a maximum-likelihood estimator")
        return cast("ParametricFamilyDistribution", base.mle(observations))

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_families.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
