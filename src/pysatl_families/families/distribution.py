"""
Concrete distribution instances with specific parameter values.

This module provides the common base of the distribution classes defined by
the parametric families. An instance is an immutable record of validated
parameters; every operation is a pure function of it (and, for sampling, of
the random generator).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from typing import TYPE_CHECKING

from pysatl_families.distributions.distribution import (
    BaseDistribution,
    ContinuousDistribution,
    DiscreteDistribution,
    Moments,
    OptionalMoments,
)
from pysatl_families.families.parametrizations import Parametrization
from pysatl_families.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_families.distributions.sampling import ArraySample
    from pysatl_families.distributions.strategies import SamplingStrategy
    from pysatl_families.families.parametric_family import ParametricFamily
    from pysatl_families.numeric import RandomSource
    from pysatl_families.types import DistributionType, GenericCharacteristicName


_MOMENT_ATTRIBUTES = {
    CharacteristicName.MEAN: "mean",
    CharacteristicName.VAR: "variance",
    CharacteristicName.SKEW: "skewness",
    CharacteristicName.KURT: "kurtosis",
}


class ParametricFamilyDistribution(Parametrization, BaseDistribution):
    """
    A specific distribution instance from a parametric family.

    Subclasses are frozen dataclasses whose fields are the parameters of the
    family's base parametrization. Constraints are checked on construction,
    so an instance that exists is always valid.
    """

    __slots__ = ()

    def __post_init__(self) -> None:
        self.validate()

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return type(self).__family__

    @property
    def family_name(self) -> str:
        """Name of the family."""
        return self.family.name

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self.family.distr_type

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self.family.sampling_strategy

    def sample(self, n: int, rng: RandomSource = None, **options: Any) -> ArraySample:
        """
        Generate samples from this distribution.

        Parameters
        ----------
        n : int
            Number of samples to generate, at least 1.
        rng : Generator, int, SeedSequence or None
            Random source; ``None`` uses the process-wide generator.
        **options : Any
            Additional options for the sampling strategy.

        Returns
        -------
        ArraySample
            ``n`` independent draws.
        """
        return self.sampling_strategy.sample(n, distr=self, rng=rng, **options)

    def query_method(self, characteristic_name: GenericCharacteristicName) -> Callable[..., Any]:
        """
        Resolve a characteristic to a callable.

        Moments resolve to callables that ignore their argument, so every
        characteristic can be evaluated as ``method(value)``.

        Raises
        ------
        RuntimeError
            If the distribution does not provide the characteristic.
        """
        name = CharacteristicName(characteristic_name)
        if isinstance(self, ContinuousDistribution):
            if name is CharacteristicName.PDF:
                return self.density
            if name is CharacteristicName.PPF:
                return self.quantile
        if isinstance(self, DiscreteDistribution) and name is CharacteristicName.PMF:
            return self.probability
        if name is CharacteristicName.CDF and isinstance(
            self, ContinuousDistribution | DiscreteDistribution
        ):
            return self.cumulative_probability
        if name in _MOMENT_ATTRIBUTES and isinstance(self, Moments | OptionalMoments):
            attribute = _MOMENT_ATTRIBUTES[name]
            return lambda _=None: getattr(self, attribute)

        raise RuntimeError(f"{self.family_name} does not provide characteristic '{name}'")

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None
    ) -> Any:
        """Evaluate a characteristic at ``value``."""
        return self.query_method(characteristic_name)(value)
