"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any

from scipy import stats

from pysatl_families.distributions.distribution import (
    DiscreteDistribution,
    Estimable,
    Moments,
    as_result,
)
from pysatl_families.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import as_observations, sample_mean
from pysatl_families.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike


POISSON_DOC = """
Poisson distribution.

The number of events occurring in a fixed interval when events happen
independently at a constant average rate λ.

Probability mass function:
    P(X = n) = λ^n e^(-λ) / n! for n = 0, 1, 2, ...
"""

PoissonFamily = ParametricFamily(
    name=FamilyName.POISSON,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["rate"],
)
PoissonFamily.__doc__ = POISSON_DOC


@parametrization(family=PoissonFamily, name="rate")
class Poisson(ParametricFamilyDistribution, DiscreteDistribution, Moments, Estimable):
    """
    Poisson distribution.

    Parameters
    ----------
    rate : float
        Expected number of events (λ)
    """

    rate: float

    @constraint(description="rate > 0")
    def check_rate_positive(self) -> bool:
        """Check that rate parameter is positive."""
        return self.rate > 0

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution"""
        return IntegerLatticeDiscreteSupport(min_k=0)

    def probability(self, n: Any) -> Any:
        return as_result(stats.poisson.pmf(n, self.rate))

    def cumulative_probability(self, n: Any) -> Any:
        return as_result(stats.poisson.cdf(n, self.rate))

    def generate(self, rng: np.random.Generator) -> int:
        return int(rng.poisson(self.rate))

    @property
    def mean(self) -> float:
        return float(self.rate)

    @property
    def variance(self) -> float:
        return float(self.rate)

    @property
    def skewness(self) -> float:
        return 1.0 / math.sqrt(self.rate)

    @property
    def kurtosis(self) -> float:
        return 1.0 / self.rate

    @classmethod
    def mle(cls, observations: ArrayLike) -> Poisson:
        """Rate estimated as the mean of the counts."""
        values = as_observations(observations)
        return cls(rate=sample_mean(values))


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return
    ParametricFamilyRegister.register(PoissonFamily)
