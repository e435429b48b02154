"""
Hypergeometric distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
from scipy import stats

from pysatl_families.distributions.distribution import (
    DiscreteDistribution,
    Moments,
    as_result,
)
from pysatl_families.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import fraction, sqr
from pysatl_families.types import FamilyName, UnivariateDiscrete

HYPERGEOMETRIC_DOC = """
Hypergeometric distribution.

The number of successes in ``k`` draws without replacement from a population
of ``t`` items, ``m`` of which are successes.

Probability mass function:
    P(X = x) = C(m, x) C(t - m, k - x) / C(t, k)
"""

HypergeometricFamily = ParametricFamily(
    name=FamilyName.HYPERGEOMETRIC,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["populationSuccessesDraws"],
)
HypergeometricFamily.__doc__ = HYPERGEOMETRIC_DOC


@parametrization(family=HypergeometricFamily, name="populationSuccessesDraws")
class Hypergeometric(ParametricFamilyDistribution, DiscreteDistribution, Moments):
    """
    Hypergeometric distribution.

    Parameters
    ----------
    t : int
        Population size
    m : int
        Number of successes in the population
    k : int
        Number of draws
    """

    t: int
    m: int
    k: int

    @constraint(description="t, m and k are integers")
    def check_integers(self) -> bool:
        return all(float(v).is_integer() for v in (self.t, self.m, self.k))

    @constraint(description="t >= 0")
    def check_population_non_negative(self) -> bool:
        return self.t >= 0

    @constraint(description="0 <= m <= t")
    def check_successes_range(self) -> bool:
        return 0 <= self.m <= self.t

    @constraint(description="0 < k <= t")
    def check_draws_range(self) -> bool:
        return 0 < self.k <= self.t

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(
            min_k=max(0, int(self.k + self.m - self.t)),
            max_k=int(min(self.m, self.k)),
        )

    def probability(self, n: Any) -> Any:
        return as_result(stats.hypergeom.pmf(n, self.t, self.m, self.k))

    def cumulative_probability(self, n: Any) -> Any:
        return as_result(stats.hypergeom.cdf(n, self.t, self.m, self.k))

    def generate(self, rng: np.random.Generator) -> int:
        return int(rng.hypergeometric(int(self.m), int(self.t - self.m), int(self.k)))

    @property
    def mean(self) -> float:
        return self.k * self.m / self.t

    @property
    def variance(self) -> float:
        t, m, k = self.t, self.m, self.k
        if t == 1:
            return 0.0
        return fraction(k * m * (t - m) * (t - k), sqr(t) * (t - 1))

    def _central_moments(self) -> tuple[float, float, float]:
        """Second to fourth central moments summed over the support."""
        support = self.support
        xs = np.arange(support.min_k, support.max_k + 1)
        mass = stats.hypergeom.pmf(xs, self.t, self.m, self.k)
        dev = xs - self.mean
        return (
            float(np.sum(mass * dev**2)),
            float(np.sum(mass * dev**3)),
            float(np.sum(mass * dev**4)),
        )

    @property
    def skewness(self) -> float:
        """
        Skewness of hypergeometric distribution.

        The closed form divides by ``t - 2``; populations of fewer than four
        items are summed over the support instead.
        """
        t, m, k = self.t, self.m, self.k
        if t < 4:
            var, m3, _ = self._central_moments()
            return fraction(m3, var * math.sqrt(var))
        numerator = (t - 2 * m) * math.sqrt(t - 1) * (t - 2 * k)
        return fraction(numerator, math.sqrt(k * m * (t - m) * (t - k)) * (t - 2))

    @property
    def kurtosis(self) -> float:
        """
        Excess kurtosis of hypergeometric distribution.

        The closed form divides by ``(t - 2)(t - 3)``; populations of fewer
        than four items are summed over the support instead.
        """
        t, m, k = self.t, self.m, self.k
        if t < 4:
            var, _, m4 = self._central_moments()
            return fraction(m4, sqr(var)) - 3
        numerator = (t - 1) * sqr(t) * (
            t * (t + 1) - 6 * m * (t - m) - 6 * k * (t - k)
        ) + 6 * k * m * (t - m) * (t - k) * (5 * t - 6)
        return fraction(numerator, k * m * (t - m) * (t - k) * (t - 2) * (t - 3))


def configure_hypergeometric_family() -> None:
    """
    Configure and register the Hypergeometric distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.HYPERGEOMETRIC):
        return
    ParametricFamilyRegister.register(HypergeometricFamily)
