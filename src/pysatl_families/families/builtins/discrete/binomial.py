"""
Binomial distribution family implementation.
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
    Moments,
    as_result,
)
from pysatl_families.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_families.families.distribution import ParametricFamilyDistribution
from pysatl_families.families.parametric_family import ParametricFamily
from pysatl_families.families.parametrizations import constraint, parametrization
from pysatl_families.families.registry import ParametricFamilyRegister
from pysatl_families.numeric import fraction
from pysatl_families.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    import numpy as np


BINOMIAL_DOC = """
Binomial distribution.

The number of successes in ``trials`` independent Bernoulli trials, each
succeeding with probability p.

Probability mass function:
    P(X = k) = C(n, k) p^k (1-p)^(n-k) for k = 0, ..., n
"""

BinomialFamily = ParametricFamily(
    name=FamilyName.BINOMIAL,
    distr_type=UnivariateDiscrete,
    distr_parametrizations=["trialsProbability"],
)
BinomialFamily.__doc__ = BINOMIAL_DOC


@parametrization(family=BinomialFamily, name="trialsProbability")
class Binomial(ParametricFamilyDistribution, DiscreteDistribution, Moments):
    """
    Binomial distribution.

    Parameters
    ----------
    trials : int
        Number of trials (n)
    p : float
        Success probability of a single trial
    """

    trials: int
    p: float

    @constraint(description="trials is an integer")
    def check_trials_integer(self) -> bool:
        return float(self.trials).is_integer()

    @constraint(description="trials >= 0")
    def check_trials_non_negative(self) -> bool:
        return self.trials >= 0

    @constraint(description="0 <= p <= 1")
    def check_p_in_unit_interval(self) -> bool:
        return 0 <= self.p <= 1

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=int(self.trials))

    def probability(self, n: Any) -> Any:
        return as_result(stats.binom.pmf(n, self.trials, self.p))

    def cumulative_probability(self, n: Any) -> Any:
        return as_result(stats.binom.cdf(n, self.trials, self.p))

    def generate(self, rng: np.random.Generator) -> int:
        return int(rng.binomial(int(self.trials), self.p))

    @property
    def mean(self) -> float:
        return self.trials * self.p

    @property
    def variance(self) -> float:
        return self.trials * self.p * (1 - self.p)

    @property
    def skewness(self) -> float:
        return fraction(1 - 2 * self.p, math.sqrt(self.variance))

    @property
    def kurtosis(self) -> float:
        q = self.p * (1 - self.p)
        return fraction(1 - 6 * q, self.variance)


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """
    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return
    ParametricFamilyRegister.register(BinomialFamily)
